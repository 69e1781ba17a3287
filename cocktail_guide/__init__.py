"""Cocktail search guide: debounced lookups against a cocktail REST API."""
