from cocktail_guide.ui.cards import render_card, render_cards

__all__ = ["render_card", "render_cards"]
