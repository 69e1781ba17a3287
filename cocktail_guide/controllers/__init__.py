from cocktail_guide.controllers.search import SearchController, SearchState, SearchView

__all__ = ["SearchController", "SearchState", "SearchView"]
