from cocktail_guide.services.cocktails import RANDOM_COCKTAIL_NAMES, CocktailClient
from cocktail_guide.services.exceptions import (
    CocktailServiceError,
    DecodeError,
    EncodingError,
    NetworkError,
)

__all__ = [
    "CocktailClient",
    "CocktailServiceError",
    "DecodeError",
    "EncodingError",
    "NetworkError",
    "RANDOM_COCKTAIL_NAMES",
]
