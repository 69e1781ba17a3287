"""Domain-specific exceptions."""


class CocktailServiceError(RuntimeError):
    """Base class for failures of a single cocktail lookup."""


class EncodingError(CocktailServiceError):
    """The query could not be prepared for transport."""


class NetworkError(CocktailServiceError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(CocktailServiceError):
    """The response body did not match the expected schema."""
