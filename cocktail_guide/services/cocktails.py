"""Client for the cocktail-by-name REST endpoint."""

from __future__ import annotations

import random
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from cocktail_guide.config import CocktailApiSettings
from cocktail_guide.domain.models import Cocktail
from cocktail_guide.logging import logger
from cocktail_guide.services.exceptions import DecodeError, EncodingError, NetworkError

RANDOM_COCKTAIL_NAMES: tuple[str, ...] = (
    "margarita",
    "mojito",
    "cosmopolitan",
    "martini",
    "manhattan",
    "daiquiri",
    "whiskey sour",
    "pina colada",
    "bloody mary",
    "old fashioned",
)

_COCKTAIL_LIST = TypeAdapter(list[Cocktail])


class CocktailClient:
    """Looks cocktails up by name; one GET per call, no caching, no retry."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CocktailApiSettings | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or CocktailApiSettings()
        self._rng = rng or random

    async def search_by_name(self, name: str) -> list[Cocktail]:
        query = (name or "").strip()
        url = self._build_url(query)
        headers = self._headers()

        logger.info("cocktail_search_started", query=query)
        try:
            response = await self._client.get(
                url,
                headers=headers,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            detail = exc.response.text[:200]
            logger.warning("cocktail_search_failed", query=query, status_code=status_code)
            raise NetworkError(
                f"Cocktail API request failed ({status_code}): {detail}",
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning(
                "cocktail_search_failed",
                query=query,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            reason = str(exc) or exc.__class__.__name__
            raise NetworkError(f"Cocktail API request failed: {reason}") from exc

        cocktails = self._decode(response)
        logger.info("cocktail_search_completed", query=query, results=len(cocktails))
        return cocktails

    async def random_cocktail(self) -> list[Cocktail]:
        name = self._rng.choice(RANDOM_COCKTAIL_NAMES)
        logger.debug("random_cocktail_selected", name=name)
        return await self.search_by_name(name)

    def _build_url(self, query: str) -> str:
        if not query:
            raise EncodingError("Cocktail name must not be empty.")
        try:
            encoded = quote(query, safe="")
        except UnicodeEncodeError as exc:
            raise EncodingError(f"Cocktail name cannot be encoded: {query!r}") from exc
        return f"{str(self._settings.base_url)}?name={encoded}"

    def _headers(self) -> dict[str, str]:
        api_key = self._settings.api_key
        if not api_key:
            raise NetworkError("Cocktail API key is not configured.")
        return {"X-Api-Key": api_key.get_secret_value()}

    @staticmethod
    def _decode(response: httpx.Response) -> list[Cocktail]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError("Cocktail API returned a non-JSON body.") from exc
        if not isinstance(payload, list):
            raise DecodeError(
                f"Cocktail API returned {type(payload).__name__}, expected a list."
            )
        try:
            return _COCKTAIL_LIST.validate_python(payload)
        except ValidationError as exc:
            raise DecodeError(f"Cocktail API returned malformed records: {exc}") from exc


__all__ = ["CocktailClient", "RANDOM_COCKTAIL_NAMES"]
