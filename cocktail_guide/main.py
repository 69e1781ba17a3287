"""Application wiring."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from cocktail_guide.config import GuideSettings, get_settings
from cocktail_guide.controllers.search import SearchController, SearchView
from cocktail_guide.i18n import I18nService
from cocktail_guide.logging import configure_logging, logger
from cocktail_guide.services.cocktails import CocktailClient


@asynccontextmanager
async def open_guide(
    view: SearchView,
    *,
    settings: GuideSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
    locale: str | None = None,
) -> AsyncIterator[SearchController]:
    """Build the client and controller for one search screen.

    The HTTP client is closed on exit only when it was created here.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    owns_client = http_client is None
    http_client = http_client or httpx.AsyncClient(
        timeout=settings.api.request_timeout_seconds,
    )
    client = CocktailClient(http_client, settings.api)
    i18n = I18nService(default_locale=settings.default_locale)
    controller = SearchController(client, view, settings=settings, i18n=i18n, locale=locale)

    logger.info("cocktail_guide_starting", locale=locale or settings.default_locale)
    controller.start()
    try:
        yield controller
    finally:
        controller.close()
        if owns_client:
            await http_client.aclose()
        logger.info("cocktail_guide_stopped")


__all__ = ["open_guide"]
