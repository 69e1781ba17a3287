"""Debounced search flow between a view and the cocktail client.

All state lives on one asyncio event loop, which stands in for the UI thread.
Network calls run as tasks; their outcome is handed back to the loop with
``call_soon_threadsafe`` and only then reconciled against the latest request
generation. Responses for superseded generations are dropped.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from functools import partial
from typing import Awaitable, Callable, Protocol, Sequence

from cocktail_guide.config import GuideSettings, get_settings
from cocktail_guide.domain.models import Cocktail
from cocktail_guide.i18n import I18nService
from cocktail_guide.logging import logger
from cocktail_guide.services.cocktails import CocktailClient
from cocktail_guide.services.exceptions import CocktailServiceError

CocktailRequest = Callable[[], Awaitable[Sequence[Cocktail]]]


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"


class SearchView(Protocol):
    """Rendering side of the search screen."""

    def show_loading(self) -> None: ...

    def show_results(self, cocktails: Sequence[Cocktail]) -> None: ...

    def show_empty(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def clear(self, prompt: str) -> None: ...


class SearchController:
    """Turns keystrokes and button taps into cocktail lookups.

    Must be created and driven from inside the running event loop.
    """

    def __init__(
        self,
        client: CocktailClient,
        view: SearchView,
        *,
        settings: GuideSettings | None = None,
        i18n: I18nService | None = None,
        locale: str | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._client = client
        self._view = view
        self._debounce_seconds = settings.search.debounce_seconds
        self._error_display_seconds = settings.search.error_display_seconds
        self._i18n = i18n or I18nService(default_locale=settings.default_locale)
        self._locale = locale or settings.default_locale
        self._loop = loop or asyncio.get_running_loop()

        self._query = ""
        self._state = SearchState.IDLE
        self._message = self._text("search.prompt")
        self._generation = 0
        self._debounce_handle: asyncio.TimerHandle | None = None
        self._reset_handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def message(self) -> str:
        """Text of the message area; empty while loading or showing cards."""
        return self._message

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def query(self) -> str:
        return self._query

    def start(self) -> None:
        """Render the initial prompt."""
        self._view.clear(self._message)

    def on_text_changed(self, text: str) -> None:
        self._query = text or ""
        self._cancel_debounce()
        if not self._query.strip():
            self._show_idle()
            return
        self._debounce_handle = self._loop.call_later(
            self._debounce_seconds, self._on_debounce_elapsed
        )

    def on_submit(self) -> None:
        self._cancel_debounce()
        query = self._query
        if not query.strip():
            return
        self._issue("search", partial(self._client.search_by_name, query))

    def on_random_requested(self) -> None:
        self._query = ""
        self._cancel_debounce()
        self._issue("random", self._client.random_cocktail)

    async def wait_for_pending(self) -> None:
        """Wait until every in-flight request has been reconciled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
        # flush outcomes queued with call_soon_threadsafe
        await asyncio.sleep(0)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        self._cancel_debounce()
        self._cancel_reset()
        for task in list(self._tasks):
            task.cancel()
        logger.debug("search_controller_closed", pending_requests=len(self._tasks))

    def _on_debounce_elapsed(self) -> None:
        self._debounce_handle = None
        query = self._query
        if not query.strip():
            return
        self._issue("search", partial(self._client.search_by_name, query))

    def _issue(self, kind: str, request: CocktailRequest) -> None:
        if self._closed:
            return
        self._cancel_debounce()
        self._cancel_reset()
        self._generation += 1
        generation = self._generation
        self._state = SearchState.LOADING
        self._message = ""
        self._view.show_loading()
        logger.info("search_request_issued", kind=kind, generation=generation, query=self._query)

        task = self._loop.create_task(self._run(generation, request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, generation: int, request: CocktailRequest) -> None:
        cocktails: Sequence[Cocktail] = ()
        error: CocktailServiceError | None = None
        try:
            cocktails = await request()
        except CocktailServiceError as exc:
            error = exc
        except Exception as exc:
            logger.exception("search_request_crashed", generation=generation)
            error = CocktailServiceError(f"unexpected {exc.__class__.__name__}: {exc}")
            error.__cause__ = exc
        self._loop.call_soon_threadsafe(self._reconcile, generation, cocktails, error)

    def _reconcile(
        self,
        generation: int,
        cocktails: Sequence[Cocktail],
        error: CocktailServiceError | None,
    ) -> None:
        if self._closed or generation != self._generation:
            logger.info(
                "stale_response_discarded",
                generation=generation,
                latest_generation=self._generation,
            )
            return

        if error is not None:
            reason = str(error) or error.__class__.__name__
            self._state = SearchState.ERROR
            self._message = self._text("search.error", reason=reason)
            logger.warning(
                "search_request_failed",
                generation=generation,
                error_type=error.__class__.__name__,
                error=reason,
            )
            self._view.show_error(self._message)
            self._reset_handle = self._loop.call_later(
                self._error_display_seconds, self._reset_message, generation
            )
            return

        if not cocktails:
            self._state = SearchState.EMPTY
            self._message = self._text("search.not_found")
            logger.info("search_request_empty", generation=generation)
            self._view.show_empty(self._message)
            self._reset_handle = self._loop.call_later(
                self._error_display_seconds, self._reset_message, generation
            )
            return

        results = tuple(cocktails)
        self._state = SearchState.RESULTS
        self._message = ""
        logger.info("search_request_completed", generation=generation, results=len(results))
        self._view.show_results(results)

    def _reset_message(self, generation: int) -> None:
        self._reset_handle = None
        # text only; the state stays ERROR or EMPTY
        if generation != self._generation:
            return
        if self._state not in (SearchState.ERROR, SearchState.EMPTY):
            return
        self._message = self._text("search.prompt")
        self._view.clear(self._message)

    def _show_idle(self) -> None:
        # clearing the query supersedes anything still in flight
        self._generation += 1
        self._cancel_reset()
        self._state = SearchState.IDLE
        self._message = self._text("search.prompt")
        self._view.clear(self._message)

    def _cancel_debounce(self) -> None:
        if self._debounce_handle is not None:
            self._debounce_handle.cancel()
            self._debounce_handle = None

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _text(self, key: str, **kwargs) -> str:
        return self._i18n.gettext(key, locale=self._locale, **kwargs)


__all__ = ["SearchController", "SearchState", "SearchView"]
