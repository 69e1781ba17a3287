"""Fakes shared by client/controller tests."""

from __future__ import annotations

import asyncio

from cocktail_guide.domain.models import Cocktail

MARGARITA_PAYLOAD = {
    "name": "Margarita",
    "ingredients": ["Tequila", "Lime", "Triple Sec"],
    "instructions": "Shake and strain.",
}


class RecordingView:
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def show_loading(self) -> None:
        self.events.append(("loading",))

    def show_results(self, cocktails) -> None:
        self.events.append(("results", tuple(cocktail.name for cocktail in cocktails)))

    def show_empty(self, message: str) -> None:
        self.events.append(("empty", message))

    def show_error(self, message: str) -> None:
        self.events.append(("error", message))

    def clear(self, prompt: str) -> None:
        self.events.append(("clear", prompt))


class FakeCocktailClient:
    def __init__(self, responses: dict[str, list[Cocktail]] | None = None, error: Exception | None = None) -> None:
        self.responses = responses or {}
        self.error = error
        self.calls: list[str] = []
        self.random_calls = 0

    async def search_by_name(self, name: str) -> list[Cocktail]:
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return self.responses.get(name, [])

    async def random_cocktail(self) -> list[Cocktail]:
        self.random_calls += 1
        return await self.search_by_name("mojito")


class GatedCocktailClient:
    """Each call blocks until the test resolves its future."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Future] = {}

    async def search_by_name(self, name: str) -> list[Cocktail]:
        self.calls.append(name)
        gate = asyncio.get_running_loop().create_future()
        self.gates[name] = gate
        return await gate

    async def random_cocktail(self) -> list[Cocktail]:
        return await self.search_by_name("mojito")


async def settle(rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


