"""Plain-text rendering of cocktail cards."""

from __future__ import annotations

from typing import Iterable

from cocktail_guide.domain.models import Cocktail
from cocktail_guide.i18n import I18nService

CARD_SEPARATOR = "\n\n"


def render_card(cocktail: Cocktail, *, i18n: I18nService | None = None, locale: str | None = None) -> str:
    i18n = i18n or I18nService()
    lines = [f"🍹 {cocktail.name.upper()}", "", i18n.gettext("card.ingredients", locale=locale)]
    lines.extend(f"• {ingredient}" for ingredient in cocktail.ingredients)
    lines.extend(["", i18n.gettext("card.instructions", locale=locale), cocktail.instructions.strip()])
    return "\n".join(lines)


def render_cards(
    cocktails: Iterable[Cocktail],
    *,
    i18n: I18nService | None = None,
    locale: str | None = None,
) -> str:
    i18n = i18n or I18nService()
    return CARD_SEPARATOR.join(render_card(item, i18n=i18n, locale=locale) for item in cocktails)


__all__ = ["render_card", "render_cards"]
