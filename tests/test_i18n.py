"""Tests for the I18nService message lookup and fallback."""

from __future__ import annotations

import json
from pathlib import Path

from cocktail_guide.i18n import I18nService


def _write_locale(locale_dir: Path, locale: str, table: dict[str, str]) -> None:
    (locale_dir / f"{locale}.json").write_text(json.dumps(table, ensure_ascii=False), encoding="utf-8")


def test_gettext_formats_placeholders(tmp_path: Path):
    _write_locale(tmp_path, "en", {"search.error": "Error: {reason}"})
    service = I18nService(locales_path=tmp_path, default_locale="en")

    assert service.gettext("search.error", reason="offline") == "Error: offline"


def test_gettext_falls_back_to_language_then_default(tmp_path: Path):
    _write_locale(tmp_path, "en", {"search.prompt": "Type a name", "card.ingredients": "Ingredients:"})
    _write_locale(tmp_path, "ru", {"search.prompt": "Введите название"})
    service = I18nService(locales_path=tmp_path, default_locale="en")

    assert service.gettext("search.prompt", locale="ru-RU") == "Введите название"
    assert service.gettext("search.prompt", locale="ru_ru") == "Введите название"
    assert service.gettext("card.ingredients", locale="ru") == "Ingredients:"
    assert service.gettext("search.prompt", locale="es") == "Type a name"
    assert service.gettext("missing.key") == "missing.key"


def test_bundled_catalogs_share_keys():
    locales = Path(I18nService().locales_path)
    english = json.loads((locales / "en.json").read_text(encoding="utf-8"))
    russian = json.loads((locales / "ru.json").read_text(encoding="utf-8"))

    assert english.keys() == russian.keys()
    for key in ("search.prompt", "search.not_found", "search.error", "card.ingredients", "card.instructions"):
        assert english[key]
