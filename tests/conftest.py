"""Shared pytest fixtures for client/controller tests."""

from __future__ import annotations

import pytest

from cocktail_guide.config import GuideSettings, SearchSettings
from cocktail_guide.domain.models import Cocktail

from fakes import MARGARITA_PAYLOAD, RecordingView


@pytest.fixture
def margarita() -> Cocktail:
    return Cocktail.model_validate(MARGARITA_PAYLOAD)


@pytest.fixture
def fast_settings() -> GuideSettings:
    return GuideSettings(search=SearchSettings(debounce_seconds=0.05, error_display_seconds=0.1))


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
