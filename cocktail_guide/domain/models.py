"""Pydantic models shared across service/controller layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class Cocktail(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr
    ingredients: tuple[StrictStr, ...]
    instructions: StrictStr


__all__ = ["Cocktail"]
