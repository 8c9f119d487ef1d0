"""Strictness policy applied to a single validation call."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MAX_CHARACTERS = 20_000


class Policy(BaseModel):
    """Leniency and limit settings for validation.

    Frozen: callers swap in a new policy (``model_copy(update=...)``) rather
    than mutating one that may be in use.
    """

    model_config = {"frozen": True}

    max_characters: int = Field(DEFAULT_MAX_CHARACTERS, gt=0)
    max_depth: int | None = Field(None, ge=0)
    allow_comments: bool = False
    allow_trailing_commas: bool = False
