"""
Table configuration.

Settings come from keyword arguments or from ``HOLDEMBOT_*`` environment
variables via ``TableConfig.from_env()``.
"""

from __future__ import annotations
import os
import random
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from holdembot.core.rules import (
    DEFAULT_BIG_BLIND, DEFAULT_MAX_SEATS, DEFAULT_SMALL_BLIND,
    MAX_PLAYERS, MIN_PLAYERS,
)


ENV_PREFIX = "HOLDEMBOT_"


class TableConfig(BaseModel):
    """Validated settings for one table."""

    model_config = ConfigDict(frozen=True)

    small_blind: int = Field(default=DEFAULT_SMALL_BLIND, gt=0)
    big_blind: int = Field(default=DEFAULT_BIG_BLIND, gt=0)
    max_seats: int = Field(default=DEFAULT_MAX_SEATS, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    # False keeps one main pot even with uneven all-ins
    side_pots: bool = True
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_blinds(self) -> TableConfig:
        if self.big_blind < self.small_blind:
            raise ValueError("big_blind must be at least small_blind")
        return self

    @classmethod
    def from_env(cls, **overrides) -> TableConfig:
        """Build a config from HOLDEMBOT_* variables, with keyword overrides on top."""
        values = {}
        for name in ("small_blind", "big_blind", "max_seats", "side_pots", "seed"):
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw
        values.update(overrides)
        return cls.model_validate(values)

    def make_rng(self) -> random.Random:
        """Random source for the table, seeded when a seed is configured."""
        return random.Random(self.seed)
