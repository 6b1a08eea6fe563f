"""
Bot personalities and action-weight tables.

A bot's behaviour is described by a personality tag and a weight per
action type. Weight tables are validated pydantic models keyed by the
five action names, so a table can never carry an unknown action.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from holdembot.core.errors import MalformedWeightsError
from holdembot.core.rules import ActionType


logger = logging.getLogger(__name__)


class Personality(Enum):
    """Bot personality tags."""
    AGGRESSIVE = "aggressive"
    PASSIVE = "passive"
    BALANCED = "balanced"
    TIGHT = "tight"
    LOOSE = "loose"
    TIGHT_AGGRESSIVE = "tight-aggressive"
    LOOSE_AGGRESSIVE = "loose-aggressive"
    RECKLESS = "reckless"
    CARELESS = "careless"

    @classmethod
    def parse(cls, tag: Optional[str]) -> Personality:
        """Parse a free-form tag, falling back to BALANCED."""
        if not tag:
            return cls.BALANCED
        try:
            return cls(tag.strip().lower())
        except ValueError:
            logger.warning(f"Unknown personality {tag!r}, using balanced")
            return cls.BALANCED


class ActionWeights(BaseModel):
    """Non-negative weight per action type."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    fold: int = Field(default=1, ge=0)
    check: int = Field(default=4, ge=0)
    call: int = Field(default=3, ge=0)
    raise_: int = Field(default=2, ge=0, alias="raise")
    all_in: int = Field(default=1, ge=0, alias="allin")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ActionWeights:
        """
        Build a table from a mapping like ``{"fold": 1, "raise": 3}``.

        Keys missing from the mapping keep the default weight.

        Raises:
            MalformedWeightsError: On unknown keys or invalid weights.
        """
        if not isinstance(data, Mapping):
            raise MalformedWeightsError(f"Weight table must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise MalformedWeightsError(str(e)) from e

    def weight(self, action: ActionType) -> int:
        """Weight for an action type."""
        return {
            ActionType.FOLD: self.fold,
            ActionType.CHECK: self.check,
            ActionType.CALL: self.call,
            ActionType.RAISE: self.raise_,
            ActionType.ALL_IN: self.all_in,
        }[action]

    def to_dict(self) -> Dict[str, int]:
        return self.model_dump(by_alias=True)


DEFAULT_WEIGHTS = ActionWeights()

# Weight tables handed to bots that are seated without one
PERSONALITY_WEIGHTS: Dict[Personality, ActionWeights] = {
    Personality.AGGRESSIVE: ActionWeights(fold=1, check=1, call=3, raise_=5, all_in=3),
    Personality.PASSIVE: ActionWeights(fold=2, check=5, call=4, raise_=1, all_in=1),
    Personality.TIGHT: ActionWeights(fold=5, check=3, call=2, raise_=2, all_in=1),
    Personality.LOOSE: ActionWeights(fold=1, check=3, call=4, raise_=3, all_in=2),
    Personality.TIGHT_AGGRESSIVE: ActionWeights(fold=3, check=2, call=2, raise_=4, all_in=2),
    Personality.LOOSE_AGGRESSIVE: ActionWeights(fold=1, check=1, call=3, raise_=5, all_in=3),
    Personality.RECKLESS: ActionWeights(fold=1, check=1, call=2, raise_=3, all_in=5),
    Personality.CARELESS: ActionWeights(fold=1, check=1, call=2, raise_=3, all_in=5),
    Personality.BALANCED: ActionWeights(fold=2, check=3, call=3, raise_=2, all_in=1),
}

# Fraction of the post-call stack a raise uses, drawn from [low, high)
RAISE_MULTIPLIERS: Dict[Personality, Tuple[float, float]] = {
    Personality.AGGRESSIVE: (0.7, 1.0),
    Personality.LOOSE_AGGRESSIVE: (0.7, 1.0),
    Personality.PASSIVE: (0.2, 0.5),
    Personality.TIGHT: (0.4, 0.7),
    Personality.TIGHT_AGGRESSIVE: (0.4, 0.7),
    Personality.LOOSE: (0.5, 0.8),
    Personality.RECKLESS: (0.8, 1.2),
    Personality.CARELESS: (0.8, 1.2),
    Personality.BALANCED: (0.4, 0.8),
}

DELAY_MODIFIERS: Dict[Personality, float] = {
    Personality.AGGRESSIVE: 0.7,
    Personality.RECKLESS: 0.7,
    Personality.PASSIVE: 1.3,
    Personality.TIGHT: 1.3,
}


@dataclass(frozen=True)
class BotProfile:
    """
    Decision configuration for an automated seat.

    Attributes:
        personality: Personality tag driving raise sizing and delays
        weights: Explicit action weights, or None to use DEFAULT_WEIGHTS
    """
    personality: Personality = Personality.BALANCED
    weights: Optional[ActionWeights] = field(default=None)

    @classmethod
    def from_config(
        cls,
        personality: Optional[str] = None,
        weights: Optional[Mapping[str, Any]] = None,
    ) -> BotProfile:
        """
        Build a profile from roster data.

        Without a weight table the bot plays its personality's table. A
        malformed table is logged and replaced by the default table.
        """
        parsed = Personality.parse(personality)
        if weights is None:
            return cls.for_personality(parsed)
        table = None
        try:
            table = ActionWeights.from_mapping(weights)
        except MalformedWeightsError as e:
            logger.warning(f"Malformed weights for {parsed.value} bot, using defaults: {e}")
        return cls(personality=parsed, weights=table)

    @classmethod
    def for_personality(cls, personality: Personality) -> BotProfile:
        """Profile using the personality's own weight table."""
        return cls(personality=personality, weights=PERSONALITY_WEIGHTS[personality])

    @property
    def effective_weights(self) -> ActionWeights:
        return self.weights if self.weights is not None else DEFAULT_WEIGHTS

    @property
    def raise_multiplier_range(self) -> Tuple[float, float]:
        return RAISE_MULTIPLIERS[self.personality]

    @property
    def delay_modifier(self) -> float:
        return DELAY_MODIFIERS.get(self.personality, 1.0)
