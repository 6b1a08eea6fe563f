"""
Weighted-random bot decisions.

A bot picks among its currently valid actions by weight: each valid action
goes into a pool once per unit of weight and one entry is drawn uniformly.
Raises are sized from the chips left after the call, scaled by a random
multiplier taken from the bot's personality range.

Usage:
    policy = BotPolicy(random.Random(7))
    decision = policy.decide(player, game.valid_actions(player),
                             game.current_bet, game.min_raise)
    game.take_action(decision.action, decision.amount)
"""

from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from holdembot.core.player import Player
from holdembot.core.profile import BotProfile, DEFAULT_WEIGHTS
from holdembot.core.rules import ActionType


logger = logging.getLogger(__name__)

RAISE_ROUNDING = 5

# Thinking delay in milliseconds, before the personality modifier
BASE_DELAY_MS = 600
DELAY_SPREAD_MS = 800


@dataclass(frozen=True)
class Decision:
    """An action picked for a seat; amount is the raise increment for RAISE."""
    action: ActionType
    amount: int = 0


class BotPolicy:
    """
    Samples bot actions and raise sizes from an injected random source.

    Args:
        rng: Random source shared with the table for seeded replays
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def choose_action(self, profile: BotProfile, valid_actions: Sequence[ActionType]) -> ActionType:
        """
        Draw one action from the weighted pool of valid actions.

        Actions outside ``valid_actions`` are never chosen, whatever their
        weight. If every valid action weighs zero the default table is used.

        Raises:
            ValueError: If there are no valid actions.
        """
        if not valid_actions:
            raise ValueError("No valid actions to choose from")

        pool = self._build_pool(profile.effective_weights, valid_actions)
        if not pool:
            logger.warning(f"All valid actions weigh zero for {profile.personality.value} bot, using defaults")
            pool = self._build_pool(DEFAULT_WEIGHTS, valid_actions)

        return self._rng.choice(pool)

    @staticmethod
    def _build_pool(weights, valid_actions: Sequence[ActionType]) -> List[ActionType]:
        pool: List[ActionType] = []
        for action in valid_actions:
            pool.extend([action] * weights.weight(action))
        return pool

    def raise_amount(self, profile: BotProfile, available: int, min_raise: int) -> int:
        """
        Size a raise increment.

        Args:
            profile: Bot profile; its personality gives the multiplier range
            available: Chips left after covering the call
            min_raise: Smallest legal increment

        Returns:
            floor(available * multiplier), clamped to [min_raise, available]
            and rounded to the nearest multiple of 5, never above available
            nor below min_raise.
        """
        low, high = profile.raise_multiplier_range
        multiplier = low + self._rng.random() * (high - low)

        amount = math.floor(available * multiplier)
        amount = max(min_raise, min(amount, available))
        amount = math.floor(amount / RAISE_ROUNDING + 0.5) * RAISE_ROUNDING

        return max(min_raise, min(amount, available))

    def decide(
        self,
        player: Player,
        valid_actions: Sequence[ActionType],
        current_bet: int,
        min_raise: int,
    ) -> Decision:
        """
        Pick an action (and raise size) for a bot seat.

        Players without a bot profile play with the default profile.
        """
        profile = player.bot or BotProfile()
        action = self.choose_action(profile, valid_actions)

        if action != ActionType.RAISE:
            return Decision(action)

        call_amount = max(0, current_bet - player.round_bet)
        amount = self.raise_amount(profile, player.chips - call_amount, min_raise)
        logger.debug(f"{player.name} sizes raise at {amount} over a call of {call_amount}")
        return Decision(action, amount)

    def thinking_delay(self, profile: BotProfile) -> int:
        """Pause in milliseconds before a bot acts; presentation only."""
        base = BASE_DELAY_MS + self._rng.random() * DELAY_SPREAD_MS
        return math.floor(base * profile.delay_modifier)
