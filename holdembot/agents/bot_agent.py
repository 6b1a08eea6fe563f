"""
Policy-backed agent for automated seats.
"""

from typing import Dict, List, Any, Optional

from holdembot.agents.base import BaseAgent
from holdembot.agents.policy import BotPolicy
from holdembot.core.profile import BotProfile
from holdembot.core.rules import ActionType


class BotAgent(BaseAgent):
    """
    An agent that plays a weighted-random strategy.

    Valid actions and the raise range come from the legal action dicts the
    driver hands over; the RAISE entry's ``max`` is the stack left after
    the call.
    """

    def __init__(
        self,
        player_id: str,
        profile: Optional[BotProfile] = None,
        policy: Optional[BotPolicy] = None,
        name: Optional[str] = None,
    ):
        super().__init__(player_id, name or f"Bot-{player_id}")
        self.profile = profile or BotProfile()
        self.policy = policy or BotPolicy()

    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if not legal_actions:
            return {"action": ActionType.FOLD.value, "amount": 0}

        by_type = {ActionType(a["type"]): a for a in legal_actions}
        action = self.policy.choose_action(self.profile, list(by_type))

        if action == ActionType.RAISE:
            entry = by_type[action]
            amount = self.policy.raise_amount(self.profile, entry["max"], entry["min"])
            return {"action": action.value, "amount": amount}

        return {"action": action.value, "amount": 0}

    def thinking_delay(self) -> int:
        """Milliseconds this bot would pause before acting."""
        return self.policy.thinking_delay(self.profile)
