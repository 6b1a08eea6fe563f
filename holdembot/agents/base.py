"""
Base Agent Interface for holdembot.

An agent owns the decisions of one seat. The table driver hands it the
seat's view of the game and its legal actions and expects an action dict
back.

Usage:
    class MyAgent(BaseAgent):
        def act(self, game_state, legal_actions):
            return {"action": "CALL", "amount": 0}
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from holdembot.core.errors import AgentDisconnected, InvalidActionError


class BaseAgent(ABC):
    """
    Abstract base class for seat agents.

    Attributes:
        player_id: Id of the seat's player
        name: Human-readable name
    """

    # Human seats are not asked by the driver; their actions arrive from outside
    is_human = False

    def __init__(self, player_id: str, name: Optional[str] = None):
        self.player_id = player_id
        self.name = name or f"Agent-{player_id}"

    @abstractmethod
    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Choose an action given the current game state.

        Args:
            game_state: Snapshot from ``PokerGame.get_state(player_id)``
            legal_actions: Legal action dicts, each containing:
                - type: FOLD, CHECK, CALL, RAISE or ALL_IN
                - amount: Chips needed (CALL, ALL_IN)
                - min/max: Raise increment range (RAISE)

        Returns:
            Action dictionary, e.g. {"action": "RAISE", "amount": 20}

        Raises:
            AgentDisconnected: If the participant behind the seat went away.
        """

    def on_hand_end(self, summary: Dict[str, Any]) -> None:
        """
        Called when a hand ends.

        Args:
            summary: ``HandSummary.to_dict()`` of the finished hand
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id}, {self.name})"


class HumanAgent(BaseAgent):
    """
    Marks a seat as controlled by a person.

    The driver stops and waits when a connected human must act; their
    actions come through ``Table.submit_action``. Once disconnected the
    seat is forfeited on each of its turns.
    """

    is_human = True

    def __init__(self, player_id: str, name: Optional[str] = None):
        super().__init__(player_id, name or f"Human-{player_id}")
        self.connected = True

    def act(
        self,
        game_state: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if not self.connected:
            raise AgentDisconnected(f"{self.name} is disconnected")
        raise InvalidActionError("Human actions should come through Table.submit_action")
