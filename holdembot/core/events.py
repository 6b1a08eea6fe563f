"""
Observer interface for engine notifications.

Observers are told about changes after they happen. They must treat the
engine as read-only while being notified: calling a mutating engine method
from a callback raises ReentrantCallError.

Usage:
    class Printer(GameObserver):
        def on_player_acted(self, player, action, amount):
            print(player.name, action.value, amount)

    game.add_observer(Printer())
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from holdembot.core.game import HandSummary
    from holdembot.core.player import Player
    from holdembot.core.rules import ActionType, GamePhase


class GameObserver:
    """Base observer; every hook is a no-op."""

    def on_state_changed(self, phase: "GamePhase", snapshot: Dict[str, Any]) -> None:
        """Called after a hand starts and after every street transition."""

    def on_player_acted(self, player: "Player", action: "ActionType", amount: int) -> None:
        """Called after an action has been applied."""

    def on_pot_changed(self, pot: int) -> None:
        """Called after the pot changes."""

    def on_hand_ended(self, summary: "HandSummary") -> None:
        """Called once per hand after the pot has been paid out."""


class EventLog(GameObserver):
    """Observer that records every notification as a (name, payload) tuple."""

    def __init__(self):
        self.events = []

    def on_state_changed(self, phase, snapshot):
        self.events.append(("state_changed", phase))

    def on_player_acted(self, player, action, amount):
        self.events.append(("player_acted", (player.player_id, action, amount)))

    def on_pot_changed(self, pot):
        self.events.append(("pot_changed", pot))

    def on_hand_ended(self, summary):
        self.events.append(("hand_ended", summary))

    def names(self):
        return [name for name, _ in self.events]
