"""
Roster and balance persistence contract.

The table does not own storage. It reads who sits where from a roster
(``SeatSpec`` entries, optionally loaded from a JSON file) and reports each
hand's chip changes to a ``BalanceLedger``. ``InMemoryLedger`` is the
reference ledger used by the server and the tests.

Roster file format:
    [
        {"player_id": "u1", "name": "Alice", "chips": 1000},
        {"player_id": "b1", "name": "Bot", "chips": 1000, "is_bot": true,
         "personality": "aggressive", "weights": {"fold": 1, "raise": 5}}
    ]

A top-level object with a "seats" list is accepted as well.
"""

from __future__ import annotations
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError

from holdembot.core.profile import BotProfile


logger = logging.getLogger(__name__)


class SeatSpec(BaseModel):
    """One roster entry."""
    player_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    chips: int = Field(ge=0)
    is_bot: bool = False
    personality: Optional[str] = None
    # Left unvalidated here; a bad table falls back to defaults when seated
    weights: Optional[Any] = None

    def to_profile(self) -> Optional[BotProfile]:
        """Bot profile for this seat, or None for a human."""
        if not self.is_bot:
            return None
        return BotProfile.from_config(self.personality, self.weights)


def load_roster(path: Union[str, Path]) -> List[SeatSpec]:
    """
    Read a roster from a JSON file.

    Raises:
        ValueError: If the file is not valid JSON or an entry is invalid.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Roster {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("seats", [])
    if not isinstance(data, list):
        raise ValueError(f"Roster {path} must be a list of seats")

    try:
        seats = [SeatSpec.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ValueError(f"Invalid roster entry in {path}: {e}") from e

    logger.info(f"Loaded {len(seats)} seats from {path}")
    return seats


class BalanceLedger(ABC):
    """Where chip balances live between hands."""

    @abstractmethod
    def balance(self, player_id: str) -> Optional[int]:
        """Stored balance, or None if the player is unknown."""

    @abstractmethod
    def apply_deltas(self, hand_number: int, deltas: Dict[str, int]) -> None:
        """Record the chip change of every seat after a hand."""

    @abstractmethod
    def set_balance(self, player_id: str, chips: int) -> None:
        """Overwrite a stored balance."""

    def open_account(self, player_id: str, chips: int) -> int:
        """
        Balance a newly seated player starts with.

        Known players keep their stored balance; unknown ones are recorded
        with ``chips``.
        """
        stored = self.balance(player_id)
        if stored is not None:
            return stored
        self.set_balance(player_id, chips)
        return chips


class InMemoryLedger(BalanceLedger):
    """Ledger kept in a dict; remembers every applied hand."""

    def __init__(self, balances: Optional[Dict[str, int]] = None):
        self._balances: Dict[str, int] = dict(balances or {})
        self.history: List[Tuple[int, Dict[str, int]]] = []

    def balance(self, player_id: str) -> Optional[int]:
        return self._balances.get(player_id)

    def set_balance(self, player_id: str, chips: int) -> None:
        self._balances[player_id] = chips

    def apply_deltas(self, hand_number: int, deltas: Dict[str, int]) -> None:
        for player_id, delta in deltas.items():
            self._balances[player_id] = self._balances.get(player_id, 0) + delta
        self.history.append((hand_number, dict(deltas)))
        logger.debug(f"Ledger applied hand #{hand_number}: {deltas}")

    def balances(self) -> Dict[str, int]:
        return dict(self._balances)
