"""
Player class for Texas Hold'em.

Manages per-seat state:
- Chip balance (persists across hands)
- Hole cards
- Round and hand contributions
- Status (active, folded, all-in, out, waiting)
- Optional bot profile for automated seats
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field
from enum import Enum, auto

from holdembot.core.card import Card
from holdembot.core.profile import BotProfile


class PlayerStatus(Enum):
    """Player states during a hand."""
    ACTIVE = auto()       # Still in the hand, can act
    FOLDED = auto()       # Has folded
    ALL_IN = auto()       # All-in, no more actions
    OUT = auto()          # No chips, not dealt in
    WAITING = auto()      # Seated, waiting for the next hand


@dataclass
class Player:
    """
    A player seated at the table.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        chips: Current chip balance
        hole_cards: The player's private cards (0 or 2)
        round_bet: Amount contributed in the current betting round
        total_bet: Amount contributed in the current hand
        status: Current player status
        seat: Seat index at the table
        bot: Bot profile, or None for a human seat
    """
    player_id: str
    name: str
    chips: int
    seat: int = 0
    bot: Optional[BotProfile] = None
    hole_cards: List[Card] = field(default_factory=list)
    round_bet: int = 0
    total_bet: int = 0
    status: PlayerStatus = PlayerStatus.WAITING

    # Acted since the last bet that reopened the round
    has_acted: bool = False
    last_action: Optional[str] = None

    def __post_init__(self) -> None:
        if self.chips < 0:
            raise ValueError(f"Chip balance cannot be negative: {self.chips}")

    @property
    def is_bot(self) -> bool:
        return self.bot is not None

    def reset_for_new_hand(self) -> None:
        """Reset hand state; funded players become ACTIVE, the rest OUT."""
        self.hole_cards = []
        self.round_bet = 0
        self.total_bet = 0
        self.has_acted = False
        self.last_action = None

        if self.chips > 0:
            self.status = PlayerStatus.ACTIVE
        else:
            self.status = PlayerStatus.OUT

    def reset_for_new_round(self) -> None:
        """Reset betting state for a new street."""
        self.round_bet = 0
        self.has_acted = False

    def receive_card(self, card: Card) -> None:
        self.hole_cards.append(card)

    def place_bet(self, amount: int) -> int:
        """
        Contribute chips to the pot.

        Args:
            amount: Requested amount

        Returns:
            Actual amount contributed, min(amount, chips). Flips the player
            to ALL_IN when the balance reaches zero.
        """
        if amount <= 0:
            return 0

        actual_amount = min(amount, self.chips)

        self.chips -= actual_amount
        self.round_bet += actual_amount
        self.total_bet += actual_amount

        if self.chips == 0:
            self.status = PlayerStatus.ALL_IN

        return actual_amount

    def fold(self) -> None:
        self.status = PlayerStatus.FOLDED
        self.has_acted = True
        self.last_action = "FOLD"

    def check(self) -> None:
        self.has_acted = True
        self.last_action = "CHECK"

    def call(self, amount_to_call: int) -> int:
        """
        Call the current bet.

        Returns:
            Actual amount called
        """
        actual = self.place_bet(amount_to_call)
        self.has_acted = True
        self.last_action = f"CALL ${actual}"
        return actual

    def raise_by(self, total_amount: int) -> int:
        """
        Put in a call plus a raise increment.

        Args:
            total_amount: Chips to add this action (call + increment)

        Returns:
            Actual amount added to the pot
        """
        actual = self.place_bet(total_amount)
        self.has_acted = True

        if self.status == PlayerStatus.ALL_IN:
            self.last_action = f"ALL-IN ${self.round_bet}"
        else:
            self.last_action = f"RAISE ${self.round_bet}"

        return actual

    def go_all_in(self) -> int:
        """
        Put the whole remaining balance in.

        Returns:
            Amount added to the pot
        """
        added = self.place_bet(self.chips)
        self.has_acted = True
        self.last_action = f"ALL-IN ${self.round_bet}"
        return added

    def add_chips(self, amount: int) -> None:
        """Receive chips (pot award or refund)."""
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        self.chips += amount

    @property
    def is_all_in(self) -> bool:
        return self.status == PlayerStatus.ALL_IN

    @property
    def has_folded(self) -> bool:
        return self.status == PlayerStatus.FOLDED

    @property
    def is_in_hand(self) -> bool:
        """Check if player is still in the hand (not folded, not out)."""
        return self.status in (PlayerStatus.ACTIVE, PlayerStatus.ALL_IN)

    @property
    def can_act(self) -> bool:
        """Check if player can take an action."""
        return self.status == PlayerStatus.ACTIVE and self.chips > 0

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "seat": self.seat,
            "chips": self.chips,
            "bet": self.round_bet,
            "total_bet": self.total_bet,
            "status": self.status.name,
            "last_action": self.last_action,
            "is_bot": self.is_bot,
            "card_count": len(self.hole_cards),
        }

        if not hide_cards and self.hole_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def to_public_dict(self) -> Dict[str, Any]:
        """Get public information (visible to all players)."""
        return self.to_dict(hide_cards=True)

    def to_private_dict(self) -> Dict[str, Any]:
        """Get private information (only for this player)."""
        return self.to_dict(hide_cards=False)

    def __repr__(self) -> str:
        return (
            f"Player({self.player_id}, chips={self.chips}, "
            f"bet={self.round_bet}, status={self.status.name})"
        )

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hole_cards) if self.hole_cards else "??"
        return f"Player {self.name} [{cards_str}] ${self.chips}"
