"""
Texas Hold'em table rules and constants.

Seat arithmetic follows the house rules of this table:

1. The two seats after the dealer post the small and big blind, at every
   table size (heads-up included).

2. Preflop, action starts three seats after the dealer. On later streets it
   starts on the first seat after the dealer.

3. A raise names the increment on top of the call. It must be at least the
   current minimum raise, which starts each street at the big blind and then
   tracks the last full raise.
"""

from enum import Enum, auto
from typing import Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    WAITING = auto()      # No hand started yet
    PREFLOP = auto()      # After hole cards dealt, before flop
    FLOP = auto()         # After 3 community cards
    TURN = auto()         # After 4th community card
    RIVER = auto()        # After 5th community card
    SHOWDOWN = auto()     # Determine winner
    ENDED = auto()        # Hand is complete


BETTING_PHASES = (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


# Default game settings
DEFAULT_SMALL_BLIND = 5
DEFAULT_BIG_BLIND = 10
DEFAULT_MAX_SEATS = 9
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand

# Community cards dealt when leaving each street
STREET_CARDS = {
    GamePhase.PREFLOP: FLOP_CARDS,
    GamePhase.FLOP: TURN_CARDS,
    GamePhase.TURN: RIVER_CARDS,
}

NEXT_PHASE = {
    GamePhase.PREFLOP: GamePhase.FLOP,
    GamePhase.FLOP: GamePhase.TURN,
    GamePhase.TURN: GamePhase.RIVER,
    GamePhase.RIVER: GamePhase.SHOWDOWN,
    GamePhase.SHOWDOWN: GamePhase.ENDED,
}


def blind_positions(num_players: int, dealer_index: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    Args:
        num_players: Number of players dealt into the hand
        dealer_index: Index of the dealer among those players

    Returns:
        Tuple of (small_blind_index, big_blind_index)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")

    return (dealer_index + 1) % num_players, (dealer_index + 2) % num_players


def first_to_act(num_players: int, dealer_index: int, phase: GamePhase) -> int:
    """
    Get the index of the first player to act on a street.

    Preflop this is three seats after the dealer (the seat after the big
    blind); afterwards it is the first seat after the dealer.
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")

    if phase == GamePhase.PREFLOP:
        return (dealer_index + 3) % num_players
    return (dealer_index + 1) % num_players
