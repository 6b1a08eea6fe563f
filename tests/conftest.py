"""
Pytest configuration and shared fixtures for holdembot tests.
"""

import random
from typing import List, Optional, Sequence

import pytest
from holdembot.config import TableConfig
from holdembot.core.card import Card, Deck, Rank, Suit, canonical_cards, parse_cards
from holdembot.core.game import PokerGame
from holdembot.core.player import Player
from holdembot.core.rules import ActionType


class StackedDeck(Deck):
    """Deck whose shuffle puts the given cards on top, in draw order."""

    def __init__(self, draw_order: Sequence[Card]):
        self._order = list(draw_order)
        super().__init__(rng=random.Random(0))

    def shuffle(self) -> None:
        rest = [c for c in self._cards if c not in self._order]
        self._cards = rest + list(reversed(self._order))


class ShortDeck(Deck):
    """Deck holding only its first few cards."""

    def __init__(self, size: int):
        self._size = size
        super().__init__(rng=random.Random(0))

    def reset(self) -> None:
        super().reset()
        self._cards = self._cards[:self._size]


def deal_order(holes: Sequence[str], board: str = "") -> List[Card]:
    """
    Draw order for a hand: interleaved hole cards, then burn + flop,
    burn + turn, burn + river. Burns come from cards nobody uses.
    """
    hole_cards = [parse_cards(h) for h in holes]
    board_cards = parse_cards(board) if board else []
    used = {c for h in hole_cards for c in h} | set(board_cards)
    spare = [c for c in canonical_cards() if c not in used]

    order = [h[0] for h in hole_cards] + [h[1] for h in hole_cards]
    if board_cards:
        order += [spare.pop()] + board_cards[:3]
        order += [spare.pop()] + board_cards[3:4]
        order += [spare.pop()] + board_cards[4:5]
    return order


def play_passively(game: PokerGame) -> None:
    """Check or call until the hand is over."""
    while game.is_hand_running():
        valid = game.valid_actions()
        action = ActionType.CHECK if ActionType.CHECK in valid else ActionType.CALL
        assert game.take_action(action).success


@pytest.fixture
def make_players():
    """Factory for players p0, p1, ... with the given stacks."""
    def _make(*chips: int) -> List[Player]:
        return [Player(player_id=f"p{i}", name=f"P{i}", chips=c) for i, c in enumerate(chips)]
    return _make


@pytest.fixture
def make_game(make_players):
    """
    Factory for a table with blinds 5/10.

    With ``holes`` the deck is stacked: holes[i] goes to the i-th funded
    player in seat order, board is dealt street by street.
    """
    def _make(*chips: int, holes: Optional[Sequence[str]] = None, board: str = "", **config) -> PokerGame:
        deck = StackedDeck(deal_order(holes, board)) if holes else None
        return PokerGame(
            make_players(*chips),
            TableConfig(**config),
            rng=random.Random(42),
            deck=deck,
        )
    return _make


@pytest.fixture
def three_player_game(make_game):
    """3 players with 1000 chips, hand not started."""
    return make_game(1000, 1000, 1000)


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]


@pytest.fixture
def check_down():
    """Play the current hand out with checks and calls."""
    return play_passively


@pytest.fixture
def make_short_game(make_players):
    """Factory for a table whose deck holds only ``size`` cards."""
    def _make(size: int, *chips: int) -> PokerGame:
        return PokerGame(make_players(*chips), TableConfig(), deck=ShortDeck(size))
    return _make
