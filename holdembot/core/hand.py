"""
Hand Evaluation for Texas Hold'em.

This module picks the best 5-card hand out of 5-7 cards and describes it
as a category plus a tie-break vector. Two results compare by category
first and then element-wise by tie-break values.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ T♠
 9. Straight Flush: 5 consecutive cards of same suit
 8. Four of a Kind: 4 cards of same rank
 7. Full House: 3 of a kind + pair
 6. Flush: 5 cards of same suit
 5. Straight: 5 consecutive cards
 4. Three of a Kind: 3 cards of same rank
 3. Two Pair: 2 different pairs
 2. One Pair: 2 cards of same rank
 1. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel), which ranks as a
5-high straight.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Tuple, Optional, Sequence, TypeVar
from itertools import combinations
from enum import IntEnum
from collections import Counter

from holdembot.core.card import ACE_LOW_VALUE, Card, Rank
from holdembot.core.rules import HAND_SIZE


class HandRank(IntEnum):
    """Hand categories from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.HIGH_CARD: "High Card",
}

WHEEL_VALUES = (14, 5, 4, 3, 2)


@total_ordering
@dataclass(frozen=True, eq=False)
class HandResult:
    """
    The best 5-card hand found for a set of cards.

    Attributes:
        rank: Hand category
        values: Tie-break vector, category-defining values first, then
                kickers, all descending (2-14, Ace low counts as 1)
        cards: The 5 cards making the hand, in tie-break order
    """
    rank: HandRank
    values: Tuple[int, ...]
    cards: Tuple[Card, ...]

    @property
    def key(self) -> Tuple[int, Tuple[int, ...]]:
        return int(self.rank), self.values

    @property
    def name(self) -> str:
        return HAND_RANK_NAMES[self.rank]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: HandResult) -> bool:
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        cards = " ".join(c.short_str for c in self.cards)
        return f"HandResult({self.rank.name}, {self.values}, [{cards}])"


def evaluate_hand(cards: Sequence[Card]) -> HandResult:
    """
    Evaluate a poker hand (5-7 cards).

    Args:
        cards: Hole cards plus community cards, 5 to 7 in total

    Returns:
        The best HandResult over every 5-card subset

    Raises:
        ValueError: If not 5-7 distinct cards provided
    """
    if len(cards) < HAND_SIZE or len(cards) > 7:
        raise ValueError(f"Need 5-7 cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise ValueError(f"Duplicate cards in {list(cards)}")

    if len(cards) == HAND_SIZE:
        return _evaluate_5_cards(cards)

    return max(_evaluate_5_cards(combo) for combo in combinations(cards, HAND_SIZE))


def _evaluate_5_cards(cards: Sequence[Card]) -> HandResult:
    """Evaluate exactly 5 cards, testing categories from best to worst."""
    sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)
    values = [c.value for c in sorted_cards]

    is_flush = len({c.suit for c in sorted_cards}) == 1
    straight_values = _straight_values(values)

    rank_counts = Counter(values)
    counts = sorted(rank_counts.values(), reverse=True)

    if straight_values and is_flush:
        if straight_values[0] == 14:
            hand_type = HandRank.ROYAL_FLUSH
        else:
            hand_type = HandRank.STRAIGHT_FLUSH
        return HandResult(hand_type, straight_values, _order_straight(sorted_cards, straight_values))

    if counts == [4, 1]:
        return _grouped(HandRank.FOUR_OF_A_KIND, sorted_cards, rank_counts)

    if counts == [3, 2]:
        return _grouped(HandRank.FULL_HOUSE, sorted_cards, rank_counts)

    if is_flush:
        return HandResult(HandRank.FLUSH, tuple(values), tuple(sorted_cards))

    if straight_values:
        return HandResult(HandRank.STRAIGHT, straight_values, _order_straight(sorted_cards, straight_values))

    if counts == [3, 1, 1]:
        return _grouped(HandRank.THREE_OF_A_KIND, sorted_cards, rank_counts)

    if counts == [2, 2, 1]:
        return _grouped(HandRank.TWO_PAIR, sorted_cards, rank_counts)

    if counts == [2, 1, 1, 1]:
        return _grouped(HandRank.ONE_PAIR, sorted_cards, rank_counts)

    return HandResult(HandRank.HIGH_CARD, tuple(values), tuple(sorted_cards))


def _straight_values(values: List[int]) -> Optional[Tuple[int, ...]]:
    """
    Tie-break vector of a straight, or None if the values are not one.

    The wheel (A-2-3-4-5) comes back as (5, 4, 3, 2, 1).
    """
    if len(set(values)) != HAND_SIZE:
        return None

    if values[0] - values[4] == 4:
        return tuple(values)

    if tuple(values) == WHEEL_VALUES:
        return (5, 4, 3, 2, ACE_LOW_VALUE)

    return None


def _order_straight(cards: List[Card], straight_values: Tuple[int, ...]) -> Tuple[Card, ...]:
    """Put the Ace last when it plays low."""
    if straight_values[-1] == ACE_LOW_VALUE:
        return tuple(cards[1:] + cards[:1])
    return tuple(cards)


def _grouped(hand_type: HandRank, cards: List[Card], rank_counts: Counter) -> HandResult:
    """Order cards by group size, then value, and build the tie-break vector from them."""
    ordered = sorted(cards, key=lambda c: (rank_counts[c.value], c.value), reverse=True)
    return HandResult(hand_type, tuple(c.value for c in ordered), tuple(ordered))


def compare_hands(a: HandResult, b: HandResult) -> int:
    """
    Compare two evaluated hands.

    Returns:
        1 if a wins, -1 if b wins, 0 if tie
    """
    if a.rank != b.rank:
        return 1 if a.rank > b.rank else -1

    for value_a, value_b in zip(a.values, b.values):
        if value_a != value_b:
            return 1 if value_a > value_b else -1

    return 0


T = TypeVar("T")


def determine_winners(entries: Sequence[Tuple[T, HandResult]]) -> List[T]:
    """
    Pick every entry holding the best hand.

    Args:
        entries: (owner, HandResult) pairs, e.g. (player, hand)

    Returns:
        Owners whose hand compares equal to the best one, in input order
    """
    if not entries:
        return []

    best = entries[0][1]
    for _, hand in entries[1:]:
        if compare_hands(hand, best) > 0:
            best = hand

    return [owner for owner, hand in entries if compare_hands(hand, best) == 0]


def get_hand_description(hand: HandResult) -> str:
    """Get a human-readable description of an evaluated hand."""
    values = hand.values
    hand_type = hand.rank

    if hand_type == HandRank.ROYAL_FLUSH:
        return "Royal Flush"
    elif hand_type == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {_value_name(values[0])} high"
    elif hand_type == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_value_name(values[0])}s"
    elif hand_type == HandRank.FULL_HOUSE:
        return f"Full House, {_value_name(values[0])}s full of {_value_name(values[3])}s"
    elif hand_type == HandRank.FLUSH:
        return f"Flush, {_value_name(values[0])} high"
    elif hand_type == HandRank.STRAIGHT:
        if values[-1] == ACE_LOW_VALUE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_value_name(values[0])} high"
    elif hand_type == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {_value_name(values[0])}s"
    elif hand_type == HandRank.TWO_PAIR:
        return f"Two Pair, {_value_name(values[0])}s and {_value_name(values[2])}s"
    elif hand_type == HandRank.ONE_PAIR:
        return f"Pair of {_value_name(values[0])}s"
    else:
        return f"High Card, {_value_name(values[0])}"


def _value_name(value: int) -> str:
    """Get the name of a card value (2-14)."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[Rank(value - 2)]
