"""
Card and Deck classes for Texas Hold'em.

Cards are immutable (rank, suit) pairs with a compact integer encoding
(``rank * 4 + suit``). The deck owns an injectable random source so a
seeded table replays the exact same shuffles.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional
from enum import IntEnum

from holdembot.core.errors import DeckExhaustedError


logger = logging.getLogger(__name__)


class Suit(IntEnum):
    """Card suits with integer values for fast comparison."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


# String mappings
SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Canonical deck order: suits outer, ranks inner
CANONICAL_SUIT_ORDER = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)

ACE_LOW_VALUE = 1


class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10h")
      or Card.from_string("A♠")
    - Integer (0-51): Card.from_int(51) = Ace of Spades
    """

    __slots__ = ("rank", "suit", "_int")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "rank", Rank(rank))
        object.__setattr__(self, "suit", Suit(suit))
        object.__setattr__(self, "_int", int(self.rank) * 4 + int(self.suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __delattr__(self, name):
        raise AttributeError("Card is immutable")

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts "As", "Kh", "Td", "10d", "2c" and the symbol forms "A♠", "K♥".
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        if s.startswith("10"):
            rank_part, suit_part = "T", s[2:]
        else:
            rank_part, suit_part = s[0].upper(), s[1:]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")
        rank = CHAR_TO_RANK[rank_part]

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(rank, suit)

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from integer (0-51)."""
        if not 0 <= card_int <= 51:
            raise ValueError(f"Card int must be 0-51, got {card_int}")
        return cls(Rank(card_int // 4), Suit(card_int % 4))

    def to_int(self) -> int:
        """Return the integer representation (0-51)."""
        return self._int

    @property
    def value(self) -> int:
        """Numeric rank value, 2 through 14 (Ace high)."""
        return int(self.rank) + 2

    def __int__(self) -> int:
        return self._int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._int == other._int
        return False

    def __hash__(self) -> int:
        return self._int

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_CHARS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "color": self.color,
        }


def canonical_cards() -> List[Card]:
    """The 52 cards in canonical order (hearts, diamonds, clubs, spades; 2 to Ace)."""
    return [Card(rank, suit) for suit in CANONICAL_SUIT_ORDER for rank in Rank]


class Deck:
    """
    A standard 52-card deck.

    Cards are drawn from the end of the sequence. Pass a seeded
    ``random.Random`` to make shuffles reproducible.

    Usage:
        deck = Deck(rng=random.Random(7))
        deck.shuffle()
        card = deck.draw()
        flop = deck.draw_multiple(3)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards in canonical order."""
        self._cards: List[Card] = canonical_cards()
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Uniform in-place permutation of the remaining cards (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """
        Remove and return the last card of the sequence.

        Raises:
            DeckExhaustedError: If no cards remain.
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        card = self._cards.pop()
        self._dealt.append(card)
        return card

    def draw_multiple(self, n: int) -> List[Card]:
        """Draw up to n cards, returning fewer if the deck runs out."""
        drawn = []
        for _ in range(n):
            if not self._cards:
                logger.warning(f"Deck exhausted after {len(drawn)} of {n} cards")
                break
            drawn.append(self.draw())
        return drawn

    def burn(self) -> Card:
        """Burn (discard) the next card."""
        return self.draw()

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    @property
    def dealt_cards(self) -> List[Card]:
        """Cards drawn since the last reset, burns included."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh Td" (space-separated)
    - "AsKhTd", "10hAs" (no separator)
    - "A♠ K♥ T♦" (with symbols)
    """
    cards_str = cards_str.strip()

    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    result = []
    i = 0
    while i < len(cards_str):
        width = 3 if cards_str.startswith("10", i) else 2
        if i + width <= len(cards_str) and (
            cards_str[i + width - 1] in SYMBOL_TO_SUIT
            or cards_str[i + width - 1].lower() in CHAR_TO_SUIT
        ):
            result.append(Card.from_string(cards_str[i:i + width]))
            i += width
        else:
            raise ValueError(f"Cannot parse card at position {i}: {cards_str[i:]}")

    return result
