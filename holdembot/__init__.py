"""
holdembot - Texas Hold'em table engine with weighted-random bots

- Pure Python game core (cards, hand evaluation, betting state machine)
- Weighted-random bot policy with personality profiles
- Table driver with a pluggable balance ledger
- Optional FastAPI service over one table

Usage:
    from holdembot.core import Card, Deck, Player, PokerGame
    from holdembot.agents import BotPolicy
    from holdembot.table import Table
"""

__version__ = "0.1.0"

from holdembot.core.card import Card, Deck
from holdembot.core.player import Player
from holdembot.core.game import PokerGame
from holdembot.core.hand import HandRank, evaluate_hand
from holdembot.config import TableConfig

__all__ = [
    "Card",
    "Deck",
    "Player",
    "PokerGame",
    "HandRank",
    "evaluate_hand",
    "TableConfig",
    "__version__",
]
