"""
holdembot Core - Pure Python Texas Hold'em Game Logic

This module contains all game logic without any network dependencies.
"""

from holdembot.core.card import Card, Deck, parse_cards
from holdembot.core.player import Player, PlayerStatus
from holdembot.core.hand import HandRank, HandResult, evaluate_hand, compare_hands, determine_winners
from holdembot.core.profile import ActionWeights, BotProfile, Personality
from holdembot.core.rules import GamePhase, ActionType
from holdembot.core.game import PokerGame, ActionResult, ActionRecord, HandSummary, PotAward

__all__ = [
    "Card",
    "Deck",
    "parse_cards",
    "Player",
    "PlayerStatus",
    "HandRank",
    "HandResult",
    "evaluate_hand",
    "compare_hands",
    "determine_winners",
    "ActionWeights",
    "BotProfile",
    "Personality",
    "PokerGame",
    "GamePhase",
    "ActionType",
    "ActionResult",
    "ActionRecord",
    "HandSummary",
    "PotAward",
]
