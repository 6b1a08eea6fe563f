"""
Error types raised by the poker engine and its collaborators.
"""


class PokerError(Exception):
    """Base class for all engine errors."""


class InvalidActionError(PokerError):
    """An action outside the acting player's valid set was attempted."""


class InsufficientPlayersError(PokerError):
    """Fewer than two funded players are seated, so no hand can start."""


class DeckExhaustedError(PokerError):
    """The deck ran out of cards in the middle of a hand."""


class MalformedWeightsError(PokerError, ValueError):
    """A bot action-weight table could not be parsed."""


class ReentrantCallError(PokerError, RuntimeError):
    """An observer tried to mutate the engine while being notified."""


class AgentDisconnected(PokerError):
    """The participant owning the acting seat went away mid-decision."""
