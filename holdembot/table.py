"""
Table driver: runs hands between agents.

The engine only knows seats and chips. The table maps each seat to an
agent, asks bots for their decisions, waits for connected humans, forfeits
disconnected seats, and reports every finished hand to the ledger.

Usage:
    table = Table(TableConfig(seed=7), ledger=InMemoryLedger())
    table.seat_roster(load_roster("roster.json"))
    table.play_hand()          # runs bots until a human must act
    table.submit_action("u1", ActionType.CALL)
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, Iterable, List, Optional

from holdembot.agents.base import BaseAgent, HumanAgent
from holdembot.agents.bot_agent import BotAgent
from holdembot.agents.policy import BotPolicy, Decision
from holdembot.config import TableConfig
from holdembot.core.errors import AgentDisconnected, InsufficientPlayersError, InvalidActionError
from holdembot.core.events import GameObserver
from holdembot.core.game import ActionResult, HandSummary, PokerGame
from holdembot.core.player import Player
from holdembot.core.rules import ActionType
from holdembot.roster import BalanceLedger, SeatSpec


logger = logging.getLogger(__name__)


class _HandReporter(GameObserver):
    """Forwards finished hands to the agents."""

    def __init__(self, table: Table):
        self.table = table

    def on_hand_ended(self, summary: HandSummary) -> None:
        result = summary.to_dict()
        for agent in self.table.agents.values():
            agent.on_hand_end(result)


class Table:
    """
    One table: an engine, its seat agents and a balance ledger.

    Args:
        config: Table settings
        ledger: Balance store; seated players start from their stored balance
        rng: Random source shared by the deck and the bots
        pace: Sleep for each bot's thinking delay before it acts
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        ledger: Optional[BalanceLedger] = None,
        rng: Optional[random.Random] = None,
        pace: bool = False,
    ):
        self.config = config or TableConfig()
        self._rng = rng if rng is not None else self.config.make_rng()
        self.game = PokerGame(config=self.config, rng=self._rng)
        self.policy = BotPolicy(self._rng)
        self.ledger = ledger
        self.pace = pace
        self.agents: Dict[str, BaseAgent] = {}
        self._recorded_hand = 0
        self.game.add_observer(_HandReporter(self))

    # ============= Seating =============

    def seat(self, spec: SeatSpec) -> Player:
        """Seat one roster entry with a bot or human agent."""
        chips = spec.chips
        if self.ledger is not None:
            chips = self.ledger.open_account(spec.player_id, spec.chips)

        player = self.game.seat_player(Player(
            player_id=spec.player_id,
            name=spec.name,
            chips=chips,
            bot=spec.to_profile(),
        ))

        if player.is_bot:
            self.agents[player.player_id] = BotAgent(player.player_id, player.bot, self.policy, spec.name)
        else:
            self.agents[player.player_id] = HumanAgent(player.player_id, spec.name)

        logger.info(f"Seated {spec.name} ({'bot' if player.is_bot else 'human'}) with ${chips}")
        return player

    def seat_roster(self, specs: Iterable[SeatSpec]) -> List[Player]:
        return [self.seat(spec) for spec in specs]

    def disconnect(self, player_id: str) -> None:
        """Mark a human seat as gone; its turns are forfeited from now on."""
        agent = self.agents.get(player_id)
        if isinstance(agent, HumanAgent):
            agent.connected = False
            logger.info(f"{agent.name} disconnected")
        self.run_bots()

    # ============= Play =============

    def play_hand(self) -> Optional[HandSummary]:
        """
        Start a hand and play it until a human must act.

        Returns:
            The hand summary if the hand finished, otherwise None.

        Raises:
            InvalidActionError: If a hand is already running.
            InsufficientPlayersError: If fewer than two players have chips.
        """
        if self.game.is_hand_running():
            raise InvalidActionError("A hand is already running")
        if not self.game.start_hand():
            raise InsufficientPlayersError(
                f"{len(self.game.funded_players())} funded player(s); at least 2 are needed"
            )
        return self.run_bots()

    def run_bots(self) -> Optional[HandSummary]:
        """
        Let automated and disconnected seats act until a connected human is
        up or the hand is over.

        Returns:
            The hand summary if the hand finished, otherwise None.
        """
        while self.game.is_hand_running():
            player = self.game.current_player
            if player is None:
                break

            agent = self.agents[player.player_id]
            if agent.is_human and agent.connected:
                return None

            decision = self._ask(agent, player)
            result = self.game.take_action(decision.action, decision.amount)
            if not result.success:
                fallback = self._forfeit(player)
                logger.warning(f"{player.name}: {result.message}; falling back to {fallback.action.value}")
                self.game.take_action(fallback.action)

        if self.game.is_hand_running():
            return None
        summary = self.game.last_summary
        if summary is not None:
            self._record(summary)
        return summary

    def _record(self, summary: HandSummary) -> None:
        """
        Send a finished hand's deltas to the ledger, once per hand.

        Ledger errors propagate to the caller; the hand is marked recorded
        only after the write succeeded.
        """
        if self.ledger is None or summary.hand_number <= self._recorded_hand:
            return
        self.ledger.apply_deltas(summary.hand_number, summary.deltas)
        self._recorded_hand = summary.hand_number

    def _ask(self, agent: BaseAgent, player: Player) -> Decision:
        """Get a decision from the seat's agent, forfeiting on disconnect."""
        if self.pace and isinstance(agent, BotAgent):
            time.sleep(agent.thinking_delay() / 1000)

        state = self.game.get_state(player.player_id)
        legal = state["private_info"]["legal_actions"]
        try:
            choice = agent.act(state, legal)
        except AgentDisconnected as e:
            logger.warning(f"{player.name} forfeits the turn: {e}")
            return self._forfeit(player)

        try:
            return Decision(ActionType(choice["action"]), int(choice.get("amount", 0)))
        except (KeyError, ValueError, TypeError):
            logger.warning(f"{player.name} returned an unusable action {choice!r}")
            return self._forfeit(player)

    def _forfeit(self, player: Player) -> Decision:
        """Check when it is free, otherwise fold."""
        if ActionType.CHECK in self.game.valid_actions(player):
            return Decision(ActionType.CHECK)
        return Decision(ActionType.FOLD)

    def submit_action(self, player_id: str, action: ActionType, amount: int = 0) -> ActionResult:
        """
        Apply a human seat's action, then let the bots play on.

        Raises:
            InvalidActionError: If it is not this player's turn or the
                action is rejected; nothing has changed in that case.
        """
        player = self.game.current_player
        if player is None or player.player_id != player_id:
            raise InvalidActionError(f"It is not {player_id}'s turn")

        result = self.game.take_action(action, amount)
        if not result.success:
            raise InvalidActionError(result.message)

        self.run_bots()
        return result

    # ============= Views =============

    def waiting_for(self) -> Optional[str]:
        """Id of the human the table is waiting on, if any."""
        player = self.game.current_player
        if player is None:
            return None
        agent = self.agents.get(player.player_id)
        if agent is not None and agent.is_human and agent.connected:
            return player.player_id
        return None
