"""
Texas Hold'em Game Engine - State Machine Implementation.

This module implements the hand/street/betting state machine. It handles:
- Dealer button rotation, blinds and interleaved hole-card dealing
- Valid-action computation and atomic action application
- Round completion, street transitions and board dealing
- Early wins, showdown evaluation and pot distribution (with side pots)
- Observer notifications and an append-only action history

The engine is single-threaded: exactly one decision is outstanding at a
time, and observers may not call back into mutating methods.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Sequence, Tuple, Any
from dataclasses import dataclass, field
import logging
import random

from holdembot.config import TableConfig
from holdembot.core.card import Card, Deck
from holdembot.core.errors import DeckExhaustedError, ReentrantCallError
from holdembot.core.events import GameObserver
from holdembot.core.hand import HandResult, evaluate_hand, determine_winners, get_hand_description
from holdembot.core.player import Player, PlayerStatus
from holdembot.core.pot import Pot, build_pots, split_pot
from holdembot.core.rules import (
    GamePhase, ActionType, BETTING_PHASES, NEXT_PHASE, STREET_CARDS,
    HOLE_CARDS, MIN_PLAYERS, blind_positions, first_to_act,
)


logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Result of a player action."""
    success: bool
    message: str
    action_type: Optional[ActionType] = None
    amount: int = 0


@dataclass(frozen=True)
class ActionRecord:
    """One applied action. Records are never modified once written."""
    player_id: str
    player_name: str
    action_type: ActionType
    amount: int  # Chips contributed by this action
    pot: int  # Pot after the action
    phase: GamePhase

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "player": self.player_name,
            "action": self.action_type.value,
            "amount": self.amount,
            "pot": self.pot,
            "phase": self.phase.name,
        }


@dataclass(frozen=True)
class PotAward:
    """How one pot was paid out."""
    amount: int
    winners: Tuple[str, ...]
    shares: Dict[str, int]
    hand_type: Optional[str] = None
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "winners": list(self.winners),
            "shares": dict(self.shares),
            "hand_type": self.hand_type,
            "description": self.description,
        }


@dataclass
class HandSummary:
    """Outcome of a finished hand."""
    hand_number: int
    awards: List[PotAward]
    showdown: bool
    board: List[Card] = field(default_factory=list)
    deltas: Dict[str, int] = field(default_factory=dict)
    hands: Dict[str, str] = field(default_factory=dict)
    aborted: bool = False

    @property
    def winners(self) -> List[str]:
        """Ids of every player who won chips, first pot first."""
        seen: List[str] = []
        for award in self.awards:
            for pid in award.winners:
                if pid not in seen:
                    seen.append(pid)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hand_number": self.hand_number,
            "awards": [a.to_dict() for a in self.awards],
            "winners": self.winners,
            "showdown": self.showdown,
            "board": [c.to_dict() for c in self.board],
            "deltas": dict(self.deltas),
            "hands": dict(self.hands),
            "aborted": self.aborted,
        }


class PokerGame:
    """
    Texas Hold'em game engine implementing a state machine.

    Usage:
        game = PokerGame(players, TableConfig(small_blind=5, big_blind=10))
        game.start_hand()

        while game.is_hand_running():
            player = game.current_player
            action, amount = decide(player, game.valid_actions(player))
            game.take_action(action, amount)

        summary = game.last_summary

    ``take_action`` applies the action and then moves the hand forward
    (street transitions, early win, showdown). The lower-level steps,
    ``apply_action``, ``is_round_complete``, ``advance_state``,
    ``should_end_early`` and ``award_pot``, are public for drivers that
    want to sequence them themselves; ``progress`` performs the same
    forward step ``take_action`` does.
    """

    def __init__(
        self,
        players: Optional[Sequence[Player]] = None,
        config: Optional[TableConfig] = None,
        rng: Optional[random.Random] = None,
        deck: Optional[Deck] = None,
    ):
        """
        Initialize a table.

        Args:
            players: Players to seat, in seat order
            config: Blinds, seat limit, side-pot mode and seed
            rng: Random source; defaults to one built from config.seed
            deck: Deck to deal from; defaults to a deck sharing rng
        """
        self.config = config or TableConfig()
        self._rng = rng if rng is not None else self.config.make_rng()
        self.deck = deck if deck is not None else Deck(rng=self._rng)

        self._players: List[Player] = []
        self._observers: List[GameObserver] = []
        self._notify_depth = 0

        self._phase = GamePhase.WAITING
        self.hand_number = 0
        self.last_summary: Optional[HandSummary] = None

        # Position tracking (table seats)
        self.dealer_position = 0
        self.small_blind_position = -1
        self.big_blind_position = -1

        # Players dealt into the current hand, in seat order
        self._hand_players: List[Player] = []
        self._dealer_index = 0
        self._current_index = 0

        # Round state
        self._community: List[Card] = []
        self._pot = 0
        self._current_bet = 0
        self._min_raise = self.config.big_blind
        self._action_count = 0
        self._history: List[ActionRecord] = []
        self._chips_at_start: Dict[str, int] = {}

        for player in players or []:
            self.seat_player(player)

    # ============= Read-only views =============

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def players(self) -> Tuple[Player, ...]:
        """All seated players, in seat order."""
        return tuple(self._players)

    @property
    def hand_players(self) -> Tuple[Player, ...]:
        """Players dealt into the current hand, in seat order."""
        return tuple(self._hand_players)

    @property
    def community_cards(self) -> List[Card]:
        return list(self._community)

    @property
    def pot(self) -> int:
        return self._pot

    @property
    def current_bet(self) -> int:
        return self._current_bet

    @property
    def min_raise(self) -> int:
        return self._min_raise

    @property
    def action_count(self) -> int:
        """Actions applied since the street started or the last reopening bet."""
        return self._action_count

    @property
    def action_history(self) -> Tuple[ActionRecord, ...]:
        return tuple(self._history)

    @property
    def num_players(self) -> int:
        return len(self._players)

    @property
    def current_player(self) -> Optional[Player]:
        """The player whose turn it is to act."""
        if self._phase not in BETTING_PHASES or not self._hand_players:
            return None
        player = self._hand_players[self._current_index]
        return player if player.can_act else None

    def is_hand_running(self) -> bool:
        """Check if a hand is currently in progress."""
        return self._phase not in (GamePhase.WAITING, GamePhase.ENDED)

    def funded_players(self) -> List[Player]:
        return [p for p in self._players if p.chips > 0]

    def total_chips(self) -> int:
        """Chips on the table: every balance plus the pot."""
        return sum(p.chips for p in self._players) + self._pot

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self._players:
            if player.player_id == player_id:
                return player
        return None

    # ============= Observers =============

    def add_observer(self, observer: GameObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: GameObserver) -> None:
        self._observers.remove(observer)

    def _notify(self, hook: str, *args) -> None:
        if not self._observers:
            return
        self._notify_depth += 1
        try:
            for observer in list(self._observers):
                try:
                    getattr(observer, hook)(*args)
                except Exception:
                    logger.exception(f"Observer {observer!r} failed in {hook}")
        finally:
            self._notify_depth -= 1

    def _ensure_not_notifying(self) -> None:
        if self._notify_depth:
            raise ReentrantCallError("Engine cannot be mutated from an observer callback")

    # ============= Seating =============

    def seat_player(self, player: Player) -> Player:
        """
        Seat a player at the next free seat.

        Players seated while a hand is running wait for the next hand.
        """
        self._ensure_not_notifying()
        if len(self._players) >= self.config.max_seats:
            raise ValueError(f"Table is full ({self.config.max_seats} seats)")
        if self.get_player(player.player_id) is not None:
            raise ValueError(f"Player {player.player_id} is already seated")

        player.seat = len(self._players)
        player.status = PlayerStatus.WAITING
        self._players.append(player)
        logger.debug(f"Seated {player.name} at seat {player.seat}")
        return player

    # ============= Hand start =============

    def start_hand(self) -> bool:
        """
        Start a new hand.

        Returns:
            True if the hand started; False (nothing changed) if a hand is
            already running or fewer than two players have chips.

        Raises:
            DeckExhaustedError: If dealing fails; the hand is aborted first.
        """
        self._ensure_not_notifying()
        if self.is_hand_running():
            logger.warning("Cannot start hand: a hand is already running")
            return False

        funded = self.funded_players()
        if len(funded) < MIN_PLAYERS:
            logger.warning(f"Cannot start hand: {len(funded)} funded player(s), need {MIN_PLAYERS}")
            return False

        self.hand_number += 1
        logger.info(f"Starting hand #{self.hand_number} with {len(funded)} players")

        self._community = []
        self._pot = 0
        self._current_bet = 0
        self._min_raise = self.config.big_blind
        self._action_count = 0
        self._history = []
        self.last_summary = None

        for player in self._players:
            player.reset_for_new_hand()
        self._chips_at_start = {p.player_id: p.chips for p in self._players}
        self._hand_players = funded

        self._move_dealer_button()

        self.deck.reset()
        self.deck.shuffle()
        self._phase = GamePhase.PREFLOP

        self._post_blinds()
        try:
            self._deal_hole_cards()
        except DeckExhaustedError:
            self._abort_hand()
            raise

        self._current_index = self._seek_actor(
            first_to_act(len(self._hand_players), self._dealer_index, GamePhase.PREFLOP)
        )

        self._notify("on_state_changed", self._phase, self.get_state())
        self._notify("on_pot_changed", self._pot)

        self.progress()
        return True

    def _move_dealer_button(self) -> None:
        """Move the dealer button to the next funded seat."""
        start = (self.dealer_position + 1) % self.num_players
        for i in range(self.num_players):
            pos = (start + i) % self.num_players
            if self._players[pos].chips > 0:
                self.dealer_position = pos
                break

        self._dealer_index = self._hand_players.index(self._players[self.dealer_position])
        sb_index, bb_index = blind_positions(len(self._hand_players), self._dealer_index)
        self.small_blind_position = self._hand_players[sb_index].seat
        self.big_blind_position = self._hand_players[bb_index].seat

    def _post_blinds(self) -> None:
        """Post small and big blinds straight into the pot."""
        sb_player = self._players[self.small_blind_position]
        bb_player = self._players[self.big_blind_position]

        sb_amount = sb_player.place_bet(self.config.small_blind)
        self._pot += sb_amount
        sb_player.last_action = f"SB ${sb_amount}"

        bb_amount = bb_player.place_bet(self.config.big_blind)
        self._pot += bb_amount
        bb_player.last_action = f"BB ${bb_amount}"

        self._current_bet = self.config.big_blind

        logger.debug(f"Blinds posted: {sb_player.name} SB={sb_amount} {bb_player.name} BB={bb_amount}")

    def _deal_hole_cards(self) -> None:
        """Deal one card to each player in seat order, twice around."""
        for _ in range(HOLE_CARDS):
            for player in self._hand_players:
                player.receive_card(self.deck.draw())

    # ============= Turn order =============

    def _seek_actor(self, start: int) -> int:
        """First index at or after start whose player can act (start if none)."""
        n = len(self._hand_players)
        for i in range(n):
            index = (start + i) % n
            if self._hand_players[index].can_act:
                return index
        return start

    def _next_actor_index(self) -> int:
        return self._seek_actor((self._current_index + 1) % len(self._hand_players))

    # ============= Actions =============

    def valid_actions(self, player: Optional[Player] = None) -> List[ActionType]:
        """
        Actions the player may take right now.

        With nothing to call: CHECK, RAISE (if affordable), ALL_IN.
        Facing a bet: FOLD, CALL (only if the full call is affordable),
        RAISE (if affordable), ALL_IN. ALL_IN is offered whenever the player
        has chips.
        """
        if player is None:
            player = self.current_player

        if player is None or not player.can_act or self._phase not in BETTING_PHASES:
            return []

        actions = []
        call_amount = self._current_bet - player.round_bet

        if call_amount <= 0:
            actions.append(ActionType.CHECK)
        else:
            actions.append(ActionType.FOLD)
            if player.chips >= call_amount:
                actions.append(ActionType.CALL)

        if player.chips + player.round_bet > self._current_bet + self._min_raise:
            actions.append(ActionType.RAISE)

        if player.chips > 0:
            actions.append(ActionType.ALL_IN)

        return actions

    def get_legal_actions(self, player: Optional[Player] = None) -> List[Dict[str, Any]]:
        """
        Valid actions with their amounts.

        CALL carries the call amount, RAISE the increment range on top of
        the call, ALL_IN the chips it would put in.
        """
        if player is None:
            player = self.current_player
        if player is None:
            return []

        call_amount = max(0, self._current_bet - player.round_bet)
        legal = []
        for action in self.valid_actions(player):
            entry: Dict[str, Any] = {"type": action.value}
            if action == ActionType.CALL:
                entry["amount"] = call_amount
            elif action == ActionType.RAISE:
                entry["min"] = self._min_raise
                entry["max"] = player.chips - call_amount
            elif action == ActionType.ALL_IN:
                entry["amount"] = player.chips
            legal.append(entry)
        return legal

    def apply_action(self, player: Player, action_type: ActionType, amount: int = 0) -> ActionResult:
        """
        Apply one action for the acting player.

        Args:
            player: The acting player
            action_type: One of the player's valid actions
            amount: For RAISE, the increment on top of the call; raised to
                    the minimum raise if smaller. Ignored otherwise.

        Returns:
            ActionResult. On failure nothing has changed.
        """
        self._ensure_not_notifying()

        if self._phase not in BETTING_PHASES:
            return ActionResult(False, "No betting round in progress")

        if player is not self.current_player:
            return ActionResult(False, f"It is not {player.name}'s turn")

        valid = self.valid_actions(player)
        if action_type not in valid:
            logger.warning(f"Rejected {action_type.value} from {player.name}; valid: {[a.value for a in valid]}")
            return ActionResult(
                False,
                f"{action_type.value} is not valid now (valid: {', '.join(a.value for a in valid)})",
            )

        call_amount = max(0, self._current_bet - player.round_bet)
        contributed = 0

        if action_type == ActionType.FOLD:
            player.fold()
            message = "Folded"

        elif action_type == ActionType.CHECK:
            player.check()
            message = "Checked"

        elif action_type == ActionType.CALL:
            contributed = player.call(call_amount)
            message = f"Called ${contributed}"

        elif action_type == ActionType.RAISE:
            if amount < 0:
                return ActionResult(False, f"Raise amount cannot be negative: {amount}")
            raise_amount = max(amount, self._min_raise)
            total = call_amount + raise_amount
            if player.chips < total:
                return ActionResult(False, f"Cannot afford ${total} (call ${call_amount} + raise ${raise_amount})")

            contributed = player.raise_by(total)
            self._current_bet = player.round_bet
            self._min_raise = raise_amount
            self._reopen_action(player)
            message = f"Raised to ${player.round_bet}"

        else:
            contributed = player.go_all_in()
            if player.round_bet > self._current_bet:
                increment = player.round_bet - self._current_bet
                if increment >= self._min_raise:
                    self._min_raise = increment
                self._current_bet = player.round_bet
                self._reopen_action(player)
            message = f"All-in for ${player.round_bet}"

        self._pot += contributed
        self._action_count += 1
        self._history.append(ActionRecord(
            player_id=player.player_id,
            player_name=player.name,
            action_type=action_type,
            amount=contributed,
            pot=self._pot,
            phase=self._phase,
        ))
        self._current_index = self._next_actor_index()

        logger.info(f"{player.name} -> {action_type.value} ${contributed} (pot ${self._pot})")

        self._notify("on_player_acted", player, action_type, contributed)
        if contributed:
            self._notify("on_pot_changed", self._pot)

        return ActionResult(True, message, action_type, contributed)

    def _reopen_action(self, aggressor: Player) -> None:
        """A bet above the table bet makes everyone else act again."""
        self._action_count = 0
        for player in self._hand_players:
            if player is not aggressor and player.can_act:
                player.has_acted = False

    def take_action(self, action_type: ActionType, amount: int = 0) -> ActionResult:
        """
        Apply an action for the current player and move the hand forward.

        Args:
            action_type: Type of action
            amount: Raise increment for RAISE

        Returns:
            ActionResult indicating success/failure and details
        """
        player = self.current_player
        if player is None:
            return ActionResult(False, "No player to act")

        result = self.apply_action(player, action_type, amount)
        if result.success:
            self.progress()
        return result

    # ============= Round / street transitions =============

    def is_round_complete(self) -> bool:
        """
        Check if the current betting round is over.

        True when nobody can act, when a single player remains in the hand,
        or when every player who can act has matched the table bet, has
        acted since the last reopening bet, and the action counter covers
        them all.
        """
        acting = [p for p in self._hand_players if p.can_act]
        if not acting:
            return True

        if sum(1 for p in self._hand_players if p.is_in_hand) == 1:
            return True

        all_matched = all(p.round_bet == self._current_bet or p.is_all_in for p in acting)
        everyone_acted = all(p.has_acted for p in acting)
        return all_matched and everyone_acted and self._action_count >= len(acting)

    def _betting_closed(self) -> bool:
        """At most one player can still act and that player owes nothing."""
        acting = [p for p in self._hand_players if p.can_act]
        return len(acting) <= 1 and all(p.round_bet >= self._current_bet for p in acting)

    def advance_state(self) -> bool:
        """
        Close the current street and open the next one.

        Resets round betting, burns and deals the next street's community
        cards, and moves the acting seat to the first player after the
        dealer.

        Returns:
            False if there is no next state.

        Raises:
            DeckExhaustedError: If dealing fails; the hand is aborted first.
        """
        self._ensure_not_notifying()
        if self._phase not in NEXT_PHASE:
            logger.warning(f"Cannot advance from {self._phase.name}")
            return False

        self._reset_round()

        num_cards = STREET_CARDS.get(self._phase, 0)
        if num_cards:
            try:
                self.deck.burn()
                cards = self.deck.draw_multiple(num_cards)
                if len(cards) < num_cards:
                    raise DeckExhaustedError(f"Needed {num_cards} cards, deck had {len(cards)}")
            except DeckExhaustedError:
                self._abort_hand()
                raise
            self._community.extend(cards)

        previous = self._phase
        self._phase = NEXT_PHASE[previous]

        if self._phase in BETTING_PHASES:
            self._current_index = self._seek_actor(
                first_to_act(len(self._hand_players), self._dealer_index, self._phase)
            )

        logger.info(
            f"{previous.name} -> {self._phase.name}"
            + (f": {' '.join(str(c) for c in self._community)}" if num_cards else "")
        )
        self._notify("on_state_changed", self._phase, self.get_state())
        return True

    def _reset_round(self) -> None:
        self._current_bet = 0
        self._min_raise = self.config.big_blind
        self._action_count = 0
        for player in self._hand_players:
            player.reset_for_new_round()

    def progress(self) -> None:
        """
        Move the hand forward as far as it goes without a decision.

        Ends the hand early when one player is left, advances streets when
        betting is over (running the board out when nobody can bet), and
        settles the showdown.
        """
        self._ensure_not_notifying()
        while self.is_hand_running():
            if self.should_end_early():
                winner = self.early_winner()
                amount = self.award_pot(winner)
                award = PotAward(
                    amount=amount,
                    winners=(winner.player_id,),
                    shares={winner.player_id: amount},
                    description="All other players folded",
                )
                self._phase = GamePhase.ENDED
                self._notify("on_state_changed", self._phase, self.get_state())
                self._finish_hand([award], showdown=False)
                return

            if self._phase == GamePhase.SHOWDOWN:
                awards, hands = self._settle_showdown()
                self.advance_state()
                self._finish_hand(awards, showdown=True, hands=hands)
                return

            if self.is_round_complete() or self._betting_closed():
                self.advance_state()
                continue

            return

    # ============= Hand resolution =============

    def should_end_early(self) -> bool:
        """Exactly one player is left in the hand."""
        return self.is_hand_running() and sum(1 for p in self._hand_players if p.is_in_hand) == 1

    def early_winner(self) -> Optional[Player]:
        remaining = [p for p in self._hand_players if p.is_in_hand]
        return remaining[0] if len(remaining) == 1 else None

    def award_pot(self, winner: Player) -> int:
        """
        Give the whole pot to one player.

        Returns:
            The amount awarded
        """
        self._ensure_not_notifying()
        amount = self._pot
        winner.add_chips(amount)
        self._pot = 0

        logger.info(f"{winner.name} wins ${amount}")
        self._notify("on_pot_changed", self._pot)
        return amount

    def _payout_order(self) -> List[Player]:
        """Hand players in seat order starting left of the dealer."""
        n = len(self._hand_players)
        return [self._hand_players[(self._dealer_index + 1 + i) % n] for i in range(n)]

    def _settle_showdown(self) -> Tuple[List[PotAward], Dict[str, str]]:
        """Evaluate every hand still in and pay out each pot."""
        order = self._payout_order()
        contenders = [p for p in order if p.is_in_hand]

        results: Dict[str, HandResult] = {
            p.player_id: evaluate_hand(p.hole_cards + self._community) for p in contenders
        }
        descriptions = {pid: get_hand_description(hand) for pid, hand in results.items()}

        if self.config.side_pots:
            pots = build_pots(
                {p.player_id: p.total_bet for p in self._hand_players},
                [p.player_id for p in contenders],
            )
        else:
            pots = [Pot(amount=self._pot, eligible_players=[p.player_id for p in contenders])]

        awards = []
        for pot in pots:
            winners = determine_winners([(pid, results[pid]) for pid in pot.eligible_players])
            shares = split_pot(pot.amount, winners)
            for pid, share in shares.items():
                self.get_player(pid).add_chips(share)
            self._pot -= pot.amount

            best = results[winners[0]]
            awards.append(PotAward(
                amount=pot.amount,
                winners=tuple(winners),
                shares=shares,
                hand_type=best.rank.name,
                description=descriptions[winners[0]],
            ))
            logger.info(f"Pot ${pot.amount} -> {', '.join(winners)} ({descriptions[winners[0]]})")

        self._notify("on_pot_changed", self._pot)
        return awards, descriptions

    def _finish_hand(
        self,
        awards: List[PotAward],
        showdown: bool,
        hands: Optional[Dict[str, str]] = None,
        aborted: bool = False,
    ) -> None:
        self.last_summary = HandSummary(
            hand_number=self.hand_number,
            awards=awards,
            showdown=showdown,
            board=list(self._community),
            deltas=self.balance_deltas(),
            hands=hands or {},
            aborted=aborted,
        )
        self._notify("on_hand_ended", self.last_summary)

    def _abort_hand(self) -> None:
        """Refund every contribution and end the hand."""
        logger.error(f"Aborting hand #{self.hand_number}: deck exhausted")
        for player in self._hand_players:
            player.add_chips(player.total_bet)
            self._pot -= player.total_bet
            player.total_bet = 0
            player.round_bet = 0
        self._phase = GamePhase.ENDED
        self._finish_hand([], showdown=False, aborted=True)

    def balance_deltas(self) -> Dict[str, int]:
        """Chip change per seated player since the current hand started."""
        return {
            p.player_id: p.chips - self._chips_at_start[p.player_id]
            for p in self._players
            if p.player_id in self._chips_at_start
        }

    def get_winners(self) -> List[str]:
        """Ids of the last finished hand's winners."""
        if self.last_summary is None:
            return []
        return self.last_summary.winners

    # ============= Snapshots =============

    def get_state(self, for_player_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get a read-only snapshot of the game.

        Args:
            for_player_id: If specified, include private info for this player

        Returns:
            Dict with "public_info" and "private_info"
        """
        current = self.current_player
        public_info = {
            "phase": self._phase.name,
            "hand_number": self.hand_number,
            "pot": self._pot,
            "current_bet": self._current_bet,
            "min_raise": self._min_raise,
            "board": [c.to_dict() for c in self._community],
            "dealer_position": self.dealer_position,
            "small_blind_position": self.small_blind_position,
            "big_blind_position": self.big_blind_position,
            "current_player": current.player_id if current else None,
            "players": [p.to_public_dict() for p in self._players],
            "history": [r.to_dict() for r in self._history],
        }

        private_info: Dict[str, Any] = {}
        if for_player_id:
            player = self.get_player(for_player_id)
            if player:
                private_info = {
                    "player_id": player.player_id,
                    "hand": [c.to_dict() for c in player.hole_cards],
                    "is_turn": player is current,
                    "chips_to_call": max(0, self._current_bet - player.round_bet),
                    "legal_actions": self.get_legal_actions(player) if player is current else [],
                }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }
