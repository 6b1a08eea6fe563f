"""
Tests for edge cases and extreme situations.

These tests cover:
- Blinds larger than a stack
- Full ten-handed tables
- Folding out after the flop
- The board playing for everyone
- Busted seats
"""

from holdembot.core.player import PlayerStatus
from holdembot.core.rules import ActionType, GamePhase


class TestShortStackBlinds:
    """Tests for blinds that put a player all-in."""

    def test_stack_less_than_small_blind(self, make_game, check_down):
        """The small blind posts what it has and is all-in."""
        game = make_game(1000, 1000, 3)
        game.start_hand()

        p2 = game.get_player("p2")
        assert p2.status == PlayerStatus.ALL_IN
        assert p2.round_bet == 3
        assert game.pot == 13
        assert game.current_bet == 10

        check_down(game)
        assert game.total_chips() == 2003

    def test_stack_less_than_big_blind(self, make_game, check_down):
        """A short big blind still sets the table bet to the full blind."""
        game = make_game(7, 1000, 1000)
        game.start_hand()

        assert game.get_player("p0").is_all_in
        assert game.pot == 12
        assert game.current_bet == 10
        assert ActionType.CALL in game.valid_actions()

        check_down(game)
        assert game.total_chips() == 2007


class TestTenPlayers:
    """Tests for a full table."""

    def test_deal_and_first_actor(self, make_game):
        """Twenty distinct hole cards; the seat after the big blind opens."""
        game = make_game(*[1000] * 10, max_seats=10)
        game.start_hand()

        cards = [c for p in game.players for c in p.hole_cards]
        assert len(set(cards)) == 20
        assert game.current_player.player_id == "p4"

    def test_everyone_calls_down(self, make_game, check_down):
        """Ten-way limped pot reaches showdown with chips conserved."""
        game = make_game(*[1000] * 10, max_seats=10)
        game.start_hand()
        check_down(game)

        assert game.phase == GamePhase.ENDED
        assert len(game.community_cards) == 5
        assert game.total_chips() == 10000


class TestFoldAfterFlop:
    """Tests for hands that end on a later street."""

    def test_last_player_standing_on_flop(self, three_player_game):
        """Two folds on the flop hand the pot to the remaining player."""
        game = three_player_game
        game.start_hand()
        game.take_action(ActionType.CALL)   # p1
        game.take_action(ActionType.CALL)   # p2, small blind
        game.take_action(ActionType.CHECK)  # p0, big blind option
        assert game.phase == GamePhase.FLOP

        game.take_action(ActionType.FOLD)   # p2
        game.take_action(ActionType.FOLD)   # p0

        assert game.phase == GamePhase.ENDED
        assert game.last_summary.showdown is False
        assert game.last_summary.winners == ["p1"]
        assert game.get_player("p1").chips == 1020


class TestBoardPlays:
    """Tests for boards nobody can improve on."""

    def test_royal_flush_on_board_splits(self, make_game, check_down):
        """Both players play the board and split the pot."""
        game = make_game(1000, 1000, holes=["2c 3d", "4h 5c"], board="As Ks Qs Js Ts")
        game.start_hand()
        check_down(game)

        assert sorted(game.last_summary.awards[0].winners) == ["p0", "p1"]
        assert [p.chips for p in game.players] == [1000, 1000]


class TestBustedSeats:
    """Tests for seats without chips."""

    def test_busted_seat_not_dealt_in(self, make_game, check_down):
        """A seat with no chips sits out and the hand runs without it."""
        game = make_game(1000, 0, 1000)
        game.start_hand()

        busted = game.get_player("p1")
        assert busted.status == PlayerStatus.OUT
        assert busted.hole_cards == []
        assert len(game.hand_players) == 2

        check_down(game)
        assert busted.chips == 0
        assert game.total_chips() == 2000
