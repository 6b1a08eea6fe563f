"""
Tests for showdown resolution and pot distribution.

Decks are stacked: holes[i] goes to seat i, the board is dealt street by
street. On the first hand the button is on seat 1.
"""

from holdembot.core.rules import ActionType, GamePhase

BOARD = "2c 7s 9h Js 3c"


class TestShowdownBasics:
    """Tests for single-winner showdowns."""

    def test_two_player_showdown_winner(self, make_game, check_down):
        """The better pair takes the pot."""
        game = make_game(1000, 1000, holes=["Ah Ad", "Kh Kd"], board=BOARD)
        game.start_hand()
        check_down(game)

        assert game.phase == GamePhase.ENDED
        assert [p.chips for p in game.players] == [1010, 990]

        summary = game.last_summary
        assert summary.showdown
        assert summary.winners == ["p0"]
        assert summary.awards[0].hand_type == "ONE_PAIR"
        assert summary.awards[0].description == "Pair of Aces"
        assert summary.hands["p1"] == "Pair of Kings"
        assert [c.short_str for c in summary.board] == BOARD.split()

    def test_folded_player_not_in_showdown(self, make_game, check_down):
        """A folded hand cannot win, however strong."""
        game = make_game(1000, 1000, 1000, holes=["2h 3d", "9d 9c", "Kh Kd"], board=BOARD)
        game.start_hand()
        game.take_action(ActionType.FOLD)
        check_down(game)

        summary = game.last_summary
        assert summary.winners == ["p0"]
        assert "p1" not in summary.hands
        assert game.players[0].chips == 1010


class TestTieHandling:
    """Tests for split pots."""

    def test_exact_tie_splits_pot(self, make_game, check_down):
        """Equal hands share the pot."""
        game = make_game(1000, 1000, holes=["Ah Kd", "Ac Ks"], board=BOARD)
        game.start_hand()
        check_down(game)

        assert [p.chips for p in game.players] == [1000, 1000]
        assert game.last_summary.awards[0].winners == ("p0", "p1")
        assert game.last_summary.awards[0].shares == {"p0": 10, "p1": 10}

    def test_odd_chip_goes_left_of_button(self, make_game, check_down):
        """The odd chip goes to the first winner after the button."""
        game = make_game(1000, 1000, 1000, holes=["Ah Kd", "Ac Ks", "4d 8h"], board=BOARD)
        game.start_hand()
        game.take_action(ActionType.CALL)   # seat 1 (button)
        game.take_action(ActionType.FOLD)   # seat 2 (small blind)
        game.take_action(ActionType.CHECK)  # seat 0 (big blind)
        check_down(game)

        assert game.last_summary.awards[0].amount == 25
        assert [p.chips for p in game.players] == [1003, 1002, 995]
        assert game.total_chips() == 3000


class TestSidePots:
    """Tests for all-ins at different stack sizes."""

    def _play_all_in(self, game):
        game.start_hand()
        game.take_action(ActionType.ALL_IN)  # seat 1: 100
        game.take_action(ActionType.ALL_IN)  # seat 2: 300
        game.take_action(ActionType.CALL)    # seat 0 calls 300

    def test_tiered_pots(self, make_game):
        """The short stack can only win what each opponent matched."""
        game = make_game(1000, 100, 300, holes=["Qh Qd", "Ah Ad", "Kh Kd"], board=BOARD)
        self._play_all_in(game)

        assert game.phase == GamePhase.ENDED
        assert [p.chips for p in game.players] == [700, 300, 400]

        main, side = game.last_summary.awards
        assert (main.amount, main.winners) == (300, ("p1",))
        assert (side.amount, side.winners) == (400, ("p2",))

    def test_single_pot_mode(self, make_game):
        """With side pots off, the best hand takes everything."""
        game = make_game(
            1000, 100, 300,
            holes=["Qh Qd", "Ah Ad", "Kh Kd"], board=BOARD, side_pots=False,
        )
        self._play_all_in(game)

        assert [p.chips for p in game.players] == [700, 700, 0]
        assert len(game.last_summary.awards) == 1

    def test_deltas_match_chip_changes(self, make_game):
        """Summary deltas are chips after minus chips at hand start."""
        game = make_game(1000, 100, 300, holes=["Qh Qd", "Ah Ad", "Kh Kd"], board=BOARD)
        self._play_all_in(game)

        assert game.last_summary.deltas == {"p0": -300, "p1": 200, "p2": 100}
        assert sum(game.last_summary.deltas.values()) == 0
