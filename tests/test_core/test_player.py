"""
Tests for Player state.
"""

import pytest
from holdembot.core.card import parse_cards
from holdembot.core.player import Player, PlayerStatus


@pytest.fixture
def player():
    """A player with 1000 chips, ready for a hand."""
    p = Player(player_id="test_player", name="Tester", chips=1000)
    p.reset_for_new_hand()
    return p


class TestPlayerBetting:
    """Tests for contributions."""

    def test_place_bet(self, player):
        """A bet moves chips into the round and hand totals."""
        assert player.place_bet(100) == 100
        assert player.chips == 900
        assert player.round_bet == 100
        assert player.total_bet == 100

    def test_bet_capped_at_stack(self, player):
        """A bet larger than the stack puts the player all-in."""
        assert player.place_bet(5000) == 1000
        assert player.chips == 0
        assert player.status == PlayerStatus.ALL_IN
        assert player.is_in_hand
        assert not player.can_act

    def test_call_and_raise_labels(self, player):
        """Calls and raises record what the table sees."""
        player.call(20)
        assert player.last_action == "CALL $20"
        player.raise_by(60)
        assert player.last_action == "RAISE $80"
        assert player.has_acted

    def test_go_all_in(self, player):
        """All-in puts the whole stack in."""
        player.place_bet(10)
        assert player.go_all_in() == 990
        assert player.last_action == "ALL-IN $1000"

    def test_fold(self, player):
        """Folding leaves the hand."""
        player.fold()
        assert player.has_folded
        assert not player.is_in_hand

    def test_negative_chips_rejected(self):
        """Balances cannot start negative."""
        with pytest.raises(ValueError):
            Player("x", "X", -1)

    def test_add_chips(self, player):
        """Winnings are added; negative amounts are refused."""
        player.add_chips(50)
        assert player.chips == 1050
        with pytest.raises(ValueError):
            player.add_chips(-1)


class TestPlayerReset:
    """Tests for hand and round resets."""

    def test_reset_for_new_hand(self, player):
        """Hand state is cleared."""
        player.hole_cards = parse_cards("As Kd")
        player.place_bet(40)
        player.fold()

        player.reset_for_new_hand()
        assert player.hole_cards == []
        assert player.round_bet == player.total_bet == 0
        assert player.status == PlayerStatus.ACTIVE

    def test_busted_player_sits_out(self):
        """A player without chips is OUT for the hand."""
        p = Player("x", "X", 0)
        p.reset_for_new_hand()
        assert p.status == PlayerStatus.OUT
        assert not p.is_in_hand

    def test_reset_for_new_round(self, player):
        """Street reset keeps the hand total."""
        player.place_bet(40)
        player.check()
        player.reset_for_new_round()
        assert player.round_bet == 0
        assert player.total_bet == 40
        assert not player.has_acted


class TestPlayerSerialization:
    """Tests for dict views."""

    def test_public_dict_hides_cards(self, player):
        """Public view never shows hole cards."""
        player.hole_cards = parse_cards("As Kd")
        public = player.to_public_dict()
        assert "cards" not in public
        assert public["card_count"] == 2
        assert public["status"] == "ACTIVE"

    def test_private_dict_shows_cards(self, player):
        """Private view includes hole cards."""
        player.hole_cards = parse_cards("As Kd")
        assert len(player.to_private_dict()["cards"]) == 2
