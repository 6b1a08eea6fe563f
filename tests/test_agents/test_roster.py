"""
Tests for roster loading and the in-memory ledger.
"""

import json

import pytest
from holdembot.core.profile import DEFAULT_WEIGHTS, PERSONALITY_WEIGHTS, Personality
from holdembot.roster import InMemoryLedger, SeatSpec, load_roster


class TestLoadRoster:
    """Tests for reading roster files."""

    def test_load_list(self, tmp_path):
        """A JSON list of seats."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps([
            {"player_id": "u1", "name": "Alice", "chips": 1000},
            {"player_id": "b1", "name": "Bot", "chips": 500, "is_bot": True, "personality": "loose"},
        ]))

        seats = load_roster(path)
        assert [s.player_id for s in seats] == ["u1", "b1"]
        assert seats[0].to_profile() is None
        assert seats[1].to_profile().personality == Personality.LOOSE

    def test_load_object(self, tmp_path):
        """An object with a seats list."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"seats": [{"player_id": "u1", "name": "A", "chips": 10}]}))
        assert len(load_roster(path)) == 1

    def test_invalid_json(self, tmp_path):
        """Broken files are reported as ValueError."""
        path = tmp_path / "roster.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_roster(path)

    def test_invalid_entry(self, tmp_path):
        """Negative chips are rejected."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps([{"player_id": "u1", "name": "A", "chips": -5}]))
        with pytest.raises(ValueError):
            load_roster(path)

    def test_personality_sets_weights(self):
        """Roster bots without weights play their personality's table."""
        spec = SeatSpec(player_id="b", name="B", chips=10, is_bot=True, personality="aggressive")
        assert spec.to_profile().effective_weights == PERSONALITY_WEIGHTS[Personality.AGGRESSIVE]

    def test_malformed_weights_do_not_fail_loading(self):
        """A bad weight table only costs the bot its custom weights."""
        spec = SeatSpec(player_id="b", name="B", chips=10, is_bot=True, weights={"raise": "many"})
        assert spec.to_profile().effective_weights == DEFAULT_WEIGHTS


class TestInMemoryLedger:
    """Tests for the reference ledger."""

    def test_apply_deltas(self):
        """Deltas are added to stored balances and remembered."""
        ledger = InMemoryLedger({"a": 100, "b": 100})
        ledger.apply_deltas(1, {"a": 15, "b": -15})

        assert ledger.balances() == {"a": 115, "b": 85}
        assert ledger.history == [(1, {"a": 15, "b": -15})]

    def test_open_account(self):
        """Known players keep their balance; new ones are recorded."""
        ledger = InMemoryLedger({"a": 40})
        assert ledger.open_account("a", 1000) == 40
        assert ledger.open_account("b", 1000) == 1000
        assert ledger.balance("b") == 1000
