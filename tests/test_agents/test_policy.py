"""
Tests for the weighted-random bot policy.
"""

import random
from collections import Counter

import pytest
from holdembot.agents.policy import BotPolicy, Decision
from holdembot.core.player import Player
from holdembot.core.profile import ActionWeights, BotProfile, Personality
from holdembot.core.rules import ActionType

FACING_BET = [ActionType.FOLD, ActionType.CALL, ActionType.RAISE, ActionType.ALL_IN]


def profile_with(personality=Personality.BALANCED, **weights):
    return BotProfile(personality=personality, weights=ActionWeights(**weights))


@pytest.fixture
def policy():
    """A policy with a fixed seed."""
    return BotPolicy(random.Random(2024))


class TestChooseAction:
    """Tests for weighted action selection."""

    def test_single_weighted_action(self, policy):
        """With one positive weight, that action is always chosen."""
        profile = profile_with(fold=0, check=0, call=5, raise_=0, all_in=0)
        picks = {policy.choose_action(profile, FACING_BET) for _ in range(200)}
        assert picks == {ActionType.CALL}

    def test_invalid_actions_never_chosen(self, policy):
        """Weight on an invalid action does not matter."""
        profile = profile_with(fold=50, check=1, call=50, raise_=100, all_in=0)
        valid = [ActionType.CHECK, ActionType.ALL_IN]
        picks = {policy.choose_action(profile, valid) for _ in range(200)}
        assert picks == {ActionType.CHECK}

    def test_all_zero_falls_back_to_defaults(self, policy):
        """If every valid action weighs zero, the default table decides."""
        profile = profile_with(fold=0, check=0, call=0, raise_=0, all_in=0)
        assert policy.choose_action(profile, [ActionType.FOLD]) == ActionType.FOLD

    def test_no_valid_actions(self, policy):
        """There must be something to choose from."""
        with pytest.raises(ValueError):
            policy.choose_action(BotProfile(), [])

    def test_frequencies_follow_weights(self, policy):
        """Default weights 1:3:2:1 show up in the sample."""
        counts = Counter(policy.choose_action(BotProfile(), FACING_BET) for _ in range(7000))
        assert counts[ActionType.CALL] / 7000 == pytest.approx(3 / 7, abs=0.03)
        assert counts[ActionType.RAISE] / 7000 == pytest.approx(2 / 7, abs=0.03)
        assert counts[ActionType.FOLD] / 7000 == pytest.approx(1 / 7, abs=0.03)

    def test_seeded_policies_agree(self):
        """Two policies with the same seed make the same picks."""
        a = BotPolicy(random.Random(5))
        b = BotPolicy(random.Random(5))
        profile = BotProfile()
        assert [a.choose_action(profile, FACING_BET) for _ in range(50)] == \
               [b.choose_action(profile, FACING_BET) for _ in range(50)]


class TestRaiseAmount:
    """Tests for raise sizing."""

    @pytest.mark.parametrize("personality", list(Personality))
    def test_within_bounds_and_rounded(self, policy, personality):
        """Raises land in [min_raise, available] on a multiple of 5."""
        profile = BotProfile(personality=personality)
        for _ in range(100):
            amount = policy.raise_amount(profile, 990, 10)
            assert 10 <= amount <= 990
            assert amount % 5 == 0

    def test_multiplier_range(self, policy):
        """Passive bots raise 20-50% of what they have left."""
        profile = BotProfile(personality=Personality.PASSIVE)
        for _ in range(100):
            assert 200 <= policy.raise_amount(profile, 1000, 10) <= 500

    def test_clamped_to_min_raise(self, policy):
        """Tiny stacks still raise at least the minimum."""
        profile = BotProfile(personality=Personality.PASSIVE)
        assert policy.raise_amount(profile, 12, 10) == 10

    def test_clamped_to_available(self, policy):
        """Reckless multipliers above 1 are capped at the stack."""
        profile = BotProfile(personality=Personality.RECKLESS)
        assert all(policy.raise_amount(profile, 500, 10) <= 500 for _ in range(100))


class TestDecide:
    """Tests for full decisions."""

    def test_raise_decision(self, policy):
        """A raise decision carries a sized increment."""
        player = Player("b", "Bot", 1000, bot=profile_with(fold=0, check=0, call=0, raise_=1, all_in=0))
        decision = policy.decide(player, FACING_BET, current_bet=10, min_raise=10)

        assert decision.action == ActionType.RAISE
        assert 10 <= decision.amount <= 990
        assert decision.amount % 5 == 0

    def test_non_raise_has_no_amount(self, policy):
        """Other actions carry no amount."""
        player = Player("b", "Bot", 1000, bot=profile_with(fold=0, check=0, call=1, raise_=0, all_in=0))
        assert policy.decide(player, FACING_BET, 10, 10) == Decision(ActionType.CALL)

    def test_human_player_uses_default_profile(self, policy):
        """Players without a profile still get a decision."""
        player = Player("h", "Human", 1000)
        assert policy.decide(player, [ActionType.CHECK], 0, 10).action == ActionType.CHECK


class TestThinkingDelay:
    """Tests for the presentation delay."""

    def test_aggressive_is_faster(self, policy):
        """Aggressive bots think for 420-980 ms."""
        profile = BotProfile(personality=Personality.AGGRESSIVE)
        assert all(420 <= policy.thinking_delay(profile) <= 980 for _ in range(100))

    def test_tight_is_slower(self, policy):
        """Tight bots think for 780-1820 ms."""
        profile = BotProfile(personality=Personality.TIGHT)
        assert all(780 <= policy.thinking_delay(profile) <= 1820 for _ in range(100))
