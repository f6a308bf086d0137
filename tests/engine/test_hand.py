"""
Farkle - Hand Tests

Tests for action generation, action application and score folding.
"""

import pytest
from src.engine.actions import ActionKind, DiceAction
from src.engine.base import InvariantViolation
from src.engine.combinations import Multiple, Pairs, Single, Straight
from src.engine.dice_set import DiceSet
from src.engine.hand import Hand


def roll(*values: int) -> DiceSet:
    return DiceSet.from_values(values)


def stay_of(actions: list[DiceAction]) -> DiceAction:
    assert actions[-1].kind is ActionKind.STAY
    return actions[-1]


class TestDetermineActions:
    """Tests for proposals on a fresh hand."""

    def test_triple_ones_and_fives(self):
        actions = Hand().determine_actions(roll(1, 1, 1, 5, 5, 2))

        assert actions[:3] == [
            DiceAction.keep_new(Multiple(face=1, quantity=1)),
            DiceAction.keep_new(Single(face=1, count=3)),
            DiceAction.keep_new(Single(face=5, count=2)),
        ]
        stay = stay_of(actions)
        assert len(actions) == 4
        assert stay.combos == (Multiple(face=1, quantity=1), Single(face=5, count=2))
        assert sorted(stay.dice) == [1, 1, 1, 5, 5]

    def test_bust(self, bust_rolls):
        for values in bust_rolls:
            assert Hand().determine_actions(roll(*values)) == []

    def test_pairs_use_whole_roll(self):
        actions = Hand().determine_actions(roll(2, 2, 4, 4, 6, 6))

        assert actions[0] == DiceAction.keep_new(Pairs(frozenset({2, 4, 6})), [2, 2, 4, 4, 6, 6])
        assert stay_of(actions).combos == (Pairs(frozenset({2, 4, 6})),)

    def test_pairs_beat_their_singles_in_stay(self):
        actions = Hand().determine_actions(roll(1, 1, 5, 5, 3, 3))

        kinds = [(action.kind, action.combination) for action in actions]
        assert kinds[:3] == [
            (ActionKind.KEEP_NEW, Pairs(frozenset({1, 3, 5}))),
            (ActionKind.KEEP_NEW, Single(face=1, count=2)),
            (ActionKind.KEEP_NEW, Single(face=5, count=2)),
        ]
        assert stay_of(actions).combos == (Pairs(frozenset({1, 3, 5})),)

    def test_straight_in_one_roll(self):
        actions = Hand().determine_actions(roll(3, 1, 4, 6, 5, 2))

        assert actions[0].kind is ActionKind.KEEP_NEW
        assert actions[0].combination == Straight(roll=1)
        assert sorted(actions[0].dice) == [1, 2, 3, 4, 5, 6]
        assert stay_of(actions).combos == (Straight(roll=1),)

    def test_four_of_a_kind(self):
        actions = Hand().determine_actions(roll(4, 4, 4, 4, 2, 3))
        assert actions[0] == DiceAction.keep_new(Multiple(face=4, quantity=2))
        assert stay_of(actions).points == 800


class TestActionsWithHeldCombinations:
    """Tests for proposals that extend what the hand holds."""

    def test_extend_held_multiple(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=6, quantity=1)))

        actions = hand.determine_actions(roll(6, 2, 3))

        assert actions[0] == DiceAction.add_to(Multiple(face=6, quantity=1), [6])
        assert hand.score_combos() == 600
        hand.perform_action(actions[0])
        assert hand.combos == (Multiple(face=6, quantity=2),)
        assert hand.score_combos() == 1200

    def test_held_multiple_face_is_not_started_again(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=2, quantity=1)))

        actions = hand.determine_actions(roll(2, 2, 2))

        assert actions == [
            DiceAction.add_to(Multiple(face=2, quantity=1), [2, 2, 2]),
            DiceAction.stay([Multiple(face=2, quantity=4)], [2, 2, 2]),
        ]

    def test_extend_held_single(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Single(face=1, count=1)))

        actions = hand.determine_actions(roll(1, 1, 3))

        assert actions[0] == DiceAction.add_to(Single(face=1, count=1), [1, 1])
        hand.perform_action(actions[0].with_single_count(1))
        assert hand.combos == (Single(face=1, count=2),)

    def test_ones_extend_multiple_and_offer_single(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=1, quantity=1)))

        actions = hand.determine_actions(roll(1, 4))

        assert actions[0] == DiceAction.add_to(Multiple(face=1, quantity=1), [1])
        assert actions[1] == DiceAction.keep_new(Single(face=1, count=1))
        # one more one on the multiple is worth more than a single
        assert stay_of(actions).combos == (Multiple(face=1, quantity=2),)


class TestPerformAction:
    """Tests for applying actions to the hand."""

    def test_keep_new_continues(self):
        hand = Hand()
        assert hand.perform_action(DiceAction.keep_new(Single(face=5, count=1))) is True
        assert hand.combos == (Single(face=5, count=1),)

    def test_stay_folds_into_held_multiple(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=6, quantity=1)))

        stay = stay_of(hand.determine_actions(roll(6, 5)))
        assert hand.perform_action(stay) is False

        assert hand.combos == (Multiple(face=6, quantity=2), Single(face=5, count=1))
        assert hand.score_combos() == 1250

    def test_add_to_missing_combination(self):
        hand = Hand()
        with pytest.raises(InvariantViolation):
            hand.perform_action(DiceAction.add_to(Multiple(face=3, quantity=1), [3]))

    def test_keep_new_twice_for_same_face(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Single(face=1, count=1)))
        with pytest.raises(InvariantViolation):
            hand.perform_action(DiceAction.keep_new(Single(face=1, count=1)))

    def test_straight_is_guaranteed(self):
        hand = Hand()
        action = Hand().determine_actions(roll(1, 2, 3, 4, 5, 6))[0]
        hand.perform_action(action)

        assert hand.guaranteed_score() == 1500
        assert hand.turn_score(busted=True) == 1500

    def test_bust_loses_other_held_combinations(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=1, quantity=1)))
        assert hand.turn_score(busted=True) == 0


class TestStraightAcrossRolls:
    """Tests for building a straight from set-aside dice."""

    def test_candidates(self):
        assert Hand().straight_candidates(roll(2, 3, 3, 4, 6, 6)) == [2, 3, 4, 6]

    def test_no_candidates_when_roll_is_straight(self):
        assert Hand().straight_candidates(roll(1, 2, 3, 4, 5, 6)) == []

    def test_completed_on_second_roll(self):
        hand = Hand()
        hand.set_aside([1, 2, 3, 4])

        actions = hand.determine_actions(roll(6, 5))

        assert actions[0].kind is ActionKind.ADD_TO
        assert actions[0].combination == Straight(roll=2)
        hand.perform_action(actions[0])
        assert hand.guaranteed_score() == 1000
        assert hand.saved_dice().is_empty()
        assert hand.turn_score(busted=True) == 1000

    def test_completed_on_third_roll(self):
        hand = Hand()
        hand.set_aside([1, 2])
        hand.set_aside([3, 4])

        actions = hand.determine_actions(roll(5, 6))

        assert actions[0].combination == Straight(roll=3)
        assert actions[0].points == 500

    def test_no_candidates_after_dice_went_into_combinations(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=2, quantity=1)))

        assert hand.straight_candidates(roll(1, 3, 4)) == []

    def test_no_third_set_aside(self):
        hand = Hand()
        hand.set_aside([1])
        hand.set_aside([2])
        assert hand.straight_candidates(roll(3, 4, 4)) == []
        with pytest.raises(InvariantViolation):
            hand.set_aside([3])

    def test_cannot_set_aside_twice(self):
        hand = Hand()
        hand.set_aside([2, 3])
        assert hand.straight_candidates(roll(2, 4, 6, 6)) == [4, 6]
        with pytest.raises(InvariantViolation):
            hand.set_aside([2])


class TestScoreFold:
    """Tests for score_combos / accumulate_score."""

    def test_accumulate_clears_held(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=2, quantity=1)))
        hand.perform_action(DiceAction.keep_new(Single(face=5, count=1)))
        assert hand.score_combos() == 250

        hand.accumulate_score()

        assert hand.cumulative_score() == 250
        assert hand.combos == ()
        assert hand.score_combos() == 0

    def test_hand_is_fresh_after_accumulate(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Single(face=5, count=1)))
        hand.accumulate_score()

        actions = hand.determine_actions(roll(5))

        assert actions[0] == DiceAction.keep_new(Single(face=5, count=1))

    def test_guaranteed_survives_accumulate(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Straight(roll=1), [1, 2, 3, 4, 5, 6]))
        hand.accumulate_score()

        assert hand.cumulative_score() == 1500
        assert hand.guaranteed_score() == 1500
        # already banked, not counted twice
        assert hand.turn_score(busted=True) == 1500

    def test_display(self):
        hand = Hand()
        hand.perform_action(DiceAction.keep_new(Multiple(face=3, quantity=1)))

        assert str(hand).splitlines() == [
            "Cumulative score: 0 (0 guaranteed)",
            "Saved combos: 300 points",
            "combo of 3 3s",
        ]
