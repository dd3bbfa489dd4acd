"""Tests for ranked company preferences."""

import pytest

from resumebooks.selection import RANKS, RankedSelection, choose


@pytest.fixture
def state():
    return RankedSelection({1: "Google", 2: "Meta", 3: ""})


class TestChoose:

    def test_moving_a_company_clears_its_old_rank(self, state):
        result = choose(state, 3, "Google")
        assert result == RankedSelection({1: "", 2: "Meta", 3: "Google"})

    def test_sets_new_company(self, state):
        result = choose(state, 3, "Stripe")
        assert result.as_dict() == {"1": "Google", "2": "Meta", "3": "Stripe"}

    def test_replacing_with_other_ranks_company(self, state):
        result = choose(state, 2, "Google")
        assert result[1] == ""
        assert result[2] == "Google"
        assert result[3] == ""

    def test_idempotent(self, state):
        once = choose(state, 3, "Google")
        assert choose(once, 3, "Google") == once

    def test_rechoosing_same_rank_keeps_others(self, state):
        assert choose(state, 1, "Google") == state

    @pytest.mark.parametrize("rank", RANKS)
    def test_clearing_leaves_other_ranks(self, state, rank):
        result = choose(state, rank, "")
        assert result[rank] == ""
        for other in RANKS:
            if other != rank:
                assert result[other] == state[other]

    def test_empty_is_not_a_duplicate(self):
        state = RankedSelection({1: "", 2: "", 3: "Meta"})
        result = choose(state, 1, "")
        assert result == state

    def test_does_not_mutate_input(self, state):
        choose(state, 3, "Google")
        assert state.as_dict() == {"1": "Google", "2": "Meta", "3": ""}

    def test_none_is_treated_as_empty(self, state):
        assert choose(state, 1, None)[1] == ""

    def test_integer_identifiers(self):
        state = RankedSelection({1: 7, 2: 8})
        result = choose(state, 3, 7)
        assert result.as_dict() == {"1": "", "2": "8", "3": "7"}

    @pytest.mark.parametrize("rank", [0, 4, -1])
    def test_rejects_unknown_rank(self, state, rank):
        with pytest.raises(ValueError):
            choose(state, rank, "Google")

    def test_invariant_holds_over_sequence(self):
        state = RankedSelection()
        picks = [(1, "a"), (2, "b"), (3, "a"), (1, "b"), (2, "c"), (3, "c"), (1, "")]
        for rank, value in picks:
            state = choose(state, rank, value)
            assert state.duplicate_ranks() == []
        assert state.as_dict() == {"1": "", "2": "", "3": "c"}


class TestRankedSelection:

    def test_defaults_to_empty(self):
        assert RankedSelection().as_dict() == {"1": "", "2": "", "3": ""}

    def test_rejects_unknown_rank_key(self):
        with pytest.raises(ValueError):
            RankedSelection({4: "Google"})

    def test_duplicate_ranks(self):
        selection = RankedSelection({1: "Google", 2: "Google", 3: "Google"})
        assert selection.duplicate_ranks() == [2, 3]

    def test_from_missing_submission(self):
        assert RankedSelection.from_submission(None) == RankedSelection()

    def test_from_submission(self):
        class Submission:
            preferred_company_1_id = 3
            preferred_company_2_id = None
            preferred_company_3_id = 5

        selection = RankedSelection.from_submission(Submission())
        assert selection.as_dict() == {"1": "3", "2": "", "3": "5"}

    def test_hashable_and_comparable(self):
        assert {RankedSelection({1: "x"}), RankedSelection({1: "x"})} == {RankedSelection({1: "x"})}
        assert RankedSelection() != {"1": "", "2": "", "3": ""}
