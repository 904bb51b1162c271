"""Tests for conditions and the shared text normalization."""

import pytest

from review_waiting_list.condition import Condition
from review_waiting_list.text_rules import normalize_marker
from review_waiting_list.types import TeamReviewer, UserReviewer, reviewer_from_node


class TestCondition:
    def test_matches_normalized(self):
        condition = Condition("label", ["Bug", " enhancement "])
        assert condition.matches("bug") is True
        assert condition.matches("ENHANCEMENT") is True
        assert condition.matches("feature") is False

    def test_values_are_deduplicated(self):
        assert Condition("label", ["bug", "BUG", "bug"]).values == frozenset({"bug"})

    def test_brackets_are_not_stripped(self):
        assert Condition("label", ["wip"]).matches("[wip]") is False

    def test_empty_values(self):
        assert Condition("label", [], True).evaluate(["bug"]) is False
        assert Condition("label", [], False).evaluate(["bug"]) is True

    def test_include_flip_inverts_result(self):
        candidates = ["bug", "enhancement"]
        included = Condition("label", ["bug"], True).evaluate(candidates)
        excluded = Condition("label", ["bug"], False).evaluate(candidates)
        assert included is not excluded

    def test_empty_field_name(self):
        with pytest.raises(ValueError):
            Condition(" ", ["bug"])

    def test_bare_string_values(self):
        with pytest.raises(ValueError):
            Condition("label", "bug")

    def test_from_config(self):
        condition = Condition.from_config("reviewer", {"values": ["ohbarye"], "include": False})
        assert condition == Condition("reviewer", ["ohbarye"], False)

    def test_hashable(self):
        assert len({Condition("label", ["a", "b"]), Condition("label", ["b", "a"])}) == 1


class TestNormalizeMarker:
    def test_strips_brackets_and_apostrophes(self):
        assert normalize_marker("[Don't Merge] This") == "dont merge this"

    def test_compact(self):
        assert normalize_marker(" Do Not  Merge ", compact=True) == "donotmerge"

    def test_none(self):
        assert normalize_marker(None) == ""


class TestReviewer:
    def test_user(self):
        reviewer = reviewer_from_node({"login": "basan"})
        assert reviewer == UserReviewer("basan")
        assert reviewer.identifier == "basan"

    def test_team(self):
        reviewer = reviewer_from_node({"name": "team-b"})
        assert reviewer == TeamReviewer("team-b")
        assert reviewer.identifier == "team-b"

    def test_empty(self):
        assert reviewer_from_node({}) is None
        assert reviewer_from_node(None) is None
