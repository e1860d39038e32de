"""Unit tests for the hierarchy optimizer."""

from __future__ import annotations

import pytest

from memotheme.analysis import HierarchyOptimizer
from memotheme.domain.models import Theme


@pytest.fixture
def optimizer() -> HierarchyOptimizer:
    return HierarchyOptimizer()


def family(child_count: int) -> list[Theme]:
    """A parent P with children C1..Cn."""
    children = [f"C{i}" for i in range(1, child_count + 1)]
    return [Theme(id="P", name="Parent", child_theme_ids=children)] + [
        Theme(id=child_id, name=child_id, parent_theme_id="P") for child_id in children
    ]


class TestParentChildRules:
    """Tests for parent/child score comparison."""

    def test_close_scores_keep_child(self, optimizer):
        """Test that comparable scores prefer the more specific child."""
        result = optimizer.optimize(["C1", "P"], family(1), {"C1": 0.5, "P": 0.4})

        assert result == ["C1"]

    def test_weak_child_keeps_parent(self, optimizer):
        """Test that a clearly weaker child is dropped."""
        result = optimizer.optimize(["P", "C1"], family(1), {"P": 0.8, "C1": 0.4})

        assert result == ["P"]

    def test_strong_child_keeps_both(self, optimizer):
        """Test that a clearly stronger child keeps its parent too."""
        result = optimizer.optimize(["C1", "P"], family(1), {"C1": 0.9, "P": 0.5})

        assert result == ["C1", "P"]

    def test_gap_above_closeness_keeps_both(self, optimizer):
        """Test that a stronger child outside the closeness gap keeps its parent."""
        result = optimizer.optimize(["C1", "P"], family(1), {"C1": 0.75, "P": 0.5})

        # gap 0.25 with a stronger child keeps both
        assert result == ["C1", "P"]


class TestCollapse:
    """Tests for collapsing selected children into their parent."""

    def test_majority_of_children_collapse(self, optimizer):
        """Test that three selected children of three collapse into the parent."""
        scores = {"P": 0.8, "C1": 0.7, "C2": 0.65, "C3": 0.6}

        result = optimizer.optimize(["P", "C1", "C2", "C3"], family(3), scores)

        assert result == ["P"]

    def test_half_of_children_collapse(self, optimizer):
        """Test that two of four children is enough to collapse."""
        scores = {"P": 0.8, "C1": 0.7, "C2": 0.65}

        result = optimizer.optimize(["P", "C1", "C2"], family(4), scores)

        assert result == ["P"]

    def test_minority_of_children_do_not_collapse(self, optimizer):
        """Test that two of five children is not a majority."""
        scores = {"P": 0.5, "C1": 0.9, "C2": 0.95}

        result = optimizer.optimize(["C2", "C1", "P"], family(5), scores)

        # Both children are much stronger than the parent: all kept
        assert result == ["C2", "C1", "P"]

    def test_single_child_never_collapses(self, optimizer):
        """Test that one selected child is not collapsed."""
        result = optimizer.optimize(["C1", "P"], family(3), {"C1": 0.7, "P": 0.6})

        assert result == ["C1"]


class TestEdgeCases:
    """Tests for degenerate input."""

    def test_fewer_than_two_candidates(self, optimizer):
        """Test that single and empty candidate lists are returned unchanged."""
        assert optimizer.optimize([], family(1), {}) == []
        assert optimizer.optimize(["C1"], family(1), {"C1": 0.3}) == ["C1"]

    def test_unrelated_themes_all_kept(self, optimizer):
        """Test that themes without relations pass through in order."""
        themes = [Theme(id="a", name="A"), Theme(id="b", name="B")]

        assert optimizer.optimize(["b", "a"], themes, {"a": 0.3, "b": 0.4}) == ["b", "a"]

    def test_dangling_parent_reference(self, optimizer):
        """Test that a parent outside the candidates is treated as absent."""
        themes = [
            Theme(id="c", name="C", parent_theme_id="missing"),
            Theme(id="d", name="D"),
        ]

        assert optimizer.optimize(["c", "d"], themes, {"c": 0.5, "d": 0.4}) == ["c", "d"]

    def test_unknown_candidate_is_skipped(self, optimizer):
        """Test that candidates missing from the catalog are not returned."""
        themes = [Theme(id="a", name="A")]

        assert optimizer.optimize(["a", "ghost"], themes, {"a": 0.5}) == ["a"]
