"""
Tests for criteria under uncertainty.
"""

import math

import pytest
from structlog.testing import capture_logs

from decision_criteria.criteria.results import Criterion, HurwiczRow
from decision_criteria.criteria.uncertainty import (
    hurwicz,
    maximax,
    maximin_of_row_maxes,
    minimax_of_row_mins,
    savage,
)
from decision_criteria.exceptions import ShapeError
from decision_criteria.matrix.payoff import PayoffMatrix


MATRIX = [
    [3, 7, 1],
    [4, 2, 6],
    [5, 5, 2],
    [-1, 9, 0],
]


class TestMaximax:
    """Tests for maximax."""

    def test_basic(self):
        result = maximax([[10, 0], [4, 4]])
        assert result.per_row_max == [10.0, 4.0]
        assert result.overall == 10.0
        assert result.decision_index == 0
        assert result.kind is Criterion.MAXIMAX

    def test_overall_is_largest_cell(self):
        result = maximax(MATRIX)
        assert result.overall == max(v for row in MATRIX for v in row)
        assert result.overall == max(result.per_row_max)
        assert result.decision_index == 3

    def test_reports_all_tied_rows(self):
        result = maximax([[5, 1], [5, 2], [3, 3]])
        assert result.decision_index == 0
        assert result.tied_indices == [0, 1]

    def test_single_row(self):
        result = maximax([[2, 8, 5]])
        assert result.per_row_max == [8.0]
        assert result.decision_index == 0

    def test_non_finite_propagates(self):
        assert math.isnan(maximax([[float("nan"), 1], [2, 3]]).overall)
        assert maximax([[float("inf"), 0], [1, 2]]).overall == math.inf


class TestMinimax:
    """Tests for the max-of-row-minima criterion."""

    def test_basic(self):
        result = minimax_of_row_mins(MATRIX)
        assert result.per_row_min == [1.0, 2.0, 2.0, -1.0]
        assert result.overall == 2.0
        assert result.decision_index == 1
        assert result.tied_indices == [1, 2]

    def test_lowest_index_wins(self):
        result = minimax_of_row_mins([[1, 5], [2, 0], [1, 7]])
        assert result.overall == 1.0
        assert result.decision_index == 0
        assert result.tied_indices == [0, 2]


class TestMaximin:
    """Tests for the min-of-row-maxima criterion."""

    def test_basic(self):
        result = maximin_of_row_maxes(MATRIX)
        assert result.per_row_max == [7.0, 6.0, 5.0, 9.0]
        assert result.overall == 5.0
        assert result.decision_index == 2

    def test_independent_of_maximax(self):
        # Same row maxima, opposite aggregation
        high = maximax(MATRIX)
        low = maximin_of_row_maxes(MATRIX)
        assert high.per_row_max == low.per_row_max
        assert high.overall == max(low.per_row_max)
        assert low.overall == min(high.per_row_max)

    def test_lowest_index_wins(self):
        result = maximin_of_row_maxes([[3, 1], [5, 0], [3, 2]])
        assert result.decision_index == 0
        assert result.tied_indices == [0, 2]


class TestHurwicz:
    """Tests for the Hurwicz criterion."""

    def test_per_row_terms(self):
        result = hurwicz([[10, 0], [4, 4]], 0.8)
        assert result.alpha == 0.8
        assert result.per_row[0] == HurwiczRow(max_value=10.0, min_value=0.0, value=pytest.approx(8.0))
        assert result.values == pytest.approx([8.0, 4.0])
        assert result.overall == pytest.approx(8.0)
        assert result.decision_index == 0

    def test_pessimistic_alpha_changes_decision(self):
        result = hurwicz([[10, 0], [4, 4]], 0.3)
        assert result.values == pytest.approx([3.0, 4.0])
        assert result.decision_index == 1

    def test_alpha_one_matches_maximax(self):
        assert hurwicz(MATRIX, 1.0).overall == maximax(MATRIX).overall

    def test_alpha_zero_matches_minimax(self):
        assert hurwicz(MATRIX, 0.0).overall == minimax_of_row_mins(MATRIX).overall

    def test_out_of_range_alpha_computed_and_logged(self):
        with capture_logs() as logs:
            result = hurwicz([[10, 0]], 1.5)
        assert result.overall == pytest.approx(15.0)
        assert any(entry["event"] == "hurwicz_alpha_out_of_range" for entry in logs)

    def test_lowest_index_wins(self):
        result = hurwicz([[1, 3], [6, 0], [3, 1]], 0.5)
        assert result.values == pytest.approx([2.0, 3.0, 2.0])
        assert result.decision_index == 1
        assert hurwicz([[1, 3], [3, 1]], 0.5).decision_index == 0


class TestSavage:
    """Tests for the Savage minimax regret criterion."""

    def test_reference_example(self):
        result = savage([[4, -2], [0, 3]])
        assert result.column_maxima == [4.0, 3.0]
        assert result.regret_matrix == [[0.0, 5.0], [4.0, 0.0]]
        assert result.per_row_max_regret == [5.0, 4.0]
        assert result.decision_index_1based == 2
        assert result.decision_index == 1
        assert result.min_max_regret == 4.0

    def test_regret_is_non_negative(self):
        result = savage(MATRIX)
        assert all(v >= 0 for row in result.regret_matrix for v in row)

    def test_each_column_has_a_zero_regret(self):
        result = savage(MATRIX)
        for j in range(len(MATRIX[0])):
            assert min(row[j] for row in result.regret_matrix) == 0

    def test_lowest_index_wins(self):
        result = savage([[1, 2], [1, 2]])
        assert result.per_row_max_regret == [0.0, 0.0]
        assert result.decision_index_1based == 1

    def test_single_column(self):
        result = savage([[3], [7], [5]])
        assert result.regret_matrix == [[4.0], [0.0], [2.0]]
        assert result.decision_index_1based == 2


class TestShapeViolations:
    """Malformed matrices fail before any criterion computes."""

    @pytest.mark.parametrize(
        "criterion",
        [maximax, minimax_of_row_mins, maximin_of_row_maxes, savage],
    )
    def test_jagged_matrix(self, criterion):
        with pytest.raises(ShapeError):
            criterion([[1, 2], [3]])

    @pytest.mark.parametrize(
        "criterion",
        [maximax, minimax_of_row_mins, maximin_of_row_maxes, savage],
    )
    def test_three_dimensional_matrix(self, criterion):
        with pytest.raises(ShapeError):
            criterion([[[1, 2]], [[3, 4]]])

    def test_list_in_cell(self):
        with pytest.raises(ShapeError):
            maximax([[1, [2, 3]], [4, 5]])

    def test_hurwicz_empty_matrix(self):
        with pytest.raises(ShapeError):
            hurwicz([], 0.5)

    def test_validated_matrix_accepted(self):
        m = PayoffMatrix([[1, 2], [3, 4]])
        assert maximax(m).overall == 4.0
        assert savage(m).decision_index_1based == 2
