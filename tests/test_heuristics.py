"""Tests for the admissible heuristics and the heuristic registry."""

import pytest

from fifteen.domains.puzzle15 import Board, GOAL, apply_move, Move, successors, scramble
from fifteen.errors import HeuristicContractViolation
from fifteen.heuristics.inversion import inversion_distance
from fifteen.heuristics.linear_conflict import column_conflicts, linear_conflict, row_conflicts
from fifteen.heuristics.manhattan import manhattan
from fifteen.heuristics.registry import Heuristic, checked, evaluate, heuristic_fn, parse_heuristic
from fifteen.search.bfs import bfs

ALL = [manhattan, linear_conflict, inversion_distance]


def _swap_top_left_pair():
    t = list(GOAL.tiles)
    t[0], t[1] = t[1], t[0]
    return Board.from_tiles(t)


class TestGoal:
    @pytest.mark.parametrize("h", ALL)
    def test_zero_on_goal(self, h):
        assert h(GOAL) == 0

    @pytest.mark.parametrize("h", ALL)
    def test_positive_one_move_away(self, h):
        for _, b in successors(GOAL):
            assert h(b) > 0

    @pytest.mark.parametrize("h", ALL)
    def test_positive_off_goal(self, h):
        for seed in range(10):
            b = scramble(15, seed)
            if b != GOAL:
                assert h(b) > 0


class TestManhattan:
    def test_three_cycle(self, three_cycle):
        assert manhattan(three_cycle) == 2

    def test_blank_is_ignored(self):
        one_left = apply_move(GOAL, Move.LEFT)
        assert manhattan(one_left) == 1


class TestLinearConflict:
    def test_no_conflict_equals_manhattan(self, three_cycle):
        assert linear_conflict(three_cycle) == manhattan(three_cycle) == 2

    def test_adjacent_row_reversal_adds_two(self):
        b = _swap_top_left_pair()
        assert row_conflicts(b) == 1
        assert column_conflicts(b) == 0
        assert linear_conflict(b) == manhattan(b) + 2 == 4

    def test_fully_reversed_row(self):
        b = Board.from_rows([[4, 3, 2, 1], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]])
        assert manhattan(b) == 8
        assert row_conflicts(b) == 3
        assert linear_conflict(b) == 14

    def test_column_pass(self):
        b = Board.from_rows([[5, 2, 3, 4], [1, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]])
        assert column_conflicts(b) == 1
        assert row_conflicts(b) == 0
        assert linear_conflict(b) == 4

    def test_never_below_manhattan(self):
        for seed in range(20):
            b = scramble(30, seed)
            assert linear_conflict(b) >= manhattan(b)


class TestInversion:
    def test_one_vertical_move(self):
        # Moving the blank up shifts tile 12 three places in row-major order.
        b = apply_move(GOAL, Move.UP)
        assert inversion_distance(b) == 1

    def test_three_cycle(self, three_cycle):
        # 3 row-major and 3 column-major inversions
        assert inversion_distance(three_cycle) == 2

    def test_terms_round_up_separately(self):
        # 1 row-major and 7 column-major inversions: ceil(1/3) + ceil(7/3), not ceil(8/3).
        b = _swap_top_left_pair()
        assert inversion_distance(b) == 4


class TestAdmissibility:
    """Every heuristic stays at or below the BFS distance."""

    @pytest.mark.parametrize("h", ALL)
    def test_never_overestimates(self, h, short_scrambles):
        for b in short_scrambles:
            assert h(b) <= bfs(b).moves

    @pytest.mark.parametrize("h", ALL)
    def test_pure(self, h, three_cycle):
        assert h(three_cycle) == h(three_cycle)


class TestRegistry:
    def test_evaluate_dispatches(self, three_cycle):
        assert evaluate(Heuristic.MANHATTAN, three_cycle) == manhattan(three_cycle)
        assert evaluate(Heuristic.LINEAR_CONFLICT, three_cycle) == linear_conflict(three_cycle)
        assert evaluate(Heuristic.INVERSION, three_cycle) == inversion_distance(three_cycle)

    @pytest.mark.parametrize("name, expected", [
        ("manhattan", Heuristic.MANHATTAN),
        ("MD", Heuristic.MANHATTAN),
        ("lc", Heuristic.LINEAR_CONFLICT),
        ("linear_conflict", Heuristic.LINEAR_CONFLICT),
        ("inv", Heuristic.INVERSION),
        (Heuristic.INVERSION, Heuristic.INVERSION),
    ])
    def test_parse(self, name, expected):
        assert parse_heuristic(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            parse_heuristic("euclid")

    def test_labels(self):
        assert Heuristic.LINEAR_CONFLICT.label == "MD + Linear Conflict Correction"

    def test_checked_fn_passes_through(self, three_cycle):
        h = heuristic_fn("manhattan")
        assert h(three_cycle) == 2
        assert h.__name__ == "manhattan"

    def test_zero_off_goal_is_a_violation(self, three_cycle):
        h = checked(lambda b: 0, "zero")
        with pytest.raises(HeuristicContractViolation):
            h(three_cycle)

    def test_positive_on_goal_is_a_violation(self):
        h = checked(lambda b: 1, "one")
        with pytest.raises(HeuristicContractViolation):
            h(GOAL)

    def test_negative_is_a_violation(self, three_cycle):
        h = checked(lambda b: -1, "negative")
        with pytest.raises(HeuristicContractViolation):
            h(three_cycle)
