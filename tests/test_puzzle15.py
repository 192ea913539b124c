"""Tests for the 15-puzzle board model."""

import pytest

from fifteen.domains.puzzle15 import (
    Board, GOAL, MOVE_ORDER, Move, apply_move, format_board, is_solvable,
    legal_moves, moves_between, scramble, successors,
)
from fifteen.errors import InvalidBoard, InvalidMove
from fifteen.search.bfs import bfs


class TestBoard:
    """Construction, equality and fingerprints."""

    def test_goal_layout(self):
        assert GOAL.tiles == tuple(range(1, 16)) + (0,)
        assert (GOAL.blank_row, GOAL.blank_col) == (3, 3)

    def test_from_rows_tracks_blank(self, three_cycle):
        assert (three_cycle.blank_row, three_cycle.blank_col) == (2, 2)
        assert three_cycle.blank == 10

    @pytest.mark.parametrize("tiles", [
        list(range(15)),
        list(range(1, 16)) + [1],
        [0] * 16,
    ])
    def test_rejects_non_permutation(self, tiles):
        with pytest.raises(InvalidBoard):
            Board.from_tiles(tiles)

    def test_rejects_ragged_rows(self):
        with pytest.raises(InvalidBoard):
            Board.from_rows([[1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15, 0]])

    def test_plain_constructor_derives_blank(self, three_cycle):
        b = Board(three_cycle.tiles)
        assert (b.blank_row, b.blank_col) == (2, 2)
        assert b == three_cycle
        assert hash(b) == hash(three_cycle)
        assert is_solvable(b)
        assert [s for _, s in successors(b)] == [s for _, s in successors(three_cycle)]

    def test_blank_cannot_be_passed_in(self):
        with pytest.raises(TypeError):
            Board(GOAL.tiles, 0, 0)

    @pytest.mark.parametrize("tiles", [
        (1,) * 16,
        tuple(range(15)),
        list(range(1, 16)) + [0],
    ])
    def test_plain_constructor_rejects_bad_tiles(self, tiles):
        with pytest.raises(InvalidBoard):
            Board(tiles)

    def test_moved_boards_track_blank(self, three_cycle):
        for m, b in successors(three_cycle):
            assert b.blank == b.tiles.index(0)
            assert b == Board(b.tiles)

    def test_key_is_distinct_per_arrangement(self, three_cycle):
        keys = {b.key for _, b in successors(three_cycle)} | {three_cycle.key}
        assert len(keys) == 5
        assert Board.from_tiles(GOAL.tiles).key == GOAL.key

    def test_format_board(self, three_cycle):
        text = format_board(three_cycle)
        assert text.splitlines()[2] == "  9 10  0 11"
        assert len(text.splitlines()) == 4


class TestMoves:
    """Move legality and successor generation."""

    @pytest.mark.parametrize("board, expected", [
        (GOAL, 2),                                        # corner
        (apply_move(GOAL, Move.LEFT), 3),                 # edge
        (apply_move(apply_move(GOAL, Move.LEFT), Move.UP), 4),  # interior
    ])
    def test_successor_count(self, board, expected):
        assert len(successors(board)) == expected

    def test_successor_order_is_fixed(self, three_cycle):
        moves = [m for m, _ in successors(three_cycle)]
        assert moves == list(MOVE_ORDER)
        assert legal_moves(GOAL) == [Move.UP, Move.LEFT]

    def test_apply_move_is_by_value(self, three_cycle):
        before = three_cycle.tiles
        after = apply_move(three_cycle, Move.RIGHT)
        assert three_cycle.tiles == before
        assert after.tiles[10] == 11 and after.tiles[11] == 0
        assert (after.blank_row, after.blank_col) == (2, 3)

    @pytest.mark.parametrize("move", [Move.DOWN, Move.RIGHT])
    def test_blocked_move_raises(self, move):
        with pytest.raises(InvalidMove):
            apply_move(GOAL, move)

    def test_opposite_undoes_move(self, three_cycle):
        for m in legal_moves(three_cycle):
            assert apply_move(apply_move(three_cycle, m), m.opposite) == three_cycle

    def test_moves_between(self, three_cycle):
        path = [three_cycle, apply_move(three_cycle, Move.RIGHT), GOAL]
        assert moves_between(path) == [Move.RIGHT, Move.DOWN]

    def test_moves_between_rejects_gaps(self, three_cycle):
        with pytest.raises(InvalidMove):
            moves_between([three_cycle, three_cycle])


class TestSolvability:
    def test_goal_is_solvable(self):
        assert is_solvable(GOAL)

    def test_swapped_pair_is_unsolvable(self):
        t = list(GOAL.tiles)
        t[13], t[14] = t[14], t[13]
        assert not is_solvable(Board.from_tiles(t))

    @pytest.mark.parametrize("seed", range(5))
    def test_scrambles_are_solvable(self, seed):
        assert is_solvable(scramble(40, seed))


class TestScramble:
    def test_seeded_scramble_is_reproducible(self):
        assert scramble(30, seed=42) == scramble(30, seed=42)

    def test_zero_moves_is_goal(self):
        assert scramble(0, seed=1) == GOAL

    @pytest.mark.parametrize("depth", [1, 4, 7])
    def test_scramble_within_move_count(self, depth):
        for seed in range(3):
            assert bfs(scramble(depth, seed)).moves <= depth
