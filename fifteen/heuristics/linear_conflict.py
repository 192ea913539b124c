from __future__ import annotations
from typing import List

from fifteen.domains.puzzle15 import Board, N
from fifteen.heuristics.manhattan import GOAL_POS, manhattan


def _adjacent_reversals(goal_idx: List[int]) -> int:
    # Never exceeds the number of tiles that must leave the line.
    return sum(1 for a, b in zip(goal_idx, goal_idx[1:]) if a > b)


def row_conflicts(b: Board) -> int:
    s = b.tiles
    count = 0
    for r in range(N):
        cols = [GOAL_POS[t][1] for t in s[r * N:(r + 1) * N] if t != 0 and GOAL_POS[t][0] == r]
        count += _adjacent_reversals(cols)
    return count


def column_conflicts(b: Board) -> int:
    s = b.tiles
    count = 0
    for c in range(N):
        rows = [GOAL_POS[t][0] for t in s[c::N] if t != 0 and GOAL_POS[t][1] == c]
        count += _adjacent_reversals(rows)
    return count


def linear_conflict(b: Board) -> int:
    """Manhattan + 2 per adjacent reversed pair of tiles sharing their goal row (or column)."""
    return manhattan(b) + 2 * (row_conflicts(b) + column_conflicts(b))
