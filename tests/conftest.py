import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from fifteen.domains.puzzle15 import Board, GOAL, scramble


@pytest.fixture
def goal():
    return GOAL


@pytest.fixture
def three_cycle():
    """Blank at (2,2) with 11 and 12 displaced; two moves from the goal."""
    return Board.from_rows([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 0, 11], [13, 14, 15, 12]])


@pytest.fixture
def short_scrambles():
    """Boards at most 8 moves from the goal, small enough for the BFS oracle."""
    return [scramble(d, seed) for d in (1, 3, 5, 8) for seed in range(3)]
