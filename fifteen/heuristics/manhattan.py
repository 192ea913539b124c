from __future__ import annotations
from typing import Dict, Tuple

from fifteen.domains.puzzle15 import Board, GOAL, N

# Goal (row, col) of each tile
GOAL_POS: Dict[int, Tuple[int, int]] = {t: divmod(i, N) for i, t in enumerate(GOAL.tiles) if t != 0}


def manhattan(b: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(b.tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, N)
        gr, gc = GOAL_POS[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
