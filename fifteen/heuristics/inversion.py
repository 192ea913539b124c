from __future__ import annotations

from fifteen.domains.puzzle15 import Board, N, SIZE


def _col_major(idx: int) -> int:
    return N * (idx % N) + idx // N


def _ceil3(n: int) -> int:
    return -(-n // 3)


def inversion_distance(b: Board) -> int:
    """
    Inversion distance: ceil(row-major inversions / 3) + ceil(column-major inversions / 3).
    A vertical move fixes at most 3 row-major inversions and a horizontal move at most
    3 column-major ones, so each term is a separate lower bound on its kind of move.
    """
    s = b.tiles
    h_inv = 0
    v_inv = 0
    for i in range(SIZE):
        x = s[i]
        if x == 0:
            continue
        vi = _col_major(i)
        vx = _col_major(x - 1)
        for j in range(i + 1, SIZE):
            y = s[j]
            if y == 0:
                continue
            if x > y:
                h_inv += 1
            # order of the pair in column-major reading vs. the goal's column-major order
            if (vx > _col_major(y - 1)) != (vi > _col_major(j)):
                v_inv += 1
    return _ceil3(h_inv) + _ceil3(v_inv)
