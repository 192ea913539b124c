from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import random

from fifteen.errors import InvalidBoard, InvalidMove

N = 4
SIZE = N * N
State = Tuple[int, ...]  # 16-length tuple, row-major, 0 is blank


class Move(Enum):
    """Direction the blank slides."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> "Move":
        return _OPPOSITE[self]


_OPPOSITE = {Move.UP: Move.DOWN, Move.DOWN: Move.UP, Move.LEFT: Move.RIGHT, Move.RIGHT: Move.LEFT}

# Successor order; RBFS tie-breaking depends on it.
MOVE_ORDER: Tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


@dataclass(frozen=True)
class Board:
    """One 4×4 configuration. Equality and hashing look at the tiles only; the blank is derived."""
    tiles: State
    blank_row: int = field(init=False, compare=False)
    blank_col: int = field(init=False, compare=False)

    def __post_init__(self):
        t = self.tiles
        if not isinstance(t, tuple) or len(t) != SIZE or sorted(t) != list(range(SIZE)):
            raise InvalidBoard(f"expected a permutation of 0..{SIZE - 1}, got {t}")
        r, c = divmod(t.index(0), N)
        object.__setattr__(self, "blank_row", r)
        object.__setattr__(self, "blank_col", c)

    @classmethod
    def _trusted(cls, tiles: State, blank: int) -> "Board":
        # tiles come from sliding a valid board; skip the permutation check
        b = object.__new__(cls)
        r, c = divmod(blank, N)
        object.__setattr__(b, "tiles", tiles)
        object.__setattr__(b, "blank_row", r)
        object.__setattr__(b, "blank_col", c)
        return b

    @classmethod
    def from_tiles(cls, tiles: Iterable[int]) -> "Board":
        return cls(tuple(int(x) for x in tiles))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        if len(rows) != N or any(len(row) != N for row in rows):
            raise InvalidBoard(f"expected {N} rows of {N} tiles")
        return cls.from_tiles(x for row in rows for x in row)

    @property
    def blank(self) -> int:
        return self.blank_row * N + self.blank_col

    @cached_property
    def key(self) -> int:
        """Tiles packed 4 bits per cell; exact fingerprint for path-membership sets."""
        k = 0
        for t in reversed(self.tiles):
            k = (k << 4) | t
        return k

    def rows(self) -> List[List[int]]:
        return [list(self.tiles[r * N:(r + 1) * N]) for r in range(N)]

    def __str__(self) -> str:
        return format_board(self)


GOAL = Board(tuple(list(range(1, SIZE)) + [0]))

# Precomputed legal blank moves: blank index -> ((move, target index), ...)
_NEI: Dict[int, Tuple[Tuple[Move, int], ...]] = {}
for _i in range(SIZE):
    _r, _c = divmod(_i, N)
    _moves = []
    if _r > 0:       _moves.append((Move.UP, _i - N))
    if _r < N - 1:   _moves.append((Move.DOWN, _i + N))
    if _c > 0:       _moves.append((Move.LEFT, _i - 1))
    if _c < N - 1:   _moves.append((Move.RIGHT, _i + 1))
    _NEI[_i] = tuple(_moves)


def _slide(b: Board, j: int) -> Board:
    z = b.blank
    lst = list(b.tiles)
    lst[z], lst[j] = lst[j], lst[z]
    return Board._trusted(tuple(lst), j)

# ---------- Core dynamics ----------

def legal_moves(b: Board) -> List[Move]:
    return [m for m, _ in _NEI[b.blank]]


def apply_move(b: Board, move: Move) -> Board:
    dr, dc = move.value
    r, c = b.blank_row + dr, b.blank_col + dc
    if not (0 <= r < N and 0 <= c < N):
        raise InvalidMove(f"cannot move blank {move.name} from ({b.blank_row},{b.blank_col})")
    return _slide(b, r * N + c)


def successors(b: Board) -> List[Tuple[Move, Board]]:
    """Return (move, next_board) pairs in UP, DOWN, LEFT, RIGHT order, legal moves only."""
    return [(m, _slide(b, j)) for m, j in _NEI[b.blank]]


def moves_between(path: Sequence[Board]) -> List[Move]:
    """Recover the blank moves that turn path[0] into path[-1] step by step."""
    out: List[Move] = []
    for a, b in zip(path, path[1:]):
        move = next((m for m, s in successors(a) if s == b), None)
        if move is None:
            raise InvalidMove(f"boards are not one move apart:\n{a}\n\n{b}")
        out.append(move)
    return out

# ---------- Solvability ----------

def inversions(b: Board) -> int:
    arr = [x for x in b.tiles if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(b: Board) -> bool:
    """Even width: (inversions + blank row counted 1-based from the bottom) must be odd."""
    blank_row_from_bottom = N - b.blank_row
    return ((inversions(b) + blank_row_from_bottom) % 2) == 1

# ---------- Instance generation ----------

def scramble(move_count: int, seed: Optional[int] = None) -> Board:
    """Random walk of move_count blank moves from GOAL with no immediate backtrack."""
    rng = random.Random(seed)
    b = GOAL
    last: Optional[Move] = None
    for _ in range(move_count):
        cand = [(m, j) for m, j in _NEI[b.blank] if last is None or m is not last.opposite]
        m, j = rng.choice(cand)
        b = _slide(b, j)
        last = m
    return b

# ---------- Text output ----------

def format_board(b: Board) -> str:
    lines = []
    for row in b.rows():
        lines.append("".join(f"{v:>3}" for v in row))
    return "\n".join(lines)


def format_path(path: Sequence[Board]) -> str:
    return "\n\n".join(format_board(b) for b in path)
