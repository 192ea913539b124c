from __future__ import annotations
from enum import Enum
from typing import Callable, Dict

from fifteen.domains.puzzle15 import Board, GOAL, format_board
from fifteen.errors import HeuristicContractViolation
from fifteen.heuristics.inversion import inversion_distance
from fifteen.heuristics.linear_conflict import linear_conflict
from fifteen.heuristics.manhattan import manhattan

HFun = Callable[[Board], int]


class Heuristic(str, Enum):
    MANHATTAN = "manhattan"
    LINEAR_CONFLICT = "linear_conflict"
    INVERSION = "inversion"

    @property
    def label(self) -> str:
        return _LABELS[self]


_FUNCS: Dict[Heuristic, HFun] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.LINEAR_CONFLICT: linear_conflict,
    Heuristic.INVERSION: inversion_distance,
}

_LABELS = {
    Heuristic.MANHATTAN: "Manhattan Distance",
    Heuristic.LINEAR_CONFLICT: "MD + Linear Conflict Correction",
    Heuristic.INVERSION: "Inversion Distance",
}

_ALIASES = {
    "m": Heuristic.MANHATTAN, "md": Heuristic.MANHATTAN,
    "lc": Heuristic.LINEAR_CONFLICT, "linear": Heuristic.LINEAR_CONFLICT,
    "inv": Heuristic.INVERSION, "inversion_distance": Heuristic.INVERSION,
}


def parse_heuristic(name) -> Heuristic:
    if isinstance(name, Heuristic):
        return name
    n = str(name).strip().lower()
    if n in _ALIASES:
        return _ALIASES[n]
    try:
        return Heuristic(n)
    except ValueError:
        raise ValueError(f"unknown heuristic {name!r}; choose from {[h.value for h in Heuristic]}") from None


def evaluate(heuristic: Heuristic, b: Board) -> int:
    return _FUNCS[heuristic](b)


def checked(fn: HFun, name: str) -> HFun:
    """Wrap fn so a negative estimate, or h == 0 off the goal (or h > 0 on it), fails loudly."""
    def h(b: Board) -> int:
        v = fn(b)
        if v < 0:
            raise HeuristicContractViolation(f"{name} returned {v} for\n{format_board(b)}")
        if (v == 0) != (b == GOAL):
            raise HeuristicContractViolation(
                f"{name} returned {v} for a {'goal' if b == GOAL else 'non-goal'} board\n{format_board(b)}")
        return v
    h.__name__ = name
    return h


def heuristic_fn(heuristic, check: bool = True) -> HFun:
    heuristic = parse_heuristic(heuristic)
    fn = _FUNCS[heuristic]
    return checked(fn, heuristic.value) if check else fn
