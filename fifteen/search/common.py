from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from time import perf_counter

from fifteen.domains.puzzle15 import Board, is_solvable, format_board
from fifteen.errors import SearchLimitExceeded, Unsolvable


@dataclass
class SearchResult:
    algorithm: str
    heuristic: str
    path: List[Board]
    nodes_expanded: int
    time_sec: float
    peak_depth: int = 0
    bound_final: Optional[float] = None
    iterations: int = 1

    @property
    def moves(self) -> int:
        return len(self.path) - 1

    def as_row(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic,
            "moves": self.moves,
            "expanded": self.nodes_expanded,
            "time_sec": f"{self.time_sec:.6f}",
            "time_us": max(1, int(self.time_sec * 1e6)),
            "bound_final": "" if self.bound_final is None else self.bound_final,
            "peak_depth": self.peak_depth,
        }


class Budget:
    """Optional node-expansion ceiling and wall-clock timeout for one search call."""

    def __init__(self, node_limit: Optional[int] = None, timeout_sec: Optional[float] = None):
        self.node_limit = node_limit
        self.timeout_sec = timeout_sec
        self.t0 = perf_counter()

    def elapsed(self) -> float:
        return perf_counter() - self.t0

    def check(self, expanded: int) -> None:
        if self.node_limit is not None and expanded > self.node_limit:
            raise SearchLimitExceeded(f"node limit {self.node_limit} exceeded", expanded, self.elapsed())
        if self.timeout_sec is not None and self.elapsed() > self.timeout_sec:
            raise SearchLimitExceeded(f"timeout {self.timeout_sec}s exceeded", expanded, self.elapsed())


def require_solvable(start: Board) -> None:
    if not is_solvable(start):
        raise Unsolvable(f"board cannot reach the goal (wrong permutation parity):\n{format_board(start)}")


def reconstruct_path(node) -> List[Board]:
    path: List[Board] = []
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path


def heuristic_name(hfun) -> str:
    return getattr(hfun, "__name__", "")
