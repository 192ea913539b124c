from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional
import logging

from fifteen.domains.puzzle15 import Board
from fifteen.heuristics.registry import Heuristic, heuristic_fn, parse_heuristic
from fifteen.search.common import SearchResult
from fifteen.search.ida_star import ida_star
from fifteen.search.rbfs import rbfs

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    IDA = "ida"
    RBFS = "rbfs"

    @property
    def label(self) -> str:
        return "IDA*" if self is Algorithm.IDA else "RBFS"


_SOLVERS: Dict[Algorithm, Callable[..., SearchResult]] = {
    Algorithm.IDA: ida_star,
    Algorithm.RBFS: rbfs,
}


def parse_algorithm(name) -> Algorithm:
    if isinstance(name, Algorithm):
        return name
    n = str(name).strip().lower().replace("*", "").replace("_star", "")
    try:
        return Algorithm(n)
    except ValueError:
        raise ValueError(f"unknown algorithm {name!r}; choose from {[a.value for a in Algorithm]}") from None


def search(
    algorithm,
    heuristic,
    start: Board,
    node_limit: Optional[int] = None,
    timeout_sec: float | None = None,
    check_heuristic: bool = True,
) -> SearchResult:
    """
    Solve `start` with the chosen algorithm and heuristic.

    Raises Unsolvable for a board of the wrong parity and SearchLimitExceeded when
    node_limit or timeout_sec is hit; otherwise the returned path is optimal.
    """
    algo = parse_algorithm(algorithm)
    heur: Heuristic = parse_heuristic(heuristic)
    hfun = heuristic_fn(heur, check=check_heuristic)

    logger.debug("search start: %s / %s", algo.label, heur.label)
    res = _SOLVERS[algo](start, hfun, node_limit=node_limit, timeout_sec=timeout_sec)
    res.heuristic = heur.value
    logger.info("%s [%s]: %d moves, %d nodes expanded, %.4fs",
                algo.label, heur.value, res.moves, res.nodes_expanded, res.time_sec)
    return res
