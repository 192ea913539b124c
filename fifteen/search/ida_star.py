from __future__ import annotations
from typing import Callable, List, Optional, Set
import logging
import math

from fifteen.domains.puzzle15 import Board, successors
from fifteen.errors import Unsolvable
from fifteen.search.common import Budget, SearchResult, heuristic_name, require_solvable

logger = logging.getLogger(__name__)

FOUND = -1


def ida_star(
    start: Board,
    hfun: Callable[[Board], int],
    node_limit: Optional[int] = None,
    timeout_sec: float | None = None,
) -> SearchResult:
    """
    IDA*: depth-first search bounded by f = g + h, restarted from the root with the
    smallest pruned f until a board with h == 0 is reached.

    Cycle check is against the current path only; the same board may be reached
    again through a different path, in the same or a later iteration.
    """
    require_solvable(start)
    budget = Budget(node_limit, timeout_sec)

    expanded = 0
    peak_depth = 0
    # path owns the boards; on_path holds their fingerprints for O(1) membership
    path: List[Board] = [start]
    on_path: Set[int] = {start.key}

    def dfs(g: int, bound: int):
        """
        Returns:
            * FOUND      if a goal is at the end of `path`
            * next_bound the minimal f that exceeded 'bound' in this subtree (inf if none)
        """
        nonlocal expanded, peak_depth
        expanded += 1
        budget.check(expanded)
        peak_depth = max(peak_depth, g)

        node = path[-1]
        h = hfun(node)
        f = g + h
        if f > bound:
            return f
        if h == 0:
            return FOUND

        min_next = math.inf
        for _, child in successors(node):
            if child.key in on_path:
                continue
            path.append(child)
            on_path.add(child.key)

            t = dfs(g + 1, bound)
            if t == FOUND:
                return FOUND
            if t < min_next:
                min_next = t

            path.pop()
            on_path.discard(child.key)

        return min_next

    bound = hfun(start)
    iterations = 0
    while True:
        iterations += 1
        logger.debug("IDA* iteration %d: f_limit=%d, expanded so far=%d", iterations, bound, expanded)
        t = dfs(0, bound)
        if t == FOUND:
            return SearchResult(
                algorithm="IDA*",
                heuristic=heuristic_name(hfun),
                path=list(path),
                nodes_expanded=expanded,
                time_sec=budget.elapsed(),
                peak_depth=peak_depth,
                bound_final=bound,
                iterations=iterations,
            )
        if t == math.inf:
            raise Unsolvable(f"IDA* exhausted the search space after {expanded} expansions")
        bound = int(t)
