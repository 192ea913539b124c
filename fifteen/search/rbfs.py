from __future__ import annotations
from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, List, Optional, Set, Tuple
import logging
import math

from fifteen.domains.puzzle15 import Board, successors
from fifteen.errors import Unsolvable
from fifteen.search.common import Budget, SearchResult, heuristic_name, reconstruct_path, require_solvable

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class RBFSNode:
    board: Board
    g: int
    f: float
    parent: Optional["RBFSNode"] = None  # read only by reconstruct_path


def rbfs(
    start: Board,
    hfun: Callable[[Board], int],
    node_limit: Optional[int] = None,
    timeout_sec: float | None = None,
) -> SearchResult:
    """
    Recursive Best-First Search (linear memory).

    Each call keeps only its own children and their backed-up f-values. The child
    f-values are threaded through return values: a recursive call hands back the
    revised f of the subtree it gave up on, and the caller stores it on that child.
    """
    require_solvable(start)
    budget = Budget(node_limit, timeout_sec)

    expanded = 0
    peak_depth = 0
    on_path: Set[int] = {start.key}

    def search(node: RBFSNode, f_limit: float) -> Tuple[Optional[RBFSNode], float]:
        nonlocal expanded, peak_depth
        expanded += 1
        budget.check(expanded)
        peak_depth = max(peak_depth, node.g)

        if hfun(node.board) == 0:
            return node, node.f

        children: List[RBFSNode] = []
        for _, s in successors(node.board):
            if s.key in on_path:
                continue
            g2 = node.g + 1
            # f revised upward: never below the parent's backed-up value
            children.append(RBFSNode(s, g2, max(g2 + hfun(s), node.f), node))
        if not children:
            return None, math.inf

        while True:
            # stable sort: ties keep generation order (UP, DOWN, LEFT, RIGHT)
            children.sort(key=attrgetter("f"))
            best = children[0]
            if best.f > f_limit or best.f == math.inf:
                return None, best.f
            alternative = children[1].f if len(children) > 1 else math.inf

            on_path.add(best.board.key)
            result, best.f = search(best, min(f_limit, alternative))
            on_path.discard(best.board.key)
            if result is not None:
                return result, best.f

    root = RBFSNode(start, 0, hfun(start))
    goal, f_root = search(root, math.inf)
    if goal is None:
        raise Unsolvable(f"RBFS exhausted the search space after {expanded} expansions")

    logger.debug("RBFS solved at f=%s with %d expansions", f_root, expanded)
    return SearchResult(
        algorithm="RBFS",
        heuristic=heuristic_name(hfun),
        path=reconstruct_path(goal),
        nodes_expanded=expanded,
        time_sec=budget.elapsed(),
        peak_depth=peak_depth,
        bound_final=f_root,
    )
