from __future__ import annotations
from collections import deque
from typing import Dict, Optional

from fifteen.domains.puzzle15 import Board, GOAL, successors
from fifteen.errors import Unsolvable
from fifteen.search.common import Budget, SearchResult, require_solvable


def bfs(start: Board, node_limit: Optional[int] = None, timeout_sec: float | None = None) -> SearchResult:
    """Uninformed breadth-first search; the shortest-path oracle for short scrambles."""
    require_solvable(start)
    budget = Budget(node_limit, timeout_sec)
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = 0
    while q:
        s = q.popleft()
        if s == GOAL:
            path = []
            while s is not None:
                path.append(s); s = parent[s]
            path.reverse()
            return SearchResult(algorithm="BFS", heuristic="", path=path, nodes_expanded=expanded,
                                time_sec=budget.elapsed(), peak_depth=len(path) - 1)
        expanded += 1
        budget.check(expanded)
        for _, s2 in successors(s):
            if s2 in parent: continue
            parent[s2] = s; q.append(s2)
    raise Unsolvable(f"BFS exhausted the search space after {expanded} expansions")
