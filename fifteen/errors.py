from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the solver."""


class InvalidBoard(PuzzleError, ValueError):
    """Tiles are not a permutation of 0..15 laid out 4×4."""


class InvalidMove(PuzzleError):
    """The blank would slide off the board."""


class Unsolvable(PuzzleError):
    """The start board has the wrong permutation parity to reach the goal."""


class HeuristicContractViolation(PuzzleError, AssertionError):
    """A heuristic returned a negative value or disagreed with the goal test."""


class SearchLimitExceeded(PuzzleError):
    """Node-expansion ceiling or wall-clock timeout hit before a solution was found."""

    def __init__(self, reason: str, nodes_expanded: int, elapsed: float):
        super().__init__(f"{reason} after {nodes_expanded} expansions ({elapsed:.3f}s)")
        self.reason = reason
        self.nodes_expanded = nodes_expanded
        self.elapsed = elapsed
