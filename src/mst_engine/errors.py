"""Exception hierarchy for spanning tree computations.

Every failure aborts the current call; no partial result is ever returned.
Graph-shape problems are ``ValueError`` subclasses, out-of-range Union-Find
indices are ``IndexError`` subclasses, and all of them share ``MSTError`` so
callers can catch the whole family at once.
"""

from __future__ import annotations


class MSTError(Exception):
    """Base class for all errors raised by mst_engine."""


class EmptyGraphError(MSTError, ValueError):
    """The graph has no nodes."""


class NoEdgesError(MSTError, ValueError):
    """The graph has no edges."""


class DirectedGraphError(MSTError, ValueError):
    """Spanning tree operations need an undirected graph."""


class DisconnectedGraphError(MSTError, ValueError):
    """Fewer than ``num_nodes - 1`` edges are reachable."""


class UnknownStartNodeError(MSTError, ValueError):
    """The requested node is not part of the graph."""


class GraphTooLargeError(MSTError, ValueError):
    """The graph exceeds the configured ``max_nodes`` guard."""


class IndexOutOfRangeError(MSTError, IndexError):
    """A Union-Find index lies outside ``[0, n)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is outside the union range [0, {size})")
        self.index = index
        self.size = size
