"""Prim's algorithm and enumeration of every tie-broken Prim run.

Whenever several frontier edges share the minimum weight, each of them is a
legitimate next Prim step. ``compute_all_mst`` follows all of them
generation by generation and returns one result per distinct edge set.

Partial trees with the same edge set have the same visited set and thus the
same futures, so each generation is deduplicated before growing the next.
Without that the number of partial trees grows with every interleaving of
tied choices instead of with the number of distinct trees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mst_engine.engine.config import MSTConfig
from mst_engine.engine.edges import dedupe_by_edge_set, total_weight, undirected_adjacency
from mst_engine.engine.kruskal import check_spanning_tree_preconditions
from mst_engine.errors import DisconnectedGraphError

if TYPE_CHECKING:
    from mst_engine.core.graph import Edge, Graph, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimResult:
    """
    One Prim execution that produced a minimum spanning tree.

    Attributes:
        mst: Tree edges in the order Prim added them, each oriented from
            the already visited node to the newly reached one
        nodes: Nodes in discovery order, starting with the start node
    """

    mst: tuple[Edge, ...]
    nodes: tuple[Node, ...]

    @property
    def weight(self) -> float:
        return total_weight(self.mst)

    @property
    def labels(self) -> list[str]:
        return [node.label for node in self.nodes]


@dataclass(frozen=True)
class PartialTree:
    """Immutable intermediate state of one Prim run.

    ``extend`` returns a new record, so sibling branches never share
    mutable state.
    """

    edges: tuple[Edge, ...]
    order: tuple[int, ...]
    visited: frozenset[int]

    @classmethod
    def start(cls, index: int) -> PartialTree:
        return cls(edges=(), order=(index,), visited=frozenset({index}))

    def frontier(self, adjacency: list[list[Edge]]) -> list[Edge]:
        """Edges leaving the visited set, grouped by discovery order."""
        return [
            edge
            for index in self.order
            for edge in adjacency[index]
            if edge.target not in self.visited
        ]

    def extend(self, edge: Edge) -> PartialTree:
        return PartialTree(
            edges=(*self.edges, edge),
            order=(*self.order, edge.target),
            visited=self.visited | {edge.target},
        )


def _minimum_candidates(partial: PartialTree, adjacency: list[list[Edge]]) -> list[Edge]:
    candidates = partial.frontier(adjacency)
    if not candidates:
        raise DisconnectedGraphError(
            "The algorithm was not able to compute a spanning tree. "
            "The graph might not be connected."
        )
    lowest = min(edge.cost for edge in candidates)
    return [edge for edge in candidates if edge.cost == lowest]


def _to_result(graph: Graph, partial: PartialTree) -> PrimResult:
    return PrimResult(mst=partial.edges, nodes=tuple(graph.nodes[i] for i in partial.order))


def prim(graph: Graph, start: Node | str | int, config: MSTConfig | None = None) -> PrimResult:
    """
    Run Prim's algorithm once, always taking the first minimum frontier edge.

    Args:
        graph: Connected, undirected graph (unweighted edges count as 1)
        start: Start node, given as Node, label or index
        config: Engine configuration (uses defaults if None)

    Raises:
        UnknownStartNodeError: If ``start`` is not a node of the graph
        DisconnectedGraphError: If some node cannot be reached
    """
    check_spanning_tree_preconditions(graph, config)
    start_node = graph.node(start)
    adjacency = undirected_adjacency(graph)

    partial = PartialTree.start(start_node.index)
    while len(partial.edges) < graph.num_nodes - 1:
        partial = partial.extend(_minimum_candidates(partial, adjacency)[0])
    return _to_result(graph, partial)


def compute_all_mst(
    graph: Graph,
    start: Node | str | int,
    config: MSTConfig | None = None,
) -> list[PrimResult]:
    """
    Enumerate every distinct MST reachable by Prim from ``start``.

    Each weight tie on the frontier branches the search. Results with the
    same (unordered, undirected) edge set are merged, keeping the first.

    Args:
        graph: Connected, undirected graph (unweighted edges count as 1)
        start: Start node, given as Node, label or index
        config: Engine configuration (uses defaults if None)

    Returns:
        One PrimResult per distinct edge set, all of minimum total weight

    Raises:
        UnknownStartNodeError: If ``start`` is not a node of the graph
        DisconnectedGraphError: If some node cannot be reached
    """
    check_spanning_tree_preconditions(graph, config)
    start_node = graph.node(start)
    adjacency = undirected_adjacency(graph)
    target = graph.num_nodes - 1

    generation = [PartialTree.start(start_node.index)]
    while any(len(partial.edges) < target for partial in generation):
        grown: list[PartialTree] = []
        for partial in generation:
            if len(partial.edges) >= target:
                grown.append(partial)
                continue
            grown.extend(partial.extend(edge) for edge in _minimum_candidates(partial, adjacency))
        generation = dedupe_by_edge_set(grown, lambda p: p.edges)
        logger.debug(
            "Prim from %s: step %d, %d branches, %d distinct",
            start_node.label,
            len(generation[0].edges),
            len(grown),
            len(generation),
        )

    finished = dedupe_by_edge_set(generation, lambda p: p.edges)
    return [_to_result(graph, partial) for partial in finished]
