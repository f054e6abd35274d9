"""Kruskal's algorithm with rejected-edge reporting.

Edges are taken in ascending weight order; ties keep their stored order
(the sort is stable), which makes the result deterministic. An edge whose
endpoints already share a Union-Find root would close a cycle and is
recorded as rejected instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mst_engine.core.graph import Edge, Graph
from mst_engine.engine.config import MSTConfig
from mst_engine.engine.edges import total_weight, unique_edges
from mst_engine.engine.union_find import UnionFind
from mst_engine.errors import (
    DirectedGraphError,
    DisconnectedGraphError,
    EmptyGraphError,
    GraphTooLargeError,
    NoEdgesError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KruskalResult:
    """Outcome of a Kruskal run.

    Attributes:
        mst: Selected edges in selection order (``num_nodes - 1`` of them)
        cycle: Edges discarded because they would close a cycle, in the
            order Kruskal considered them
    """

    mst: tuple[Edge, ...]
    cycle: tuple[Edge, ...]

    @property
    def weight(self) -> float:
        return total_weight(self.mst)


def check_spanning_tree_preconditions(graph: Graph, config: MSTConfig | None = None) -> None:
    """Reject graphs no spanning tree operation can run on.

    Raises:
        EmptyGraphError: If the graph has no nodes
        NoEdgesError: If the graph has no edges
        DirectedGraphError: If the graph is directed
        GraphTooLargeError: If the graph exceeds ``config.max_nodes``
    """
    if graph.num_nodes == 0:
        raise EmptyGraphError("The graph has no nodes")
    if graph.num_edges == 0:
        raise NoEdgesError("The graph has no edges")
    if graph.directed:
        raise DirectedGraphError("Spanning trees are only defined for undirected graphs")
    if config is not None and config.max_nodes is not None and graph.num_nodes > config.max_nodes:
        raise GraphTooLargeError(
            f"The graph has {graph.num_nodes} nodes, limit is {config.max_nodes}"
        )


def kruskal(graph: Graph, config: MSTConfig | None = None) -> KruskalResult:
    """
    Compute one minimum spanning tree with Kruskal's algorithm.

    Args:
        graph: Connected, undirected graph (weights may be negative)
        config: Engine configuration (uses defaults if None)

    Returns:
        KruskalResult with the MST edges and the rejected cycle edges

    Raises:
        DisconnectedGraphError: If the edges run out before the tree is complete
    """
    if config is None:
        config = MSTConfig()
    check_spanning_tree_preconditions(graph, config)

    stored = graph.all_edges()
    edges = sorted(unique_edges(stored), key=lambda edge: edge.cost)
    logger.debug("Kruskal: %d stored edges, %d after symmetric dedup", len(stored), len(edges))

    target = graph.num_nodes - 1
    uf = UnionFind(graph.num_nodes, config.union_find_strategy)
    mst: list[Edge] = []
    cycle: list[Edge] = []

    for edge in edges:
        if len(mst) == target:
            break
        root_source, root_target = uf.find(edge.source), uf.find(edge.target)
        if root_source == root_target:
            cycle.append(edge)
            continue
        mst.append(edge)
        uf.union(root_source, root_target)

    if len(mst) < target:
        raise DisconnectedGraphError(
            "The algorithm was not able to compute a spanning tree. "
            "The graph might not be connected."
        )

    logger.debug("Kruskal: %d tree edges, %d rejected", len(mst), len(cycle))
    return KruskalResult(mst=tuple(mst), cycle=tuple(cycle))
