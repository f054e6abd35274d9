"""Grading of a proposed minimum spanning tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mst_engine.engine.edges import is_spanning_tree, total_weight
from mst_engine.engine.kruskal import kruskal

if TYPE_CHECKING:
    from mst_engine.core.graph import Edge, Graph
    from mst_engine.engine.config import MSTConfig


@dataclass(frozen=True)
class TreeVerdict:
    """
    Assessment of a submitted edge selection.

    Attributes:
        is_spanning_tree: The edges belong to the graph, touch every node
            and contain no cycle
        weight: Total weight of the submitted edges
        minimal_weight: Weight of a minimum spanning tree of the graph
        foreign_edges: Submitted edges with no matching edge (same endpoints
            and weight) in the graph
    """

    is_spanning_tree: bool
    weight: float
    minimal_weight: float
    foreign_edges: tuple[Edge, ...] = ()

    @property
    def is_minimal(self) -> bool:
        return self.is_spanning_tree and self.weight == self.minimal_weight


def foreign_edges(graph: Graph, edges: Sequence[Edge]) -> tuple[Edge, ...]:
    """Submitted edges that do not join the same endpoints with the same weight in ``graph``."""
    known = {edge.key for edge in graph.all_edges()}
    return tuple(edge for edge in edges if edge.key not in known)


def check_spanning_tree(
    graph: Graph,
    edges: Sequence[Edge],
    config: MSTConfig | None = None,
) -> TreeVerdict:
    """
    Check whether ``edges`` form a minimum spanning tree of ``graph``.

    Edges are matched against the graph by endpoints (either orientation)
    and weight. A selection using any edge the graph does not have is never
    a spanning tree of it.

    Raises:
        MSTError: If the graph itself admits no spanning tree
    """
    minimal = kruskal(graph, config)
    unknown = foreign_edges(graph, edges)
    return TreeVerdict(
        is_spanning_tree=not unknown and is_spanning_tree(graph.num_nodes, edges),
        weight=total_weight(edges),
        minimal_weight=minimal.weight,
        foreign_edges=unknown,
    )
