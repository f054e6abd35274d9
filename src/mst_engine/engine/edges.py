"""Edge identity helpers shared by the Kruskal and Prim engines."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from mst_engine.core.graph import Edge, Graph
from mst_engine.engine.union_find import UnionFind, UnionFindStrategy

T = TypeVar("T")

EdgeSetKey = frozenset[tuple[int, int, float]]


def is_same_edge(a: Edge, b: Edge) -> bool:
    """Check if two edges join the same endpoints, ignoring direction."""
    return (a.source == b.source and a.target == b.target) or (
        a.source == b.target and a.target == b.source
    )


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum of edge weights, unweighted edges counting as 1."""
    return sum(edge.cost for edge in edges)


def edge_set_key(edges: Iterable[Edge]) -> EdgeSetKey:
    """Orientation- and order-free identity of a set of edges."""
    return frozenset(edge.key for edge in edges)


def unique_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Drop symmetric duplicates, keeping the first stored orientation."""
    seen: set[tuple[int, int, float]] = set()
    result: list[Edge] = []
    for edge in edges:
        if edge.key in seen:
            continue
        seen.add(edge.key)
        result.append(edge)
    return result


def undirected_adjacency(graph: Graph) -> list[list[Edge]]:
    """Per node, every incident edge oriented away from that node.

    Works for graphs that store each undirected edge once as well as for
    graphs that store both directions.
    """
    adjacency: list[list[Edge]] = [[] for _ in range(graph.num_nodes)]
    for edge in unique_edges(graph.all_edges()):
        adjacency[edge.source].append(edge)
        if edge.target != edge.source:
            adjacency[edge.target].append(edge.reversed())
    return adjacency


def dedupe_by_edge_set(items: Sequence[T], edges_of: Callable[[T], Iterable[Edge]]) -> list[T]:
    """Keep the first item per distinct (unordered, undirected) edge set."""
    seen: set[EdgeSetKey] = set()
    result: list[T] = []
    for item in items:
        key = edge_set_key(edges_of(item))
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def is_spanning_tree(num_nodes: int, edges: Sequence[Edge]) -> bool:
    """
    Check if the edges form a spanning tree over ``num_nodes`` nodes.

    Exactly ``num_nodes - 1`` edges, every node touched, no edge closing a
    cycle. A single node with no edges counts as a spanning tree.
    """
    if num_nodes == 1 and not edges:
        return True
    if len(edges) != num_nodes - 1:
        return False
    touched = {edge.source for edge in edges} | {edge.target for edge in edges}
    if len(touched) != num_nodes or any(not 0 <= i < num_nodes for i in touched):
        return False

    uf = UnionFind(num_nodes, UnionFindStrategy.QUICK_FIND)
    for edge in edges:
        if uf.connected(edge.source, edge.target):
            return False  # cycle
        uf.union(edge.source, edge.target)
    return True
