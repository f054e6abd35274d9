"""Graph data structures consumed by the spanning tree engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from mst_engine.errors import UnknownStartNodeError


@dataclass(frozen=True, eq=False)
class Node:
    """
    A vertex of a graph.

    Nodes compare and hash by their index only; the label is for display.

    Attributes:
        label: Human-readable name, e.g. "A"
        index: Position in the owning graph's node sequence
    """

    label: str
    index: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)


@dataclass(frozen=True)
class Edge:
    """
    A weighted connection between two node indices.

    The stored orientation only matters for directed graphs. For spanning
    tree purposes (a, b, w) and (b, a, w) are the same edge, see ``key``.

    Attributes:
        source: Index of the source node
        target: Index of the target node
        weight: Edge weight, None meaning unit weight
    """

    source: int
    target: int
    weight: float | None = None

    @property
    def cost(self) -> float:
        """Weight used by the algorithms (1 when unweighted)."""
        return 1 if self.weight is None else self.weight

    @property
    def key(self) -> tuple[int, int, float]:
        """Orientation-free identity of this edge."""
        return (min(self.source, self.target), max(self.source, self.target), self.cost)

    def reversed(self) -> Edge:
        return Edge(source=self.target, target=self.source, weight=self.weight)

    def touches(self, index: int) -> bool:
        return index in (self.source, self.target)

    def other(self, index: int) -> int:
        """Return the endpoint opposite to ``index``."""
        if index == self.source:
            return self.target
        if index == self.target:
            return self.source
        raise ValueError(f"Node {index} is not an endpoint of {self}")


class Graph:
    """
    An immutable graph with per-node outgoing edge lists.

    Undirected graphs may store each edge once or in both directions;
    the engine treats both layouts the same.
    """

    __slots__ = ("_nodes", "_adjacency", "_directed")

    def __init__(
        self,
        nodes: Iterable[Node | str],
        edges: Iterable[Edge] = (),
        directed: bool = False,
    ) -> None:
        """
        Build a graph.

        Args:
            nodes: Labels or nodes, in index order
            edges: Edges referencing node indices
            directed: Whether edges are one-way

        Raises:
            ValueError: If an edge references an index outside the graph
        """
        self._nodes: tuple[Node, ...] = tuple(
            Node(label=item.label if isinstance(item, Node) else str(item), index=i)
            for i, item in enumerate(nodes)
        )
        adjacency: list[list[Edge]] = [[] for _ in self._nodes]
        for edge in edges:
            for endpoint in (edge.source, edge.target):
                if not 0 <= endpoint < len(self._nodes):
                    raise ValueError(
                        f"Edge {edge} references node {endpoint}, "
                        f"graph has {len(self._nodes)} nodes"
                    )
            adjacency[edge.source].append(edge)
        self._adjacency: tuple[tuple[Edge, ...], ...] = tuple(tuple(a) for a in adjacency)
        self._directed = directed

    @classmethod
    def from_edge_list(
        cls,
        labels: Iterable[str],
        edges: Iterable[Sequence[Any]],
        directed: bool = False,
        symmetric: bool = True,
    ) -> Graph:
        """
        Build a graph from ``(source, target[, weight])`` index tuples.

        Args:
            labels: Node labels; a string such as "ABCD" gives one node per character
            edges: Tuples of source index, target index and optional weight
            directed: Whether the graph is directed
            symmetric: For undirected graphs, also store the reverse of each edge

        Returns:
            A new Graph
        """
        stored: list[Edge] = []
        for item in edges:
            source, target = int(item[0]), int(item[1])
            weight = item[2] if len(item) > 2 else None
            stored.append(Edge(source=source, target=target, weight=weight))
            if symmetric and not directed and source != target:
                stored.append(Edge(source=target, target=source, weight=weight))
        return cls(list(labels), stored, directed=directed)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Graph:
        """
        Build an undirected-by-default graph from its JSON shape.

        ``{"nodes": [...], "edges": [[a, b, w?], ...], "directed": bool}``
        where endpoints are node labels or indices.
        """
        labels = [str(label) for label in data.get("nodes", [])]
        lookup = {label: i for i, label in reversed(list(enumerate(labels)))}

        def resolve(ref: Any) -> int:
            if isinstance(ref, int) and not isinstance(ref, bool):
                return ref
            if str(ref) in lookup:
                return lookup[str(ref)]
            raise ValueError(f"Unknown node in edge list: {ref!r}")

        triples = []
        for item in data.get("edges", []):
            if len(item) < 2:
                raise ValueError(f"Edge needs at least two endpoints: {item!r}")
            weight = item[2] if len(item) > 2 else None
            if weight is not None and (
                isinstance(weight, bool) or not isinstance(weight, (int, float))
            ):
                raise ValueError(f"Edge weight must be a number, got {weight!r} in {item!r}")
            triples.append((resolve(item[0]), resolve(item[1]), weight))
        directed = bool(data.get("directed", False))
        return cls.from_edge_list(labels, triples, directed=directed, symmetric=not directed)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape read by ``from_dict``."""
        edges: list[list[Any]] = []
        seen: set[tuple[int, int, float]] = set()
        for edge in self.all_edges():
            if not self._directed:
                if edge.key in seen:
                    continue
                seen.add(edge.key)
            row: list[Any] = [self._nodes[edge.source].label, self._nodes[edge.target].label]
            if edge.weight is not None:
                row.append(edge.weight)
            edges.append(row)
        return {
            "nodes": [node.label for node in self._nodes],
            "edges": edges,
            "directed": self._directed,
        }

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        """Number of stored edge records (symmetric pairs count twice)."""
        return sum(len(edges) for edges in self._adjacency)

    @property
    def directed(self) -> bool:
        return self._directed

    def edges_of(self, index: int) -> tuple[Edge, ...]:
        """Outgoing edges stored for the node at ``index``."""
        return self._adjacency[index]

    def all_edges(self) -> list[Edge]:
        """Every stored edge, grouped by source node in index order."""
        return [edge for edges in self._adjacency for edge in edges]

    def contains(self, node: Node) -> bool:
        return 0 <= node.index < len(self._nodes) and self._nodes[node.index].label == node.label

    def node(self, ref: Node | str | int) -> Node:
        """
        Resolve a node, label or index to this graph's Node.

        Raises:
            UnknownStartNodeError: If the reference does not name a node of this graph
        """
        if isinstance(ref, Node):
            if self.contains(ref):
                return self._nodes[ref.index]
        elif isinstance(ref, int) and not isinstance(ref, bool):
            if 0 <= ref < len(self._nodes):
                return self._nodes[ref]
        else:
            for node in self._nodes:
                if node.label == ref:
                    return node
        raise UnknownStartNodeError(f"Node {ref!r} is not part of the graph")

    def edge_between(self, a: Node | str | int, b: Node | str | int) -> Edge | None:
        """First stored edge joining two nodes, in either direction."""
        i, j = self.node(a).index, self.node(b).index
        for edge in self._adjacency[i]:
            if edge.target == j:
                return edge
        for edge in self._adjacency[j]:
            if edge.target == i:
                return edge
        return None

    def without_edges(self, pairs: Iterable[tuple[Node | str | int, Node | str | int]]) -> Graph:
        """Return a copy with every edge between the given node pairs removed."""
        removed = {frozenset((self.node(a).index, self.node(b).index)) for a, b in pairs}
        kept = [
            edge
            for edge in self.all_edges()
            if frozenset((edge.source, edge.target)) not in removed
        ]
        return Graph(self._nodes, kept, directed=self._directed)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({self.num_nodes} nodes, {self.num_edges} edges, {kind})"
