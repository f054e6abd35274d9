"""mst_engine - minimum spanning tree computation and enumeration."""

from mst_engine.core import Edge, Graph, Node
from mst_engine.engine import (
    KruskalResult,
    MSTConfig,
    PrimResult,
    TreeVerdict,
    UnionFind,
    UnionFindStates,
    UnionFindStrategy,
    check_spanning_tree,
    compute_all_mst,
    get_all_mst,
    get_num_of_all_mst,
    is_spanning_tree,
    kruskal,
    prim,
)
from mst_engine.errors import (
    DirectedGraphError,
    DisconnectedGraphError,
    EmptyGraphError,
    GraphTooLargeError,
    IndexOutOfRangeError,
    MSTError,
    NoEdgesError,
    UnknownStartNodeError,
)

__version__ = "0.1.0"

__all__ = [
    # Graph
    "Edge",
    "Graph",
    "Node",
    # Algorithms
    "kruskal",
    "prim",
    "compute_all_mst",
    "get_all_mst",
    "get_num_of_all_mst",
    "check_spanning_tree",
    "is_spanning_tree",
    # Results
    "KruskalResult",
    "PrimResult",
    "TreeVerdict",
    # Union-Find
    "UnionFind",
    "UnionFindStates",
    "UnionFindStrategy",
    # Config
    "MSTConfig",
    # Errors
    "MSTError",
    "EmptyGraphError",
    "NoEdgesError",
    "DirectedGraphError",
    "DisconnectedGraphError",
    "UnknownStartNodeError",
    "GraphTooLargeError",
    "IndexOutOfRangeError",
]
