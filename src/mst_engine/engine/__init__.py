"""Spanning tree algorithms: Union-Find, Kruskal, Prim enumeration."""

from mst_engine.engine.aggregate import get_all_mst, get_num_of_all_mst
from mst_engine.engine.config import MSTConfig
from mst_engine.engine.edges import (
    dedupe_by_edge_set,
    edge_set_key,
    is_same_edge,
    is_spanning_tree,
    total_weight,
)
from mst_engine.engine.kruskal import KruskalResult, check_spanning_tree_preconditions, kruskal
from mst_engine.engine.prim import PartialTree, PrimResult, compute_all_mst, prim
from mst_engine.engine.union_find import UnionFind, UnionFindStates, UnionFindStrategy
from mst_engine.engine.verify import TreeVerdict, check_spanning_tree

__all__ = [
    # Union-Find
    "UnionFind",
    "UnionFindStates",
    "UnionFindStrategy",
    # Kruskal
    "KruskalResult",
    "check_spanning_tree_preconditions",
    "kruskal",
    # Prim
    "PartialTree",
    "PrimResult",
    "compute_all_mst",
    "prim",
    "get_all_mst",
    "get_num_of_all_mst",
    # Edge utilities
    "dedupe_by_edge_set",
    "edge_set_key",
    "is_same_edge",
    "is_spanning_tree",
    "total_weight",
    # Grading
    "TreeVerdict",
    "check_spanning_tree",
    # Config
    "MSTConfig",
]
