"""Distinct MSTs over all start vertices.

Runs the Prim enumeration from every node and merges results by edge set.
The count this produces is treated as the number of distinct minimum
spanning trees of the graph; it has been checked on small graphs
(K4 with equal weights gives 16) rather than proven in general.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mst_engine.engine.edges import dedupe_by_edge_set
from mst_engine.engine.kruskal import check_spanning_tree_preconditions
from mst_engine.engine.prim import PrimResult, compute_all_mst

if TYPE_CHECKING:
    from mst_engine.core.graph import Graph
    from mst_engine.engine.config import MSTConfig

logger = logging.getLogger(__name__)


def get_all_mst(graph: Graph, config: MSTConfig | None = None) -> list[PrimResult]:
    """Every distinct Prim-reachable MST, over all start vertices."""
    check_spanning_tree_preconditions(graph, config)

    combined: list[PrimResult] = []
    for node in graph.nodes:
        results = compute_all_mst(graph, node, config)
        logger.debug("Start %s: %d distinct MSTs", node.label, len(results))
        combined.extend(results)

    unique = dedupe_by_edge_set(combined, lambda r: r.mst)
    logger.debug("All starts: %d results, %d distinct MSTs", len(combined), len(unique))
    return unique


def get_num_of_all_mst(graph: Graph, config: MSTConfig | None = None) -> int:
    return len(get_all_mst(graph, config))
