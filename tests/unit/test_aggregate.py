"""Unit tests for distinct-MST aggregation over all start vertices."""

from __future__ import annotations

import pytest

from mst_engine.core.graph import Graph
from mst_engine.engine.aggregate import get_all_mst, get_num_of_all_mst
from mst_engine.engine.config import MSTConfig
from mst_engine.engine.edges import edge_set_key, is_spanning_tree
from mst_engine.engine.kruskal import kruskal
from mst_engine.errors import DisconnectedGraphError, GraphTooLargeError


class TestGetAllMST:
    """Tests for get_all_mst and get_num_of_all_mst."""

    def test_k4_has_sixteen(self, k4: Graph, k4_single: Graph) -> None:
        assert len(get_all_mst(k4)) == 16
        assert get_num_of_all_mst(k4) == 16
        assert get_num_of_all_mst(k4_single) == 16

    def test_textbook_graphs_have_one_tie_each(self, graph1: Graph, graph2: Graph) -> None:
        assert get_num_of_all_mst(graph1) == 2
        assert get_num_of_all_mst(graph2) == 2

    def test_unique_mst(self) -> None:
        triangle = Graph.from_edge_list("ABC", [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
        results = get_all_mst(triangle)
        assert len(results) == 1
        assert results[0].weight == 3

    def test_results_distinct_and_minimal(self, any_graph: Graph) -> None:
        results = get_all_mst(any_graph)
        weight = kruskal(any_graph).weight
        keys = {edge_set_key(r.mst) for r in results}
        assert len(keys) == len(results)
        for result in results:
            assert result.weight == weight
            assert is_spanning_tree(any_graph.num_nodes, result.mst)

    def test_disconnected(self, k4: Graph) -> None:
        isolated_a = k4.without_edges([("A", "B"), ("A", "C"), ("A", "D")])
        with pytest.raises(DisconnectedGraphError):
            get_all_mst(isolated_a)

    def test_max_nodes(self, k4: Graph) -> None:
        with pytest.raises(GraphTooLargeError):
            get_num_of_all_mst(k4, MSTConfig(max_nodes=3))
