"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from mst_engine.core.graph import Graph

# Exercise 1 of the Frankfurt Algo1 self test 11 (SS20), weights as given there
TEXTBOOK_GRAPH_1 = (
    "ABCDEFGHI",
    [
        (3, 5, 12),
        (5, 8, 9),
        (3, 7, 13),
        (5, 2, 12),
        (8, 1, 9),
        (7, 2, 8),
        (2, 1, 10),
        (7, 0, 8),
        (2, 6, 13),
        (2, 4, -1),
        (1, 4, 13),
        (0, 6, -1),
        (6, 4, -3),
    ],
)

# Exercise 2 of the same self test
TEXTBOOK_GRAPH_2 = (
    "ABCDEFGHIJ",
    [
        (7, 6, 8),
        (9, 0, 15),
        (7, 1, 1),
        (6, 1, 13),
        (6, 2, 10),
        (9, 2, 4),
        (9, 3, 6),
        (0, 3, 5),
        (1, 2, 9),
        (2, 3, -1),
        (1, 8, 0),
        (2, 8, 5),
        (2, 4, 14),
        (3, 4, 10),
        (8, 4, 15),
        (8, 5, 7),
        (4, 5, 10),
    ],
)

K4_EQUAL = (
    "ABCD",
    [(0, 1, 1), (0, 2, 1), (0, 3, 1), (1, 2, 1), (1, 3, 1), (2, 3, 1)],
)


@pytest.fixture
def graph1() -> Graph:
    """9-node textbook graph, MST weight 43."""
    return Graph.from_edge_list(*TEXTBOOK_GRAPH_1)


@pytest.fixture
def graph2() -> Graph:
    """10-node textbook graph, MST weight 39."""
    return Graph.from_edge_list(*TEXTBOOK_GRAPH_2)


@pytest.fixture
def k4() -> Graph:
    """Complete graph on four nodes, all weights 1 (16 spanning trees)."""
    return Graph.from_edge_list(*K4_EQUAL)


@pytest.fixture
def k4_single() -> Graph:
    """K4 storing each undirected edge once instead of in both directions."""
    return Graph.from_edge_list(*K4_EQUAL, symmetric=False)


@pytest.fixture(params=["graph1", "graph2", "k4", "k4_single"])
def any_graph(request: pytest.FixtureRequest) -> Graph:
    return request.getfixturevalue(request.param)
