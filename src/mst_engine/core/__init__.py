"""Core data models for mst_engine."""

from mst_engine.core.graph import Edge, Graph, Node

__all__ = [
    "Edge",
    "Graph",
    "Node",
]
