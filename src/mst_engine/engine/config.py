"""Configuration for spanning tree computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mst_engine.engine.union_find import UnionFindStrategy


@dataclass(frozen=True)
class MSTConfig:
    """Configuration shared by Kruskal, Prim enumeration and aggregation.

    Attributes:
        union_find_strategy: Union-Find variant used by Kruskal. Any variant
            yields the same MST; they differ only in cost per operation.
        max_nodes: Optional upper bound on graph size. Prim enumeration grows
            with the number of distinct MSTs, so callers feeding it generated
            graphs usually cap this around 16. None disables the check.
    """

    union_find_strategy: UnionFindStrategy = UnionFindStrategy.WEIGHTED
    max_nodes: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.union_find_strategy, UnionFindStrategy):
            raise ValueError(
                f"union_find_strategy must be one of {[s.value for s in UnionFindStrategy]}, "
                f"got {self.union_find_strategy!r}"
            )
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1, got {self.max_nodes}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "union_find_strategy": self.union_find_strategy.value,
            "max_nodes": self.max_nodes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MSTConfig:
        try:
            max_nodes = data.get("max_nodes")
            return cls(
                union_find_strategy=UnionFindStrategy(
                    data.get("union_find_strategy", UnionFindStrategy.WEIGHTED.value)
                ),
                max_nodes=None if max_nodes is None else int(max_nodes),
            )
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults
