"""Union-Find (disjoint set) family used by Kruskal and the union exercises.

One state representation (parent array plus an optional size array) is
shared by four strategies. The strategy only selects which ``find`` and
``union`` functions operate on that state:

- QUICK_FIND: ``find`` is a direct lookup, ``union`` relabels every member
- QUICK_UNION: ``find`` walks parent pointers, ``union`` links root to root
- WEIGHTED: as QUICK_UNION, but the smaller tree goes under the larger one
- WEIGHTED_PATH_COMPRESSION: as WEIGHTED, and ``find`` points every visited
  node straight at the root
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import StrEnum

from mst_engine.errors import IndexOutOfRangeError


class UnionFindStrategy(StrEnum):
    """Interchangeable Union-Find implementations."""

    QUICK_FIND = "quick-find"
    QUICK_UNION = "quick-union"
    WEIGHTED = "weighted"
    WEIGHTED_PATH_COMPRESSION = "weighted-path-compression"

    @property
    def is_weighted(self) -> bool:
        return self in (UnionFindStrategy.WEIGHTED, UnionFindStrategy.WEIGHTED_PATH_COMPRESSION)


def _lookup_find(parent: list[int], i: int) -> int:
    return parent[i]


def _walk_find(parent: list[int], i: int) -> int:
    while parent[i] != i:
        i = parent[i]
    return i


def _compressing_find(parent: list[int], i: int) -> int:
    root = _walk_find(parent, i)
    while parent[i] != root:
        parent[i], i = root, parent[i]
    return root


def _relabel_union(parent: list[int], size: list[int] | None, i: int, j: int) -> None:
    pid, qid = parent[i], parent[j]
    if pid == qid:
        return
    for k, value in enumerate(parent):
        if value == pid:
            parent[k] = qid


def _link_union(parent: list[int], size: list[int] | None, i: int, j: int) -> None:
    ri, rj = _walk_find(parent, i), _walk_find(parent, j)
    if ri != rj:
        parent[ri] = rj


def _weighted_link(parent: list[int], size: list[int], ri: int, rj: int) -> None:
    if ri == rj:
        return
    # Equal sizes attach j's root under i's root
    if size[ri] < size[rj]:
        parent[ri] = rj
        size[rj] += size[ri]
    else:
        parent[rj] = ri
        size[ri] += size[rj]


def _weighted_union(parent: list[int], size: list[int] | None, i: int, j: int) -> None:
    if size is None:
        raise ValueError("Weighted union needs a size array")
    _weighted_link(parent, size, _walk_find(parent, i), _walk_find(parent, j))


def _compressing_weighted_union(
    parent: list[int], size: list[int] | None, i: int, j: int
) -> None:
    if size is None:
        raise ValueError("Weighted union needs a size array")
    _weighted_link(parent, size, _compressing_find(parent, i), _compressing_find(parent, j))


FindFn = Callable[[list[int], int], int]
UnionFn = Callable[[list[int], list[int] | None, int, int], None]

_FIND: dict[UnionFindStrategy, FindFn] = {
    UnionFindStrategy.QUICK_FIND: _lookup_find,
    UnionFindStrategy.QUICK_UNION: _walk_find,
    UnionFindStrategy.WEIGHTED: _walk_find,
    UnionFindStrategy.WEIGHTED_PATH_COMPRESSION: _compressing_find,
}

_UNION: dict[UnionFindStrategy, UnionFn] = {
    UnionFindStrategy.QUICK_FIND: _relabel_union,
    UnionFindStrategy.QUICK_UNION: _link_union,
    UnionFindStrategy.WEIGHTED: _weighted_union,
    UnionFindStrategy.WEIGHTED_PATH_COMPRESSION: _compressing_weighted_union,
}


def _sizes_from_parents(parent: Sequence[int]) -> list[int]:
    """Tree sizes per node, computed without touching the parent array."""
    size = [1] * len(parent)
    for i in range(len(parent)):
        node = i
        while parent[node] != node:
            node = parent[node]
            size[node] += 1
    return size


class UnionFind:
    """Union-Find over the indices ``[0, n)`` with a selectable strategy.

    A fresh instance holds ``n`` singleton sets. The instance exclusively
    owns its state; ``parents``, ``snapshot`` and ``sizes`` return copies.
    """

    __slots__ = ("_strategy", "_parent", "_size")

    def __init__(
        self,
        n: int,
        strategy: UnionFindStrategy | str = UnionFindStrategy.WEIGHTED_PATH_COMPRESSION,
    ) -> None:
        if n < 0:
            raise ValueError(f"Union size must be >= 0, got {n}")
        self._strategy = UnionFindStrategy(strategy)
        self._parent = list(range(n))
        self._size: list[int] | None = [1] * n if self._strategy.is_weighted else None

    @property
    def strategy(self) -> UnionFindStrategy:
        return self._strategy

    def __len__(self) -> int:
        return len(self._parent)

    def _check_range(self, *indices: int) -> None:
        for i in indices:
            if not 0 <= i < len(self._parent):
                raise IndexOutOfRangeError(i, len(self._parent))

    def find(self, i: int) -> int:
        """Return the representative of the set containing ``i``."""
        self._check_range(i)
        return _FIND[self._strategy](self._parent, i)

    def union(self, i: int, j: int) -> None:
        """Merge the sets containing ``i`` and ``j`` (no-op if already joined)."""
        self._check_range(i, j)
        _UNION[self._strategy](self._parent, self._size, i, j)

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def parents(self) -> list[int]:
        """Copy of the raw parent (id) array."""
        return list(self._parent)

    def snapshot(self) -> list[int]:
        """Representative of every index, read without compressing paths."""
        if self._strategy is UnionFindStrategy.QUICK_FIND:
            return list(self._parent)
        return [_walk_find(self._parent, i) for i in range(len(self._parent))]

    def sizes(self) -> list[int] | None:
        """Copy of the size array, or None for unweighted strategies."""
        return None if self._size is None else list(self._size)

    def groups(self) -> dict[int, list[int]]:
        """Return all groups as root -> member indices."""
        result: dict[int, list[int]] = {}
        for i, root in enumerate(self.snapshot()):
            result.setdefault(root, []).append(i)
        return result

    def set_state(self, parents: Sequence[int]) -> None:
        """Replace the current state with an artificially built parent array.

        Raises:
            ValueError: If the array has the wrong length, holds values outside
                ``[0, n)``, contains a cycle, or (for QUICK_FIND) points at a
                non-representative
        """
        n = len(self._parent)
        if len(parents) != n:
            raise ValueError(f"State must have length {n}, got {len(parents)}")
        if any(not 0 <= p < n for p in parents):
            raise ValueError(f"State values must lie within [0, {n - 1}]")
        if self._strategy is UnionFindStrategy.QUICK_FIND:
            if any(parents[p] != p for p in parents):
                raise ValueError("Quick-find states must map every index to a representative")
        else:
            for i in range(n):
                node, steps = i, 0
                while parents[node] != node:
                    node = parents[node]
                    steps += 1
                    if steps > n:
                        raise ValueError(f"State contains a cycle through index {i}")
        self._parent = list(parents)
        if self._size is not None:
            self._size = _sizes_from_parents(self._parent)

    def copy(self) -> UnionFind:
        clone = UnionFind(0, self._strategy)
        clone._parent = list(self._parent)
        clone._size = None if self._size is None else list(self._size)
        return clone

    def __repr__(self) -> str:
        return f"UnionFind({self._strategy.value}, {self._parent})"


class UnionFindStates:
    """Every Union-Find state reachable when union direction is left open.

    ``union(i, j, either_direction=True)`` keeps both outcomes,
    ``union(i, j)`` and ``union(j, i)``, so an exercise can accept any of
    them. States with identical parent arrays are merged after every union.
    """

    __slots__ = ("_states",)

    def __init__(
        self,
        n: int,
        strategy: UnionFindStrategy | str = UnionFindStrategy.QUICK_FIND,
    ) -> None:
        self._states: list[UnionFind] = [UnionFind(n, strategy)]

    def __len__(self) -> int:
        return len(self._states)

    def find(self, i: int) -> list[int]:
        """``find(i)`` evaluated on every tracked state."""
        return [state.find(i) for state in self._states]

    def union(self, i: int, j: int, either_direction: bool = False) -> None:
        forks: list[UnionFind] = []
        for state in self._states:
            if either_direction:
                fork = state.copy()
                fork.union(j, i)
                forks.append(fork)
            state.union(i, j)
        self._states.extend(forks)
        self._merge_duplicates()

    def states(self) -> list[list[int]]:
        """Parent arrays of all tracked states."""
        return [state.parents() for state in self._states]

    def _merge_duplicates(self) -> None:
        seen: set[tuple[int, ...]] = set()
        unique: list[UnionFind] = []
        for state in self._states:
            key = tuple(state.parents())
            if key in seen:
                continue
            seen.add(key)
            unique.append(state)
        self._states = unique
