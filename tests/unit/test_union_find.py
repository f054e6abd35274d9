"""Unit tests for the Union-Find family."""

from __future__ import annotations

import random

import pytest

from mst_engine.engine.union_find import (
    UnionFind,
    UnionFindStates,
    UnionFindStrategy,
    _compressing_weighted_union,
    _weighted_union,
)
from mst_engine.errors import IndexOutOfRangeError, MSTError

ALL_STRATEGIES = list(UnionFindStrategy)


def _reference_components(n: int, unions: list[tuple[int, int]]) -> list[int]:
    """Component label per index, computed by plain relabelling."""
    label = list(range(n))
    for i, j in unions:
        old, new = label[i], label[j]
        label = [new if x == old else x for x in label]
    return label


class TestSharedContract:
    """Behavior every strategy must share."""

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_fresh_instance_is_singletons(self, strategy: UnionFindStrategy) -> None:
        uf = UnionFind(5, strategy)
        assert [uf.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
        assert uf.snapshot() == [0, 1, 2, 3, 4]
        assert len(uf) == 5

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    @pytest.mark.parametrize("seed", [1, 7, 42, 2024])
    def test_find_matches_connectivity(self, strategy: UnionFindStrategy, seed: int) -> None:
        """find(i) == find(j) exactly when i and j were joined by unions."""
        rng = random.Random(seed)
        n = 12
        unions = [(rng.randrange(n), rng.randrange(n)) for _ in range(9)]
        uf = UnionFind(n, strategy)
        for i, j in unions:
            uf.union(i, j)

        expected = _reference_components(n, unions)
        for i in range(n):
            for j in range(n):
                assert (uf.find(i) == uf.find(j)) == (expected[i] == expected[j])

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_find_is_idempotent(self, strategy: UnionFindStrategy) -> None:
        uf = UnionFind(6, strategy)
        for i, j in [(0, 1), (2, 3), (1, 3), (4, 5)]:
            uf.union(i, j)
        first = [uf.find(i) for i in range(6)]
        second = [uf.find(i) for i in range(6)]
        assert first == second
        assert uf.snapshot() == first

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_union_of_joined_sets_is_noop(self, strategy: UnionFindStrategy) -> None:
        uf = UnionFind(4, strategy)
        uf.union(0, 1)
        before = uf.parents()
        uf.union(1, 0)
        uf.union(0, 1)
        assert uf.parents() == before

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_fails_loudly(self, strategy: UnionFindStrategy, index: int) -> None:
        uf = UnionFind(3, strategy)
        with pytest.raises(IndexOutOfRangeError):
            uf.find(index)
        with pytest.raises(IndexOutOfRangeError):
            uf.union(0, index)
        with pytest.raises(IndexError):
            uf.union(index, 0)

    def test_out_of_range_is_mst_error(self) -> None:
        with pytest.raises(MSTError, match=r"\[0, 2\)"):
            UnionFind(2).find(2)

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            UnionFind(-1)

    def test_strategy_accepts_value_string(self) -> None:
        assert UnionFind(2, "quick-union").strategy is UnionFindStrategy.QUICK_UNION

    def test_groups(self) -> None:
        uf = UnionFind(4, UnionFindStrategy.QUICK_FIND)
        uf.union(0, 1)
        assert uf.groups() == {1: [0, 1], 2: [2], 3: [3]}


class TestQuickFind:
    """Quick-find relabels every member of the first set."""

    def test_union_relabels_all_members(self) -> None:
        uf = UnionFind(5, UnionFindStrategy.QUICK_FIND)
        uf.union(0, 1)
        assert uf.parents() == [1, 1, 2, 3, 4]
        uf.union(1, 2)
        assert uf.parents() == [2, 2, 2, 3, 4]

    def test_has_no_sizes(self) -> None:
        assert UnionFind(3, UnionFindStrategy.QUICK_FIND).sizes() is None


class TestQuickUnion:
    """Quick-union links the first root below the second."""

    def test_union_links_roots(self) -> None:
        uf = UnionFind(5, UnionFindStrategy.QUICK_UNION)
        uf.union(0, 1)
        uf.union(1, 2)
        assert uf.parents() == [1, 2, 2, 3, 4]
        assert uf.find(0) == 2
        assert uf.snapshot() == [2, 2, 2, 3, 4]

    def test_chain_degenerates(self) -> None:
        n = 6
        uf = UnionFind(n, UnionFindStrategy.QUICK_UNION)
        for i in range(n - 1):
            uf.union(i, i + 1)
        assert uf.parents() == [1, 2, 3, 4, 5, 5]


class TestWeighted:
    """Union by size keeps trees shallow."""

    def test_smaller_tree_goes_below(self) -> None:
        uf = UnionFind(5, UnionFindStrategy.WEIGHTED)
        uf.union(0, 1)
        assert uf.parents() == [0, 0, 2, 3, 4]
        uf.union(2, 0)
        assert uf.parents() == [0, 0, 0, 3, 4]
        assert uf.sizes() == [3, 1, 1, 1, 1]

    def test_chain_stays_flat(self) -> None:
        n = 6
        uf = UnionFind(n, UnionFindStrategy.WEIGHTED)
        for i in range(n - 1):
            uf.union(i, i + 1)
        assert uf.parents() == [0] * n

    def test_find_does_not_compress(self) -> None:
        uf = UnionFind(4, UnionFindStrategy.WEIGHTED)
        uf.set_state([1, 2, 3, 3])
        assert uf.find(0) == 3
        assert uf.parents() == [1, 2, 3, 3]

    @pytest.mark.parametrize("union", [_weighted_union, _compressing_weighted_union])
    def test_missing_size_array_raises(self, union) -> None:
        with pytest.raises(ValueError, match="size array"):
            union([0, 1], None, 0, 1)


class TestPathCompression:
    """find rewrites every visited node to point at the root."""

    def test_find_flattens_path(self) -> None:
        uf = UnionFind(4, UnionFindStrategy.WEIGHTED_PATH_COMPRESSION)
        uf.set_state([1, 2, 3, 3])
        assert uf.find(0) == 3
        assert uf.parents() == [3, 3, 3, 3]

    def test_snapshot_does_not_compress(self) -> None:
        uf = UnionFind(4, UnionFindStrategy.WEIGHTED_PATH_COMPRESSION)
        uf.set_state([1, 2, 3, 3])
        assert uf.snapshot() == [3, 3, 3, 3]
        assert uf.parents() == [1, 2, 3, 3]


class TestSetState:
    """Seeding an artificial state."""

    def test_sizes_recomputed(self) -> None:
        uf = UnionFind(4, UnionFindStrategy.WEIGHTED)
        uf.set_state([1, 2, 3, 3])
        assert uf.sizes() == [1, 2, 3, 4]

    @pytest.mark.parametrize("state", [[0, 1], [0, 1, 2, 3, 4], [0, 5, 2, 3], [-1, 1, 2, 3]])
    def test_invalid_shape_rejected(self, state: list[int]) -> None:
        with pytest.raises(ValueError):
            UnionFind(4, UnionFindStrategy.QUICK_UNION).set_state(state)

    def test_cycle_rejected(self) -> None:
        with pytest.raises(ValueError, match="cycle"):
            UnionFind(3, UnionFindStrategy.QUICK_UNION).set_state([1, 0, 2])

    def test_quick_find_needs_representatives(self) -> None:
        with pytest.raises(ValueError):
            UnionFind(3, UnionFindStrategy.QUICK_FIND).set_state([1, 2, 2])


class TestUnionFindStates:
    """Tracking both outcomes of direction-agnostic unions."""

    def test_either_direction_forks(self) -> None:
        states = UnionFindStates(4, UnionFindStrategy.QUICK_FIND)
        states.union(0, 1, either_direction=True)
        assert len(states) == 2
        states.union(2, 3)
        assert states.states() == [[1, 1, 3, 3], [0, 0, 3, 3]]
        assert states.find(0) == [1, 0]

    def test_identical_states_merged(self) -> None:
        states = UnionFindStates(3, UnionFindStrategy.QUICK_FIND)
        states.union(0, 1, either_direction=True)
        states.union(0, 1, either_direction=True)
        assert len(states) == 2

    def test_single_direction_keeps_one_state(self) -> None:
        states = UnionFindStates(3, UnionFindStrategy.WEIGHTED)
        states.union(0, 1)
        states.union(1, 2)
        assert states.states() == [[0, 0, 0]]

    def test_out_of_range(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            UnionFindStates(2).union(0, 2)
