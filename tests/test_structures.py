import pytest

from junction_wiring.errors import InvalidInputError
from junction_wiring.structures import DisjointSet


def test_initial_forest_is_all_singletons():
    forest = DisjointSet(4)
    assert [forest.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert forest.root_sizes() == {0: 1, 1: 1, 2: 1, 3: 1}
    assert forest.cluster_count == 4


def test_union_reports_whether_it_merged():
    forest = DisjointSet(3)
    assert forest.union(0, 1) is True
    assert forest.union(1, 0) is False
    assert forest.cluster_count == 2


def test_equal_sizes_attach_second_root_under_first():
    forest = DisjointSet(2)
    forest.union(0, 1)
    assert forest.find(1) == 0
    assert forest.root_sizes() == {0: 2}


def test_smaller_cluster_joins_larger():
    forest = DisjointSet(4)
    forest.union(1, 2)
    forest.union(0, 1)
    assert forest.find(0) == 1
    assert forest.size_of(0) == 3


def test_find_compresses_paths():
    forest = DisjointSet(4)
    # chain 3 -> 2 -> 1 -> 0 built by hand so compression is observable
    forest.parent = [0, 0, 1, 2]
    assert forest.find(3) == 0
    assert forest.parent == [0, 0, 0, 0]


def test_find_is_idempotent():
    forest = DisjointSet(5)
    forest.union(0, 1)
    forest.union(2, 3)
    forest.union(1, 3)
    for index in range(5):
        assert forest.find(index) == forest.find(index)


def test_sizes_always_sum_to_universe():
    forest = DisjointSet(6)
    for left, right in [(0, 1), (2, 3), (1, 3), (0, 2), (4, 5)]:
        forest.union(left, right)
        assert sum(forest.root_sizes().values()) == 6
        assert len(forest.root_sizes()) == forest.cluster_count


def test_clusters_follow_unioned_chains():
    forest = DisjointSet(5)
    forest.union(0, 2)
    forest.union(2, 4)
    assert sorted(sorted(members) for members in forest.clusters().values()) == [[0, 2, 4], [1], [3]]
    assert forest.connected(0, 4)
    assert not forest.connected(0, 1)


def test_out_of_range_index_is_rejected():
    forest = DisjointSet(2)
    with pytest.raises(InvalidInputError):
        forest.find(2)
    with pytest.raises(InvalidInputError):
        forest.union(-1, 0)


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_cluster_count_drops_by_one_per_successful_union():
    forest = DisjointSet(5)
    for left, right in [(0, 1), (1, 0), (2, 3), (0, 3), (1, 2), (4, 0)]:
        before = forest.cluster_count
        merged = forest.union(left, right)
        assert forest.cluster_count == before - (1 if merged else 0)
    assert forest.cluster_count == 1
