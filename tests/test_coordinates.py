import numpy as np
import pytest

from junction_wiring.coordinates import CoordinateStore
from junction_wiring.errors import InvalidInputError


def test_distance_squared_is_exact():
    store = CoordinateStore([(0, 0, 0), (1, 2, 3)])
    assert store.distance_squared(0, 1) == 14
    assert store.distance_squared(1, 0) == 14


def test_pairwise_distances_follow_pair_order():
    store = CoordinateStore([(0, 0, 0), (1, 0, 0), (0, 5, 0)])
    assert store.pairwise_distance_squared().tolist() == [1, 25, 26]


def test_large_coordinates_stay_exact():
    big = 10**12
    store = CoordinateStore([(0, 0, 0), (big, big, big)])
    assert store.array.dtype == object
    assert store.distance_squared(0, 1) == 3 * big * big
    assert store.pairwise_distance_squared().tolist() == [3 * big * big]


def test_accepts_numpy_rows():
    store = CoordinateStore(np.array([[1, 2, 3], [4, 5, 6]]))
    assert store.point(1) == (4, 5, 6)
    assert isinstance(store.point(1)[0], int)


def test_empty_point_set_is_invalid():
    with pytest.raises(InvalidInputError):
        CoordinateStore([])


@pytest.mark.parametrize("record", [(1, 2), (1, 2, 3, 4), (1.5, 2, 3), ("1", 2, 3)])
def test_malformed_points_are_invalid(record):
    with pytest.raises(InvalidInputError):
        CoordinateStore([(0, 0, 0), record])


def test_out_of_range_index_is_invalid():
    store = CoordinateStore([(0, 0, 0)])
    with pytest.raises(InvalidInputError):
        store.distance_squared(0, 1)
