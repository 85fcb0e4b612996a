import numpy as np
import pytest

from seqdiff.core.sequence import (
    as_coordinates,
    enumerate_values,
    positions,
    resolve_order,
)
from seqdiff.config import Settings
from seqdiff.errors import InvalidOrder


def test_enumerate_list():
    keys, arr = enumerate_values([3, 1, 2])
    assert keys == [0, 1, 2]
    assert arr.dtype == float
    np.testing.assert_array_equal(arr, [3.0, 1.0, 2.0])


def test_enumerate_mapping_keeps_key_order():
    keys, arr = enumerate_values({10: 1.0, 2: 5.0, 7: -1.0})
    assert keys == [10, 2, 7]
    np.testing.assert_array_equal(arr, [1.0, 5.0, -1.0])


def test_enumerate_copies_arrays():
    src = np.array([1.0, 2.0, 3.0])
    _, arr = enumerate_values(src)
    arr[0] = 99.0
    assert src[0] == 1.0


def test_rejects_two_dimensional_input():
    with pytest.raises(ValueError):
        enumerate_values([[1.0, 2.0], [3.0, 4.0]])


def test_coordinates_keep_type():
    assert as_coordinates(("a", "b")) == ["a", "b"]
    assert as_coordinates({"k": 1.5}) == [1.5]


def test_positions():
    np.testing.assert_array_equal(positions(4), [0.0, 1.0, 2.0, 3.0])


def test_resolve_order():
    assert resolve_order(3) == 3
    assert resolve_order(np.int64(2)) == 2
    assert resolve_order(None, Settings()) == 1
    with pytest.raises(InvalidOrder) as excinfo:
        resolve_order(0)
    assert excinfo.value.order == 0


def test_enumerate_generator():
    keys, arr = enumerate_values(v * 2 for v in range(3))
    assert keys == [0, 1, 2]
    np.testing.assert_array_equal(arr, [0.0, 2.0, 4.0])


def test_enumerate_reports_shape():
    with pytest.raises(ValueError, match=r"\(2, 2\)"):
        enumerate_values(np.zeros((2, 2)))
