import numpy as np
import pytest

from qrengine.matrix import Matrix, Module


def test_new_matrix_is_unset() -> None:
    m = Matrix.new(1)
    assert m.size == 21
    assert m.version == 1
    assert m.get(0, 0) == Module.UNSET
    assert not m.is_reserved(10, 10)
    assert not m.reserved.any()


def test_new_invalid_version() -> None:
    with pytest.raises(ValueError):
        Matrix.new(41)


def test_set_reserves_module() -> None:
    m = Matrix.new(1)
    m.set(3, 4, True)
    assert m.get(3, 4) == Module.DARK
    assert m.is_dark(3, 4)
    assert m.is_reserved(3, 4)


def test_set_data_does_not_reserve() -> None:
    m = Matrix.new(1)
    m.set_data(3, 4, False)
    assert m.get(3, 4) == Module.LIGHT
    assert not m.is_reserved(3, 4)


def test_copy_is_independent() -> None:
    m = Matrix.new(2)
    m.set(0, 0, True)
    other = m.copy()
    other.set(1, 1, True)
    assert m.get(1, 1) == Module.UNSET
    assert other.get(0, 0) == Module.DARK
    assert m != other


def test_in_bounds() -> None:
    m = Matrix.new(1)
    assert m.in_bounds(0, 20)
    assert not m.in_bounds(-1, 0)
    assert not m.in_bounds(0, 21)


def test_to_array_treats_unset_as_light() -> None:
    m = Matrix.new(1)
    m.set(0, 0, True)
    arr = m.to_array()
    assert arr.dtype == np.bool_
    assert arr[0, 0]
    assert arr.sum() == 1


def test_to_list_with_margin() -> None:
    m = Matrix.new(1)
    m.set(0, 0, True)
    rows = m.to_list(margin=2)
    assert len(rows) == 25
    assert all(len(row) == 25 for row in rows)
    assert rows[2][2] == 1
    assert rows[0] == [0] * 25
    assert m.to_list(margin=0)[0][0] == 1


def test_to_list_negative_margin() -> None:
    with pytest.raises(ValueError):
        Matrix.new(1).to_list(margin=-1)
