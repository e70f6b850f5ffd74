"""Tests for validation decorators."""

import numpy as np
import pytest

from glmatrix.exceptions import DimensionError, MatrixIndexError
from glmatrix.validators import check_dimension, validate_index, validate_min_dimension


class Square:
    """Minimal object exposing a dimension."""

    def __init__(self, dimension):
        self.dimension = dimension
        self.calls = []

    @validate_min_dimension(4)
    def translate(self, tx):
        self.calls.append(("translate", tx))
        return self

    @validate_min_dimension(3, "custom_op")
    def named(self):
        return self

    @validate_index("row", "col")
    def get(self, row, col):
        return (row, col)


def test_min_dimension_passes():
    """Test that large enough receivers reach the method."""
    square = Square(4)

    assert square.translate(1.0) is square
    assert square.calls == [("translate", 1.0)]


def test_min_dimension_fails_before_call():
    """Test that small receivers fail before the method body runs."""
    square = Square(3)

    with pytest.raises(DimensionError, match="translate requires dimension >= 4, got 3"):
        square.translate(1.0)

    assert square.calls == []


def test_min_dimension_custom_name():
    """Test the explicit operation name in error messages."""
    with pytest.raises(DimensionError, match="custom_op requires dimension >= 3"):
        Square(2).named()


def test_min_dimension_preserves_metadata():
    """Test that functools.wraps keeps the method name."""
    assert Square.translate.__name__ == "translate"


def test_index_valid():
    """Test valid positional and keyword indices."""
    square = Square(3)

    assert square.get(0, 2) == (0, 2)
    assert square.get(row=2, col=1) == (2, 1)
    assert square.get(1, col=np.int64(0)) == (1, 0)


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0)])
def test_index_out_of_range(row, col):
    """Test out-of-range indices."""
    with pytest.raises(MatrixIndexError, match="outside valid range"):
        Square(3).get(row, col)


@pytest.mark.parametrize("row", [1.0, "0", True, None])
def test_index_wrong_type(row):
    """Test non-integer indices."""
    with pytest.raises(TypeError, match="row must be an integer"):
        Square(3).get(row, 0)


def test_index_missing_argument():
    """Test that missing indices are reported by the method itself."""
    with pytest.raises(TypeError):
        Square(3).get(0)


def test_check_dimension():
    """Test dimension argument validation."""
    assert check_dimension(4) == 4
    assert check_dimension(np.int32(2)) == 2
    assert type(check_dimension(np.int64(3))) is int

    with pytest.raises(DimensionError):
        check_dimension(0)
    with pytest.raises(TypeError):
        check_dimension(4.0)
    with pytest.raises(TypeError):
        check_dimension(True)
