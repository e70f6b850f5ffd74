"""
Tests for utility functions.
"""

import math

import numpy as np
import pytest

from glmatrix.exceptions import DegenerateVolumeError
from glmatrix.utils import (
    degree_to_radian,
    half_extents,
    hybridmethod,
    is_scalar,
    perspective_bounds,
)

# ============================================================================
# hybridmethod Tests
# ============================================================================


class Counter:
    """Object with a factory and an instance method sharing one name."""

    def __init__(self, value=0):
        self.value = value

    @hybridmethod
    def reset(cls, value=10):
        return cls(value)

    @reset.instancemethod
    def reset(self):
        self.value = 0
        return self


class OnlyFactory:
    """Object whose hybridmethod has no instance variant."""

    @hybridmethod
    def build(cls):
        return cls


def test_hybridmethod_class_access():
    """Test that class access calls the factory."""
    counter = Counter.reset(5)

    assert isinstance(counter, Counter)
    assert counter.value == 5


def test_hybridmethod_instance_access():
    """Test that instance access calls the instance method."""
    counter = Counter(3)

    assert counter.reset() is counter
    assert counter.value == 0


def test_hybridmethod_subclass():
    """Test that the factory binds to the subclass."""

    class SubCounter(Counter):
        pass

    assert isinstance(SubCounter.reset(), SubCounter)


def test_hybridmethod_without_instance_variant():
    """Test fallback to the class function on instances."""
    assert OnlyFactory().build() is OnlyFactory


def test_hybridmethod_name():
    """Test that the descriptor exposes the function name."""
    assert Counter.__dict__["reset"].__name__ == "reset"


# ============================================================================
# Angle & Scalar Tests
# ============================================================================


def test_degree_to_radian():
    """Test degree conversion."""
    assert degree_to_radian(0) == 0.0
    assert math.isclose(degree_to_radian(180), math.pi)
    assert math.isclose(degree_to_radian(90), math.pi / 2)
    assert math.isclose(degree_to_radian(-45), -math.pi / 4)


@pytest.mark.parametrize("value", [1, 2.5, -3, np.float32(1.0), np.int64(2), np.float64(0.0)])
def test_is_scalar_true(value):
    """Test numeric scalars."""
    assert is_scalar(value)


@pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, [1], 1j, np.array([1.0])])
def test_is_scalar_false(value):
    """Test non-scalar values."""
    assert not is_scalar(value)


# ============================================================================
# Projection Helper Tests
# ============================================================================


def test_half_extents():
    """Test half-extent computation."""
    assert half_extents(-2, 6, -1, 3, 1, 5) == (4.0, 2.0, 2.0)


def test_half_extents_negative():
    """Test that inverted bounds give negative half-extents."""
    assert half_extents(1, -1, 1, -1, 1, -1) == (-1.0, -1.0, -1.0)


@pytest.mark.parametrize(
    "bounds, axis",
    [
        ((0, 0, -1, 1, -1, 1), "x"),
        ((-1, 1, 5, 5, -1, 1), "y"),
        ((-1, 1, -1, 1, 0.5, 0.5), "z"),
    ],
)
def test_half_extents_degenerate(bounds, axis):
    """Test zero-extent detection per axis."""
    with pytest.raises(DegenerateVolumeError, match=f"zero {axis} extent"):
        half_extents(*bounds)


def test_perspective_bounds_symmetric():
    """Test symmetry of the perspective window."""
    x_left, x_right, y_down, y_up = perspective_bounds(60.0, 1.5, 2.0)

    assert math.isclose(y_up, 2.0 * math.tan(math.radians(30.0)))
    assert y_down == -y_up
    assert x_left == y_down * 1.5
    assert x_right == -x_left
