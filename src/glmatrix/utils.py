"""
Utility functions for matrix construction.

Provides angle conversion, projection volume helpers, scalar detection and the
descriptor that lets a single name act as both a factory and an instance method.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import numpy as np

from glmatrix.exceptions import DegenerateVolumeError


class hybridmethod:
    """
    Descriptor dispatching to a class-level or an instance-level function.

    Accessed on the class, the class function is bound to the class (like a
    classmethod). Accessed on an instance, the instance function is bound to
    the instance.

    Example:
        >>> class Box:
        ...     @hybridmethod
        ...     def reset(cls):
        ...         return cls()
        ...
        ...     @reset.instancemethod
        ...     def reset(self):
        ...         return self
    """

    def __init__(self, fclass: Callable[..., Any], finstance: Callable[..., Any] | None = None):
        self.fclass = fclass
        self.finstance = finstance
        self.__doc__ = fclass.__doc__
        self.__name__ = getattr(fclass, "__name__", None)

    def instancemethod(self, finstance: Callable[..., Any]) -> hybridmethod:
        """Register the function used when accessed through an instance."""
        return type(self)(self.fclass, finstance)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None or self.finstance is None:
            if owner is None:
                owner = type(instance)
            return self.fclass.__get__(owner, owner)
        return self.finstance.__get__(instance, owner)


def degree_to_radian(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle * math.pi / 180.0


def is_scalar(value: Any) -> bool:
    """
    Check whether value is a numeric scalar operand.

    Booleans are rejected even though bool subclasses int.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def half_extents(
    x_left: float, x_right: float, y_down: float, y_up: float, z_near: float, z_far: float
) -> tuple[float, float, float]:
    """
    Compute the half-extents of a viewing volume.

    Args:
        x_left, x_right: Horizontal bounds
        y_down, y_up: Vertical bounds
        z_near, z_far: Depth bounds

    Returns:
        (x_half, y_half, z_half)

    Raises:
        DegenerateVolumeError: If any extent is zero
    """
    x_half = (x_right - x_left) / 2.0
    y_half = (y_up - y_down) / 2.0
    z_half = (z_far - z_near) / 2.0

    for axis, lo, hi, half in (
        ("x", x_left, x_right, x_half),
        ("y", y_down, y_up, y_half),
        ("z", z_near, z_far, z_half),
    ):
        if half == 0:
            raise DegenerateVolumeError(
                f"Viewing volume has zero {axis} extent ({lo} to {hi}). "
                f"Use distinct {axis} bounds."
            )

    return x_half, y_half, z_half


def perspective_bounds(
    vertical_fov_degrees: float, aspect_ratio: float, z_near: float
) -> tuple[float, float, float, float]:
    """
    Compute the near-plane bounds of a symmetric perspective frustum.

    Args:
        vertical_fov_degrees: Vertical field of view in degrees
        aspect_ratio: Width / height
        z_near: Distance to the near plane

    Returns:
        (x_left, x_right, y_down, y_up)

    Example:
        >>> x_left, x_right, y_down, y_up = perspective_bounds(90.0, 2.0, 1.0)
        >>> # y_up ~= 1.0 (tan 45deg), x_right ~= 2.0 (aspect 2:1)
    """
    angle = degree_to_radian(vertical_fov_degrees)

    y_up = z_near * math.tan(angle / 2.0)
    y_down = -y_up
    x_left = y_down * aspect_ratio
    x_right = -x_left

    return x_left, x_right, y_down, y_up
