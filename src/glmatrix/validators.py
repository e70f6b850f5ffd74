"""
Validation decorators for Matrix operations.

Provides reusable checks that run before a method touches the receiver, so a
failed validation never leaves a matrix partially modified.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeAlias

import numpy as np

from glmatrix.exceptions import DimensionError, MatrixIndexError

# Python 3.12+ type alias for callables
F: TypeAlias = Callable[..., Any]


def validate_min_dimension(min_dimension: int, operation: str | None = None) -> Callable[[F], F]:
    """
    Decorator for validating the receiver's dimension.

    Args:
        min_dimension: Smallest dimension the operation supports (inclusive)
        operation: Operation name for error messages (default: function name)

    Returns:
        Decorated method raising DimensionError on small matrices

    Example:
        >>> @validate_min_dimension(4)
        ... def translate(self, tx: float, ty: float, tz: float) -> Self:
        ...     ...
    """

    def decorator(func: F) -> F:
        name = operation or func.__name__

        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            if self.dimension < min_dimension:
                raise DimensionError(
                    f"{name} requires dimension >= {min_dimension}, got {self.dimension}. "
                    f"Use a matrix of dimension {min_dimension} or larger."
                )
            return func(self, *args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_index(*param_names: str) -> Callable[[F], F]:
    """
    Decorator for validating row/column indices against the receiver's dimension.

    Indices are read positionally in the order of ``param_names`` (first arg
    after self) or by keyword.

    Args:
        param_names: Names of the index parameters, e.g. ("row", "col")

    Returns:
        Decorated method raising TypeError for non-integers and
        MatrixIndexError for out-of-range indices
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            for position, param_name in enumerate(param_names):
                if len(args) > position:
                    value = args[position]
                elif param_name in kwargs:
                    value = kwargs[param_name]
                else:
                    # Missing argument, let the function report it
                    continue

                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise TypeError(
                        f"{param_name} must be an integer, got {type(value).__name__}"
                    )

                if not 0 <= value < self.dimension:
                    raise MatrixIndexError(
                        f"{param_name}={value} is outside valid range [0, {self.dimension - 1}] "
                        f"for a matrix of dimension {self.dimension}"
                    )

            return func(self, *args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def check_dimension(dimension: Any) -> int:
    """
    Validate a matrix dimension argument.

    Args:
        dimension: Requested side length

    Returns:
        The dimension as a plain int

    Raises:
        TypeError: If dimension is not an integer
        DimensionError: If dimension is not positive
    """
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
        raise TypeError(f"dimension must be an integer, got {type(dimension).__name__}")

    if dimension <= 0:
        raise DimensionError(f"dimension={dimension} must be positive (> 0).")

    return int(dimension)
