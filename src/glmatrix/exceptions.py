"""
Error taxonomy for glmatrix.

Every error derives from MatrixError and from the closest builtin exception,
so callers may catch either the library type or the builtin one.
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all glmatrix errors."""


class SizeMismatchError(MatrixError, ValueError):
    """Operands (or assigned elements) do not share the same size."""


class InvalidOperandTypeError(MatrixError, TypeError):
    """Operand is neither a Matrix nor a numeric scalar."""


class DimensionError(MatrixError, ValueError):
    """Matrix dimension is invalid or below an operation's minimum."""


class MatrixIndexError(MatrixError, IndexError):
    """Row or column index lies outside [0, dimension)."""


class ZeroAxisError(MatrixError, ValueError):
    """Rotation axis has zero length and cannot be normalized."""


class DegenerateVolumeError(MatrixError, ValueError):
    """Projection viewing volume has a zero extent along some axis."""
