"""
glmatrix - Square-matrix algebra for rendering pipelines

Builds and composes the model, view and projection matrices fed to a
graphics API, stored flat in column-major order.

Features:
- Generic N x N matrix value type with flat column-major ``elements``
- Algebra: add, multiply (matrix or scalar), matrix-vector application
- Affine composition: translate, scale, axis-angle rotate (left-composed)
- Projections: orthographic, frustum, perspective
- Numba-compiled kernels for products and elementwise operations
- Fluent chaining for every in-place operation

Example - Model-View-Projection:
    >>> from glmatrix import Matrix
    >>>
    >>> model = Matrix.identity(4).scale(2, 2, 2).rotate(45, 0, 1, 0)
    >>> view = Matrix.identity(4).translate(0, 0, 5)
    >>> projection = Matrix.perspective(60.0, 16 / 9, 0.1, 100.0)
    >>>
    >>> mvp = projection @ view @ model
    >>> upload = mvp.to_gl()  # float32, column-major

Example - Composition order:
    >>> m = Matrix.identity(4).translate(1, 2, 3).scale(2, 2, 2)
    >>> m.apply([0, 0, 0, 1])  # translate first, then scale
    array([2., 4., 6., 1.])
"""

__version__ = "0.1.0"

# Error taxonomy
from glmatrix.exceptions import (
    DegenerateVolumeError,
    DimensionError,
    InvalidOperandTypeError,
    MatrixError,
    MatrixIndexError,
    SizeMismatchError,
    ZeroAxisError,
)

# Kernel diagnostics
from glmatrix.kernels import get_numba_status

# Matrix value type
from glmatrix.matrix import Matrix

# Utility functions
from glmatrix.utils import degree_to_radian, perspective_bounds

__all__ = [
    # Version
    "__version__",
    # Core type
    "Matrix",
    # Errors
    "MatrixError",
    "SizeMismatchError",
    "InvalidOperandTypeError",
    "DimensionError",
    "MatrixIndexError",
    "ZeroAxisError",
    "DegenerateVolumeError",
    # Utils
    "degree_to_radian",
    "perspective_bounds",
    "get_numba_status",
]
