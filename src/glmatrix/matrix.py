"""
Matrix: Square-matrix value type for rendering-pipeline transforms.

This module provides a dense square matrix with flat column-major storage and
a fluent API for building model, view and projection matrices.

Key Features:
- Flat column-major ``elements`` buffer ready for upload to a graphics API
- Algebra: add, multiply (matrix or scalar), matrix-vector application
- Left-composed affine operations (translate, scale, rotate) with chaining
- Projection builders (orthographic, frustum, perspective) that overwrite
- Validation before mutation: a failed call leaves the matrix unchanged
"""

from __future__ import annotations

import logging
import math
from typing import Any, Self, TypeAlias

import numpy as np

from glmatrix.constants import (
    DEFAULT_ATOL,
    DEFAULT_DIMENSION,
    DEFAULT_RTOL,
    ELEMENT_DTYPE,
    GL_DTYPE,
    MIN_PROJECTION_DIMENSION,
    MIN_ROTATE_DIMENSION,
    MIN_SCALE_DIMENSION,
    MIN_TRANSLATE_DIMENSION,
    PROJECTION_DIMENSION,
)
from glmatrix.exceptions import (
    DimensionError,
    InvalidOperandTypeError,
    SizeMismatchError,
    ZeroAxisError,
)
from glmatrix.kernels import (
    elementwise_add_numba,
    elementwise_multiply_scalar_numba,
    matmul_column_major_numba,
    matvec_column_major_numba,
)
from glmatrix.utils import (
    degree_to_radian,
    half_extents,
    hybridmethod,
    is_scalar,
    perspective_bounds,
)
from glmatrix.validators import check_dimension, validate_index, validate_min_dimension

logger = logging.getLogger(__name__)

# Type aliases for better readability (Python 3.12+ syntax)
ArrayLike: TypeAlias = np.ndarray | tuple | list
Scalar: TypeAlias = int | float | np.integer | np.floating


class Matrix:
    """
    Dense square matrix with flat column-major storage.

    Element (row, col) lives at ``elements[col * dimension + row]``. Mutating
    methods return self for chaining; ``add`` and ``multiply`` return new
    matrices and never modify their operands.

    Supported Operations:
    - get / set: Element access (indices validated)
    - empty / identity: Reset contents
    - add / multiply: Algebra (multiply accepts a Matrix or a scalar)
    - translate / scale / rotate: Compose a transform on the left
    - set_orthographic / set_frustum / set_perspective: Overwrite with a projection

    Example:
        >>> model = Matrix.identity(4).translate(1, 2, 3).rotate(90, 0, 0, 1)
        >>> projection = Matrix.perspective(60.0, 16 / 9, 0.1, 100.0)
        >>> mvp = projection @ model
        >>> buffer = mvp.to_gl()  # float32, column-major
    """

    __slots__ = ("_dimension", "_elements")

    # NumPy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, dimension: int = DEFAULT_DIMENSION):
        """
        Create a zero-filled matrix.

        Args:
            dimension: Side length (positive integer, default 4)
        """
        self._dimension: int = check_dimension(dimension)
        self._elements: np.ndarray = np.zeros(self._dimension * self._dimension, dtype=ELEMENT_DTYPE)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_elements(cls, elements: ArrayLike) -> Self:
        """
        Build a matrix from a flat column-major sequence.

        Args:
            elements: Flat sequence whose length is a perfect square

        Returns:
            New matrix with dimension inferred from the length

        Raises:
            DimensionError: If the sequence is not flat or its length is not
                a positive perfect square
        """
        values = np.asarray(elements, dtype=ELEMENT_DTYPE)
        if values.ndim != 1:
            raise DimensionError(
                f"from_elements expects a flat sequence, got shape {values.shape}. "
                f"Use from_rows for nested rows."
            )

        dimension = math.isqrt(values.size)
        if values.size == 0 or dimension * dimension != values.size:
            raise DimensionError(
                f"{values.size} elements do not form a square matrix. "
                f"Provide dimension * dimension elements."
            )

        matrix = cls(dimension)
        matrix._elements[:] = values
        return matrix

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Self:
        """
        Build a matrix from row-major nested rows.

        Example:
            >>> Matrix.from_rows([[1, 2], [3, 4]]).get(0, 1)
            2.0
        """
        values = np.asarray(rows, dtype=ELEMENT_DTYPE)
        if values.ndim != 2 or values.shape[0] != values.shape[1] or values.size == 0:
            raise DimensionError(f"from_rows expects square nested rows, got shape {values.shape}")

        matrix = cls(values.shape[0])
        matrix._elements[:] = values.ravel(order="F")
        return matrix

    @hybridmethod
    def identity(cls, dimension: int = DEFAULT_DIMENSION) -> Matrix:
        """
        Identity matrix factory (class access) or reset-to-identity (instance access).

        ``Matrix.identity(4)`` builds a new 4x4 identity matrix;
        ``m.identity()`` overwrites ``m`` with the identity and returns it.
        """
        matrix = cls(dimension)
        for index in range(matrix._dimension):
            matrix.set(index, index, 1.0)
        return matrix

    @identity.instancemethod
    def identity(self) -> Self:
        self.empty()
        for index in range(self._dimension):
            self.set(index, index, 1.0)
        return self

    @classmethod
    def orthographic(
        cls,
        x_left: float,
        x_right: float,
        y_down: float,
        y_up: float,
        z_near: float,
        z_far: float,
    ) -> Self:
        """Build a 4x4 orthographic projection (see set_orthographic)."""
        return cls(PROJECTION_DIMENSION).set_orthographic(
            x_left, x_right, y_down, y_up, z_near, z_far
        )

    @classmethod
    def frustum(
        cls,
        x_left: float,
        x_right: float,
        y_down: float,
        y_up: float,
        z_near: float,
        z_far: float,
    ) -> Self:
        """Build a 4x4 frustum projection (see set_frustum)."""
        return cls(PROJECTION_DIMENSION).set_frustum(x_left, x_right, y_down, y_up, z_near, z_far)

    @classmethod
    def perspective(
        cls, vertical_fov_degrees: float, aspect_ratio: float, z_near: float, z_far: float
    ) -> Self:
        """Build a 4x4 perspective projection (see set_perspective)."""
        return cls(PROJECTION_DIMENSION).set_perspective(
            vertical_fov_degrees, aspect_ratio, z_near, z_far
        )

    # ------------------------------------------------------------------
    # Storage & element access
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        """Side length of the matrix."""
        return self._dimension

    @property
    def size(self) -> int:
        """Number of elements (dimension squared)."""
        return self._elements.size

    @property
    def elements(self) -> np.ndarray:
        """
        Live flat column-major element buffer.

        Assigning a sequence copies it into the existing buffer; its length
        must equal ``size``.
        """
        return self._elements

    @elements.setter
    def elements(self, values: ArrayLike) -> None:
        values = np.asarray(values, dtype=ELEMENT_DTYPE)
        if values.ndim != 1 or values.size != self.size:
            raise SizeMismatchError(
                f"Cannot assign {values.size} elements (shape {values.shape}) "
                f"to a matrix of size {self.size}"
            )
        self._elements[:] = values

    @validate_index("row", "col")
    def get(self, row: int, col: int) -> float:
        """Read element (row, col)."""
        return float(self._elements[col * self._dimension + row])

    @validate_index("row", "col")
    def set(self, row: int, col: int, value: float) -> Self:
        """
        Write element (row, col).

        Returns:
            Self for method chaining
        """
        self._elements[col * self._dimension + row] = value
        return self

    def empty(self) -> Self:
        """Overwrite every element with 0."""
        self._elements.fill(0.0)
        return self

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def add(self, right: Matrix) -> Matrix:
        """
        Elementwise sum of two matrices of equal size.

        Returns:
            New matrix; neither operand is modified
        """
        if not isinstance(right, Matrix):
            raise InvalidOperandTypeError(
                f"add expects a Matrix, got {type(right).__name__}"
            )
        if self.size != right.size:
            raise SizeMismatchError(
                f"Cannot add matrices of size {self.size} and {right.size}"
            )

        result = Matrix(self._dimension)
        elementwise_add_numba(self._elements, right._elements, result._elements)
        return result

    def multiply(self, right: Matrix | Scalar) -> Matrix:
        """
        Matrix product ``self @ right`` or scalar product ``self * right``.

        Args:
            right: Matrix of equal size, or a numeric scalar

        Returns:
            New matrix; neither operand is modified

        Raises:
            SizeMismatchError: If right is a Matrix of a different size
            InvalidOperandTypeError: If right is neither a Matrix nor a number
        """
        match right:
            case Matrix():
                if self.size != right.size:
                    raise SizeMismatchError(
                        f"Cannot multiply matrices of size {self.size} and {right.size}"
                    )
                result = Matrix(self._dimension)
                matmul_column_major_numba(
                    self._elements, right._elements, self._dimension, result._elements
                )
            case _ if is_scalar(right):
                result = Matrix(self._dimension)
                elementwise_multiply_scalar_numba(self._elements, float(right), result._elements)
            case _:
                raise InvalidOperandTypeError(
                    f"multiply expects a Matrix or a number, got {type(right).__name__}"
                )

        return result

    def apply(self, vector: ArrayLike) -> np.ndarray:
        """
        Multiply a column vector by this matrix.

        Args:
            vector: Vector of length ``dimension``, e.g. a homogeneous point
                (x, y, z, 1) for a 4x4 transform

        Returns:
            Transformed vector [dimension]
        """
        values = np.ascontiguousarray(vector, dtype=ELEMENT_DTYPE)
        if values.shape != (self._dimension,):
            raise SizeMismatchError(
                f"apply expects a vector of length {self._dimension}, got shape {values.shape}"
            )

        out = np.empty(self._dimension, dtype=ELEMENT_DTYPE)
        matvec_column_major_numba(self._elements, values, self._dimension, out)
        return out

    # ------------------------------------------------------------------
    # Affine composition (left-composed)
    # ------------------------------------------------------------------

    def _compose_left(self, transform: Matrix) -> Self:
        """Replace contents with ``transform @ self``."""
        self._elements[:] = transform.multiply(self)._elements
        return self

    @validate_min_dimension(MIN_TRANSLATE_DIMENSION)
    def translate(self, tx: float, ty: float, tz: float) -> Self:
        """
        Compose a translation on the left.

        Args:
            tx, ty, tz: Translation along each axis

        Returns:
            Self for method chaining
        """
        transform = Matrix.identity(self._dimension).set(0, 3, tx).set(1, 3, ty).set(2, 3, tz)

        logger.debug("[Matrix] translate (%s, %s, %s)", tx, ty, tz)
        return self._compose_left(transform)

    @validate_min_dimension(MIN_SCALE_DIMENSION)
    def scale(self, sx: float, sy: float, sz: float) -> Self:
        """
        Compose a per-axis scaling on the left.

        Args:
            sx, sy, sz: Scale factor along each axis

        Returns:
            Self for method chaining
        """
        transform = Matrix.identity(self._dimension).set(0, 0, sx).set(1, 1, sy).set(2, 2, sz)

        logger.debug("[Matrix] scale (%s, %s, %s)", sx, sy, sz)
        return self._compose_left(transform)

    @validate_min_dimension(MIN_ROTATE_DIMENSION)
    def rotate(self, angle_degrees: float, ax: float, ay: float, az: float) -> Self:
        """
        Compose an axis-angle rotation on the left.

        Uses Rodrigues' formula ``R = I + sin(a) K + (1 - cos(a)) K^2`` where K
        is the cross-product matrix of the normalized axis.

        Args:
            angle_degrees: Rotation angle in degrees (counter-clockwise about the axis)
            ax, ay, az: Rotation axis (normalized internally)

        Returns:
            Self for method chaining

        Raises:
            ZeroAxisError: If the axis has zero length
        """
        magnitude = math.sqrt(ax * ax + ay * ay + az * az)
        if magnitude == 0:
            raise ZeroAxisError(
                f"Rotation axis ({ax}, {ay}, {az}) has zero length. "
                f"Provide a non-zero axis, e.g. (0, 0, 1)."
            )

        ax /= magnitude
        ay /= magnitude
        az /= magnitude

        angle = degree_to_radian(angle_degrees)
        cosine = math.cos(angle)
        sine = math.sin(angle)

        # Cross-product (skew-symmetric) matrix of the axis
        axis = (
            Matrix(self._dimension)
            .set(0, 1, -az)
            .set(0, 2, ay)
            .set(1, 2, -ax)
            .set(1, 0, az)
            .set(2, 0, -ay)
            .set(2, 1, ax)
        )

        rotation = (
            Matrix.identity(self._dimension)
            .add(axis.multiply(sine))
            .add(axis.multiply(axis).multiply(1.0 - cosine))
        )

        logger.debug("[Matrix] rotate %s deg about (%.4f, %.4f, %.4f)", angle_degrees, ax, ay, az)
        return self._compose_left(rotation)

    # ------------------------------------------------------------------
    # Projection builders (overwrite)
    # ------------------------------------------------------------------

    @validate_min_dimension(MIN_PROJECTION_DIMENSION)
    def set_orthographic(
        self,
        x_left: float,
        x_right: float,
        y_down: float,
        y_up: float,
        z_near: float,
        z_far: float,
    ) -> Self:
        """
        Overwrite with an orthographic projection of the given box.

        Maps [x_left, x_right] x [y_down, y_up] x [z_near, z_far] onto the
        cube [-1, 1]^3.

        Returns:
            Self for method chaining
        """
        x_half, y_half, z_half = half_extents(x_left, x_right, y_down, y_up, z_near, z_far)

        (
            self.identity()
            .set(0, 0, 1.0 / x_half)
            .set(1, 1, 1.0 / y_half)
            .set(2, 2, 1.0 / z_half)
            .set(0, 3, -x_left / x_half - 1.0)
            .set(1, 3, -y_down / y_half - 1.0)
            .set(2, 3, -z_near / z_half - 1.0)
        )

        logger.debug(
            "[Matrix] set_orthographic x=[%s, %s] y=[%s, %s] z=[%s, %s]",
            x_left, x_right, y_down, y_up, z_near, z_far,
        )
        return self

    @validate_min_dimension(MIN_PROJECTION_DIMENSION)
    def set_frustum(
        self,
        x_left: float,
        x_right: float,
        y_down: float,
        y_up: float,
        z_near: float,
        z_far: float,
    ) -> Self:
        """
        Overwrite with a frustum projection of the given near-plane window.

        Note:
            Depth row is ``(2,2) = z_near / z_half + 1`` and
            ``(2,3) = -(z_near * z_far / z_half)`` with ``w = z``. These values
            differ from the textbook glFrustum matrix and are kept as-is
            because existing renderers depend on them.

        Returns:
            Self for method chaining
        """
        x_half, y_half, z_half = half_extents(x_left, x_right, y_down, y_up, z_near, z_far)

        (
            self.empty()
            .set(0, 0, z_near / x_half)
            .set(1, 1, z_near / y_half)
            .set(0, 2, -x_left / x_half - 1.0)
            .set(1, 2, -y_down / y_half - 1.0)
            .set(2, 2, z_near / z_half + 1.0)
            .set(2, 3, -(z_near * z_far / z_half))
            .set(3, 2, 1.0)
            .set(3, 3, 0.0)
        )

        logger.debug(
            "[Matrix] set_frustum x=[%s, %s] y=[%s, %s] z=[%s, %s]",
            x_left, x_right, y_down, y_up, z_near, z_far,
        )
        return self

    @validate_min_dimension(MIN_PROJECTION_DIMENSION)
    def set_perspective(
        self, vertical_fov_degrees: float, aspect_ratio: float, z_near: float, z_far: float
    ) -> Self:
        """
        Overwrite with a symmetric perspective projection.

        Args:
            vertical_fov_degrees: Vertical field of view in degrees
            aspect_ratio: Viewport width / height
            z_near: Near plane distance
            z_far: Far plane distance

        Returns:
            Self for method chaining
        """
        x_left, x_right, y_down, y_up = perspective_bounds(
            vertical_fov_degrees, aspect_ratio, z_near
        )
        return self.set_frustum(x_left, x_right, y_down, y_up, z_near, z_far)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_numpy(self) -> np.ndarray:
        """Copy as a (dimension, dimension) array indexed [row, col]."""
        return self._elements.reshape((self._dimension, self._dimension), order="F").copy()

    def to_gl(self) -> np.ndarray:
        """Copy as a contiguous float32 column-major buffer for upload."""
        return self._elements.astype(GL_DTYPE)

    def allclose(
        self, other: Matrix, rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL
    ) -> bool:
        """Check elementwise equality within tolerance (False on dimension mismatch)."""
        if not isinstance(other, Matrix):
            raise InvalidOperandTypeError(f"allclose expects a Matrix, got {type(other).__name__}")
        if self._dimension != other._dimension:
            return False
        return bool(np.allclose(self._elements, other._elements, rtol=rtol, atol=atol))

    # ------------------------------------------------------------------
    # Copy & dunder protocol
    # ------------------------------------------------------------------

    def copy(self) -> Self:
        """
        Create an independent copy.

        Returns:
            New matrix with its own element buffer
        """
        new_obj = self.__class__(self._dimension)
        new_obj._elements[:] = self._elements
        return new_obj

    def __copy__(self) -> Self:
        """Shallow copy (element buffer is always duplicated)."""
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Deep copy implementation."""
        return self.copy()

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: Any) -> Matrix:
        if not (isinstance(other, Matrix) or is_scalar(other)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._dimension == other._dimension and bool(
            np.array_equal(self._elements, other._elements)
        )

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """String representation of the matrix."""
        return f"Matrix(dimension={self._dimension}, elements={self._elements.tolist()})"
