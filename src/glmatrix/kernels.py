"""
Numba-optimized kernels for flat column-major matrix operations.

All kernels operate on 1D float64 buffers where element (row, col) of a
square matrix of side ``dimension`` lives at ``col * dimension + row``.
Kernels write into a pre-allocated ``out`` buffer.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numba import njit
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Kernels are compiled without fastmath: results must follow IEEE semantics
# exactly (NaN/inf propagation, no reassociation of the product sums).

# ============================================================================
# Matrix Product
# ============================================================================


@njit(cache=True, nogil=True)
def matmul_column_major_numba(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    dimension: int,
    out: NDArray[np.float64],
) -> None:
    """
    Standard matrix product ``left @ right`` on column-major buffers.

    Loops over (result_col, row, col) and accumulates
    ``left[row][col] * right[col][result_col]`` in column order.

    Args:
        left: Left operand [dimension * dimension]
        right: Right operand [dimension * dimension]
        dimension: Side length of both matrices
        out: Output buffer [dimension * dimension] (must not alias inputs)
    """
    for result_col in range(dimension):
        for row in range(dimension):
            acc = 0.0
            for col in range(dimension):
                acc += left[col * dimension + row] * right[result_col * dimension + col]
            out[result_col * dimension + row] = acc


@njit(cache=True, nogil=True)
def matvec_column_major_numba(
    matrix: NDArray[np.float64],
    vector: NDArray[np.float64],
    dimension: int,
    out: NDArray[np.float64],
) -> None:
    """
    Matrix-vector product ``matrix @ vector`` on a column-major buffer.

    Args:
        matrix: Matrix buffer [dimension * dimension]
        vector: Column vector [dimension]
        dimension: Side length of the matrix
        out: Output vector [dimension] (must not alias vector)
    """
    for row in range(dimension):
        acc = 0.0
        for col in range(dimension):
            acc += matrix[col * dimension + row] * vector[col]
        out[row] = acc


# ============================================================================
# Elementwise Operations
# ============================================================================


@njit(cache=True, nogil=True)
def elementwise_add_numba(
    left: NDArray[np.float64], right: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """
    Add two flat buffers element-wise: left + right

    Args:
        left: Input buffer [N]
        right: Input buffer [N]
        out: Output buffer [N] (pre-allocated)
    """
    for i in range(left.shape[0]):
        out[i] = left[i] + right[i]


@njit(cache=True, nogil=True)
def elementwise_multiply_scalar_numba(
    arr: NDArray[np.float64], scalar: float, out: NDArray[np.float64]
) -> None:
    """
    Multiply flat buffer by scalar element-wise: arr * scalar

    Args:
        arr: Input buffer [N]
        scalar: Scalar multiplier
        out: Output buffer [N] (pre-allocated)
    """
    for i in range(arr.shape[0]):
        out[i] = arr[i] * scalar


# ============================================================================
# Helper Functions
# ============================================================================


def get_numba_status() -> dict[str, Any]:
    """
    Get information about Numba availability and configuration.

    Returns:
        Dictionary with Numba status information
    """
    import numba

    return {
        "available": True,
        "version": numba.__version__,
        "num_threads": numba.config.NUMBA_NUM_THREADS,
        "threading_layer": numba.config.THREADING_LAYER,
    }


def warmup_matrix_kernels() -> None:
    """
    Warm up Numba JIT compilation for matrix kernels.

    Call this once at import time to avoid first-call compilation overhead.
    """
    dimension = 4
    a = np.eye(dimension, dtype=np.float64).ravel(order="F")
    b = np.arange(dimension * dimension, dtype=np.float64)
    v = np.ones(dimension, dtype=np.float64)

    out = np.empty(dimension * dimension, dtype=np.float64)
    out_v = np.empty(dimension, dtype=np.float64)

    # Trigger JIT compilation
    matmul_column_major_numba(a, b, dimension, out)
    matvec_column_major_numba(a, v, dimension, out_v)
    elementwise_add_numba(a, b, out)
    elementwise_multiply_scalar_numba(a, 2.0, out)

    logger.debug("[kernels] Warmup complete")


# Warmup on import to avoid first-call overhead
warmup_matrix_kernels()
