"""
Constants and default values for glmatrix.

Centralizes dimension requirements, storage dtypes and comparison tolerances.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Dimension Constants
# =============================================================================

DEFAULT_DIMENSION = 4  # Homogeneous 3D transforms
PROJECTION_DIMENSION = 4  # Allocated by orthographic/frustum/perspective factories

# Minimum dimension required by each operation
MIN_TRANSLATE_DIMENSION = 4  # Translation column lives at col 3
MIN_SCALE_DIMENSION = 3
MIN_ROTATE_DIMENSION = 3
MIN_PROJECTION_DIMENSION = 4

# =============================================================================
# Storage Constants
# =============================================================================

ELEMENT_DTYPE = np.float64  # Flat column-major storage
GL_DTYPE = np.float32  # Upload buffer dtype for graphics APIs

# =============================================================================
# Comparison Constants
# =============================================================================

DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12
