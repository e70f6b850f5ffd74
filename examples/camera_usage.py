"""
Example: building model, view and projection matrices.

Demonstrates how to use glmatrix for:
- Composing a model transform (scale, rotate, translate)
- Building a view transform
- Perspective and orthographic projections
- Producing a float32 upload buffer
"""

import logging

import numpy as np

from glmatrix import Matrix

# Configure logging to see construction details
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_model_matrix():
    """Example 1: Composing a model transform."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Model Matrix (scale -> rotate -> translate)")
    print("=" * 70)

    # Operations compose on the left: the first call reaches the vertex first
    model = Matrix.identity(4).scale(2, 2, 2).rotate(90, 0, 0, 1).translate(10, 0, 0)

    vertex = [1.0, 0.0, 0.0, 1.0]
    print(f"Vertex {vertex} -> {np.round(model.apply(vertex), 6)}")
    print(model.to_numpy().round(6))

    return model


def example_2_view_projection(model: Matrix):
    """Example 2: View and perspective projection."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Model-View-Projection")
    print("=" * 70)

    view = Matrix.identity(4).translate(0, 0, 20)
    projection = Matrix.perspective(60.0, 16 / 9, 0.1, 100.0)

    mvp = projection @ view @ model
    clip = mvp.apply([1.0, 0.0, 0.0, 1.0])
    print(f"Clip coordinates: {np.round(clip, 6)}")
    print(f"NDC:              {np.round(clip[:3] / clip[3], 6)}")

    return mvp


def example_3_orthographic():
    """Example 3: Orthographic projection for a 2D overlay."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Orthographic Overlay (800x600 pixels)")
    print("=" * 70)

    overlay = Matrix.orthographic(0, 800, 0, 600, -1, 1)
    for pixel in ([0, 0], [400, 300], [800, 600]):
        ndc = overlay.apply([pixel[0], pixel[1], 0.0, 1.0])
        print(f"Pixel {pixel} -> NDC {np.round(ndc[:2], 6)}")


def example_4_upload_buffer(mvp: Matrix):
    """Example 4: Flat column-major buffer for a graphics API."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Upload Buffer")
    print("=" * 70)

    buffer = mvp.to_gl()
    print(f"dtype={buffer.dtype}, shape={buffer.shape}, contiguous={buffer.flags['C_CONTIGUOUS']}")
    # e.g. glUniformMatrix4fv(location, 1, GL_FALSE, buffer)


if __name__ == "__main__":
    model = example_1_model_matrix()
    mvp = example_2_view_projection(model)
    example_3_orthographic()
    example_4_upload_buffer(mvp)
