"""
Benchmark matrix operations (Numba column-major kernels).
"""

import time

import numpy as np

from glmatrix import Matrix

NUM_ITERATIONS = 10_000


def bench(label, func, iterations=NUM_ITERATIONS):
    """Time func over iterations and print mean per-call time."""
    # Warmup
    for _ in range(100):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = (time.perf_counter() - start) / iterations * 1e6

    print(f"  {label:<36} {elapsed:8.2f} us/call")
    return elapsed


print("=" * 80)
print("MATRIX OPERATION BENCHMARK")
print(f"{NUM_ITERATIONS:,} iterations per operation")
print("=" * 80)

rng = np.random.default_rng(42)

for dimension in (4, 8, 16):
    a = Matrix.from_elements(rng.standard_normal(dimension * dimension))
    b = Matrix.from_elements(rng.standard_normal(dimension * dimension))
    a_np = a.to_numpy()
    b_np = b.to_numpy()

    print(f"\nDimension {dimension}:")
    bench("multiply (kernel)", lambda: a.multiply(b))
    bench("multiply (numpy @ reference)", lambda: a_np @ b_np)
    bench("add", lambda: a.add(b))
    bench("multiply scalar", lambda: a.multiply(2.0))

print("\nComposition (4x4):")
m = Matrix.identity(4)
bench("translate", lambda: m.translate(0.1, 0.2, 0.3))
bench("scale", lambda: m.scale(1.0, 1.0, 1.0))
bench("rotate", lambda: m.rotate(1.0, 0.0, 1.0, 0.0))

print("\nProjection (4x4):")
p = Matrix(4)
bench("set_orthographic", lambda: p.set_orthographic(-1, 1, -1, 1, 0.1, 100))
bench("set_perspective", lambda: p.set_perspective(60.0, 16 / 9, 0.1, 100.0))

print("\n" + "=" * 80)
