"""
polydist - Distance of points to polynomial curves

Exact minimum Euclidean distance from 2-D points to a curve y = p(x), found by
root finding on the derivative of the squared-distance polynomial.

Key components:
- polynomial: Coefficient utilities (square, pad, add, differentiate)
- kernels: Companion-matrix root finding and Horner evaluation (Triton on CUDA)
- engine: DistanceEngine and the compute_distances entry point
- plot: Optional Matplotlib rendering of points, curve and shortest segments

Usage:
    from polydist import compute_distances

    # y = x^2, distance of (1, 0) to the parabola
    distances = compute_distances([1, 0, 0], [(1.0, 0.0)])

    # Same, plus a figure of the scene
    distances = compute_distances([1, 0, 0], [(1.0, 0.0)], visualize=True)
"""

from .errors import (
    InvalidInputError,
    DegenerateRootError,
)

from .polynomial import (
    as_coefficients,
    poly_mul,
    poly_square,
    pad_left,
    poly_add,
    poly_derivative,
    squared_distance_poly,
)

from .kernels import (
    polyroots,
    real_roots,
    polyval,
)

from .engine import (
    DistanceConfig,
    DistanceResult,
    DistanceEngine,
    as_points,
    compute_distances,
    polydist,
)


__all__ = [
    # Errors
    'InvalidInputError',
    'DegenerateRootError',
    # Polynomial
    'as_coefficients',
    'poly_mul',
    'poly_square',
    'pad_left',
    'poly_add',
    'poly_derivative',
    'squared_distance_poly',
    # Kernels
    'polyroots',
    'real_roots',
    'polyval',
    # Engine
    'DistanceConfig',
    'DistanceResult',
    'DistanceEngine',
    'as_points',
    'compute_distances',
    'polydist',
]


# Version info
__version__ = '0.1.0'
__backend__ = 'triton'
