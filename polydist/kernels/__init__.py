"""
Numerical kernels for polynomial distance computation.

This package contains the low-level routines:
- roots: companion-matrix root finding and real-root filtering
- polyval: Horner evaluation (Triton kernel, torch path, Python reference)
"""

from .roots import (
    strip_leading_zeros,
    companion_matrix,
    polyroots,
    real_roots,
)

from .polyval import (
    polyval_kernel,
    polyval_triton,
    polyval_torch,
    polyval,
    polyval_py,
)


__all__ = [
    # Roots
    'strip_leading_zeros',
    'companion_matrix',
    'polyroots',
    'real_roots',
    # Polyval
    'polyval_kernel',
    'polyval_triton',
    'polyval_torch',
    'polyval',
    'polyval_py',
]
