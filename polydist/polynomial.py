"""
Coefficient-sequence polynomial utilities.

A polynomial is a 1-D float64 tensor of coefficients, highest degree first:
[c0, c1, ..., cn] represents c0*x^n + c1*x^(n-1) + ... + cn.
All functions here are pure and return new tensors.
"""

import numpy as np
import torch

from .errors import InvalidInputError
from .kernels.polyval import polyval
from .kernels.roots import strip_leading_zeros


def as_coefficients(polynomial, device=None) -> torch.Tensor:
    """
    Validate a coefficient sequence and convert it to a float64 tensor.

    Accepts lists, tuples, numpy arrays and tensors. Raises InvalidInputError
    if the sequence is empty, not one-dimensional, non-numeric or contains
    non-finite values.
    """
    if isinstance(polynomial, torch.Tensor):
        arr = polynomial.detach().cpu().numpy()
    else:
        try:
            arr = np.asarray(polynomial)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"polynomial must be a sequence of real numbers: {e}") from e

    # Python ints beyond int64 come back as objects
    if arr.dtype.kind == 'O':
        try:
            arr = arr.astype(np.float64)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidInputError(f"polynomial coefficients must be real numbers: {e}") from e

    if arr.dtype.kind not in 'iuf':
        raise InvalidInputError(
            f"polynomial coefficients must be real numbers, got dtype {arr.dtype}"
        )
    if arr.ndim != 1:
        raise InvalidInputError(
            f"polynomial must be a one-dimensional coefficient sequence, got shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidInputError("polynomial must have at least one coefficient")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("polynomial coefficients must be finite")

    return torch.as_tensor(arr.astype(np.float64), device=device)


def degree(coeffs: torch.Tensor) -> int:
    """Degree ignoring leading zeros (the zero polynomial has degree 0)."""
    return strip_leading_zeros(coeffs).numel() - 1


def poly_mul(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """Product of two polynomials (coefficient convolution)."""
    out = torch.zeros(a.numel() + b.numel() - 1, dtype=a.dtype, device=a.device)
    ia = torch.arange(a.numel(), device=a.device)
    ib = torch.arange(b.numel(), device=a.device)
    # Term a[i] * b[j] lands at position i + j counting from the top
    index = (ia[:, None] + ib[None, :]).flatten()
    return out.index_add_(0, index, torch.outer(a, b).flatten())


def poly_square(a: torch.Tensor) -> torch.Tensor:
    """Square of a polynomial; degree doubles."""
    return poly_mul(a, a)


def pad_left(a: torch.Tensor, length: int) -> torch.Tensor:
    """Prepend zeros so the sequence has `length` coefficients."""
    if length < a.numel():
        raise ValueError(f"cannot pad {a.numel()} coefficients down to {length}")
    if length == a.numel():
        return a
    return torch.cat([a.new_zeros(length - a.numel()), a])


def poly_add(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """Sum of two polynomials of possibly different degree."""
    length = max(a.numel(), b.numel())
    return pad_left(a, length) + pad_left(b, length)


def poly_derivative(a: torch.Tensor) -> torch.Tensor:
    """
    Derivative of a polynomial.

    [c0, ..., cm] of degree m becomes [m*c0, (m-1)*c1, ..., 1*c(m-1)].
    The derivative of a constant is [0].
    """
    m = a.numel() - 1
    if m == 0:
        return a.new_zeros(1)
    powers = torch.arange(m, 0, -1, dtype=a.dtype, device=a.device)
    return a[:-1] * powers


def squared_distance_poly(coeffs: torch.Tensor, x0: float, y0: float) -> torch.Tensor:
    """
    D(x) = (x - x0)^2 + (p(x) - y0)^2 as a coefficient tensor.

    The x part is always degree 2; the y part has degree 2*deg(p). The shorter
    one is left-padded before the sum.
    """
    x_part = torch.tensor([1.0, -2.0 * x0, x0 * x0], dtype=coeffs.dtype, device=coeffs.device)

    y_part = coeffs.clone()
    y_part[-1] -= y0
    y_part = poly_square(y_part)

    return poly_add(x_part, y_part)


__all__ = [
    'as_coefficients',
    'degree',
    'poly_mul',
    'poly_square',
    'pad_left',
    'poly_add',
    'poly_derivative',
    'squared_distance_poly',
    'strip_leading_zeros',
    'polyval',
]
