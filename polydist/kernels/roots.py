"""
Polynomial root finding.

All roots (real and complex) come from the eigenvalues of the companion
matrix, which is the same method numpy.roots uses. Coefficients are ordered
highest degree first.
"""

import torch


def strip_leading_zeros(coeffs: torch.Tensor) -> torch.Tensor:
    """Drop leading exact zeros, always keeping at least one coefficient."""
    nonzero = torch.nonzero(coeffs).flatten()
    if nonzero.numel() == 0:
        return coeffs[-1:]
    return coeffs[int(nonzero[0]):]


def companion_matrix(coeffs: torch.Tensor) -> torch.Tensor:
    """
    Companion matrix of a polynomial with non-zero leading coefficient.

    The first row holds the negated, normalized lower coefficients and the
    subdiagonal is ones, so the characteristic polynomial is the monic input.
    """
    n = coeffs.numel() - 1
    mat = torch.zeros((n, n), dtype=coeffs.dtype, device=coeffs.device)
    mat[0, :] = -coeffs[1:] / coeffs[0]
    if n > 1:
        mat[1:, :-1] = torch.eye(n - 1, dtype=coeffs.dtype, device=coeffs.device)
    return mat


def polyroots(coeffs: torch.Tensor) -> torch.Tensor:
    """
    All roots of a polynomial.

    Returns a complex tensor in solver order. A constant polynomial has no
    roots and yields an empty tensor.
    """
    coeffs = strip_leading_zeros(coeffs.to(torch.float64))
    if coeffs.numel() < 2:
        return torch.zeros(0, dtype=torch.complex128, device=coeffs.device)
    return torch.linalg.eigvals(companion_matrix(coeffs))


def real_roots(roots: torch.Tensor, imag_tolerance: float = 1e-7) -> torch.Tensor:
    """
    Real parts of the roots whose imaginary part is negligible.

    A root r is kept when |Im r| <= imag_tolerance * max(1, |r|). Solver
    order is preserved.
    """
    if roots.numel() == 0:
        return torch.zeros(0, dtype=torch.float64, device=roots.device)
    if not torch.is_complex(roots):
        return roots.to(torch.float64)
    scale = torch.clamp(roots.abs(), min=1.0)
    keep = roots.imag.abs() <= imag_tolerance * scale
    return roots.real[keep]
