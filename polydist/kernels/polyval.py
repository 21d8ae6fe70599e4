"""
Polynomial evaluation (Horner's scheme).

Three implementations of the same recurrence:
- polyval_kernel / polyval_triton: batched Triton kernel for CUDA tensors
- polyval_torch: tensor path for any device
- polyval_py: pure Python reference for testing
"""

import torch
import triton
import triton.language as tl


@triton.jit
def polyval_kernel(
    out_ptr,        # [N] float64
    x_ptr,          # [N] float64
    coeffs_ptr,     # [num_coeffs] float64, highest degree first
    num_x,
    num_coeffs,
    BLOCK_SIZE: tl.constexpr,
):
    """
    Evaluate one polynomial at a block of abscissae.

    Each program handles BLOCK_SIZE values of x and walks the coefficients
    once, accumulating acc = acc * x + c.
    """
    pid = tl.program_id(0)
    offsets = pid * BLOCK_SIZE + tl.arange(0, BLOCK_SIZE)
    mask = offsets < num_x

    x = tl.load(x_ptr + offsets, mask=mask, other=0.0)
    acc = tl.zeros([BLOCK_SIZE], dtype=tl.float64)

    for i in range(0, num_coeffs):
        c = tl.load(coeffs_ptr + i)
        acc = acc * x + c

    tl.store(out_ptr + offsets, acc, mask=mask)


def polyval_triton(coeffs: torch.Tensor, x: torch.Tensor, block_size: int = 256) -> torch.Tensor:
    """Launch polyval_kernel. Both tensors must live on the same CUDA device."""
    flat_x = x.reshape(-1).to(torch.float64).contiguous()
    coeffs = coeffs.to(device=flat_x.device, dtype=torch.float64).contiguous()
    out = torch.empty_like(flat_x)

    num_x = flat_x.numel()
    if num_x == 0:
        return out.reshape(x.shape)

    grid = (triton.cdiv(num_x, block_size),)
    polyval_kernel[grid](
        out, flat_x, coeffs,
        num_x, coeffs.numel(),
        BLOCK_SIZE=block_size,
    )
    return out.reshape(x.shape)


def polyval_torch(coeffs: torch.Tensor, x: torch.Tensor) -> torch.Tensor:
    """Horner evaluation with tensor ops; works on any device."""
    acc = torch.zeros_like(x, dtype=coeffs.dtype)
    for c in coeffs:
        acc = acc * x + c
    return acc


def polyval(coeffs: torch.Tensor, x) -> torch.Tensor:
    """
    Evaluate a polynomial at x (scalar or tensor).

    Uses the Triton kernel for CUDA tensors and the tensor path otherwise.
    """
    x = torch.as_tensor(x, dtype=torch.float64, device=coeffs.device)
    coeffs = coeffs.to(torch.float64)
    if x.is_cuda:
        return polyval_triton(coeffs, x)
    return polyval_torch(coeffs, x)


# Python reference implementation for testing
def polyval_py(coeffs, x: float) -> float:
    """Python reference implementation of Horner evaluation."""
    acc = 0.0
    for c in coeffs:
        acc = acc * x + float(c)
    return acc
