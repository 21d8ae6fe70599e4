"""
I/O utilities for polydist.
"""

import numpy as np
import torch

from .errors import InvalidInputError


def get_device(name: str = 'auto') -> torch.device:
    """Resolve a device name; 'auto' picks CUDA when available."""
    if name == 'auto':
        return torch.device('cuda' if torch.cuda.is_available() else 'cpu')
    return torch.device(name)


def load_points(path: str) -> np.ndarray:
    """
    Read a two-column point file into an (n, 2) float64 array.

    Columns may be separated by whitespace or commas; '#' starts a comment.
    """
    with open(path) as f:
        data_lines = [line.split('#', 1)[0] for line in f]
    if not any(line.strip() for line in data_lines):
        return np.zeros((0, 2), dtype=np.float64)

    # Commas inside comments do not count
    delimiter = ',' if any(',' in line for line in data_lines) else None
    try:
        data = np.loadtxt(path, comments='#', delimiter=delimiter, dtype=np.float64, ndmin=2)
    except ValueError as e:
        raise InvalidInputError(f"{path}: cannot parse points: {e}") from e

    if data.shape[1] != 2:
        raise InvalidInputError(f"{path}: expected 2 columns, got {data.shape[1]}")
    return data


def save_distances(path: str, distances) -> None:
    """Write one distance per line."""
    np.savetxt(path, np.asarray(distances, dtype=np.float64).reshape(-1, 1), fmt='%.17g')
