"""
Matplotlib rendering of a distance result.

Draws the points, the curve and, for every point, the shortest segment to the
curve labelled with its length. Both axes share one range so distances look
like distances.
"""

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import torch

from .kernels.polyval import polyval


def scene_limits(
    points: np.ndarray,
    closest_points: Sequence[Tuple[float, float]],
    margin: float = 0.05,
) -> Tuple[float, float]:
    """
    Shared [lo, hi] range for both axes.

    Covers the bounding box of the points and the segment feet, widened by
    `margin` of its size on each side.
    """
    coords = np.concatenate([
        np.asarray(points, dtype=np.float64).reshape(-1),
        np.asarray(closest_points, dtype=np.float64).reshape(-1),
    ])
    if coords.size == 0:
        return -1.0, 1.0

    lo = float(coords.min())
    hi = float(coords.max())
    pad = margin * (hi - lo) if hi > lo else 1.0
    return lo - pad, hi + pad


class MatplotlibRenderer:
    """
    Renderer callable for DistanceEngine.

    Args:
        output_path: Save the figure here if given
        show: Call plt.show() after drawing; otherwise the figure is closed
            once saved
        num_samples: Number of abscissae used to draw the curve
        fontsize: Font size of the distance labels
    """

    def __init__(
        self,
        output_path: Optional[str] = None,
        show: bool = False,
        num_samples: int = 200,
        fontsize: int = 6,
        dpi: int = 150,
    ):
        self.output_path = output_path
        self.show = show
        self.num_samples = num_samples
        self.fontsize = fontsize
        self.dpi = dpi

    def __call__(self, polynomial: torch.Tensor, points: np.ndarray, result):
        fig, ax = plt.subplots(figsize=(6, 6))
        ax.grid(True)

        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        closest = result.closest_points

        ax.plot(points[:, 0], points[:, 1], '*')

        for (x0, y0), (xc, yc), dist in zip(points, closest, result.distances):
            ax.plot([x0, xc], [y0, yc], '-r')
            ax.text((x0 + xc) / 2, (y0 + yc) / 2, f'{dist:.4g}', fontsize=self.fontsize)

        lo, hi = scene_limits(points, closest)
        xs = torch.linspace(lo, hi, self.num_samples, dtype=torch.float64)
        ys = polyval(polynomial.cpu(), xs)
        ax.plot(xs.numpy(), ys.numpy())

        ax.set_xlim(lo, hi)
        ax.set_ylim(lo, hi)
        ax.set_aspect('equal')

        if self.output_path:
            fig.savefig(self.output_path, dpi=self.dpi)
        if self.show:
            plt.show()
        else:
            plt.close(fig)
        return fig
