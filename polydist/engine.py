"""
Point-to-polynomial distance engine.

For a point (x0, y0) and a curve y = p(x) the squared distance as a function
of x is itself a polynomial:

    D(x) = (x - x0)^2 + (p(x) - y0)^2

D grows without bound in both directions, so its global minimum sits at a
critical point. The engine:
1. Builds D from the coefficients of p
2. Differentiates it
3. Finds every root of D' from the companion matrix eigenvalues
4. Keeps the (near-)real roots
5. Evaluates D on them and takes the square root of the smallest value

Each point is independent of the others. Rendering, if requested, happens
once after all distances are known.
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np
import torch

from .errors import DegenerateRootError, InvalidInputError
from .kernels.polyval import polyval
from .kernels.roots import polyroots, real_roots
from .polynomial import as_coefficients, poly_derivative, squared_distance_poly


logger = logging.getLogger(__name__)


@dataclass
class DistanceConfig:
    """Configuration for distance computation."""
    imag_tolerance: float = 1e-7   # Relative |Im r| below which a root counts as real
    device: str = 'cpu'            # Torch device for coefficient tensors


@dataclass
class DistanceResult:
    """
    Per-point output of the engine.

    points is the validated (n, 2) input. distances[i] and x_min[i] belong to
    points[i]; x_min is the abscissa of the closest point on the curve.
    """
    polynomial: torch.Tensor
    points: Optional[np.ndarray] = None
    distances: List[float] = field(default_factory=list)
    x_min: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.distances)

    @property
    def closest_points(self) -> List[Tuple[float, float]]:
        """Feet of the shortest segments, (x_min, p(x_min)) per point."""
        if not self.x_min:
            return []
        ys = polyval(self.polynomial, torch.tensor(self.x_min, dtype=torch.float64))
        return list(zip(self.x_min, ys.cpu().tolist()))


def as_points(points) -> np.ndarray:
    """
    Validate a point set and convert it to an (n, 2) float64 array.

    Raises InvalidInputError naming the offending index when a point is not an
    (x, y) pair of finite reals.
    """
    if isinstance(points, torch.Tensor):
        points = points.detach().cpu().numpy()
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return np.zeros((0, 2), dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidInputError(
                f"points must be an (n, 2) array, got shape {points.shape}"
            )
    try:
        rows = list(points)
    except TypeError as e:
        raise InvalidInputError(f"points must be a sequence of (x, y) pairs: {e}") from e

    out = np.empty((len(rows), 2), dtype=np.float64)
    for i, pt in enumerate(rows):
        try:
            x, y = pt
        except (TypeError, ValueError):
            raise InvalidInputError(f"point {i} is not an (x, y) pair: {pt!r}") from None
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInputError(f"point {i} has a non-real coordinate: {value!r}")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidInputError(f"point {i} has a non-finite coordinate: {pt!r}")
        out[i, 0] = x
        out[i, 1] = y
    return out


class DistanceEngine:
    """
    Computes minimum distances from points to a polynomial curve.

    Args:
        config: Numerical settings, defaults to DistanceConfig()
        renderer: Callable(polynomial, points, result) used when visualization
            is requested. Defaults to plot.MatplotlibRenderer on first use.
    """

    def __init__(
        self,
        config: Optional[DistanceConfig] = None,
        renderer: Optional[Callable] = None,
    ):
        self.config = config if config is not None else DistanceConfig()
        self.renderer = renderer

    @property
    def device(self) -> torch.device:
        return torch.device(self.config.device)

    def _closest_point(self, coeffs: torch.Tensor, x0: float, y0: float, index: int) -> Tuple[float, float]:
        dist_poly = squared_distance_poly(coeffs, x0, y0)
        roots = polyroots(poly_derivative(dist_poly))
        candidates = real_roots(roots, self.config.imag_tolerance)

        if candidates.numel() == 0:
            logger.error(
                "point %d (%g, %g): none of the %d derivative roots is real (tolerance %g)",
                index, x0, y0, roots.numel(), self.config.imag_tolerance,
            )
            raise DegenerateRootError(index, (x0, y0))

        values = polyval(dist_poly, candidates)
        # argmin returns the first minimum, so ties go to solver order
        best = int(torch.argmin(values))
        # Rounding near a double root can push D slightly below zero
        dist_sq = max(float(values[best]), 0.0)

        logger.debug(
            "point %d (%g, %g): %d real of %d roots, x_min=%g, distance=%g",
            index, x0, y0, candidates.numel(), roots.numel(),
            float(candidates[best]), math.sqrt(dist_sq),
        )
        return math.sqrt(dist_sq), float(candidates[best])

    def closest_point(self, polynomial, point, index: int = 0) -> Tuple[float, float]:
        """
        Return (distance, x_min) for a single point.

        index is reported in DegenerateRootError and log records.
        """
        coeffs = as_coefficients(polynomial, device=self.device)
        (x0, y0), = as_points([point])
        return self._closest_point(coeffs, float(x0), float(y0), index)

    def solve(self, polynomial, points) -> DistanceResult:
        """
        Distances and minimizing abscissae for every point.

        All input is validated before any point is processed. Any error aborts
        the whole call.
        """
        coeffs = as_coefficients(polynomial, device=self.device)
        pts = as_points(points)

        result = DistanceResult(polynomial=coeffs, points=pts)
        for i, (x0, y0) in enumerate(pts):
            distance, x_min = self._closest_point(coeffs, float(x0), float(y0), i)
            result.distances.append(distance)
            result.x_min.append(x_min)
        return result

    def render(self, result: DistanceResult):
        """Hand a finished result to the renderer."""
        if self.renderer is None:
            from .plot import MatplotlibRenderer
            self.renderer = MatplotlibRenderer(show=True)
        return self.renderer(result.polynomial, result.points, result)

    def compute_distances(self, polynomial, points, visualize: bool = False) -> List[float]:
        """
        Euclidean distance from each point to the curve y = p(x).

        Args:
            polynomial: Coefficients, highest degree first
            points: Sequence of (x, y) pairs or an (n, 2) array
            visualize: Also draw the points, curve and shortest segments

        Returns:
            List of non-negative floats, one per point, in input order
        """
        result = self.solve(polynomial, points)
        if visualize:
            self.render(result)
        return result.distances


def compute_distances(
    polynomial,
    points,
    visualize: bool = False,
    renderer: Optional[Callable] = None,
    config: Optional[DistanceConfig] = None,
) -> List[float]:
    """
    Distances from points to a polynomial curve.

    Convenience wrapper around DistanceEngine.compute_distances.
    """
    engine = DistanceEngine(config=config, renderer=renderer)
    return engine.compute_distances(polynomial, points, visualize=visualize)


def polydist(p, points, draw: bool = False) -> List[float]:
    """Short alias: polydist(p, points, draw=False)."""
    return compute_distances(p, points, visualize=draw)
