"""
Kernel density estimation for the salary ridgeline.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

import numpy as np

Kernel = Callable[[np.ndarray], np.ndarray]

PEAK_HEIGHT = 0.8
SINGLE_VALUE_SPREAD = 0.1


def epanechnikov(bandwidth: float) -> Kernel:
    if bandwidth <= 0:
        raise ValueError("bandwidth must be positive")

    def _kernel(x: np.ndarray) -> np.ndarray:
        u = np.asarray(x, dtype="float64") / bandwidth
        return np.where(np.abs(u) <= 1, 0.75 * (1 - u * u) / bandwidth, 0.0)

    return _kernel


def kde(kernel: Kernel, thresholds: Sequence[float], sample: Sequence[float]) -> List[Tuple[float, float]]:
    """Mean kernel weight of the sample at every threshold."""
    grid = np.asarray(thresholds, dtype="float64")
    values = np.asarray(sample, dtype="float64")
    if values.size == 0:
        return [(float(t), 0.0) for t in grid]
    weights = kernel(grid[:, None] - values[None, :]).mean(axis=1)
    return list(zip(grid.tolist(), weights.tolist()))


def density_curve(
    values: Sequence[float],
    grid_min: float,
    grid_max: float,
    bandwidth: float = 10000.0,
    points: int = 100,
) -> List[Tuple[float, float]]:
    """KDE over an even grid, rescaled so the highest point sits at PEAK_HEIGHT.

    A lone observation has no spread, so it is widened to +/-10% first.
    """
    sample = [float(v) for v in values]
    if not sample:
        return []
    if len(sample) == 1:
        v = sample[0]
        sample = [v * (1 - SINGLE_VALUE_SPREAD), v, v * (1 + SINGLE_VALUE_SPREAD)]

    thresholds = np.linspace(grid_min, grid_max, points)
    density = kde(epanechnikov(bandwidth), thresholds, sample)
    peak = max(d for _, d in density) or 1.0
    return [(t, d / peak * PEAK_HEIGHT) for t, d in density]
