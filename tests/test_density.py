"""
Tests for the ridgeline kernel density estimate
"""

import numpy as np
import pytest

from employment_dashboard.data.density import PEAK_HEIGHT, density_curve, epanechnikov, kde


def test_kernel_integrates_to_one():
    kernel = epanechnikov(10000)
    xs = np.linspace(-20000, 20000, 40001)
    step = xs[1] - xs[0]
    assert float(kernel(xs).sum() * step) == pytest.approx(1.0, abs=1e-3)


def test_kernel_is_zero_outside_bandwidth():
    kernel = epanechnikov(100)
    assert kernel(np.array([150.0, -101.0])).tolist() == [0.0, 0.0]
    assert kernel(np.array([0.0]))[0] == pytest.approx(0.75 / 100)


@pytest.mark.parametrize("bandwidth", [0, -1])
def test_non_positive_bandwidth(bandwidth):
    with pytest.raises(ValueError):
        epanechnikov(bandwidth)


def test_kde_empty_sample_is_zero():
    assert kde(epanechnikov(10), [1.0, 2.0], []) == [(1.0, 0.0), (2.0, 0.0)]


def test_density_curve_peaks_at_fixed_height():
    curve = density_curve([50000, 52000, 61000, 90000], 40000, 100000, points=50)
    assert len(curve) == 50
    assert curve[0][0] == 40000
    assert curve[-1][0] == 100000
    assert max(d for _, d in curve) == pytest.approx(PEAK_HEIGHT)
    assert all(d >= 0 for _, d in curve)


def test_single_value_gives_visible_curve():
    curve = density_curve([80000], 60000, 100000)
    densities = [d for _, d in curve]
    assert max(densities) == pytest.approx(PEAK_HEIGHT)
    peak_at = curve[int(np.argmax(densities))][0]
    assert abs(peak_at - 80000) < 1000


def test_empty_values():
    assert density_curve([], 0, 1) == []
