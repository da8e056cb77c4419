"""
===============================================================================
DISPERSION MODEL TESTS
===============================================================================

Verifies the refractive-index models and the spectrum colour map:
- Sellmeier crown glass at the helium d line, normal dispersion
- Empirical water model and its upper frequency boundary (NaN)
- Colour endpoints and clamping
- Tabulation helper

Run with:
    pytest developer_tests/test_dispersion.py -v
===============================================================================
"""

import sys
import os
import math

import numpy as np
import pytest

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from optics_suite.materials import (
    crown_glass_index,
    frequency_to_color,
    frequency_to_wavelength,
    index_curve,
    rgb_css,
    water_index,
)


def assert_close(actual, expected, tol=1e-6, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


# =============================================================================
# CROWN GLASS
# =============================================================================

def test_crown_glass_d_line():
    """BK7 n_d = 1.5168."""
    assert_close(crown_glass_index(587.6), 1.5168, 1e-3, "n_d")


def test_crown_glass_normal_dispersion():
    """Index falls monotonically with wavelength across the visible band."""
    wl, n = index_curve(crown_glass_index, 400.0, 800.0, 10.0)
    assert len(wl) == 41
    assert np.all(np.diff(n) < 0)
    assert 1.50 < n[-1] < n[0] < 1.54


def test_crown_glass_near_resonance_is_nan():
    """Just below the 0.0200 um^2 resonance (about 141.5 nm) n^2 is negative."""
    assert math.isnan(crown_glass_index(140.0))
    assert math.isfinite(crown_glass_index(100.0))


def test_crown_glass_curve_through_resonance():
    wl, n = index_curve(crown_glass_index, 100.0, 2000.0, 10.0)
    assert len(wl) == 191
    assert np.isnan(n[4])  # 140 nm
    assert np.isfinite(n[-1])


# =============================================================================
# WATER
# =============================================================================

def test_water_index_green():
    assert_close(water_index(550.0), 1.33342, 1e-4, "n(550 THz)")


def test_water_index_increases_with_frequency():
    assert water_index(405.0) < water_index(600.0) < water_index(790.0)


def test_water_index_domain_boundary():
    """Above roughly 2575 THz the model has no real solution."""
    assert math.isfinite(water_index(2550.0))
    assert math.isnan(water_index(2600.0))
    assert math.isnan(water_index(3000.0))


def test_index_curve_drop_nan():
    f, n = index_curve(water_index, 2500.0, 2700.0, 50.0)
    assert len(f) == 5
    assert int(np.isnan(n).sum()) == 3

    f, n = index_curve(water_index, 2500.0, 2700.0, 50.0, drop_nan=True)
    assert list(f) == [2500.0, 2550.0]
    assert np.all(np.isfinite(n))


def test_index_curve_rejects_bad_step():
    with pytest.raises(ValueError):
        index_curve(water_index, 405.0, 790.0, 0.0)


# =============================================================================
# COLOUR AND UNITS
# =============================================================================

def test_color_endpoints_and_clamping():
    assert frequency_to_color(405.0) == (255, 0, 0)
    assert frequency_to_color(790.0) == (255, 0, 255)
    assert frequency_to_color(300.0) == (255, 0, 0)
    assert frequency_to_color(900.0) == (255, 0, 255)


def test_color_calibration_point():
    assert frequency_to_color(510.0) == (255, 255, 0)
    assert frequency_to_color(600.0) == (0, 255, 255)


def test_color_interpolates_between_calibration_points():
    # Three quarters of the way from 405 (255, 0, 0) to 480 (255, 127, 0)
    assert frequency_to_color(461.25) == (255, 95, 0)


@pytest.mark.parametrize("frequency", [math.nan, math.inf, -math.inf])
def test_color_rejects_non_finite_frequency(frequency):
    with pytest.raises(ValueError):
        frequency_to_color(frequency)


def test_rgb_css():
    assert rgb_css((1, 2, 3)) == "rgb(1,2,3)"
    assert rgb_css(frequency_to_color(405.0)) == "rgb(255,0,0)"


def test_frequency_to_wavelength():
    assert_close(frequency_to_wavelength(545.0), 550.078, 1e-2, "545 THz")
