"""
===============================================================================
FERMAT'S PRINCIPLE TESTS
===============================================================================

Least-time paths across a mirror and a flat interface:
- Reflection point equalises the angles
- Refraction point satisfies Snell's law and minimises travel time
- Travel-time curve for charting

Run with:
    pytest developer_tests/test_fermat.py -v
===============================================================================
"""

import sys
import os
import math

import numpy as np
import pytest
from hypothesis import given, strategies as st

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from optics_suite.analysis.fermat import (
    find_reflection_point,
    find_refraction_point,
    reflection_travel_time,
    refraction_travel_time,
    travel_time_curve,
)


def assert_close(actual, expected, tol=1e-9, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


# =============================================================================
# Reflection
# =============================================================================

def test_reflection_point_equal_angles():
    sol = find_reflection_point(2.0, 1.0, 3.0)
    assert_close(sol.x, 0.5)
    assert_close(sol.theta1_deg, sol.theta2_deg)


def test_reflection_point_is_least_time():
    sol = find_reflection_point(2.0, 1.0, 3.0)
    t = reflection_travel_time(sol.x, 2.0, 1.0, 3.0)
    assert_close(sol.travel_time, t, 1e-20)
    assert reflection_travel_time(sol.x - 0.01, 2.0, 1.0, 3.0) > t
    assert reflection_travel_time(sol.x + 0.01, 2.0, 1.0, 3.0) > t


# =============================================================================
# Refraction
# =============================================================================

def test_refraction_symmetric_media():
    sol = find_refraction_point(2.0, 1.0, 1.0, 1.0, 1.0)
    assert_close(sol.x, 1.0)


def test_refraction_into_denser_medium():
    """Light spends less of its path in the slower medium."""
    L, y1, y2, n1, n2 = 2.0, 1.0, 1.0, 1.0, 1.5
    sol = find_refraction_point(L, y1, y2, n1, n2)

    assert sol.x > L / 2
    assert_close(sol.snell_left, sol.snell_right, 1e-9, "Snell")
    assert sol.theta2_deg < sol.theta1_deg

    t = refraction_travel_time(sol.x, L, y1, y2, n1, n2)
    assert refraction_travel_time(sol.x - 1e-3, L, y1, y2, n1, n2) > t
    assert refraction_travel_time(sol.x + 1e-3, L, y1, y2, n1, n2) > t


def test_refraction_source_on_interface():
    """y1 = 0: light leaves A grazing, so n2 sin(theta2) = n1 = 1."""
    sol = find_refraction_point(1.0, 0.0, 1.0, 1.0, 1.5)
    # (L - x) / sqrt((L - x)^2 + 1) = 2/3
    assert_close(sol.x, 1.0 - 2.0 / math.sqrt(5.0), 1e-9)
    assert_close(sol.snell_left, sol.snell_right, 1e-9, "Snell")


def test_refraction_destination_on_interface():
    sol = find_refraction_point(1.0, 1.0, 0.0, 1.5, 1.0)
    assert_close(sol.x, 2.0 / math.sqrt(5.0), 1e-9)
    assert math.isfinite(sol.travel_time)


def test_reflection_both_points_on_mirror():
    sol = find_reflection_point(2.0, 0.0, 0.0)
    assert math.isnan(sol.x)
    assert math.isnan(sol.travel_time)


@given(
    L=st.floats(min_value=0.5, max_value=10.0),
    y1=st.floats(min_value=0.1, max_value=5.0),
    y2=st.floats(min_value=0.1, max_value=5.0),
    n1=st.floats(min_value=1.0, max_value=2.5),
    n2=st.floats(min_value=1.0, max_value=2.5),
)
def test_refraction_point_satisfies_snell(L, y1, y2, n1, n2):
    sol = find_refraction_point(L, y1, y2, n1, n2)
    assert 0.0 <= sol.x <= L
    assert abs(sol.snell_left - sol.snell_right) < 1e-6


# =============================================================================
# Travel-time curve
# =============================================================================

def test_travel_time_curve():
    x, t = travel_time_curve(2.0, 1.0, 1.0)
    assert x.shape == (201,)
    assert t.shape == (201,)
    assert int(np.argmin(t)) == 100
    # 2 sqrt(2) m at c, in nanoseconds
    assert_close(t[100], 2.0 * math.sqrt(2.0) / 299792458.0 * 1e9, 1e-9)


def test_travel_time_curve_bad_steps():
    with pytest.raises(ValueError):
        travel_time_curve(2.0, 1.0, 1.0, steps=0)
