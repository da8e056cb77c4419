"""
===============================================================================
CORE TESTS - Geometry, Root Finding, Exceptions
===============================================================================

Covers the building blocks every other module leans on:

1. GEOMETRY
   - Point sentinel and Shapely conversion
   - Line/line and ray/segment intersection edge cases

2. ROOT FINDING
   - Bisection accuracy and iteration cap
   - Golden-section minimum, including infeasible (inf/NaN) regions

3. EXCEPTIONS
   - Hierarchy used by the checked boundary API

Run with:
    pytest developer_tests/test_core.py -v
===============================================================================
"""

import sys
import os
import math
import logging

import pytest

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from optics_suite.core import (
    DomainError,
    Line,
    NoImageError,
    OpticsError,
    Point,
    find_root,
    geometry,
    minimize,
)


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


# =============================================================================
# GEOMETRY
# =============================================================================

def test_nan_point_is_not_finite():
    p = Point.nan()
    assert not p.is_finite
    assert math.isnan(p.x) and math.isnan(p.y)
    assert Point(1.0, 2.0).is_finite


def test_point_shapely_round_trip():
    p = Point(1.5, -2.0)
    sp = p.to_shapely()
    assert (sp.x, sp.y) == (1.5, -2.0)
    assert Point.from_shapely(sp) == p
    assert p.to_dict() == {'x': 1.5, 'y': -2.0}


def test_lines_intersection():
    l1 = Line(Point(0, 0), Point(1, 1))
    l2 = Line(Point(0, 2), Point(2, 0))
    p = geometry.lines_intersection(l1, l2)
    assert_close(p.x, 1.0)
    assert_close(p.y, 1.0)


def test_parallel_lines_give_nan():
    l1 = Line(Point(0, 0), Point(1, 0))
    l2 = Line(Point(0, 1), Point(1, 1))
    assert not geometry.lines_intersection(l1, l2).is_finite


def test_ray_segment_hit_and_miss():
    hit = geometry.ray_segment_intersection(
        Point(0, 0), Point(1, 0), Point(2, -1), Point(2, 1)
    )
    assert hit is not None
    assert_close(hit.t, 2.0)
    assert_close(hit.u, 0.5)
    assert_close(hit.point.x, 2.0)

    # Segment behind the origin
    assert geometry.ray_segment_intersection(
        Point(0, 0), Point(-1, 0), Point(2, -1), Point(2, 1)
    ) is None
    # Ray parallel to the segment
    assert geometry.ray_segment_intersection(
        Point(0, 0), Point(0, 1), Point(2, -1), Point(2, 1)
    ) is None
    # Passes beyond the segment end
    assert geometry.ray_segment_intersection(
        Point(0, 5), Point(1, 0), Point(2, -1), Point(2, 1)
    ) is None


def test_reflect_and_normalize():
    r = geometry.reflect_vec(Point(1, -1), Point(0, 1))
    assert (r.x, r.y) == (1, 1)

    n = geometry.normalize_vec(Point(3, 4))
    assert_close(geometry.length(n), 1.0)
    assert geometry.normalize_vec(Point(0, 0)) == Point(0.0, 0.0)

    # perp_right is a clockwise quarter turn
    assert geometry.perp_right(Point(1, 0)) == Point(0, -1)
    assert_close(geometry.cross(Point(1, 0), Point(0, 1)), 1.0)


# =============================================================================
# ROOT FINDING
# =============================================================================

def test_find_root_sqrt2():
    root = find_root(lambda x: x * x - 2.0, 0.0, 2.0)
    assert_close(root, math.sqrt(2.0), 1e-10)


def test_find_root_linear():
    assert_close(find_root(lambda x: x - 3.0, 0.0, 10.0), 3.0, 1e-10)


def test_find_root_iteration_cap_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="optics_suite.core.root_finding")
    root = find_root(lambda x: x - 0.3, 0.0, 1.0, tol=0.0, max_iter=5)
    # Five halvings leave a bracket of width 1/32 around the root
    assert abs(root - 0.3) < 1.0 / 16
    assert any("max_iter=5" in r.getMessage() for r in caplog.records)


def test_minimize_parabola():
    result = minimize(lambda x: (x - 2.0) ** 2, -5.0, 5.0)
    assert_close(result.x, 2.0, 1e-6)
    assert_close(result.fx, 0.0, 1e-10)


def test_minimize_routes_around_infeasible_region():
    def f(x):
        if x < 1.0:
            return math.inf
        if x > 4.0:
            return math.nan
        return (x - 3.0) ** 2

    result = minimize(f, 0.0, 5.0)
    assert_close(result.x, 3.0, 1e-6)


# =============================================================================
# EXCEPTIONS
# =============================================================================

def test_exception_hierarchy():
    err = NoImageError("no image", element="lens", point=Point(1, 0))
    assert isinstance(err, DomainError)
    assert isinstance(err, OpticsError)
    assert isinstance(err, ValueError)
    assert err.element == "lens"
    assert err.message == "no image"

    with pytest.raises(OpticsError):
        raise err
