"""
===============================================================================
OPTICAL ELEMENT DISPATCH TESTS
===============================================================================

Element records and the transform() entry point:
- Each element dispatches to its point transform
- Prism element traces toward the left face; TIR gives no image
- image_of() / require_image() checked boundary
- Type tags and immutability

Run with:
    pytest developer_tests/test_elements.py -v
===============================================================================
"""

import sys
import os
import math
import dataclasses

import pytest

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from optics_suite.core import DomainError, NoImageError, Point
from optics_suite.optical_elements import (
    AnamorphicArc,
    ConcaveMirror,
    ConvexMirror,
    PlaneMirror,
    Prism,
    ThinLens,
    image_of,
    make_transform,
    require_image,
    transform,
)


def assert_point_close(actual, expected, tol=1e-9, msg=""):
    if abs(actual.x - expected.x) > tol or abs(actual.y - expected.y) > tol:
        raise AssertionError(f"{msg}: expected {expected}, got {actual}")


# =============================================================================
# Dispatch
# =============================================================================

@pytest.mark.parametrize("element, p, expected", [
    (PlaneMirror(), Point(1.0, 2.0), Point(-1.0, 2.0)),
    (ThinLens(1.0), Point(3.0, 0.5), Point(-1.5, -0.25)),
    (ConcaveMirror(2.0), Point(3.0, 0.0), Point(1.5, 0.0)),
    (ConvexMirror(1.0), Point(2.0, 0.0), Point(2.0 / 3.0, 0.0)),
    (AnamorphicArc(2.0, 90.0), Point(0.0, 0.0), Point(0.7, 0.0)),
])
def test_transform_dispatch(element, p, expected):
    assert_point_close(transform(element, p), expected, msg=element.type)
    assert_point_close(make_transform(element)(p), expected, msg=element.type)


def test_unsupported_element():
    with pytest.raises(TypeError):
        transform("mirror", Point(0.0, 0.0))


# =============================================================================
# Prism element
# =============================================================================

def test_prism_element_exits():
    prism = Prism(60.0, 1.5)
    image = transform(prism, Point(-2.0, -0.3))
    assert image.is_finite
    # The exiting segment leaves on the far side of the prism
    assert image.x > 0.0


def test_prism_element_total_internal_reflection():
    """A steep approach from above meets the base beyond the critical angle."""
    prism = Prism(60.0, 1.5)
    p = Point(-2.0, 1.5)
    assert not transform(prism, p).is_finite
    assert image_of(prism, p) is None


@pytest.mark.parametrize("apex,height", [(0.0, 1.0), (180.0, 1.0), (200.0, 1.0), (60.0, -1.0)])
def test_prism_element_rejects_bad_geometry_at_construction(apex, height):
    with pytest.raises(ValueError):
        Prism(apex, 1.5, height=height)


def test_prism_geometry_property():
    prism = Prism(60.0, 1.5, height=2.0)
    assert prism.prism_geometry.height == 2.0
    assert abs(prism.prism_geometry.interior_angle(2) - 60.0) < 1e-9


# =============================================================================
# Checked boundary
# =============================================================================

def test_image_of_returns_point():
    image = image_of(ThinLens(1.0), Point(3.0, 0.5))
    assert image is not None
    assert_point_close(image, Point(-1.5, -0.25))


def test_require_image_raises_with_context():
    lens = ThinLens(1.0)
    p = Point(1.0, 0.2)
    with pytest.raises(NoImageError) as excinfo:
        require_image(lens, p)
    err = excinfo.value
    assert err.element is lens
    assert err.point == p
    assert "thin_lens" in str(err)
    assert isinstance(err, DomainError)
    assert isinstance(err, ValueError)


def test_require_image_prism_tir():
    prism = Prism(60.0, 1.5)
    with pytest.raises(NoImageError) as excinfo:
        require_image(prism, Point(-2.0, 1.5))
    assert excinfo.value.element is prism


def test_nan_input_propagates():
    assert image_of(PlaneMirror(), Point.nan()) is None
    assert image_of(Prism(60.0, 1.5), Point.nan()) is None


# =============================================================================
# Records
# =============================================================================

def test_type_tags():
    assert PlaneMirror.type == 'plane_mirror'
    assert ThinLens(1.0).type == 'thin_lens'
    assert ConcaveMirror(1.0).type == 'concave_mirror'
    assert ConvexMirror(1.0).type == 'convex_mirror'
    assert AnamorphicArc(1.0, 90.0).type == 'anamorphic_arc'
    assert Prism(60.0, 1.5).type == 'prism'


def test_elements_are_frozen():
    lens = ThinLens(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        lens.focal_length = 2.0
    # The type tag is not a constructor field
    assert [f.name for f in dataclasses.fields(lens)] == ['focal_length']


def test_anamorphic_default_ratio():
    arc = AnamorphicArc(2.0, 90.0)
    assert math.isclose(arc.tau, 0.35)
