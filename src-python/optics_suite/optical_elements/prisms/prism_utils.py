"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
PRISM UTILITIES
===============================================================================
Closed-form companions to the ray tracer:
- Minimum deviation and the incidence that produces it
- Deviation at arbitrary incidence (two-surface Snell's law)
- Critical angle and the incidence below which a ray is trapped

Used to cross-check traced rays and to pick incidence angles without
running a trace.
===============================================================================
"""

from __future__ import annotations

import math


# =============================================================================
# Deviation
# =============================================================================

def minimum_deviation(apex_angle_deg: float, n: float) -> float:
    """
    Minimum deviation angle (degrees): D_min = 2 asin(n sin(A/2)) - A.

    Raises:
        ValueError: If n sin(A/2) > 1 (no symmetric passage exists).

    Example:
        >>> minimum_deviation(60.0, 1.5)
        37.18...
    """
    A = math.radians(apex_angle_deg)
    arg = n * math.sin(A / 2)
    if arg > 1.0:
        raise ValueError(
            f"Minimum deviation impossible: n * sin(A/2) = {arg:.4f} > 1"
        )
    return math.degrees(2 * math.asin(arg) - A)


def incidence_for_minimum_deviation(apex_angle_deg: float, n: float) -> float:
    """Incidence angle (degrees) of the symmetric passage: (A + D_min) / 2."""
    return (apex_angle_deg + minimum_deviation(apex_angle_deg, n)) / 2


def refractive_index_from_deviation(apex_angle_deg: float, d_min_deg: float) -> float:
    """Inverse of minimum_deviation: n = sin((D_min + A)/2) / sin(A/2)."""
    A = math.radians(apex_angle_deg)
    D = math.radians(d_min_deg)
    return math.sin((D + A) / 2) / math.sin(A / 2)


def deviation_at_incidence(apex_angle_deg: float, n: float, theta_i_deg: float) -> float:
    """
    Total deviation (degrees) of a ray crossing two faces that meet at the apex.

    r1 = asin(sin(theta_i)/n), r2 = A - r1, theta_t = asin(n sin(r2)),
    D = theta_i + theta_t - A.

    Returns:
        Deviation in degrees, or NaN when the ray is trapped at the second face.
    """
    A = math.radians(apex_angle_deg)
    theta_i = math.radians(theta_i_deg)

    r1 = math.asin(math.sin(theta_i) / n)
    sin_theta_t = n * math.sin(A - r1)
    if abs(sin_theta_t) > 1.0:
        return math.nan

    return math.degrees(theta_i + math.asin(sin_theta_t) - A)


# =============================================================================
# Total Internal Reflection
# =============================================================================

def critical_angle(n_inside: float, n_outside: float = 1.0) -> float:
    """
    Critical angle (degrees) for light leaving a denser medium.

    Raises:
        ValueError: If n_inside <= n_outside (TIR impossible).
    """
    if n_inside <= n_outside:
        raise ValueError(
            f"TIR impossible: n_inside ({n_inside}) must be > n_outside ({n_outside})"
        )
    return math.degrees(math.asin(n_outside / n_inside))


def tir_onset_angle(face_angle_deg: float, n: float) -> float:
    """
    Incidence angle (degrees) separating trapped rays from transmitted ones.

    For two faces meeting at face_angle_deg, the internal ray reaches the
    second face at (A - r1); it is trapped while that exceeds the critical
    angle, i.e. for incidence below

        theta* = asin(n sin(A - asin(1/n)))

    For the 60 degree prism the left face meets the base at 60 degrees too,
    so this is also the threshold for rays traced toward the base.

    Returns:
        theta* in degrees; 0.0 if no incidence is trapped, 90.0 if every
        incidence is.
    """
    A = math.radians(face_angle_deg)
    arg = n * math.sin(A - math.asin(1.0 / n))
    if arg <= 0.0:
        return 0.0
    if arg >= 1.0:
        return 90.0
    return math.degrees(math.asin(arg))
