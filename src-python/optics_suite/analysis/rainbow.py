"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
RAINBOW ANGLE SOLVER
===============================================================================
Descartes ray model for a spherical water droplet.

A ray enters at incidence theta, refracts to phi = asin(sin(theta)/n), and
leaves after k internal reflections. Its total deviation is

    primary   (k = 1):  D1 = pi + 2 theta - 4 phi
    secondary (k = 2):  D2 = 2 pi + 2 theta - 6 phi

Light piles up at the minimum of D, which sets the bow's angular radius
(elevation) about the anti-solar point:

    primary:    eps1 = pi - D1
    secondary:  eps2 = D2 - pi

The minimum is found by golden-section search; the closed-form stationary
point cos^2(theta) = (n^2 - 1) / (k^2 + 2k) is kept as a cross-check.
===============================================================================
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULT_RENDER_CONFIG, RenderConfig
from ..core.constants import (
    RAINBOW_THETA_MARGIN,
    VISIBLE_FREQUENCY_MAX,
    VISIBLE_FREQUENCY_MIN,
)
from ..core.root_finding import minimize
from ..materials.dispersion import water_index

logger = logging.getLogger(__name__)

PRIMARY = 1
SECONDARY = 2

# cos^2(theta) = (n^2 - 1) / _STATIONARY_DIVISOR[order]
_STATIONARY_DIVISOR = {PRIMARY: 3.0, SECONDARY: 8.0}


@dataclass(frozen=True)
class BowSolution:
    """
    Minimum-deviation ray of one bow. All angles in degrees.

    elevation_deg is measured from the anti-solar point: 180 - deviation_deg
    for the primary, deviation_deg - 180 for the secondary.
    """
    theta_deg: float
    phi_deg: float
    deviation_deg: float
    elevation_deg: float


@dataclass(frozen=True)
class RainbowSolution:
    """
    Both bows for one refractive index.

    Attributes:
        primary: Single-reflection bow.
        secondary: Double-reflection bow.
        critical_deg: Water-to-air critical angle inside the droplet.
    """
    primary: BowSolution
    secondary: BowSolution
    critical_deg: float


@dataclass(frozen=True)
class RainbowSample:
    """Bow elevations (degrees) at one frequency (THz)."""
    frequency: float
    eps1: float
    eps2: float


def _check_order(order: int) -> None:
    if order not in _STATIONARY_DIVISOR:
        raise ValueError(f"order must be 1 (primary) or 2 (secondary), got {order}")


def _internal_angle(theta: float, n: float) -> float:
    s = math.sin(theta) / n
    if s < -1.0 or s > 1.0:
        return math.nan
    return math.asin(s)


# =============================================================================
# Descartes Model
# =============================================================================

def deviation(theta: float, n: float, order: int = PRIMARY) -> float:
    """
    Total deviation (radians) of a ray entering a droplet at incidence theta.

    Args:
        theta: Incidence angle in radians.
        n: Refractive index of water.
        order: 1 for the primary bow, 2 for the secondary.

    Returns:
        Deviation in radians, or +inf when sin(theta)/n is outside [-1, 1]
        so that minimisation routes away from it.
    """
    _check_order(order)
    phi = _internal_angle(theta, n)
    if math.isnan(phi):
        return math.inf
    if order == PRIMARY:
        return math.pi + 2 * theta - 4 * phi
    return 2 * math.pi + 2 * theta - 6 * phi


def elevation(theta: float, n: float, order: int = PRIMARY) -> float:
    """
    Elevation (radians) above the anti-solar point of the ray leaving at theta.

    This is the angle measured from the anti-solar point, not the total
    deviation; the deviation formulas live in deviation(). Primary:
    pi - D. Secondary: D - pi, so that it comes out positive (about 51
    degrees for water) rather than the negative 180 - D.

    Returns:
        4 phi - 2 theta for the primary bow, pi + 2 theta - 6 phi for the
        secondary, or NaN when the incidence is invalid.
    """
    d = deviation(theta, n, order)
    if not math.isfinite(d):
        return math.nan
    if order == PRIMARY:
        return math.pi - d
    return d - math.pi


def min_deviation_angle(n: float, order: int = PRIMARY, method: str = "golden") -> float:
    """
    Incidence angle (radians) of minimum deviation.

    Args:
        n: Refractive index of water.
        order: 1 for the primary bow, 2 for the secondary.
        method: "golden" for a golden-section search over (0, pi/2), or
            "closed_form" for the stationary point of D.

    Returns:
        theta in radians. The closed form returns NaN when its radicand
        falls outside [0, 1].

    Raises:
        ValueError: For an unknown method or order.

    Example:
        >>> math.degrees(min_deviation_angle(1.333))
        59.4...
    """
    _check_order(order)
    if method == "golden":
        result = minimize(
            lambda th: deviation(th, n, order),
            RAINBOW_THETA_MARGIN,
            math.pi / 2 - RAINBOW_THETA_MARGIN,
        )
        return result.x
    elif method == "closed_form":
        cos_sq = (n * n - 1.0) / _STATIONARY_DIVISOR[order]
        if not (0.0 <= cos_sq <= 1.0):
            return math.nan
        return math.acos(math.sqrt(cos_sq))
    raise ValueError(f"Unknown method '{method}', expected 'golden' or 'closed_form'")


def closed_form_agrees(n: float, order: int = PRIMARY, tol: float = 1e-6) -> bool:
    """True when the golden-section and closed-form minima coincide within tol."""
    closed = min_deviation_angle(n, order, method="closed_form")
    if math.isnan(closed):
        return False
    return abs(min_deviation_angle(n, order) - closed) <= tol


def critical_angle(n: float) -> float:
    """Water-to-air critical angle asin(1/n) in degrees; NaN for n < 1."""
    if not n >= 1.0:
        return math.nan
    return math.degrees(math.asin(1.0 / n))


# =============================================================================
# Solutions
# =============================================================================

def _bow(n: float, order: int) -> BowSolution:
    theta = min_deviation_angle(n, order)
    d_deg = math.degrees(deviation(theta, n, order))
    if order == PRIMARY:
        elev = 180.0 - d_deg
    else:
        elev = d_deg - 180.0
    return BowSolution(
        theta_deg=math.degrees(theta),
        phi_deg=math.degrees(_internal_angle(theta, n)),
        deviation_deg=d_deg,
        elevation_deg=elev,
    )


def find_minima_deg(n: float) -> RainbowSolution:
    """
    Minimum-deviation solutions of both bows for a refractive index.

    elevation_deg is 180 - deviation_deg for the primary bow but
    deviation_deg - 180 for the secondary, whose deviation exceeds 180
    degrees. Applying 180 - D to both would put the secondary at about
    -51 degrees.

    Example:
        >>> sol = find_minima_deg(1.3334)
        >>> round(sol.primary.elevation_deg, 1), round(sol.secondary.elevation_deg, 1)
        (42.0, 51.0)
    """
    return RainbowSolution(
        primary=_bow(n, PRIMARY),
        secondary=_bow(n, SECONDARY),
        critical_deg=critical_angle(n),
    )


def sample_rainbow_angles(
    index_fn: Callable[[float], float] = water_index,
    f_start: float = VISIBLE_FREQUENCY_MIN,
    f_end: float = VISIBLE_FREQUENCY_MAX,
    step: float = 5.0
) -> Iterator[RainbowSample]:
    """
    Lazily tabulate both bow elevations across a frequency range.

    Frequencies run from f_start to f_end inclusive. Frequencies where
    index_fn is undefined are skipped.

    Args:
        index_fn: Refractive index as a function of frequency (THz).
        f_start: First frequency in THz.
        f_end: Last frequency in THz.
        step: Frequency step in THz.

    Yields:
        RainbowSample(frequency, eps1, eps2) in degrees.

    Raises:
        ValueError: If step is not positive.
    """
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")

    count = int(math.floor((f_end - f_start) / step + 1e-9)) + 1
    skipped = 0
    for i in range(max(count, 0)):
        f = f_start + i * step
        n = index_fn(f)
        if not math.isfinite(n):
            skipped += 1
            continue
        solution = find_minima_deg(n)
        yield RainbowSample(f, solution.primary.elevation_deg, solution.secondary.elevation_deg)

    if skipped:
        logger.debug(f"sample_rainbow_angles skipped {skipped} undefined frequencies")


def bow_visible(elevation_deg: float, solar_elevation_deg: float, tolerance: float = 0.1) -> bool:
    """
    Whether a bow's apex clears the horizon.

    The anti-solar point sits solar_elevation_deg below the horizon, so the
    apex is at elevation_deg - solar_elevation_deg.
    """
    if not math.isfinite(elevation_deg):
        return False
    return elevation_deg - solar_elevation_deg > tolerance


def visible_samples(
    solar_elevation_deg: float,
    index_fn: Callable[[float], float] = water_index,
    config: Optional[RenderConfig] = None,
    step: float = 5.0
) -> List[RainbowSample]:
    """
    Spectrum samples for the sky simulator with hidden bows set to NaN.

    A sample is kept when either of its bows clears the horizon by
    config.visibility_tolerance_deg.
    """
    config = config or DEFAULT_RENDER_CONFIG
    tolerance = config.visibility_tolerance_deg
    visible = []
    for sample in sample_rainbow_angles(index_fn, step=step):
        eps1 = sample.eps1 if bow_visible(sample.eps1, solar_elevation_deg, tolerance) else math.nan
        eps2 = sample.eps2 if bow_visible(sample.eps2, solar_elevation_deg, tolerance) else math.nan
        if math.isnan(eps1) and math.isnan(eps2):
            continue
        visible.append(RainbowSample(sample.frequency, eps1, eps2))
    return visible


def elevation_curve(n: float, thetas_deg: Sequence[float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Elevation of both bows against incidence angle.

    Args:
        n: Refractive index of water.
        thetas_deg: Incidence angles in degrees.

    Returns:
        (theta_deg, eps1_deg, eps2_deg) numpy arrays; NaN where invalid.
    """
    theta = np.radians(np.asarray(thetas_deg, dtype=float))
    s = np.sin(theta) / n
    valid = np.abs(s) <= 1.0
    phi = np.where(valid, np.arcsin(np.clip(s, -1.0, 1.0)), np.nan)

    eps1 = np.degrees(4 * phi - 2 * theta)
    eps2 = np.degrees(np.pi + 2 * theta - 6 * phi)
    return np.degrees(theta), eps1, eps2
