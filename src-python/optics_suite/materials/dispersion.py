"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
DISPERSION MODELS
===============================================================================
Refractive index as a function of wavelength or frequency:

- crown_glass_index(): Sellmeier equation for BK7 crown glass (wavelength, nm)
- water_index(): empirical inverse-square model for water (frequency, THz)
- frequency_to_color(): piecewise-linear spectrum colour for plotting

NaN is returned where a model has no real solution; callers filter it.
===============================================================================
"""

from __future__ import annotations

import math
from typing import Callable, Tuple

import numpy as np

from ..core.constants import (
    SPEED_OF_LIGHT,
    VISIBLE_FREQUENCY_MAX,
    VISIBLE_FREQUENCY_MIN,
)

RGB = Tuple[int, int, int]


# =============================================================================
# Sellmeier Model (Crown Glass)
# =============================================================================

# BK7 Sellmeier coefficients (C in um^2)
SELLMEIER_B: Tuple[float, float, float] = (1.03961212, 0.231792344, 1.01146945)
SELLMEIER_C: Tuple[float, float, float] = (0.00600069867, 0.0200179144, 103.560653)


def crown_glass_index(wavelength_nm: float) -> float:
    """
    Refractive index of BK7 crown glass from the 3-term Sellmeier equation.

    n^2 = 1 + sum(B_i * lambda^2 / (lambda^2 - C_i)), lambda in micrometers.

    Args:
        wavelength_nm: Wavelength in nanometers.

    Returns:
        Refractive index (about 1.51-1.54 across the visible band), or NaN
        at a resonance (lambda^2 = C_i) and where n^2 goes negative near one.

    Example:
        >>> crown_glass_index(587.6)  # Helium d line
        1.5168...
    """
    lambda_sq = (wavelength_nm / 1000.0) ** 2
    total = 0.0
    for b, c in zip(SELLMEIER_B, SELLMEIER_C):
        if lambda_sq == c:
            return math.nan
        total += b * lambda_sq / (lambda_sq - c)
    n_sq = 1.0 + total
    if not n_sq >= 0:
        return math.nan
    return math.sqrt(n_sq)


# =============================================================================
# Empirical Water Model
# =============================================================================

def water_index(frequency_thz: float) -> float:
    """
    Refractive index of water from the empirical frequency model.

    n = sqrt(1 + (1.731 - 0.261 * f^2)^(-1/2)), with f in PHz.

    Args:
        frequency_thz: Frequency in THz.

    Returns:
        Refractive index, or NaN when 1.731 - 0.261 f^2 <= 0 (no real
        solution; the model's upper frequency boundary).
    """
    f_phz_sq = (frequency_thz / 1000.0) ** 2
    inv_sq = 1.731 - 0.261 * f_phz_sq
    if inv_sq <= 0:
        return math.nan
    return math.sqrt(inv_sq ** -0.5 + 1.0)


# =============================================================================
# Unit Conversions
# =============================================================================

def frequency_to_wavelength(frequency_thz: float) -> float:
    """Vacuum wavelength in nm for a frequency in THz."""
    return SPEED_OF_LIGHT / (frequency_thz * 1e12) * 1e9


def wavelength_to_frequency(wavelength_nm: float) -> float:
    """Frequency in THz for a vacuum wavelength in nm."""
    return SPEED_OF_LIGHT / (wavelength_nm * 1e-9) / 1e12


# =============================================================================
# Spectrum Colour
# =============================================================================

_COLOR_FREQUENCIES = (405.0, 480.0, 510.0, 530.0, 600.0, 620.0, 680.0, 790.0)
_COLOR_R = (1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 137 / 255, 1.0)
_COLOR_G = (0.0, 127 / 255, 1.0, 1.0, 1.0, 1.0, 0.0, 0.0)
_COLOR_B = (0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0)


def frequency_to_color(frequency_thz: float) -> RGB:
    """
    Approximate display colour of light at a given frequency.

    Linear interpolation (np.interp) between 8 calibration points from
    405 THz (red end) to 790 THz (violet end). Frequencies outside the range
    clamp to the nearest endpoint colour.

    Args:
        frequency_thz: Frequency in THz.

    Returns:
        (r, g, b) tuple of ints in 0-255.

    Raises:
        ValueError: If frequency_thz is NaN or infinite; there is no colour
            to clamp to.
    """
    if not math.isfinite(frequency_thz):
        raise ValueError(f"frequency_thz must be finite, got {frequency_thz}")
    return tuple(
        int(round(float(np.interp(frequency_thz, _COLOR_FREQUENCIES, channel)) * 255))
        for channel in (_COLOR_R, _COLOR_G, _COLOR_B)
    )


def rgb_css(color: RGB) -> str:
    """Format an RGB triple as a CSS 'rgb(r,g,b)' string."""
    r, g, b = color
    return f"rgb({r},{g},{b})"


# =============================================================================
# Sampling
# =============================================================================

def index_curve(
    index_fn: Callable[[float], float],
    start: float = VISIBLE_FREQUENCY_MIN,
    stop: float = VISIBLE_FREQUENCY_MAX,
    step: float = 2.0,
    drop_nan: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Tabulate a dispersion model over an inclusive range.

    Args:
        index_fn: crown_glass_index, water_index, or any scalar model.
        start: First abscissa (nm or THz, matching index_fn).
        stop: Last abscissa (inclusive when it lands on the grid).
        step: Grid spacing.
        drop_nan: Remove samples where the model is undefined.

    Returns:
        (x, n) numpy arrays.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    xs = start + step * np.arange(count)
    ns = np.array([index_fn(float(x)) for x in xs], dtype=float)
    if drop_nan:
        keep = np.isfinite(ns)
        xs, ns = xs[keep], ns[keep]
    return xs, ns
