"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
LINEAR REGRESSION
===============================================================================
Least-squares line fit y = m x + c, used to check the thin lens equation
against bench measurements: 1/v = -1/u + 1/f is a straight line in
(1/u, 1/v) whose intercept is 1/f.
===============================================================================
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

# Relative threshold below which a variance sum counts as zero
_DEGENERATE_RTOL = 1e-12

# Object/image distances (u, v) in cm from a converging-lens bench experiment
LENS_EXPERIMENT_DATA: List[Tuple[float, float]] = [
    (20.0, 65.5),
    (25.0, 40.0),
    (30.0, 31.0),
    (35.0, 27.0),
    (40.0, 25.0),
    (45.0, 23.1),
    (50.0, 21.5),
    (55.0, 20.5),
]


@dataclass(frozen=True)
class RegressionResult:
    """Fitted line and its coefficient of determination."""
    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class LensFit:
    """Thin-lens fit of 1/v against 1/u."""
    regression: RegressionResult
    focal_length: float


def _is_zero(spread: float, scale: float) -> bool:
    return abs(spread) <= _DEGENERATE_RTOL * max(1.0, abs(scale))


def linear_regression(points: Iterable[Tuple[float, float]]) -> RegressionResult:
    """
    Ordinary least-squares fit over (x, y) pairs.

    One pass accumulates sum(x), sum(y), sum(xy), sum(x^2) and sum(y^2);
    R^2 is the squared Pearson correlation.

    Degenerate input (no points, or every x equal) has no defined line and
    reports slope, intercept and R^2 as 0. If every y is equal the line is
    exact but R^2 is reported as 0.

    Example:
        >>> linear_regression([(1, 2), (2, 4), (3, 6)])
        RegressionResult(slope=2.0, intercept=0.0, r_squared=1.0)
    """
    n = 0
    sum_x = sum_y = sum_xy = sum_x2 = sum_y2 = 0.0
    for x, y in points:
        n += 1
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_x2 += x * x
        sum_y2 += y * y

    sxx = n * sum_x2 - sum_x * sum_x
    if n == 0 or _is_zero(sxx, n * sum_x2):
        logger.warning(
            f"Degenerate regression input (n={n}); reporting slope, intercept and R^2 as 0"
        )
        return RegressionResult(0.0, 0.0, 0.0)

    sxy = n * sum_xy - sum_x * sum_y
    syy = n * sum_y2 - sum_y * sum_y

    slope = sxy / sxx
    intercept = (sum_y - slope * sum_x) / n

    if _is_zero(syy, n * sum_y2):
        r_squared = 0.0
    else:
        r_squared = (sxy / math.sqrt(sxx * syy)) ** 2

    return RegressionResult(slope, intercept, r_squared)


def fit_thin_lens(uv_pairs: Iterable[Tuple[float, float]] = LENS_EXPERIMENT_DATA) -> LensFit:
    """
    Fit 1/v = m (1/u) + 1/f to measured object/image distances.

    Returns:
        LensFit with focal_length = 1 / intercept (NaN for a zero intercept).
    """
    reciprocal = [(1.0 / u, 1.0 / v) for u, v in uv_pairs]
    regression = linear_regression(reciprocal)
    focal_length = 1.0 / regression.intercept if regression.intercept != 0 else math.nan
    return LensFit(regression, focal_length)
