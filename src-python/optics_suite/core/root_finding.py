"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
ROOT-FINDING KERNEL
===============================================================================
Derivative-free scalar solvers used by the Fermat-principle and rainbow
modules:

- find_root(): bisection on a sign-changing bracket
- minimize(): golden-section minimisation on a unimodal bracket

Both functions are pure, iteration-capped and never raise on
non-convergence; they return their best estimate. A non-finite objective
value (e.g. from an impossible Snell's-law evaluation) is treated as +inf
so the search routes away from infeasible regions.
===============================================================================
"""

from __future__ import annotations

import logging
import math
from typing import Callable, NamedTuple

from .constants import (
    BISECTION_MAX_ITER,
    BISECTION_TOLERANCE,
    GOLDEN_MAX_ITER,
    GOLDEN_TOLERANCE,
)

logger = logging.getLogger(__name__)

# 1 - 1/phi, the golden-section interior fraction
_GOLDEN_RHO = 1.0 - 2.0 / (1.0 + math.sqrt(5.0))


class MinimizeResult(NamedTuple):
    """Location and value of a golden-section minimum."""
    x: float
    fx: float


def _finite_or_inf(value: float) -> float:
    return value if math.isfinite(value) else math.inf


def find_root(
    f: Callable[[float], float],
    low: float,
    high: float,
    tol: float = BISECTION_TOLERANCE,
    max_iter: int = BISECTION_MAX_ITER
) -> float:
    """
    Find a root of f in [low, high] by bisection.

    Assumes a sign change across the bracket. Each iteration keeps the half
    whose sign differs from f(low).

    Args:
        f: Scalar function.
        low: Lower bracket end.
        high: Upper bracket end.
        tol: Stop once the half-width of the bracket is below this.
        max_iter: Iteration cap.

    Returns:
        Midpoint of the final bracket (approximate root).

    Example:
        >>> find_root(lambda x: x - 3, 0, 10)
        3.0...
    """
    mid = (low + high) / 2
    for i in range(max_iter):
        mid = (low + high) / 2
        low_val = _finite_or_inf(f(low))
        mid_val = _finite_or_inf(f(mid))

        if low_val * mid_val > 0:
            low = mid
        else:
            high = mid

        if (high - low) / 2 < tol:
            break
    else:
        logger.debug(
            f"find_root hit max_iter={max_iter}; bracket width {high - low:.3e}"
        )

    return mid


def minimize(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = GOLDEN_TOLERANCE,
    max_iter: int = GOLDEN_MAX_ITER
) -> MinimizeResult:
    """
    Minimise f on [a, b] by golden-section search.

    Two interior points are kept at the golden ratio; the bracket shrinks
    toward whichever point has the lower value. No derivatives needed.

    Args:
        f: Scalar objective, unimodal on the bracket.
        a: Lower bracket end.
        b: Upper bracket end.
        tol: Stop once the bracket is narrower than this.
        max_iter: Iteration cap.

    Returns:
        MinimizeResult(x, fx) at the bracket midpoint.

    Example:
        >>> minimize(lambda x: (x - 2) ** 2, -5, 5).x
        2.0...
    """
    x1 = a + _GOLDEN_RHO * (b - a)
    x2 = b - _GOLDEN_RHO * (b - a)
    f1 = _finite_or_inf(f(x1))
    f2 = _finite_or_inf(f(x2))

    iterations = 0
    while abs(b - a) > tol and iterations < max_iter:
        iterations += 1
        if f1 > f2:
            a = x1
            x1, f1 = x2, f2
            x2 = b - _GOLDEN_RHO * (b - a)
            f2 = _finite_or_inf(f(x2))
        else:
            b = x2
            x2, f2 = x1, f1
            x1 = a + _GOLDEN_RHO * (b - a)
            f1 = _finite_or_inf(f(x1))

    if abs(b - a) > tol:
        logger.debug(
            f"minimize hit max_iter={max_iter}; bracket width {abs(b - a):.3e}"
        )

    x = (a + b) / 2
    return MinimizeResult(x, f(x))
