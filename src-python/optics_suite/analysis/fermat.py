"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
FERMAT'S PRINCIPLE
===============================================================================
Least-time paths between A = (0, y1) and B = (L, y2) via a point (x, 0) on
a flat mirror or interface.

    reflection:  t(x) = (sqrt(x^2 + y1^2) + sqrt((L - x)^2 + y2^2)) / c
    refraction:  t(x) = (n1 sqrt(x^2 + y1^2) + n2 sqrt((L - x)^2 + y2^2)) / c

The refraction minimum is where dt/dx = 0, i.e. n1 sin(theta1) =
n2 sin(theta2). That expression is monotonic in x on [0, L], so bisection
on it always converges.
===============================================================================
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.constants import SPEED_OF_LIGHT
from ..core.root_finding import find_root


@dataclass(frozen=True)
class FermatSolution:
    """
    Least-time crossing point.

    Attributes:
        x: Position of the crossing on the surface.
        travel_time: Total time in seconds.
        theta1_deg: Angle to the normal on the source side.
        theta2_deg: Angle to the normal on the destination side.
        snell_left: n1 sin(theta1).
        snell_right: n2 sin(theta2).
    """
    x: float
    travel_time: float
    theta1_deg: float
    theta2_deg: float
    snell_left: float
    snell_right: float


def reflection_travel_time(x: float, L: float, y1: float, y2: float) -> float:
    """Travel time (s) of the path A -> (x, 0) -> B in vacuum."""
    return (math.hypot(x, y1) + math.hypot(L - x, y2)) / SPEED_OF_LIGHT


def refraction_travel_time(x: float, L: float, y1: float, y2: float, n1: float, n2: float) -> float:
    """Travel time (s) of the path A -> (x, 0) -> B across two media."""
    return (n1 * math.hypot(x, y1) + n2 * math.hypot(L - x, y2)) / SPEED_OF_LIGHT


def _solution(x: float, L: float, y1: float, y2: float, n1: float, n2: float) -> FermatSolution:
    theta1 = math.atan2(x, y1)
    theta2 = math.atan2(L - x, y2)
    return FermatSolution(
        x=x,
        travel_time=refraction_travel_time(x, L, y1, y2, n1, n2),
        theta1_deg=math.degrees(theta1),
        theta2_deg=math.degrees(theta2),
        snell_left=n1 * math.sin(theta1),
        snell_right=n2 * math.sin(theta2),
    )


def find_refraction_point(L: float, y1: float, y2: float, n1: float, n2: float) -> FermatSolution:
    """
    Least-time crossing of a flat interface.

    Args:
        L: Horizontal separation of A and B.
        y1: Distance of A from the interface.
        y2: Distance of B from the interface.
        n1: Index on A's side.
        n2: Index on B's side.

    Returns:
        FermatSolution; snell_left and snell_right agree to within the
        bisection tolerance.

    Example:
        >>> find_refraction_point(2.0, 1.0, 1.0, 1.0, 1.0).x
        1.0...
    """
    def snell_difference(x: float) -> float:
        return n1 * _sine(x, y1) - n2 * _sine(L - x, y2)

    x = find_root(snell_difference, 0.0, L)
    return _solution(x, L, y1, y2, n1, n2)


def _sine(along: float, height: float) -> float:
    # A point on the surface seen from itself: take the grazing limit
    h = math.hypot(along, height)
    if h == 0:
        return 1.0
    return along / h


def find_reflection_point(L: float, y1: float, y2: float) -> FermatSolution:
    """
    Least-time mirror point, x = L y1 / (y1 + y2); angles come out equal.

    With y1 + y2 = 0 there is no unique point and every field is NaN.
    """
    if y1 + y2 == 0:
        return FermatSolution(*([math.nan] * 6))
    x = L * y1 / (y1 + y2)
    return _solution(x, L, y1, y2, 1.0, 1.0)


def travel_time_curve(
    L: float,
    y1: float,
    y2: float,
    n1: float = 1.0,
    n2: float = 1.0,
    steps: int = 200
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Travel time across [0, L] for the time-versus-position chart.

    Returns:
        (x, t) numpy arrays, t in nanoseconds.
    """
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    x = np.linspace(0.0, L, steps + 1)
    t = (n1 * np.hypot(x, y1) + n2 * np.hypot(L - x, y2)) / SPEED_OF_LIGHT
    return x, t * 1e9
