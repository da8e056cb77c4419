"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
EXCEPTIONS
===============================================================================
Exception hierarchy for callers that want checked handling instead of
NaN propagation.

Per-pixel code never raises: transforms return Point.nan() for "no image".
These classes are raised only at the explicit boundary API
(optical_elements.elements.require_image) and for construction-time
misuse.

Hierarchy:
- OpticsError
  - DomainError
    - NoImageError
===============================================================================
"""

from __future__ import annotations

from typing import Any, Optional


class OpticsError(Exception):
    """Base class for all optics-suite errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainError(OpticsError, ValueError):
    """An input lies outside the domain where a physical result exists."""


class NoImageError(DomainError):
    """
    Raised when an optical element forms no image of a point.

    Attributes:
        element: The element that was asked for an image.
        point: The object-space point.
    """

    def __init__(
        self,
        message: str,
        element: Optional[Any] = None,
        point: Optional[Any] = None,
    ) -> None:
        self.element = element
        self.point = point
        super().__init__(message)
