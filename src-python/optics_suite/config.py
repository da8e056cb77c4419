"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Runtime options for pixel remapping and sky rendering, passed explicitly by
the caller. Numerical tolerances live in core.constants.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """
    Options for pixel-mapped image viewers.

    Attributes:
        pixel_skip: Stride in pixels when walking the source image (> 0).
        scale_divisor: Canvas scale is min(width, height) / scale_divisor.
        visibility_tolerance_deg: Margin a rainbow must clear the horizon by.
    """
    pixel_skip: int = 4
    scale_divisor: float = 4.0
    visibility_tolerance_deg: float = 0.1

    def __post_init__(self) -> None:
        if not isinstance(self.pixel_skip, int) or self.pixel_skip <= 0:
            raise ValueError(f"pixel_skip must be a positive integer, got {self.pixel_skip!r}")
        if not self.scale_divisor > 0:
            raise ValueError(f"scale_divisor must be positive, got {self.scale_divisor}")
        if self.visibility_tolerance_deg < 0:
            raise ValueError(
                f"visibility_tolerance_deg must be non-negative, got {self.visibility_tolerance_deg}"
            )


DEFAULT_RENDER_CONFIG = RenderConfig()
