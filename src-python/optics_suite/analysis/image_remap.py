"""
Copyright 2026 optics-suite authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
PIXEL REMAPPING
===============================================================================
Pushes an RGBA image placed in object space through a point transform and
collects where each sampled pixel lands.

The source image is centred on object_position and stretched to
object_size. Pixel (i, j) (column, row) maps to

    pX = objX + (i / W - 0.5) * objW
    pY = objY - (j / H - 0.5) * objH

Rows grow downward in the buffer, so pY decreases with j. Transparent pixels
and pixels the element forms no image of are dropped.
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from ..config import DEFAULT_RENDER_CONFIG, RenderConfig
from ..core.geometry import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemappedImage:
    """
    Image-space samples of a remapped picture.

    Attributes:
        points: (N, 2) array of image-space coordinates.
        colors: (N, 4) uint8 array of RGBA values, row-aligned with points.
        rejected: Number of opaque samples with no image.
    """
    points: np.ndarray
    colors: np.ndarray
    rejected: int

    def __len__(self) -> int:
        return len(self.points)


def _check_pixels(pixels: np.ndarray) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"pixels must have shape (H, W, 4), got {pixels.shape}")
    return pixels


def remap_image(
    pixels: np.ndarray,
    object_position: Tuple[float, float],
    object_size: Tuple[float, float],
    transformation: Callable[[Point], Point],
    config: Optional[RenderConfig] = None
) -> RemappedImage:
    """
    Map sampled pixels of an RGBA image through a point transform.

    Args:
        pixels: RGBA buffer of shape (H, W, 4).
        object_position: Centre (x, y) of the object in object space.
        object_size: (width, height) of the object in object space.
        transformation: Point transform, e.g. from make_transform().
        config: Render options; pixel_skip sets the sampling stride.

    Returns:
        RemappedImage with one row per surviving sample.

    Raises:
        ValueError: If pixels is not an (H, W, 4) buffer.
    """
    config = config or DEFAULT_RENDER_CONFIG
    pixels = _check_pixels(pixels)
    height, width = pixels.shape[:2]
    obj_x, obj_y = object_position
    obj_w, obj_h = object_size
    skip = config.pixel_skip

    points = []
    colors = []
    rejected = 0
    for j in range(0, height, skip):
        for i in range(0, width, skip):
            rgba = pixels[j, i]
            if rgba[3] == 0:
                continue

            p = Point(
                obj_x + (i / width - 0.5) * obj_w,
                obj_y - (j / height - 0.5) * obj_h,
            )
            image = transformation(p)
            if not image.is_finite:
                rejected += 1
                continue

            points.append((image.x, image.y))
            colors.append(rgba)

    logger.debug(
        f"remap_image: {len(points)} samples kept, {rejected} without image "
        f"({width}x{height}, skip={skip})"
    )

    return RemappedImage(
        points=np.array(points, dtype=float).reshape(-1, 2),
        colors=np.array(colors, dtype=np.uint8).reshape(-1, 4),
        rejected=rejected,
    )


def to_canvas(
    points: np.ndarray,
    width: float,
    height: float,
    config: Optional[RenderConfig] = None
) -> np.ndarray:
    """
    Map image-space points to canvas pixel coordinates.

    The origin goes to the canvas centre, one unit spans
    min(width, height) / scale_divisor pixels, and y is flipped so that up
    in image space is up on screen.

    Returns:
        (N, 2) array of canvas coordinates.
    """
    config = config or DEFAULT_RENDER_CONFIG
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    scale = min(width, height) / config.scale_divisor
    canvas = np.empty_like(pts)
    canvas[:, 0] = width / 2 + pts[:, 0] * scale
    canvas[:, 1] = height / 2 - pts[:, 1] * scale
    return canvas
