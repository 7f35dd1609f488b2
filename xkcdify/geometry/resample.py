"""
Resampling of polylines and hand-drawn jitter.
"""

import math
from typing import Optional, Tuple

import numpy as np

from xkcdify.geometry.noise import generate_noise, smooth
from xkcdify.geometry.scale import ScaleContext

# One resampled point per this many pixels of on-screen length.
PIXELS_PER_POINT = 4
MIN_POINTS = 2
# Derived counts never exceed what it takes to trace the surface border this many times.
MAX_PERIMETERS = 4


def _as_polyline(x, y) -> Tuple[np.ndarray, np.ndarray]:
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    if x.size != y.size:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    if x.size == 0:
        raise ValueError("A polyline needs at least one point")
    return x, y


def polyline_pixel_length(x, y, scale: ScaleContext) -> float:
    """Total on-screen length of a polyline, in pixels."""
    x, y = _as_polyline(x, y)
    dx = np.diff(x * scale.px_per_x)
    dy = np.diff(y * scale.px_per_y)
    return float(np.sum(np.hypot(dx, dy)))


def max_point_count(width_px: float, height_px: float) -> int:
    """Upper bound on the derived point count for a surface of the given pixel size."""
    perimeter = 2 * (abs(width_px) + abs(height_px))
    return max(math.ceil(MAX_PERIMETERS * perimeter / PIXELS_PER_POINT), MIN_POINTS)


def resample(x, y, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Piecewise-linear resample of a polyline to ``n`` points.

    Both coordinates are interpolated independently over a parameter running
    from 0 to 1, with the input points evenly spaced along it.
    """
    x, y = _as_polyline(x, y)
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    t_old = np.linspace(0.0, 1.0, x.size)
    t_new = np.linspace(0.0, 1.0, n)
    return np.interp(t_new, t_old, x), np.interp(t_new, t_old, y)


def resample_and_jitter(
    x,
    y,
    jitter_x: float,
    jitter_y: float,
    n: int = 0,
    scale: Optional[ScaleContext] = None,
    rng: Optional[np.random.Generator] = None,
    max_n: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Resample a polyline and add smoothed random wobble to it.

    When ``n`` is 0 the number of points is derived from the polyline's
    on-screen length (one point per 4 pixels), which needs ``scale``. A
    derived count is capped at ``max_n``, which keeps geometry reaching far
    outside the visible area cheap. The noise on each axis is a burst signal weighted by uniform random values,
    scaled by the jitter amplitude and then smoothed.

    Args:
        x, y: Polyline coordinates in data units
        jitter_x, jitter_y: Maximum wobble along each axis, in data units
        n: Number of output points, 0 to derive it from the pixel length
        scale: Pixel scale of the surface the polyline is drawn on
        rng: Random generator, a fresh unseeded one is used when omitted
        max_n: Cap on the derived number of points, no cap when omitted

    Returns:
        Tuple of the new x and y arrays, both of length n
    """
    x, y = _as_polyline(x, y)
    if jitter_x < 0 or jitter_y < 0:
        raise ValueError(f"Jitter amplitudes must be non-negative, got ({jitter_x}, {jitter_y})")

    if not n:
        if scale is None:
            raise ValueError("A scale context is required to derive the number of points")
        length = polyline_pixel_length(x, y, scale)
        n = max(math.ceil(length / PIXELS_PER_POINT), MIN_POINTS)
        if max_n is not None:
            n = min(n, max(max_n, MIN_POINTS))

    rng = rng if rng is not None else np.random.default_rng()
    x, y = resample(x, y, n)

    x = x + smooth(generate_noise(n, rng) * rng.random(n) * jitter_x)
    y = y + smooth(generate_noise(n, rng) * rng.random(n) * jitter_y)
    return x, y
