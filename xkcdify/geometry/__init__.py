"""
Numeric primitives behind the hand-drawn look.
"""

from xkcdify.geometry.noise import generate_noise, smooth
from xkcdify.geometry.resample import (
    max_point_count,
    polyline_pixel_length,
    resample,
    resample_and_jitter,
)
from xkcdify.geometry.scale import ScaleCache, ScaleContext

__all__ = [
    "generate_noise",
    "smooth",
    "max_point_count",
    "polyline_pixel_length",
    "resample",
    "resample_and_jitter",
    "ScaleCache",
    "ScaleContext",
]
