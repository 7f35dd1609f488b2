"""
Conversion between data units and screen pixels for a drawing surface.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleContext:
    """
    Pixels per data unit along each axis of one drawing surface.

    Args:
        px_per_x: Screen pixels covered by one x data unit
        px_per_y: Screen pixels covered by one y data unit
    """

    px_per_x: float
    px_per_y: float

    def __post_init__(self):
        if not (self.px_per_x > 0 and self.px_per_y > 0):
            raise ValueError(
                f"Pixel scales must be positive, got ({self.px_per_x}, {self.px_per_y})"
            )

    @classmethod
    def from_extent(
        cls,
        width_px: float,
        height_px: float,
        xlim: Tuple[float, float],
        ylim: Tuple[float, float],
    ) -> "ScaleContext":
        """Build a context from a pixel size and the data limits shown in it."""
        x_span = abs(xlim[1] - xlim[0])
        y_span = abs(ylim[1] - ylim[0])
        if x_span == 0 or y_span == 0:
            raise ValueError(f"Degenerate axes limits: xlim={xlim}, ylim={ylim}")
        return cls(px_per_x=width_px / x_span, px_per_y=height_px / y_span)

    @classmethod
    def from_axes(cls, ax) -> "ScaleContext":
        """Build a context from a matplotlib Axes' current pixel box and limits."""
        bbox = ax.get_window_extent()
        return cls.from_extent(bbox.width, bbox.height, ax.get_xlim(), ax.get_ylim())

    @classmethod
    def from_transform(cls, transform) -> "ScaleContext":
        """
        Build a context from an affine transform into display pixels, for
        artists that are not drawn in plain data coordinates.
        """
        origin, unit_x, unit_y = transform.transform([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
        return cls(
            px_per_x=float(np.hypot(*(unit_x - origin))),
            px_per_y=float(np.hypot(*(unit_y - origin))),
        )

    def to_data(self, dx_px: float, dy_px: float) -> Tuple[float, float]:
        """Convert a pixel offset into data units."""
        return dx_px / self.px_per_x, dy_px / self.px_per_y


def _signature(ax) -> Tuple[float, ...]:
    bounds = tuple(ax.get_window_extent().bounds)
    return bounds + tuple(ax.get_xlim()) + tuple(ax.get_ylim())


class ScaleCache:
    """
    Scale contexts keyed by drawing surface.

    An entry is recomputed whenever the surface's pixel box or limits differ
    from the ones it was computed with. ``invalidate`` drops entries
    explicitly.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Tuple[float, ...], ScaleContext]] = {}

    def get(self, ax) -> ScaleContext:
        key = id(ax)
        signature = _signature(ax)
        entry = self._entries.get(key)
        if entry is not None and entry[0] == signature:
            return entry[1]

        context = ScaleContext.from_axes(ax)
        logger.debug(
            f"Computed scale for axes {key}: "
            f"{context.px_per_x:.3f} px/x, {context.px_per_y:.3f} px/y"
        )
        self._entries[key] = (signature, context)
        return context

    def invalidate(self, ax: Optional[object] = None):
        """Forget the cached scale for ``ax``, or for every surface when omitted."""
        if ax is None:
            self._entries.clear()
        else:
            self._entries.pop(id(ax), None)

    def __contains__(self, ax) -> bool:
        return id(ax) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
