"""
Entry point: redraw existing matplotlib axes in an xkcd style.
"""

import logging
import warnings
from collections import Counter
from typing import Iterable, List, Optional, Union

import numpy as np
from matplotlib.axes import Axes

from xkcdify.geometry.scale import ScaleCache
from xkcdify.scene.axes_lines import draw_hand_drawn_axes
from xkcdify.scene.errors import UnsupportedArtistWarning
from xkcdify.scene.fonts import change_all_text_fonts
from xkcdify.scene.handlers import (
    RenderContext,
    cartoonify_line,
    cartoonify_patch,
    cartoonify_regions,
    cartoonify_segments,
    restyle_text,
)
from xkcdify.scene.kinds import ArtistKind
from xkcdify.scene.stacking import AxesStack
from xkcdify.scene.traversal import walk
from xkcdify.style import XkcdStyle

logger = logging.getLogger(__name__)

HANDLERS = {
    ArtistKind.LINE: cartoonify_line,
    ArtistKind.FILLED_SHAPE: cartoonify_patch,
    ArtistKind.SEGMENTS: cartoonify_segments,
    ArtistKind.REGIONS: cartoonify_regions,
    ArtistKind.TEXT: restyle_text,
}


def restyle(items: Iterable, ctx: RenderContext) -> Counter:
    """
    Apply the per-kind handlers to every artist reachable from ``items``.

    Unsupported artists are reported with an ``UnsupportedArtistWarning``
    and skipped.

    Returns:
        Count of handled artists per kind
    """
    counts = Counter()
    for kind, artist in walk(items):
        handler = HANDLERS.get(kind)
        if handler is None:
            warnings.warn(
                f"Received unsupported child of type {type(artist).__name__}",
                UnsupportedArtistWarning,
                stacklevel=2,
            )
            continue
        handler(artist, ctx)
        counts[kind] += 1
    return counts


def _as_axes_list(axes) -> List[Axes]:
    if axes is None:
        raise TypeError("axes must be specified")
    if isinstance(axes, Axes):
        return [axes]
    if isinstance(axes, np.ndarray):
        axes = axes.ravel()
    axes_list = list(axes)
    if not axes_list:
        raise TypeError("axes must be specified")
    for ax in axes_list:
        if not isinstance(ax, Axes):
            raise TypeError(f"Expected matplotlib Axes, got {type(ax).__name__}")
    return axes_list


def _freeze_limits(ax: Axes):
    # Masks and replacement patches must not trigger autoscaling.
    ax.set_xlim(ax.get_xlim())
    ax.set_ylim(ax.get_ylim())


def xkcdify(
    axes: Union[Axes, Iterable[Axes]],
    render_axes_lines: bool = True,
    style: Optional[XkcdStyle] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Axes]:
    """
    Redraw the children of one or more axes in a hand-drawn xkcd style.

    Lines and filled shapes (bars, box plots, polygons) get wobbly outlines,
    line collections get wobbly segments and every text switches to the
    xkcd font. With ``render_axes_lines`` the spines, ticks and labels are
    replaced by hand-drawn ones on an overlay axes.

    Args:
        axes: An Axes, or an iterable/array of Axes
        render_axes_lines: Whether to redraw the axes decorations
        style: Style constants, defaults when omitted
        rng: Random generator, a fresh unseeded one is used when omitted

    Returns:
        The overlay axes created, one per input axes when
        ``render_axes_lines`` is set, otherwise an empty list

    Raises:
        TypeError: If nothing is passed or an item is not an Axes
    """
    axes_list = _as_axes_list(axes)
    style = style or XkcdStyle()
    scales = ScaleCache()

    overlays = []
    for ax in axes_list:
        _freeze_limits(ax)
        ctx = RenderContext(ax=ax, style=style, scales=scales, rng=rng)

        # Back to front, i.e. draw order.
        children = AxesStack(ax).children()[::-1]
        counts = restyle(children, ctx)
        logger.debug(
            "Restyled " + ", ".join(f"{n} {kind.value}" for kind, n in counts.items())
        )

        if render_axes_lines:
            overlays.append(draw_hand_drawn_axes(ax, style, rng))

        change_all_text_fonts(ax, style)

    logger.info(f"xkcdified {len(axes_list)} axes")
    return overlays


def xkcdify_artists(
    artists: Iterable,
    ax: Axes,
    style: Optional[XkcdStyle] = None,
    rng: Optional[np.random.Generator] = None,
) -> Counter:
    """
    Restyle only the given artists or groups of artists (for instance the
    BarContainer returned by ``Axes.bar`` or the dict returned by
    ``Axes.boxplot``), leaving the rest of ``ax`` untouched.
    """
    if not isinstance(ax, Axes):
        raise TypeError(f"Expected matplotlib Axes, got {type(ax).__name__}")
    _freeze_limits(ax)
    ctx = RenderContext(ax=ax, style=style or XkcdStyle(), rng=rng)
    return restyle([artists], ctx)
