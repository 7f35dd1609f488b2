"""
Hand-drawn replacement for an axes' spines, ticks and labels.

The original decorations are hidden and redrawn on a transparent overlay
axes sitting exactly on top of the original one, sharing its limits, so the
new strokes can be placed in data coordinates.
"""

import logging
from typing import List, Optional

import numpy as np
from matplotlib.axes import Axes
from matplotlib.lines import Line2D

from xkcdify.style import XkcdStyle

logger = logging.getLogger(__name__)


def _has_label(axis) -> bool:
    return bool(axis.label.get_text())


def is_box_on(ax: Axes) -> bool:
    return ax.spines["top"].get_visible() or ax.spines["right"].get_visible()


def make_label_room(ax: Axes, style: XkcdStyle):
    """Shrink ``ax`` to leave room for axis labels in the larger xkcd font."""
    left_px = style.ylabel_space_px if _has_label(ax.yaxis) else 0
    bottom_px = style.xlabel_space_px if _has_label(ax.xaxis) else 0
    if not (left_px or bottom_px):
        return

    fig_bbox = ax.figure.bbox
    left = left_px / fig_bbox.width
    bottom = bottom_px / fig_bbox.height

    pos = ax.get_position()
    if pos.width <= left or pos.height <= bottom:
        logger.warning(f"Axes too small to make room for labels: {pos.bounds}")
        return
    ax.set_position([pos.x0 + left, pos.y0 + bottom, pos.width - left, pos.height - bottom])


def visible_ticks(axis, lo: float, hi: float) -> np.ndarray:
    """Major tick locations of ``axis`` that fall inside [lo, hi]."""
    lo, hi = sorted((lo, hi))
    ticks = np.asarray(axis.get_majorticklocs(), dtype=float)
    return ticks[(ticks >= lo) & (ticks <= hi)]


def tick_labels(axis, ticks: np.ndarray) -> List[str]:
    if len(ticks) == 0:
        return []
    return list(axis.get_major_formatter().format_ticks(ticks))


def create_overlay(ax: Axes) -> Axes:
    """Transparent axes on top of ``ax`` with the same position, scales and limits."""
    overlay = ax.figure.add_axes(ax.get_position().bounds, facecolor="none", label="xkcd-overlay")
    overlay.set_xscale(ax.get_xscale())
    overlay.set_yscale(ax.get_yscale())
    overlay.set_xlim(ax.get_xlim())
    overlay.set_ylim(ax.get_ylim())
    overlay.set_axis_off()
    overlay.set_zorder(ax.get_zorder() + 1)
    overlay.set_navigate(False)
    return overlay


def hide_axes_decorations(ax: Axes):
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.tick_params(
        axis="both",
        which="both",
        length=0,
        labelbottom=False,
        labeltop=False,
        labelleft=False,
        labelright=False,
    )


def draw_hand_drawn_axes(
    ax: Axes,
    style: Optional[XkcdStyle] = None,
    rng: Optional[np.random.Generator] = None,
) -> Axes:
    """
    Replace the spines, ticks and labels of ``ax`` with hand-drawn ones.

    Args:
        ax: Axes to decorate
        style: Style constants, defaults when omitted
        rng: Random generator for the spine wobble

    Returns:
        The overlay axes holding the new decorations
    """
    style = style or XkcdStyle()
    rng = rng if rng is not None else np.random.default_rng()

    box_on = is_box_on(ax)
    make_label_room(ax, style)

    x0, x1 = ax.get_xlim()
    y0, y1 = ax.get_ylim()
    x_range = abs(x1 - x0)
    y_range = abs(y1 - y0)
    # Offsets point away from the plot area even on inverted axes.
    x_dir = 1.0 if x1 >= x0 else -1.0
    y_dir = 1.0 if y1 >= y0 else -1.0

    # Read ticks before the original decorations are hidden.
    x_ticks = visible_ticks(ax.xaxis, x0, x1)
    y_ticks = visible_ticks(ax.yaxis, y0, y1)
    x_tick_labels = tick_labels(ax.xaxis, x_ticks)
    y_tick_labels = tick_labels(ax.yaxis, y_ticks)

    overlay = create_overlay(ax)
    bbox = ax.get_window_extent()
    nx = max(round(bbox.width * style.axis_points_per_px), 2)
    ny = max(round(bbox.height * style.axis_points_per_px), 2)

    def wobble(n):
        return rng.random(n) * style.axis_wobble

    edges = [
        (x0 + x_dir * wobble(ny) * x_range, np.linspace(y0, y1, ny)),
        (np.linspace(x0, x1, nx), y0 + y_dir * wobble(nx) * y_range),
    ]
    if box_on:
        edges.append((x1 + x_dir * wobble(ny) * x_range, np.linspace(y0, y1, ny)))
        edges.append((np.linspace(x0, x1, nx), y1 + y_dir * wobble(nx) * y_range))

    for x, y in edges:
        overlay.add_line(
            Line2D(x, y, color=style.axis_color, linewidth=style.axis_line_width, clip_on=False)
        )

    tick_kw = dict(color=style.axis_color, linewidth=style.tick_width, clip_on=False)
    text_kw = dict(fontfamily=style.font_family, fontsize=style.font_size, clip_on=False)

    half = style.tick_length * y_range
    for tick, label in zip(x_ticks, x_tick_labels):
        overlay.add_line(Line2D([tick, tick], [y0 - half, y0 + half], **tick_kw))
        overlay.text(
            tick, y0 - y_dir * style.tick_label_offset * y_range, label, ha="center", va="top", **text_kw
        )

    half = style.tick_length * x_range
    for tick, label in zip(y_ticks, y_tick_labels):
        overlay.add_line(Line2D([x0 - half, x0 + half], [tick, tick], **tick_kw))
        overlay.text(
            x0 - x_dir * style.tick_label_offset * x_range, tick, label, ha="right", va="center", **text_kw
        )

    xlabel = ax.get_xlabel()
    if xlabel:
        overlay.text(
            (x0 + x1) / 2, y0 - y_dir * style.axis_label_offset * y_range, xlabel,
            ha="center", va="top", **text_kw
        )
        ax.set_xlabel("")

    ylabel = ax.get_ylabel()
    if ylabel:
        overlay.text(
            x0 - x_dir * style.axis_label_offset * x_range, (y0 + y1) / 2, ylabel,
            ha="center", va="bottom", rotation=90, **text_kw
        )
        ax.set_ylabel("")

    hide_axes_decorations(ax)
    logger.debug(
        f"Drew hand-drawn axes: {len(edges)} edges, {len(x_ticks)} x ticks, {len(y_ticks)} y ticks"
    )
    return overlay
