"""
Per-kind restyling of the artists found on an axes.

Each handler reads an artist's geometry, runs it through the jitter pipeline
and writes it back. Lines and filled shapes also get a mask: a thick stroke
in the axes background colour drawn just underneath them, which produces the
small gaps where hand-drawn strokes cross.
"""

import logging
import warnings
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.lines import Line2D
from matplotlib.patches import Patch, PathPatch, Polygon
from matplotlib.path import Path
from matplotlib.text import Text

from xkcdify.geometry.resample import max_point_count, resample_and_jitter
from xkcdify.geometry.scale import ScaleCache, ScaleContext
from xkcdify.scene.errors import UnsupportedArtistWarning
from xkcdify.scene.stacking import uistack
from xkcdify.style import XkcdStyle

logger = logging.getLogger(__name__)

NONE_STYLES = ("None", "none", "", " ")


@dataclass
class RenderContext:
    """Everything a handler needs besides the artist itself."""

    ax: Axes
    style: XkcdStyle = field(default_factory=XkcdStyle)
    scales: ScaleCache = field(default_factory=ScaleCache)
    rng: Optional[np.random.Generator] = None

    def scale_for(self, transform) -> Optional[ScaleContext]:
        """
        Pixel scale of the coordinate system an artist is drawn in, or None
        when it cannot be expressed as a per-axis factor (log and other
        non-linear scales).
        """
        if not transform.is_affine:
            return None
        if transform is self.ax.transData:
            return self.scales.get(self.ax)
        return ScaleContext.from_transform(transform)

    def max_points(self) -> int:
        bbox = self.ax.get_window_extent()
        return max_point_count(bbox.width, bbox.height)

    def jitter(self, x, y, jitter_x: float, jitter_y: float, scale: ScaleContext):
        return resample_and_jitter(
            x, y, jitter_x, jitter_y, scale=scale, rng=self.rng, max_n=self.max_points()
        )


def _axis_jitter(x: np.ndarray, y: np.ndarray, scale: ScaleContext, jitter_px: float):
    jitter_x, jitter_y = scale.to_data(jitter_px, jitter_px)
    if np.all(np.diff(y) == 0):
        jitter_x = 0.0
    elif np.all(np.diff(x) == 0):
        jitter_y = 0.0
    return jitter_x, jitter_y


def add_background_mask(ctx: RenderContext, x, y, width: float, zorder: float, transform=None) -> Line2D:
    """Draw a background-coloured stroke along (x, y), below the artist at ``zorder``."""
    mask = Line2D(
        x,
        y,
        linewidth=width,
        color=ctx.ax.get_facecolor(),
        zorder=zorder,
        solid_capstyle="round",
        solid_joinstyle="round",
    )
    if transform is not None:
        mask.set_transform(transform)
    ctx.ax.add_line(mask)
    return mask


def _warn_unsupported(artist, reason: str):
    warnings.warn(
        f"Received unsupported {type(artist).__name__} ({reason}), skipping",
        UnsupportedArtistWarning,
        stacklevel=3,
    )


def _split_markers(line: Line2D, ctx: RenderContext):
    """Move a line's markers onto a marker-only copy so they stay on the data points."""
    markers = Line2D([], [])
    markers.update_from(line)
    markers.set_data(line.get_xdata(), line.get_ydata())
    markers.set_linestyle("None")
    markers.set_zorder(line.get_zorder())
    markers.set_label("_nolegend_")
    ctx.ax.add_line(markers)
    line.set_marker("None")
    return markers


def cartoonify_line(line: Line2D, ctx: RenderContext) -> bool:
    """
    Redraw a line with a wobbly stroke.

    Marker-only lines are left alone. Every other line is widened to at
    least ``style.min_line_width``; if it has more than one point it is
    resampled and jittered, without x jitter for horizontal lines and without
    y jitter for vertical ones.

    Returns:
        True if the line was restyled
    """
    if line.get_linestyle() in NONE_STYLES:
        return False

    transform = line.get_transform()
    scale = ctx.scale_for(transform)
    if scale is None:
        _warn_unsupported(line, "non-affine coordinates")
        return False

    style = ctx.style
    if line.get_linewidth() < style.min_line_width:
        line.set_linewidth(style.min_line_width)

    xy = np.asarray(line.get_xydata(), dtype=float)
    x, y = xy[:, 0], xy[:, 1]

    if x.size > 1 and np.all(np.isfinite(xy)):
        if line.get_marker() not in NONE_STYLES:
            markers = _split_markers(line, ctx)
        else:
            markers = None
        jitter_x, jitter_y = _axis_jitter(x, y, scale, style.line_jitter_px)
        x, y = ctx.jitter(x, y, jitter_x, jitter_y, scale)
    else:
        markers = None
        if x.size > 1:
            logger.debug(f"Not jittering {line!r}, it has non-finite points")

    line.set_data(x, y)
    line.set_linestyle("-")

    add_background_mask(
        ctx, x, y, line.get_linewidth() * style.mask_width_factor, line.get_zorder(), transform
    )
    uistack(line, "top")
    if markers is not None:
        uistack(markers, "top")
    return True


def _closed_polygons(path: Path, transform=None) -> List[np.ndarray]:
    polygons = path.to_polygons(transform, closed_only=False)
    closed = []
    for polygon in polygons:
        if len(polygon) == 0:
            continue
        if not np.array_equal(polygon[0], polygon[-1]):
            polygon = np.vstack([polygon, polygon[:1]])
        closed.append(polygon)
    return closed


def _wobble_outlines(polygons: List[np.ndarray], scale: ScaleContext, ctx: RenderContext) -> List[np.ndarray]:
    """Jitter closed outlines, pinning each one's first and last vertex."""
    jitter_x, jitter_y = scale.to_data(ctx.style.line_jitter_px, ctx.style.line_jitter_px)

    outlines = []
    for polygon in polygons:
        x, y = polygon[:, 0], polygon[:, 1]
        if x.size > 1 and np.all(np.isfinite(polygon)):
            x, y = ctx.jitter(x, y, jitter_x, jitter_y, scale)
            x[[0, -1]] = polygon[[0, -1], 0]
            y[[0, -1]] = polygon[[0, -1], 1]
        outlines.append(np.column_stack([x, y]))
    return outlines


def _replace_with_path_patch(patch: Patch, path: Path, ax: Axes) -> PathPatch:
    """
    Swap a fixed-shape patch (Rectangle, Ellipse, ...) for a PathPatch with
    the same look and the given outline.
    """
    replacement = PathPatch(path)
    replacement.update_from(patch)
    replacement.set_zorder(patch.get_zorder())
    replacement.set_gid(patch.get_gid())
    replacement.set_url(patch.get_url())

    patch.remove()
    ax.add_patch(replacement)

    for container in ax.containers:
        members = getattr(container, "patches", None)
        if isinstance(members, list):
            for i, member in enumerate(members):
                if member is patch:
                    members[i] = replacement
    return replacement


def cartoonify_patch(patch: Patch, ctx: RenderContext) -> Optional[Patch]:
    """
    Redraw every closed outline of a patch with a wobbly edge.

    The first and last vertex of each outline are pinned back to the original
    position so neighbouring shapes still line up. Fill, edge colour, hatch
    and every other style property are preserved.

    Returns:
        The restyled patch, which is a new PathPatch when the original shape
        cannot hold arbitrary outlines, or None if it was skipped
    """
    transform = patch.get_data_transform()
    scale = ctx.scale_for(transform)
    if scale is None:
        _warn_unsupported(patch, "non-affine coordinates")
        return None

    polygons = _closed_polygons(patch.get_path(), patch.get_patch_transform())
    if not polygons:
        return None

    outlines = _wobble_outlines(polygons, scale, ctx)

    if isinstance(patch, Polygon) and len(outlines) == 1:
        patch.set_xy(outlines[0])
        result = patch
    else:
        path = Path.make_compound_path(*[Path(outline, closed=True) for outline in outlines])
        if isinstance(patch, PathPatch):
            patch.set_path(path)
            result = patch
        else:
            result = _replace_with_path_patch(patch, path, ctx.ax)

    for outline in outlines:
        add_background_mask(
            ctx, outline[:, 0], outline[:, 1], ctx.style.patch_mask_width, result.get_zorder(), transform
        )
    uistack(result, "top")
    return result


def cartoonify_segments(collection: LineCollection, ctx: RenderContext) -> bool:
    """Jitter each segment of a LineCollection (error bars, vlines, hlines)."""
    scale = ctx.scale_for(collection.get_transform())
    if scale is None:
        _warn_unsupported(collection, "non-affine coordinates")
        return False

    segments = []
    for segment in collection.get_segments():
        segment = np.asarray(segment, dtype=float)
        if len(segment) > 1 and np.all(np.isfinite(segment)):
            x, y = segment[:, 0], segment[:, 1]
            jitter_x, jitter_y = _axis_jitter(x, y, scale, ctx.style.line_jitter_px)
            x, y = ctx.jitter(x, y, jitter_x, jitter_y, scale)
            segment = np.column_stack([x, y])
        segments.append(segment)

    collection.set_segments(segments)
    return True


def cartoonify_regions(collection: PolyCollection, ctx: RenderContext) -> bool:
    """
    Wobble the outlines of a PolyCollection (fill_between, stackplot, violin
    bodies), path by path so per-path colours stay aligned.
    """
    transform = collection.get_transform()
    scale = ctx.scale_for(transform)
    if scale is None:
        _warn_unsupported(collection, "non-affine coordinates")
        return False

    paths = []
    all_outlines = []
    for path in collection.get_paths():
        outlines = _wobble_outlines(_closed_polygons(path), scale, ctx)
        if outlines:
            path = Path.make_compound_path(*[Path(outline, closed=True) for outline in outlines])
        paths.append(path)
        all_outlines.extend(outlines)

    collection.set_verts_and_codes(
        [path.vertices for path in paths],
        [path.codes for path in paths],
    )

    for outline in all_outlines:
        add_background_mask(
            ctx, outline[:, 0], outline[:, 1], ctx.style.patch_mask_width, collection.get_zorder(), transform
        )
    uistack(collection, "top")
    return True


def restyle_text(text: Text, ctx: RenderContext) -> bool:
    text.set_fontfamily(ctx.style.font_family)
    return True
