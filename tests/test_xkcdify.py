"""
Tests for restyling whole axes.
"""

import warnings

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.colors import to_rgba
from matplotlib.patches import PathPatch, Polygon

from xkcdify import XkcdStyle, xkcdify, xkcdify_artists
from xkcdify.geometry.resample import max_point_count
from xkcdify.scene.errors import UnsupportedArtistWarning
from xkcdify.scene.kinds import ArtistKind
from xkcdify.scene.stacking import AxesStack


class TestLines:
    """Tests for line restyling."""

    def test_line_is_resampled_and_widened(self, fig_ax, rng):
        """Thin dashed lines become thick, solid and resampled."""
        _, ax = fig_ax
        x = np.linspace(0, 10, 10)
        (line,) = ax.plot(x, np.sin(x), "--", linewidth=1)

        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert len(line.get_xdata()) > 10
        assert len(line.get_xdata()) == len(line.get_ydata())
        assert line.get_linewidth() == 4
        assert line.get_linestyle() == "-"

    def test_wide_lines_keep_their_width(self, fig_ax, rng):
        """Lines already wider than the minimum keep their width."""
        _, ax = fig_ax
        (line,) = ax.plot([0, 1], [0, 1], linewidth=7)
        xkcdify(ax, render_axes_lines=False, rng=rng)
        assert line.get_linewidth() == 7

    def test_horizontal_line_has_no_x_jitter(self, fig_ax, rng):
        """Horizontal lines only wobble vertically."""
        _, ax = fig_ax
        (line,) = ax.plot([0, 10], [1, 1])
        xkcdify(ax, render_axes_lines=False, rng=rng)

        x = line.get_xdata()
        assert np.allclose(x, np.linspace(0, 10, len(x)))

    def test_vertical_line_has_no_y_jitter(self, fig_ax, rng):
        """Vertical lines only wobble horizontally."""
        _, ax = fig_ax
        (line,) = ax.plot([2, 2], [0, 5])
        ax.set_xlim(0, 4)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        y = line.get_ydata()
        assert np.allclose(y, np.linspace(0, 5, len(y)))

    def test_marker_only_line_untouched(self, fig_ax, rng):
        """Marker-only lines get no jitter and no mask."""
        _, ax = fig_ax
        (dots,) = ax.plot([0, 1, 2], [0, 1, 0], "o")
        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert list(dots.get_xdata()) == [0, 1, 2]
        assert len(ax.lines) == 1

    def test_markers_stay_on_data_points(self, fig_ax, rng):
        """Markers move to a copy left on the data points."""
        _, ax = fig_ax
        (line,) = ax.plot([0, 1, 2], [0, 1, 0], "o-")
        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert line.get_marker() == "None"
        marker_lines = [other for other in ax.lines if other.get_marker() == "o"]
        assert len(marker_lines) == 1
        assert list(marker_lines[0].get_xdata()) == [0, 1, 2]
        assert marker_lines[0].get_linestyle() == "None"

    def test_single_point_line(self, fig_ax, rng):
        """A one-point line is not jittered but still restyled."""
        _, ax = fig_ax
        (line,) = ax.plot([1], [1], "-", linewidth=1)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert list(line.get_xdata()) == [1]
        assert line.get_linewidth() == 4

    def test_masks_sit_under_their_lines(self, fig_ax, rng):
        """Each line is drawn just in front of its own mask."""
        _, ax = fig_ax
        (first,) = ax.plot([0, 1], [0, 1])
        (second,) = ax.plot([0, 1], [1, 0])
        xkcdify(ax, render_axes_lines=False, rng=rng)

        front_to_back = AxesStack(ax).children()
        assert len(front_to_back) == 4
        assert front_to_back[0] is second
        assert front_to_back[2] is first

        mask = front_to_back[1]
        assert mask.get_linewidth() == pytest.approx(second.get_linewidth() * 3)
        assert mask.get_color() == ax.get_facecolor()

    def test_limits_are_not_autoscaled(self, fig_ax, rng):
        """Added masks do not change the axes limits."""
        _, ax = fig_ax
        ax.plot([0, 1], [0, 1])
        xlim, ylim = ax.get_xlim(), ax.get_ylim()
        xkcdify(ax, render_axes_lines=False, rng=rng)
        assert ax.get_xlim() == xlim
        assert ax.get_ylim() == ylim

    def test_zoomed_in_long_line_is_capped(self, fig_ax, rng):
        """A line reaching far past the limits gets a bounded number of points."""
        _, ax = fig_ax
        (line,) = ax.plot([0, 1e6], [0, 1e6])
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        bbox = ax.get_window_extent()
        assert 2 < len(line.get_xdata()) <= max_point_count(bbox.width, bbox.height)

    def test_log_axes_are_skipped_with_warning(self, fig_ax, rng):
        """Lines on a log axis are left alone rather than jittered with a linear scale."""
        _, ax = fig_ax
        (line,) = ax.plot([1, 10], [1, 10])
        ax.set_xscale("log")
        with pytest.warns(UnsupportedArtistWarning, match="non-affine"):
            xkcdify(ax, render_axes_lines=False, rng=rng)
        assert list(line.get_xdata()) == [1, 10]
        assert len(ax.lines) == 1

    def test_seeded_runs_match(self, rng):
        """Equal seeds give identical output."""
        results = []
        for _ in range(2):
            fig, ax = plt.subplots()
            (line,) = ax.plot(np.arange(5), np.arange(5) ** 2)
            xkcdify(ax, rng=np.random.default_rng(7))
            results.append(line.get_ydata().copy())
            plt.close(fig)
        assert np.array_equal(results[0], results[1])


class TestPatches:
    """Tests for filled shape restyling."""

    def test_bar_colours_are_preserved(self, fig_ax, rng):
        """Replaced bars keep colour, edge and hatch."""
        _, ax = fig_ax
        colours = ["red", "green", "blue"]
        bars = ax.bar([1, 2, 3], [3, 2, 4], color=colours, edgecolor="k", hatch="//")
        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert len(ax.patches) == 3
        for patch, colour in zip(bars.patches, colours):
            assert isinstance(patch, PathPatch)
            assert patch in list(ax.patches)
            assert patch.get_facecolor() == to_rgba(colour)
            assert patch.get_edgecolor() == to_rgba("k")
            assert patch.get_hatch() == "//"

    def test_bar_corner_is_pinned(self, fig_ax, rng):
        """The first outline vertex stays on the bar corner."""
        _, ax = fig_ax
        bars = ax.bar([1], [3], width=0.8)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        vertices = bars.patches[0].get_path().vertices
        assert np.allclose(vertices[0], [0.6, 0.0])
        assert len(vertices) > 5

    def test_polygon_updated_in_place(self, fig_ax, rng):
        """Polygons keep their identity and colour."""
        _, ax = fig_ax
        triangle = Polygon([[0, 0], [1, 0], [1, 1]], facecolor="orange")
        ax.add_patch(triangle)
        ax.set_xlim(-1, 2)
        ax.set_ylim(-1, 2)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        assert list(ax.patches) == [triangle]
        xy = triangle.get_xy()
        assert len(xy) > 4
        assert np.allclose(xy[0], [0, 0])
        assert triangle.get_facecolor() == to_rgba("orange")

    def test_boxplot_patches(self, fig_ax, rng):
        """Filled boxplot boxes get wobbly outlines."""
        _, ax = fig_ax
        parts = ax.boxplot([[1, 2, 3, 4, 10], [2, 3, 4, 5, 6]], patch_artist=True)
        boxes = parts["boxes"]
        xkcdify(ax, render_axes_lines=False, rng=rng)
        for box in boxes:
            assert len(box.get_path().vertices) > 5

    def test_patch_is_brought_in_front_of_its_mask(self, fig_ax, rng):
        """A restyled patch is drawn in front of its mask."""
        _, ax = fig_ax
        bars = ax.bar([1], [3])
        xkcdify(ax, render_axes_lines=False, rng=rng)
        assert AxesStack(ax).children()[0] is bars.patches[0]


class TestRegions:
    """Tests for filled regions drawn as PolyCollections."""

    def test_fill_between(self, fig_ax, rng):
        """The area outline is wobbled and keeps its colour and start point."""
        _, ax = fig_ax
        x = np.linspace(0, 4, 20)
        area = ax.fill_between(x, np.sin(x), np.sin(x) + 1, color="orange")
        original = area.get_paths()[0].vertices.copy()

        with warnings.catch_warnings():
            warnings.simplefilter("error", UnsupportedArtistWarning)
            xkcdify(ax, render_axes_lines=False, rng=rng)

        (path,) = area.get_paths()
        assert len(path.vertices) > len(original)
        assert np.allclose(path.vertices[0], original[0])
        assert np.allclose(area.get_facecolor()[0], to_rgba("orange"))
        assert AxesStack(ax).children()[0] is area

    def test_stackplot_colours_stay_aligned(self, fig_ax, rng):
        """Each stacked layer keeps one path and its own colour."""
        _, ax = fig_ax
        x = np.arange(5)
        layers = ax.stackplot(x, [1, 2, 3, 2, 1], [2, 2, 1, 1, 2], colors=["red", "blue"])
        xkcdify(ax, render_axes_lines=False, rng=rng)

        for layer, colour in zip(layers, ["red", "blue"]):
            assert len(layer.get_paths()) == 1
            assert np.allclose(layer.get_facecolor()[0], to_rgba(colour))

    def test_violin_bodies(self, fig_ax, rng):
        """Violin bodies and their extrema lines are all handled."""
        _, ax = fig_ax
        parts = ax.violinplot([rng.standard_normal(50), rng.standard_normal(50) + 2])
        before = [body.get_paths()[0].vertices.copy() for body in parts["bodies"]]

        counts = xkcdify_artists(parts, ax, rng=rng)

        assert counts[ArtistKind.REGIONS] == 2
        for body, vertices in zip(parts["bodies"], before):
            assert not np.array_equal(body.get_paths()[0].vertices, vertices)


class TestOtherArtists:
    """Tests for segments, text and unsupported artists."""

    def test_vlines_are_jittered(self, fig_ax, rng):
        """vlines segments wobble only sideways."""
        _, ax = fig_ax
        collection = ax.vlines([1, 2], [0, 0], [3, 3])
        ax.set_xlim(0, 3)
        xkcdify(ax, render_axes_lines=False, rng=rng)

        for segment in collection.get_segments():
            assert len(segment) > 2
            assert np.allclose(segment[:, 1], np.linspace(0, 3, len(segment)))

    def test_text_font(self, fig_ax, rng):
        """Free text switches to the xkcd font."""
        _, ax = fig_ax
        text = ax.text(0.5, 0.5, "hello")
        style = XkcdStyle()
        xkcdify(ax, render_axes_lines=False, style=style, rng=rng)
        assert text.get_fontfamily() == style.font_family

    def test_unsupported_artist_warns_and_continues(self, fig_ax, rng):
        """Unsupported artists warn without stopping the pass."""
        _, ax = fig_ax
        ax.scatter([0, 1], [0, 1])
        (line,) = ax.plot([0, 1], [0, 1])
        with pytest.warns(UnsupportedArtistWarning, match="PathCollection"):
            xkcdify(ax, render_axes_lines=False, rng=rng)
        assert len(line.get_xdata()) > 2

    def test_xkcdify_artists_boxplot(self, fig_ax, rng):
        """Only the given artists are restyled."""
        _, ax = fig_ax
        parts = ax.boxplot([[1, 2, 3, 4, 10], [2, 3, 4, 5, 6]])
        (other,) = ax.plot([0, 3], [0, 3])
        counts = xkcdify_artists(parts, ax, rng=rng)

        n_lines = sum(len(members) for members in parts.values())
        assert counts[ArtistKind.LINE] == n_lines
        assert len(other.get_xdata()) == 2


class TestXkcdifyArguments:
    """Tests for argument handling."""

    @pytest.mark.parametrize("axes", [None, []])
    def test_missing_axes(self, axes):
        """Nothing to restyle raises TypeError."""
        with pytest.raises(TypeError):
            xkcdify(axes)

    def test_non_axes_rejected_before_any_change(self, fig_ax):
        """A bad item is rejected before any axes changes."""
        _, ax = fig_ax
        (line,) = ax.plot([0, 1], [0, 1])
        with pytest.raises(TypeError):
            xkcdify([ax, "not axes"])
        assert len(line.get_xdata()) == 2

    def test_axes_array(self, rng):
        """A subplots array is accepted."""
        fig, axes = plt.subplots(2, 2)
        for ax in axes.flat:
            ax.plot([0, 1], [0, 1])
        overlays = xkcdify(axes, rng=rng)
        assert len(overlays) == 4
        plt.close(fig)

    def test_no_overlays_without_axes_lines(self, fig_ax, rng):
        """No overlays are created when axes lines are off."""
        _, ax = fig_ax
        assert xkcdify(ax, render_axes_lines=False, rng=rng) == []


class TestHandDrawnAxes:
    """Tests for the redrawn spines, ticks and labels."""

    def test_overlay_matches_axes(self, fig_ax, rng):
        """The overlay shares position and limits, drawn on top."""
        fig, ax = fig_ax
        ax.plot([0, 10], [0, 5])
        (overlay,) = xkcdify(ax, rng=rng)

        assert overlay in fig.axes
        assert overlay.get_xlim() == ax.get_xlim()
        assert overlay.get_ylim() == ax.get_ylim()
        assert overlay.get_position().bounds == pytest.approx(ax.get_position().bounds)
        assert overlay.get_zorder() > ax.get_zorder()

    def test_original_decorations_hidden(self, fig_ax, rng):
        """The original spines are hidden."""
        _, ax = fig_ax
        ax.plot([0, 1], [0, 1])
        xkcdify(ax, rng=rng)
        assert not any(spine.get_visible() for spine in ax.spines.values())

    def test_four_edges_with_box(self, fig_ax, rng):
        """A boxed axes gets four hand-drawn edges."""
        _, ax = fig_ax
        (overlay,) = xkcdify(ax, rng=rng)
        edges = [line for line in overlay.lines if line.get_linewidth() == 3]
        assert len(edges) == 4

    def test_two_edges_without_box(self, fig_ax, rng):
        """An open axes gets only left and bottom edges."""
        _, ax = fig_ax
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        (overlay,) = xkcdify(ax, rng=rng)
        edges = [line for line in overlay.lines if line.get_linewidth() == 3]
        assert len(edges) == 2

    def test_ticks_and_labels_redrawn(self, fig_ax, rng):
        """Visible ticks and their labels are redrawn."""
        _, ax = fig_ax
        ax.set_xlim(0, 2)
        ax.set_xticks([0, 1, 2])
        ax.set_ylim(0, 4)
        ax.set_yticks([1, 3])
        (overlay,) = xkcdify(ax, rng=rng)

        ticks = [line for line in overlay.lines if line.get_linewidth() == 2]
        assert len(ticks) == 5
        labels = {text.get_text() for text in overlay.texts}
        assert {"0", "1", "2", "3"} <= labels

    def test_ticks_outside_limits_are_dropped(self, fig_ax, rng):
        """Ticks outside the limits are not drawn."""
        _, ax = fig_ax
        ax.set_xticks([0, 1, 2])
        ax.set_xlim(0.5, 1.5)
        ax.set_yticks([])
        (overlay,) = xkcdify(ax, rng=rng)
        ticks = [line for line in overlay.lines if line.get_linewidth() == 2]
        assert len(ticks) == 1

    def test_tick_labels_outside_inverted_axes(self, fig_ax, rng):
        """On an inverted y axis the x tick labels still sit below the plot."""
        _, ax = fig_ax
        ax.set_xticks([1])
        ax.set_xlim(0, 2)
        ax.set_yticks([])
        ax.set_ylim(4, 0)
        ax.set_xlabel("Depth")
        (overlay,) = xkcdify(ax, rng=rng)

        texts = {text.get_text(): text for text in overlay.texts}
        assert texts["1"].get_position()[1] > 4
        assert texts["Depth"].get_position()[1] > texts["1"].get_position()[1]

    def test_axis_labels_moved_to_overlay(self, fig_ax, rng):
        """Axis labels move to the overlay and the axes shrinks to fit them."""
        fig, ax = fig_ax
        ax.set_xlabel("Time")
        ax.set_ylabel("Value")
        before = ax.get_position()
        (overlay,) = xkcdify(ax, rng=rng)

        assert ax.get_xlabel() == ""
        assert ax.get_ylabel() == ""
        texts = {text.get_text(): text for text in overlay.texts}
        assert "Time" in texts and "Value" in texts
        assert texts["Value"].get_rotation() == 90

        after = ax.get_position()
        assert after.y0 == pytest.approx(before.y0 + 35 / fig.bbox.height)
        assert after.x0 == pytest.approx(before.x0 + 45 / fig.bbox.width)

    def test_no_room_made_without_labels(self, fig_ax, rng):
        """Axes without labels keep their position."""
        _, ax = fig_ax
        before = ax.get_position().bounds
        xkcdify(ax, rng=rng)
        assert ax.get_position().bounds == pytest.approx(before)

    def test_fonts(self, fig_ax, rng):
        """Title and overlay texts use the style's fonts and sizes."""
        _, ax = fig_ax
        ax.set_title("Title")
        style = XkcdStyle(font_size=15, title_font_size=21)
        (overlay,) = xkcdify(ax, style=style, rng=rng)

        assert ax.title.get_fontsize() == 21
        assert ax.title.get_fontfamily() == style.font_family
        for text in overlay.texts:
            assert text.get_fontsize() == 15

    def test_figure_draws(self, fig_ax, rng):
        """A mixed figure renders after restyling."""
        fig, ax = fig_ax
        ax.plot([0, 1, 2], [0, 1, 0], "o-")
        ax.bar([0.5, 1.5], [0.5, 0.7])
        ax.errorbar([0.5, 1.5], [0.2, 0.4], yerr=0.1)
        ax.set_xlabel("x")
        ax.set_title("t")
        xkcdify(ax, rng=rng)
        fig.canvas.draw()
