"""
Visual stacking order of artists that share a parent axes or figure.

Stacking lists run front to back: index 0 is drawn on top of everything
else, the last index is drawn first. matplotlib keeps the opposite
(draw) order, so the stack adapters reverse on the way in and out. Artists with
different zorders are still sorted by zorder when drawn, the stacking order
only decides between artists of equal zorder.
"""

import logging
import numbers
import warnings
from typing import Iterable, List, Tuple, Union

from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.figure import FigureBase

from xkcdify.scene.errors import ChildNotFoundError, StackingWarning

logger = logging.getLogger(__name__)

PLACEMENTS = ("up", "down", "top", "bottom")


def validate_stacking_args(placement: str, step) -> Tuple[str, int]:
    """
    Check and normalize a placement keyword and step count.

    Raises:
        ValueError: If placement is not one of up/down/top/bottom or step is
            not a positive integer
    """
    if not isinstance(placement, str) or placement.lower() not in PLACEMENTS:
        raise ValueError(
            f"placement must be one of {', '.join(PLACEMENTS)}, got {placement!r}"
        )
    if (
        isinstance(step, bool)
        or not isinstance(step, numbers.Real)
        or step < 1
        or not float(step).is_integer()
    ):
        raise ValueError(f"step must be a positive integer, got {step!r}")
    return placement.lower(), int(step)


def reorder_children(children: List, target, placement: str = "up", step: int = 1) -> List:
    """
    Move one element of a front-to-back stacking list.

    The relative order of every other element is preserved. When the target
    is already where it would be moved to, the input list itself is returned.

    Args:
        children: Front-to-back list of siblings
        target: Element to move, compared by identity
        placement: 'up'/'down' moves by ``step`` positions toward the
            front/back, 'top'/'bottom' moves all the way
        step: Number of positions for 'up' and 'down'

    Returns:
        The reordered list

    Raises:
        ValueError: On an invalid placement or step
        ChildNotFoundError: If target is not in children
    """
    placement, step = validate_stacking_args(placement, step)

    current = next((i for i, child in enumerate(children) if child is target), None)
    if current is None:
        raise ChildNotFoundError(f"{target!r} is not among its parent's children")

    last = len(children) - 1
    if placement == "top":
        new_index = 0
    elif placement == "bottom":
        new_index = last
    elif placement == "up":
        new_index = max(0, current - step)
    else:
        new_index = min(last, current + step)

    if new_index == current:
        return children

    reordered = list(children)
    del reordered[current]
    reordered.insert(new_index, target)
    return reordered


class _ListStack:
    """Front-to-back view of a draw-order list owned by ``owner``."""

    def __init__(self, owner, draw_order: List):
        self.owner = owner
        self._draw_order = draw_order

    def children(self) -> List[Artist]:
        return list(reversed(self._draw_order))

    def install(self, children: List[Artist]):
        """Replace the draw order with the given front-to-back list."""
        if len(children) != len(self._draw_order) or {id(c) for c in children} != {
            id(c) for c in self._draw_order
        }:
            raise ValueError("Installed stacking order must hold the same artists as its parent")
        self._draw_order[:] = list(reversed(children))
        self.owner.stale = True


class AxesStack(_ListStack):
    """Front-to-back view of the artists held by a matplotlib Axes."""

    def __init__(self, ax: Axes):
        super().__init__(ax, ax._children)
        self.ax = ax


# Figure attributes holding the figure's own children, each drawn in list order.
FIGURE_CHILD_LISTS = ("_localaxes", "artists", "lines", "patches", "texts", "images", "legends", "subfigs")


class FigureStack(_ListStack):
    """
    Front-to-back view of one of a figure's child lists.

    A figure keeps its Axes, lines, patches and texts in separate lists and
    only orders artists within each list, so siblings are the members of the
    list holding the target.
    """

    def __init__(self, fig: FigureBase, attr: str = "_localaxes"):
        if attr not in FIGURE_CHILD_LISTS:
            raise ValueError(f"attr must be one of {', '.join(FIGURE_CHILD_LISTS)}, got {attr!r}")
        super().__init__(fig, getattr(fig, attr))
        self.fig = fig
        self.attr = attr

    @classmethod
    def holding(cls, fig: FigureBase, artist: Artist) -> "FigureStack":
        """Stack over whichever child list of ``fig`` holds ``artist``."""
        for attr in FIGURE_CHILD_LISTS:
            if any(child is artist for child in getattr(fig, attr)):
                return cls(fig, attr)
        raise ChildNotFoundError(f"{artist!r} is not among its parent's children")

    def install(self, children: List[Artist]):
        super().install(children)
        if self.attr != "_localaxes":
            return
        # Keep Figure.axes in the same order as the drawn axes.
        axstack = getattr(self.fig, "_axstack", None)
        if axstack is not None and set(axstack._axes) == set(self._draw_order):
            axstack._axes = {ax: axstack._axes[ax] for ax in self._draw_order}


def _parent_figure(artist: Artist):
    if isinstance(artist, FigureBase):
        # Subfigures sit in their parent's subfigs list, a root figure has no parent.
        return getattr(artist, "_parent", None)
    return artist.figure


def stack_for(artist: Artist):
    """
    The stack holding ``artist``: its Axes for artists drawn in one, its
    figure for Axes, subfigures and figure-level artists.

    Returns:
        An ``AxesStack`` or ``FigureStack``, or None if ``artist`` has no parent

    Raises:
        ChildNotFoundError: If the parent does not list ``artist`` among its children
    """
    if not isinstance(artist, (Axes, FigureBase)) and artist.axes is not None:
        return AxesStack(artist.axes)
    fig = _parent_figure(artist)
    if fig is None:
        return None
    return FigureStack.holding(fig, artist)


def uistack(
    targets: Union[Artist, Iterable[Artist]],
    placement: str = "up",
    step: int = 1,
):
    """
    Change the stacking order of one or more artists within their parent.

    Artists drawn in an Axes move among that Axes' children. Axes, subfigures
    and figure-level artists move within their figure. Each target is moved
    independently and in order. A target without a parent, or missing from
    its parent's children, is skipped with a ``StackingWarning``.

    Args:
        targets: An artist or an iterable of artists
        placement: One of 'up', 'down', 'top', 'bottom'
        step: Number of levels for 'up' and 'down'

    Raises:
        ValueError: On an invalid placement or step
        TypeError: If any target is not a matplotlib artist
    """
    placement, step = validate_stacking_args(placement, step)

    if isinstance(targets, Artist):
        targets = [targets]
    targets = list(targets)
    for target in targets:
        if not isinstance(target, Artist):
            raise TypeError(f"Expected matplotlib artists, got {type(target).__name__}")

    for target in targets:
        try:
            stack = stack_for(target)
            if stack is None:
                warnings.warn(
                    f"{target!r} has no parent, cannot reorder", StackingWarning, stacklevel=2
                )
                continue
            children = stack.children()
            reordered = reorder_children(children, target, placement, step)
        except ChildNotFoundError as e:
            warnings.warn(str(e), StackingWarning, stacklevel=2)
            continue

        if reordered is not children:
            stack.install(reordered)
            logger.debug(f"Moved {target!r} {placement} (step {step})")
