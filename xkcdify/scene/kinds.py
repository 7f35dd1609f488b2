"""
Closed set of artist kinds that the restyling pass knows how to handle.
"""

from enum import Enum
from typing import Iterator

from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.container import Container
from matplotlib.lines import Line2D
from matplotlib.patches import Patch
from matplotlib.text import Text


class ArtistKind(Enum):
    LINE = "line"
    FILLED_SHAPE = "filled-shape"
    SEGMENTS = "segments"
    REGIONS = "regions"
    TEXT = "text"
    GROUP = "group"
    UNSUPPORTED = "unsupported"


def classify(obj) -> ArtistKind:
    """Map a matplotlib object, or a grouping of them, to its kind."""
    if isinstance(obj, Line2D):
        return ArtistKind.LINE
    if isinstance(obj, LineCollection):
        return ArtistKind.SEGMENTS
    if isinstance(obj, PolyCollection):
        return ArtistKind.REGIONS
    if isinstance(obj, Patch):
        return ArtistKind.FILLED_SHAPE
    if isinstance(obj, Text):
        return ArtistKind.TEXT
    # Container is a tuple subclass; dicts come from Axes.boxplot.
    if isinstance(obj, (Container, dict, list, tuple)):
        return ArtistKind.GROUP
    return ArtistKind.UNSUPPORTED


def group_children(group) -> Iterator:
    """Members of a group, in order, skipping empty slots."""
    if isinstance(group, Container):
        members = group.get_children()
    elif isinstance(group, dict):
        members = group.values()
    else:
        members = group
    for member in members:
        if member is not None:
            yield member
