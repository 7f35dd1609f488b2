"""
Restyling of matplotlib artists and their stacking order.
"""

from xkcdify.scene.errors import (
    ChildNotFoundError,
    StackingWarning,
    UnsupportedArtistWarning,
    XkcdifyWarning,
)
from xkcdify.scene.kinds import ArtistKind, classify
from xkcdify.scene.stacking import AxesStack, FigureStack, reorder_children, stack_for, uistack
from xkcdify.scene.transform import xkcdify, xkcdify_artists

__all__ = [
    "ArtistKind",
    "AxesStack",
    "ChildNotFoundError",
    "FigureStack",
    "StackingWarning",
    "UnsupportedArtistWarning",
    "XkcdifyWarning",
    "classify",
    "reorder_children",
    "stack_for",
    "uistack",
    "xkcdify",
    "xkcdify_artists",
]
