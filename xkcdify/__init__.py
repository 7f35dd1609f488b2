"""
xkcdify: redraw existing matplotlib charts in a hand-drawn xkcd style
"""

__version__ = "0.1.0"

from xkcdify.scene import reorder_children, uistack, xkcdify, xkcdify_artists
from xkcdify.style import XkcdStyle

__all__ = [
    "__version__",
    "XkcdStyle",
    "reorder_children",
    "uistack",
    "xkcdify",
    "xkcdify_artists",
]
