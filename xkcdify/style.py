"""
Style constants for the hand-drawn look.
"""

from dataclasses import dataclass, field, fields
from typing import Any, List

# Same fallback chain matplotlib uses for its own xkcd mode.
XKCD_FONTS = ["xkcd", "xkcd Script", "Humor Sans", "Comic Neue", "Comic Sans MS"]


@dataclass
class XkcdStyle:
    """
    Tunable constants of the xkcd transform.

    Pixel quantities are converted to data units per axes, so the look does
    not depend on zoom level.
    """

    font_family: List[str] = field(default_factory=lambda: list(XKCD_FONTS))
    font_size: float = 16
    title_font_size: float = 18

    # Extra room made for axis labels drawn in the larger font
    xlabel_space_px: float = 35
    ylabel_space_px: float = 45

    line_jitter_px: float = 6
    min_line_width: float = 4
    mask_width_factor: float = 3
    patch_mask_width: float = 6

    axis_line_width: float = 3
    axis_color: str = "k"
    axis_wobble: float = 0.005
    axis_points_per_px: float = 0.1
    tick_width: float = 2
    tick_length: float = 0.02
    tick_label_offset: float = 0.04
    axis_label_offset: float = 0.12

    @classmethod
    def from_config(cls, config: Any) -> "XkcdStyle":
        """
        Build a style from ``style.*`` keys of a Config, keeping defaults for
        keys it does not set.
        """
        overrides = {}
        for f in fields(cls):
            value = config.get(f"style.{f.name}")
            if value is None:
                continue
            if f.name == "font_family" and isinstance(value, str):
                value = [value]
            overrides[f.name] = value
        return cls(**overrides)
