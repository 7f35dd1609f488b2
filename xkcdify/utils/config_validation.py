"""
Lightweight validation of style configuration values.
"""

from typing import Any

POSITIVE_KEYS = (
    "style.font_size",
    "style.title_font_size",
    "style.line_jitter_px",
    "style.min_line_width",
    "style.mask_width_factor",
    "style.patch_mask_width",
    "style.axis_line_width",
    "style.axis_points_per_px",
    "style.tick_width",
)

NON_NEGATIVE_KEYS = (
    "style.xlabel_space_px",
    "style.ylabel_space_px",
    "style.axis_wobble",
    "style.tick_length",
    "style.tick_label_offset",
    "style.axis_label_offset",
)


def validate_config(config: Any) -> None:
    """
    Validate style values before any figure is touched.
    Raises ValueError on an invalid value.
    """
    for key in POSITIVE_KEYS:
        value = config.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"{key} must be a positive number, got {value!r}")

    for key in NON_NEGATIVE_KEYS:
        value = config.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"{key} must be a non-negative number, got {value!r}")

    fonts = config.get("style.font_family")
    if fonts is not None:
        if isinstance(fonts, str):
            fonts = [fonts]
        if not fonts or not all(isinstance(f, str) and f for f in fonts):
            raise ValueError(f"style.font_family must be a font name or list of names, got {fonts!r}")

    level = config.get("logging.level", "INFO")
    if str(level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unsupported logging.level '{level}'.")
