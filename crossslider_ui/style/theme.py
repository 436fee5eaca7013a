from __future__ import annotations

from dataclasses import asdict, dataclass
import math
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_KEYS = ("track_tint", "thumb_tint", "thumb_stroke", "highlight_overlay")


@dataclass(frozen=True)
class SliderAppearance:
    """Presentation hints for whatever draws the slider.

    None of these affect the value model; adapters pass them through to the
    drawing layer as-is.
    """

    track_tint: str = "#E6E6E6"
    thumb_tint: str = "#FFFFFF"
    thumb_stroke: str = "#808080"
    thumb_line_width: float = 0.5
    highlight_overlay: str = "#0000001A"
    curvaceousness: float = 1.0


DEFAULT_APPEARANCE = SliderAppearance()


def clamp_curvaceousness(value: float) -> float:
    """0.0 gives square corners, 1.0 a circular thumb and rounded rails."""

    if math.isnan(value):
        raise ValueError("curvaceousness must be a number")
    return max(0.0, min(1.0, value))


def validate_slider_appearance(overrides: Mapping[str, Any] | None = None) -> SliderAppearance:
    """Validate and merge appearance overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_APPEARANCE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown appearance key: {key}")
            raw[key] = value

    for key in _COLOR_KEYS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Appearance `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    line_width = raw["thumb_line_width"]
    if isinstance(line_width, bool) or not isinstance(line_width, (int, float)) or float(line_width) <= 0:
        raise ValueError("Appearance `thumb_line_width` must be a positive number")

    curvaceousness = raw["curvaceousness"]
    if isinstance(curvaceousness, bool) or not isinstance(curvaceousness, (int, float)):
        raise ValueError("Appearance `curvaceousness` must be a number")

    return SliderAppearance(
        track_tint=str(raw["track_tint"]),
        thumb_tint=str(raw["thumb_tint"]),
        thumb_stroke=str(raw["thumb_stroke"]),
        thumb_line_width=float(line_width),
        highlight_overlay=str(raw["highlight_overlay"]),
        curvaceousness=clamp_curvaceousness(float(curvaceousness)),
    )
