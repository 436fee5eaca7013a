from __future__ import annotations

from dataclasses import dataclass
import math


DEFAULT_FRAME = "slider_tl"


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float
    frame: str | None = None


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float
    frame: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


def parse_coordinate_notation(notation: str, default_frame: str | None = None) -> CoordinatePoint:
    """Parse `x,y` into a CoordinatePoint tagged with `default_frame`."""

    raw = notation.strip()
    if not raw:
        raise ValueError("coordinate notation must be non-empty")
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError("coordinates must use `x,y` format")
    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise ValueError(f"coordinates must be numbers: {notation!r}") from exc
    if not math.isfinite(x) or not math.isfinite(y):
        raise ValueError(f"coordinates must be finite: {notation!r}")
    return CoordinatePoint(x=x, y=y, frame=default_frame)
