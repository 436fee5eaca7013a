from __future__ import annotations

from dataclasses import dataclass
import math


class InvalidRangeError(ValueError):
    """Raised when an axis bound edit would leave `minimum > maximum`."""


@dataclass(frozen=True)
class AxisRange:
    """Closed value interval for one slider axis."""

    minimum: float = -1.0
    maximum: float = 1.0

    def __post_init__(self) -> None:
        _validate_bounds(self.minimum, self.maximum)

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    @property
    def is_degenerate(self) -> bool:
        return self.maximum == self.minimum

    def set_bounds(self, minimum: float, maximum: float) -> AxisRange:
        _validate_bounds(minimum, maximum)
        return AxisRange(minimum=float(minimum), maximum=float(maximum))

    def with_minimum(self, minimum: float) -> AxisRange:
        return self.set_bounds(minimum, self.maximum)

    def with_maximum(self, maximum: float) -> AxisRange:
        return self.set_bounds(self.minimum, maximum)

    def contains(self, v: float) -> bool:
        return self.minimum <= v <= self.maximum

    def clamp(self, v: float) -> float:
        return max(self.minimum, min(self.maximum, v))


def _validate_bounds(minimum: float, maximum: float) -> None:
    if not math.isfinite(minimum) or not math.isfinite(maximum):
        raise InvalidRangeError(f"axis bounds must be finite (got {minimum}, {maximum})")
    if minimum > maximum:
        raise InvalidRangeError(f"minimum ({minimum}) must be <= maximum ({maximum})")
