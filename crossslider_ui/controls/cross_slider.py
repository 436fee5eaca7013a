from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Literal

from crossslider_ui.component_schema import DEFAULT_FRAME, BoundingBox, CoordinatePoint

from .axis_range import AxisRange
from .quantizer import Quantizer

LOGGER = logging.getLogger(__name__)

DEFAULT_THUMB_SIDE = 32.0

SliderState = Literal["idle", "dragging"]
ValueListener = Callable[["SliderValue"], None]


@dataclass(frozen=True)
class SliderValue:
    x: float = 0.0
    y: float = 0.0


class CrossSliderModel:
    """Two-axis slider value model driven by begin/move/end touch calls.

    The model owns both axis ranges, the current value, the quantizer and the
    transient drag session. It never references whatever draws it; adapters
    subscribe with `add_value_listener` and read state back.

    Dragging is relative: each move converts the pointer delta into a value
    delta scaled by the full track extent. A delta that would push an axis out
    of its range is dropped for that axis (the thumb sticks at the edge) instead
    of being clamped. With a step configured, moves stay silent and the value is
    snapped and announced once when the touch ends.
    """

    def __init__(
        self,
        track_width: float,
        track_height: float,
        *,
        x_range: AxisRange | None = None,
        y_range: AxisRange | None = None,
        value: SliderValue | None = None,
        quantizer: Quantizer | None = None,
        thumb_side: float = DEFAULT_THUMB_SIDE,
    ) -> None:
        _validate_track_size(track_width, track_height)
        if not math.isfinite(thumb_side) or thumb_side <= 0:
            raise ValueError("thumb_side must be > 0")
        self._track_width = float(track_width)
        self._track_height = float(track_height)
        self._thumb_side = float(thumb_side)
        self._x_range = x_range or AxisRange()
        self._y_range = y_range or AxisRange()
        self._quantizer = quantizer or Quantizer.disabled()
        self._value = self._clamped(value or SliderValue())
        self._state: SliderState = "idle"
        self._highlighted = False
        self._previous_pointer = CoordinatePoint(0.0, 0.0, DEFAULT_FRAME)
        self._listeners: list[ValueListener] = []
        self._thumb_frame = self._compute_thumb_frame()

    @property
    def value(self) -> SliderValue:
        return self._value

    @property
    def state(self) -> SliderState:
        return self._state

    @property
    def is_highlighted(self) -> bool:
        return self._highlighted

    @property
    def x_range(self) -> AxisRange:
        return self._x_range

    @property
    def y_range(self) -> AxisRange:
        return self._y_range

    @property
    def quantizer(self) -> Quantizer:
        return self._quantizer

    @property
    def thumb_side(self) -> float:
        return self._thumb_side

    @property
    def track_size(self) -> tuple[float, float]:
        return (self._track_width, self._track_height)

    def thumb_frame(self) -> BoundingBox:
        return self._thumb_frame

    def position_for_value(self, value: SliderValue) -> CoordinatePoint:
        """Top-left corner of the thumb for `value`, in track pixels.

        The thumb travels over `extent - thumb_side` so it never overhangs the
        track. A degenerate axis (`min == max`) maps to 0 on that axis only.
        """

        x = _axis_position(value.x, self._x_range, self._track_width - self._thumb_side)
        y = _axis_position(value.y, self._y_range, self._track_height - self._thumb_side)
        return CoordinatePoint(x, y, DEFAULT_FRAME)

    def add_value_listener(self, listener: ValueListener) -> None:
        self._listeners.append(listener)

    def remove_value_listener(self, listener: ValueListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            raise ValueError("listener is not registered") from None

    def set_minimum_x(self, minimum: float) -> None:
        self._x_range = self._x_range.with_minimum(minimum)
        self._after_range_change()

    def set_maximum_x(self, maximum: float) -> None:
        self._x_range = self._x_range.with_maximum(maximum)
        self._after_range_change()

    def set_minimum_y(self, minimum: float) -> None:
        self._y_range = self._y_range.with_minimum(minimum)
        self._after_range_change()

    def set_maximum_y(self, maximum: float) -> None:
        self._y_range = self._y_range.with_maximum(maximum)
        self._after_range_change()

    def set_x_range(self, minimum: float, maximum: float) -> None:
        self._x_range = self._x_range.set_bounds(minimum, maximum)
        self._after_range_change()

    def set_y_range(self, minimum: float, maximum: float) -> None:
        self._y_range = self._y_range.set_bounds(minimum, maximum)
        self._after_range_change()

    def set_step(self, step: float | None) -> None:
        self._quantizer = Quantizer.from_step(step)
        self._refresh_geometry()

    def set_value(self, x: float, y: float) -> None:
        """Programmatic value update; clamps into range and does not notify."""

        self._value = self._clamped(SliderValue(float(x), float(y)))
        self._refresh_geometry()

    def set_track_size(self, width: float, height: float) -> None:
        _validate_track_size(width, height)
        self._track_width = float(width)
        self._track_height = float(height)
        self._refresh_geometry()

    def begin_touch(self, point: CoordinatePoint) -> bool:
        """Start a drag if `point` hits the thumb; return whether it was captured."""

        if self._state == "dragging":
            return True
        if not self._thumb_frame.contains(point.x, point.y):
            return False
        self._previous_pointer = point
        self._highlighted = True
        self._state = "dragging"
        LOGGER.debug("drag captured at (%.2f, %.2f)", point.x, point.y)
        return True

    def move_touch(self, point: CoordinatePoint) -> bool:
        if self._state != "dragging":
            return False
        delta_x = self._x_range.span * (point.x - self._previous_pointer.x) / self._track_width
        delta_y = self._y_range.span * (point.y - self._previous_pointer.y) / self._track_height
        self._previous_pointer = point

        x, y = self._value.x, self._value.y
        if self._x_range.contains(x + delta_x):
            x += delta_x
        if self._y_range.contains(y + delta_y):
            y += delta_y
        self._value = SliderValue(x, y)
        self._refresh_geometry()

        if not self._quantizer.is_enabled:
            self._notify()
        return True

    def end_touch(self) -> None:
        if self._state != "dragging":
            return
        self._highlighted = False
        self._state = "idle"
        if not self._quantizer.is_enabled:
            LOGGER.debug("drag released at %s", self._value)
            return
        snapped = SliderValue(
            self._quantizer.snap(self._value.x),
            self._quantizer.snap(self._value.y),
        )
        self._value = self._clamped(snapped)
        self._refresh_geometry()
        LOGGER.debug("drag released, snapped to %s", self._value)
        self._notify()

    def cancel_touch(self) -> None:
        self.end_touch()

    def _after_range_change(self) -> None:
        self._value = self._clamped(self._value)
        self._refresh_geometry()

    def _clamped(self, value: SliderValue) -> SliderValue:
        return SliderValue(self._x_range.clamp(value.x), self._y_range.clamp(value.y))

    def _refresh_geometry(self) -> None:
        self._thumb_frame = self._compute_thumb_frame()

    def _compute_thumb_frame(self) -> BoundingBox:
        origin = self.position_for_value(self._value)
        return BoundingBox(
            x=origin.x,
            y=origin.y,
            width=self._thumb_side,
            height=self._thumb_side,
            frame=DEFAULT_FRAME,
        )

    def _notify(self) -> None:
        value = self._value
        for listener in list(self._listeners):
            listener(value)


def _axis_position(v: float, axis_range: AxisRange, travel: float) -> float:
    if axis_range.is_degenerate:
        return 0.0
    return travel * (v - axis_range.minimum) / axis_range.span


def _validate_track_size(width: float, height: float) -> None:
    if not math.isfinite(width) or not math.isfinite(height) or width <= 0 or height <= 0:
        raise ValueError("track width and height must be > 0")
