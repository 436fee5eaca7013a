from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

import numpy as np

from crossslider_ui.component_schema import DEFAULT_FRAME, BoundingBox, CoordinatePoint
from crossslider_ui.style.theme import DEFAULT_APPEARANCE, SliderAppearance

from .axis_range import AxisRange
from .cross_slider import CrossSliderModel, SliderValue
from .interaction import PointerEvent, parse_hdi_pointer_event

LOGGER = logging.getLogger(__name__)

DEFAULT_LABEL_FORMAT = "X: {x:.2f} Y: {y:.2f}"
THUMB_INSET_PX = 2.0


@dataclass(frozen=True)
class SliderLayout:
    """Frames and hints for one paint pass. Geometry only; nothing is drawn here.

    `detents_x`/`detents_y` are thumb-centre pixel positions of the snap points
    and are empty when the slider is continuous.
    """

    track_x: BoundingBox
    track_y: BoundingBox
    thumb: BoundingBox
    track_x_corner_radius: float
    track_y_corner_radius: float
    thumb_corner_radius: float
    highlighted: bool
    appearance: SliderAppearance
    detents_x: tuple[float, ...] = ()
    detents_y: tuple[float, ...] = ()


class CrossSliderAdapter:
    """Reference presentation adapter for `CrossSliderModel`.

    Holds the model without owning its state: pointer events are forwarded to
    the model and everything the drawing layer needs is read back in `layout()`.
    """

    def __init__(
        self,
        model: CrossSliderModel,
        *,
        appearance: SliderAppearance = DEFAULT_APPEARANCE,
        label_format: str = DEFAULT_LABEL_FORMAT,
        on_value_changed: Callable[[SliderValue], None] | None = None,
    ) -> None:
        self._model = model
        self._appearance = appearance
        self._label_format = label_format
        self._on_value_changed = on_value_changed
        self._notification_count = 0
        self._last_notified: SliderValue | None = None
        self._attached = True
        model.add_value_listener(self._handle_value_changed)

    @property
    def model(self) -> CrossSliderModel:
        return self._model

    @property
    def appearance(self) -> SliderAppearance:
        return self._appearance

    @property
    def notification_count(self) -> int:
        return self._notification_count

    @property
    def last_notified(self) -> SliderValue | None:
        return self._last_notified

    def set_appearance(self, appearance: SliderAppearance) -> None:
        self._appearance = appearance

    def detach(self) -> None:
        if not self._attached:
            return
        self._model.remove_value_listener(self._handle_value_changed)
        self._attached = False

    def handle_hdi_event(self, event_type: str, payload: object) -> bool:
        event = parse_hdi_pointer_event(event_type, payload)
        if event is None:
            return False
        return self.handle_pointer(event)

    def handle_pointer(self, event: PointerEvent) -> bool:
        """Route one pointer event; return True when the gesture belongs to the slider."""

        if event.phase == "down":
            return self._model.begin_touch(self._point(event))
        if event.phase == "move":
            return self._model.move_touch(self._point(event))
        if self._model.state != "dragging":
            return False
        if event.phase == "cancel":
            self._model.cancel_touch()
        else:
            self._model.end_touch()
        return True

    def value_label(self) -> str:
        value = self._model.value
        return self._label_format.format(x=value.x, y=value.y)

    def layout(self) -> SliderLayout:
        model = self._model
        side = model.thumb_side
        width, height = model.track_size
        curve = self._appearance.curvaceousness

        thumb = model.thumb_frame()
        track_y = BoundingBox(
            x=width / 2.0 - side / 32.0,
            y=side / 16.0,
            width=side / 16.0,
            height=max(0.0, height - side / 8.0),
            frame=DEFAULT_FRAME,
        )
        track_x = BoundingBox(
            x=side / 16.0,
            y=thumb.mid_y - side / 32.0,
            width=max(0.0, width - side / 8.0),
            height=side / 16.0,
            frame=DEFAULT_FRAME,
        )
        inset_side = max(0.0, side - 2.0 * THUMB_INSET_PX)
        return SliderLayout(
            track_x=track_x,
            track_y=track_y,
            thumb=thumb,
            track_x_corner_radius=_corner_radius(track_x, curve),
            track_y_corner_radius=_corner_radius(track_y, curve),
            thumb_corner_radius=inset_side * curve / 2.0,
            highlighted=model.is_highlighted,
            appearance=self._appearance,
            detents_x=_detent_centres(model, model.x_range, width),
            detents_y=_detent_centres(model, model.y_range, height),
        )

    def _handle_value_changed(self, value: SliderValue) -> None:
        self._notification_count += 1
        self._last_notified = value
        LOGGER.debug("value changed: %s", self.value_label())
        if self._on_value_changed is not None:
            self._on_value_changed(value)

    @staticmethod
    def _point(event: PointerEvent) -> CoordinatePoint:
        if not event.has_position:
            raise ValueError(f"pointer `{event.phase}` event requires a position")
        return CoordinatePoint(float(event.x), float(event.y), DEFAULT_FRAME)


def _corner_radius(box: BoundingBox, curvaceousness: float) -> float:
    return min(box.width, box.height) * curvaceousness / 2.0


def _detent_centres(model: CrossSliderModel, axis_range: AxisRange, extent: float) -> tuple[float, ...]:
    values = model.quantizer.detents(axis_range)
    if values.size == 0:
        return ()
    half = model.thumb_side / 2.0
    if axis_range.is_degenerate:
        return tuple(np.full(values.shape, half).tolist())
    travel = extent - model.thumb_side
    centres = travel * (values - axis_range.minimum) / axis_range.span + half
    return tuple(float(v) for v in centres)
