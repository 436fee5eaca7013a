"""Slider model, value constraints and pointer interaction contracts."""

from .adapter import CrossSliderAdapter, SliderLayout
from .axis_range import AxisRange, InvalidRangeError
from .cross_slider import CrossSliderModel, SliderState, SliderValue
from .interaction import PointerEvent, PointerPhase, parse_hdi_pointer_event
from .quantizer import InvalidStepError, Quantizer

__all__ = [
    "AxisRange",
    "CrossSliderAdapter",
    "CrossSliderModel",
    "InvalidRangeError",
    "InvalidStepError",
    "PointerEvent",
    "PointerPhase",
    "Quantizer",
    "SliderLayout",
    "SliderState",
    "SliderValue",
    "parse_hdi_pointer_event",
]
