"""Toolkit-independent two-axis (X/Y) slider model and adapter contracts."""

from .component_schema import BoundingBox, CoordinatePoint, parse_coordinate_notation
from .config import SliderConfig, load_slider_config, slider_config_from_mapping
from .controls.adapter import CrossSliderAdapter, SliderLayout
from .controls.axis_range import AxisRange, InvalidRangeError
from .controls.cross_slider import CrossSliderModel, SliderState, SliderValue
from .controls.interaction import PointerEvent, PointerPhase, parse_hdi_pointer_event
from .controls.quantizer import InvalidStepError, Quantizer
from .style.theme import DEFAULT_APPEARANCE, SliderAppearance, validate_slider_appearance

__all__ = [
    "AxisRange",
    "BoundingBox",
    "CoordinatePoint",
    "CrossSliderAdapter",
    "CrossSliderModel",
    "DEFAULT_APPEARANCE",
    "InvalidRangeError",
    "InvalidStepError",
    "PointerEvent",
    "PointerPhase",
    "Quantizer",
    "SliderAppearance",
    "SliderConfig",
    "SliderLayout",
    "SliderState",
    "SliderValue",
    "load_slider_config",
    "parse_coordinate_notation",
    "parse_hdi_pointer_event",
    "slider_config_from_mapping",
    "validate_slider_appearance",
]
