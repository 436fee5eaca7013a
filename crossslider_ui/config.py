from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
import tomllib
from typing import Any, Callable, Mapping

from .controls.adapter import DEFAULT_LABEL_FORMAT, CrossSliderAdapter
from .controls.axis_range import AxisRange
from .controls.cross_slider import DEFAULT_THUMB_SIDE, CrossSliderModel, SliderValue
from .controls.quantizer import Quantizer
from .style.theme import DEFAULT_APPEARANCE, SliderAppearance, validate_slider_appearance

LOGGER = logging.getLogger(__name__)

# Inspector-style names accepted next to the snake_case field names.
_SLIDER_ALIASES = {
    "minimumValueX": "minimum_x",
    "maximumValueX": "maximum_x",
    "minimumValueY": "minimum_y",
    "maximumValueY": "maximum_y",
    "stepValue": "step",
    "thumbWidth": "thumb_side",
    "trackWidth": "track_width",
    "trackHeight": "track_height",
}
_APPEARANCE_ALIASES = {
    "trackTintColor": "track_tint",
    "thumbTintColor": "thumb_tint",
    "curvaceousness": "curvaceousness",
}
_SLIDER_FIELDS = {
    "minimum_x",
    "maximum_x",
    "minimum_y",
    "maximum_y",
    "value",
    "step",
    "thumb_side",
    "track_width",
    "track_height",
    "label_format",
}


@dataclass(frozen=True)
class SliderConfig:
    minimum_x: float = -1.0
    maximum_x: float = 1.0
    minimum_y: float = -1.0
    maximum_y: float = 1.0
    value: tuple[float, float] = (0.0, 0.0)
    step: float | None = None
    thumb_side: float = DEFAULT_THUMB_SIDE
    track_width: float = 264.0
    track_height: float = 264.0
    label_format: str = DEFAULT_LABEL_FORMAT
    appearance: SliderAppearance = field(default_factory=lambda: DEFAULT_APPEARANCE)

    def __post_init__(self) -> None:
        AxisRange(self.minimum_x, self.maximum_x)
        AxisRange(self.minimum_y, self.maximum_y)
        Quantizer.from_step(self.step)
        if not math.isfinite(self.thumb_side) or self.thumb_side <= 0:
            raise ValueError("thumb_side must be > 0")
        if not math.isfinite(self.track_width) or not math.isfinite(self.track_height):
            raise ValueError("track_width and track_height must be finite")
        if self.track_width <= 0 or self.track_height <= 0:
            raise ValueError("track_width and track_height must be > 0")

    def build_model(self) -> CrossSliderModel:
        return CrossSliderModel(
            self.track_width,
            self.track_height,
            x_range=AxisRange(self.minimum_x, self.maximum_x),
            y_range=AxisRange(self.minimum_y, self.maximum_y),
            value=SliderValue(*self.value),
            quantizer=Quantizer.from_step(self.step),
            thumb_side=self.thumb_side,
        )

    def build_adapter(
        self,
        model: CrossSliderModel | None = None,
        *,
        on_value_changed: Callable[[SliderValue], None] | None = None,
    ) -> CrossSliderAdapter:
        return CrossSliderAdapter(
            model or self.build_model(),
            appearance=self.appearance,
            label_format=self.label_format,
            on_value_changed=on_value_changed,
        )


def slider_config_from_mapping(raw: Mapping[str, Any]) -> SliderConfig:
    """Build a SliderConfig from inspector-style or snake_case keys.

    Presentation keys (`trackTintColor`, `thumbTintColor`, `curvaceousness`) and a
    nested `appearance` mapping are routed to `validate_slider_appearance`.
    """

    if not isinstance(raw, Mapping):
        raise ValueError("slider config must be a mapping")
    slider: dict[str, Any] = {}
    appearance: dict[str, Any] = {}
    for key, value in raw.items():
        if key == "appearance":
            if not isinstance(value, Mapping):
                raise ValueError("`appearance` must be a table")
            appearance.update(value)
        elif key in _APPEARANCE_ALIASES:
            appearance[_APPEARANCE_ALIASES[key]] = value
        elif key in _SLIDER_ALIASES:
            slider[_SLIDER_ALIASES[key]] = value
        elif key in _SLIDER_FIELDS:
            slider[key] = value
        else:
            raise ValueError(f"Unknown slider config key: {key}")

    kwargs: dict[str, Any] = {}
    for key in ("minimum_x", "maximum_x", "minimum_y", "maximum_y", "thumb_side", "track_width", "track_height"):
        if key in slider:
            kwargs[key] = _coerce_float(slider[key], key)
    if "step" in slider:
        kwargs["step"] = None if slider["step"] is None else _coerce_float(slider["step"], "step")
    if "value" in slider:
        kwargs["value"] = _coerce_pair(slider["value"], "value")
    if "label_format" in slider:
        if not isinstance(slider["label_format"], str):
            raise ValueError("`label_format` must be a string")
        kwargs["label_format"] = slider["label_format"]
    kwargs["appearance"] = validate_slider_appearance(appearance)
    return SliderConfig(**kwargs)


def load_slider_config(path: str | Path) -> SliderConfig:
    """Read a `[slider]` table (and optional `[appearance]` table) from TOML."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"slider config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    slider = raw.get("slider")
    if not isinstance(slider, dict):
        raise ValueError(f"slider config missing `[slider]` table: {config_path}")
    merged = dict(slider)
    top_appearance = raw.get("appearance")
    if top_appearance is not None:
        nested = merged.get("appearance", {})
        if not isinstance(top_appearance, dict) or not isinstance(nested, dict):
            raise ValueError("`appearance` must be a table")
        merged["appearance"] = {**top_appearance, **nested}
    config = slider_config_from_mapping(merged)
    LOGGER.info(
        "loaded slider config %s: x=[%s, %s] y=[%s, %s] step=%s",
        config_path,
        config.minimum_x,
        config.maximum_x,
        config.minimum_y,
        config.maximum_y,
        config.step,
    )
    return config


def _coerce_float(raw: object, name: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"`{name}` must be a number")
    return float(raw)


def _coerce_pair(raw: object, name: str) -> tuple[float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"`{name}` must be a two-item [x, y] list")
    return (_coerce_float(raw[0], f"{name}[0]"), _coerce_float(raw[1], f"{name}[1]"))
