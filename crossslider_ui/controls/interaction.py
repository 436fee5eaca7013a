from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping


PointerPhase = Literal["down", "move", "up", "cancel"]

_CLICK_PHASES = {"down", "up", "cancel"}
_POINTER_EVENT_PHASES: dict[str, PointerPhase] = {
    "pointer_down": "down",
    "pointer_move": "move",
    "pointer_up": "up",
}


@dataclass(frozen=True)
class PointerEvent:
    """Minimal standardized pointer event contract consumed by the slider."""

    phase: PointerPhase
    x: float | None = None
    y: float | None = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


def parse_hdi_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse normalized HDI pointer events into a typed slider interaction event.

    Accepts `click` events carrying a `phase` of down/up/cancel, `pointer_move`,
    and the `pointer_down`/`pointer_up` aliases. `down` and `move` need a numeric
    position; `up` and `cancel` may omit it.
    """

    if not isinstance(payload, Mapping):
        return None
    if event_type == "click":
        phase = payload.get("phase")
        if phase not in _CLICK_PHASES:
            return None
    elif event_type in _POINTER_EVENT_PHASES:
        phase = _POINTER_EVENT_PHASES[event_type]
    else:
        return None
    x = _coerce_coordinate(payload.get("x"))
    y = _coerce_coordinate(payload.get("y"))
    if phase in ("down", "move") and (x is None or y is None):
        return None
    return PointerEvent(phase=phase, x=x, y=y)


def _coerce_coordinate(raw: object) -> float | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value
