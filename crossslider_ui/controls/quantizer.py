from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import math

import numpy as np

from .axis_range import AxisRange


MAX_DETENTS = 10_000
DETENT_TOLERANCE = 1e-9


class InvalidStepError(ValueError):
    """Raised when an enabled quantizer is given a non-positive step."""


@dataclass(frozen=True)
class Quantizer:
    """Either disabled (`step is None`) or snapping to multiples of a positive step.

    Build through `disabled()`, `enabled(step)` or `from_step(step)`; the
    constructor validates the same way so a zero or negative step can never be
    stored.
    """

    step: float | None = None

    def __post_init__(self) -> None:
        if self.step is None:
            return
        if not isinstance(self.step, (int, float)) or isinstance(self.step, bool):
            raise InvalidStepError(f"step must be a number, got {type(self.step).__name__}")
        if not math.isfinite(self.step) or self.step <= 0:
            raise InvalidStepError(f"step must be a positive finite number, got {self.step}")
        object.__setattr__(self, "step", float(self.step))

    @classmethod
    def disabled(cls) -> Quantizer:
        return cls(step=None)

    @classmethod
    def enabled(cls, step: float) -> Quantizer:
        if step is None:
            raise InvalidStepError("enabled quantizer requires a step")
        return cls(step=step)

    @classmethod
    def from_step(cls, step: float | None) -> Quantizer:
        return cls(step=step)

    @property
    def is_enabled(self) -> bool:
        return self.step is not None

    def snap(self, v: float) -> float:
        """Round `v` to the nearest step multiple; ties go away from zero."""

        if self.step is None:
            return v
        ratio = v / self.step
        if not math.isfinite(ratio):
            return v
        if abs(ratio) >= 2.0**52:
            # Already integral; too wide for the default decimal context.
            return float(int(ratio) * self.step)
        steps = Decimal(ratio).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return float(int(steps) * self.step)

    def detents(self, axis_range: AxisRange) -> np.ndarray:
        """Step multiples lying inside `axis_range`, ascending."""

        if self.step is None:
            return np.asarray([], dtype=np.float64)
        # Bounds that are step multiples must survive float drift in the ratio.
        first = math.ceil(axis_range.minimum / self.step - DETENT_TOLERANCE)
        last = math.floor(axis_range.maximum / self.step + DETENT_TOLERANCE)
        if last < first:
            return np.asarray([], dtype=np.float64)
        if last - first + 1 > MAX_DETENTS:
            raise ValueError(f"step {self.step} yields more than {MAX_DETENTS} detents for this range")
        values = np.arange(first, last + 1, dtype=np.float64) * self.step
        values[np.isclose(values, 0.0, rtol=0.0, atol=self.step * 1e-9)] = 0.0
        # Float drift at the ends must not escape the range.
        np.clip(values, axis_range.minimum, axis_range.maximum, out=values)
        return values
