from __future__ import annotations

import math
import unittest

import numpy as np

from crossslider_ui.controls.axis_range import AxisRange
from crossslider_ui.controls.quantizer import InvalidStepError, Quantizer


class QuantizerTests(unittest.TestCase):
    def test_disabled_quantizer_passes_values_through(self) -> None:
        for quantizer in (Quantizer.disabled(), Quantizer.from_step(None), Quantizer()):
            self.assertFalse(quantizer.is_enabled)
            self.assertEqual(quantizer.snap(0.37), 0.37)

    def test_enabled_rejects_non_positive_and_non_finite_steps(self) -> None:
        for step in (0, 0.0, -0.25, math.nan, math.inf):
            with self.assertRaises(InvalidStepError):
                Quantizer.enabled(step)
        with self.assertRaises(InvalidStepError):
            Quantizer.from_step(-1.0)
        with self.assertRaises(InvalidStepError):
            Quantizer.enabled(None)  # type: ignore[arg-type]

    def test_snap_rounds_to_nearest_step(self) -> None:
        quantizer = Quantizer.enabled(0.25)
        self.assertEqual(quantizer.snap(0.37), 0.25)
        self.assertEqual(quantizer.snap(0.38), 0.5)
        self.assertEqual(quantizer.snap(-0.6), -0.5)

    def test_snap_ties_round_away_from_zero(self) -> None:
        quantizer = Quantizer.enabled(0.25)
        self.assertEqual(quantizer.snap(0.125), 0.25)
        self.assertEqual(quantizer.snap(0.375), 0.5)
        self.assertEqual(quantizer.snap(-0.125), -0.25)
        self.assertEqual(quantizer.snap(-0.375), -0.5)

    def test_snap_is_idempotent_and_within_half_step(self) -> None:
        for step in (0.1, 0.25, 0.3, 1.0):
            quantizer = Quantizer.enabled(step)
            for v in np.linspace(-3.0, 3.0, 601):
                snapped = quantizer.snap(float(v))
                self.assertEqual(quantizer.snap(snapped), snapped)
                self.assertLessEqual(abs(snapped - float(v)), step / 2.0 + 1e-12)

    def test_detents_cover_range_on_step_multiples(self) -> None:
        quantizer = Quantizer.enabled(0.25)
        detents = quantizer.detents(AxisRange(-1.0, 1.0))
        np.testing.assert_allclose(detents, np.linspace(-1.0, 1.0, 9))

        partial = quantizer.detents(AxisRange(-0.3, 0.6))
        np.testing.assert_allclose(partial, [-0.25, 0.0, 0.25, 0.5])
        self.assertEqual(float(partial[1]), 0.0)

    def test_detents_keep_bounds_that_are_step_multiples(self) -> None:
        quantizer = Quantizer.enabled(0.1)
        axis_range = AxisRange(0.0, 0.3)
        detents = quantizer.detents(axis_range)
        self.assertEqual(detents.size, 4)
        np.testing.assert_allclose(detents, [0.0, 0.1, 0.2, 0.3])
        allowed = detents.tolist()
        for v in np.linspace(0.0, 0.3, 31):
            self.assertIn(axis_range.clamp(quantizer.snap(float(v))), allowed)

    def test_detents_empty_when_disabled_or_no_multiple_fits(self) -> None:
        self.assertEqual(Quantizer.disabled().detents(AxisRange(-1.0, 1.0)).size, 0)
        self.assertEqual(Quantizer.enabled(1.0).detents(AxisRange(0.2, 0.8)).size, 0)

    def test_detents_refuse_unbounded_counts(self) -> None:
        with self.assertRaisesRegex(ValueError, "detents"):
            Quantizer.enabled(1e-6).detents(AxisRange(-1.0, 1.0))


if __name__ == "__main__":
    unittest.main()
