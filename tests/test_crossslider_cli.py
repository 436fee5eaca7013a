from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from crossslider_ui.config import SliderConfig
from main import main, replay_trace


_CONFIG_TOML = "\n".join(
    [
        "[slider]",
        "minimumValueX = -1.0",
        "maximumValueX = 1.0",
        "trackWidth = 264",
        "trackHeight = 264",
        "",
    ]
)


def _trace_records() -> list[dict[str, object]]:
    return [
        {"event_type": "click", "payload": {"phase": "down", "x": 132.0, "y": 132.0}},
        {"event_type": "pointer_move", "payload": {"x": 158.4, "y": 132.0}},
        {"event_type": "scroll", "payload": {"x": 158.4, "y": 132.0, "delta_y": 3.0}},
        {"event_type": "pointer_move", "payload": {"x": 171.6, "y": 145.2}},
        {"event_type": "click", "payload": {"phase": "up", "x": 171.6, "y": 145.2}},
    ]


class ReplayTraceTests(unittest.TestCase):
    def test_replay_reports_one_label_per_notification(self) -> None:
        result = replay_trace(SliderConfig(), _trace_records(), echo=False)
        self.assertEqual(result["events"], 5)
        self.assertEqual(result["ignored"], 1)
        self.assertEqual(result["notifications"], 2)
        self.assertEqual(result["labels"], ["X: 0.20 Y: 0.00", "X: 0.30 Y: 0.10"])
        self.assertEqual(result["final_label"], "X: 0.30 Y: 0.10")

    def test_quantized_replay_notifies_once_on_release(self) -> None:
        result = replay_trace(SliderConfig(step=0.25), _trace_records(), echo=False)
        self.assertEqual(result["labels"], ["X: 0.25 Y: 0.00"])


class CLITests(unittest.TestCase):
    def _write_inputs(self, tmp: str, trace_lines: list[str]) -> tuple[Path, Path]:
        config_path = Path(tmp) / "slider.toml"
        config_path.write_text(_CONFIG_TOML, encoding="utf-8")
        trace_path = Path(tmp) / "trace.jsonl"
        trace_path.write_text("\n".join(trace_lines) + "\n", encoding="utf-8")
        return config_path, trace_path

    def test_replay_command_prints_labels_and_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lines = [json.dumps(record) for record in _trace_records()]
            config_path, trace_path = self._write_inputs(tmp, lines + [""])
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                main(["--log-level", "ERROR", "replay", str(config_path), str(trace_path)])
        printed = out.getvalue().splitlines()
        self.assertEqual(printed[:2], ["X: 0.20 Y: 0.00", "X: 0.30 Y: 0.10"])
        self.assertIn("notifications=2", printed[-1])
        self.assertIn("ignored=1", printed[-1])

    def test_replay_rejects_malformed_trace_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path, trace_path = self._write_inputs(tmp, ['{"event_type": "click"', "{}"])
            with self.assertRaisesRegex(ValueError, "trace.jsonl:1"):
                main(["replay", str(config_path), str(trace_path)])

    def test_hit_command_reports_capture(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path, _ = self._write_inputs(tmp, [])
            inside = io.StringIO()
            with contextlib.redirect_stdout(inside):
                main(["hit", str(config_path), "120,140"])
            outside = io.StringIO()
            with contextlib.redirect_stdout(outside):
                main(["hit", str(config_path), "10,10"])
        self.assertEqual(inside.getvalue().strip(), "captured")
        self.assertEqual(outside.getvalue().strip(), "not captured")

    def test_describe_command_prints_initial_layout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path, _ = self._write_inputs(tmp, [])
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                main(["describe", str(config_path)])
        payload = json.loads(out.getvalue())
        self.assertEqual(payload["thumb"], [116.0, 116.0, 32.0, 32.0])
        self.assertEqual(payload["label"], "X: 0.00 Y: 0.00")
        self.assertIsNone(payload["step"])


if __name__ == "__main__":
    unittest.main()
