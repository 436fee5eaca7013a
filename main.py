from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from crossslider_ui.component_schema import parse_coordinate_notation
from crossslider_ui.config import SliderConfig, load_slider_config
from crossslider_ui.controls.adapter import CrossSliderAdapter
from crossslider_ui.controls.cross_slider import SliderValue
from crossslider_ui.controls.interaction import parse_hdi_pointer_event

LOGGER = logging.getLogger("crossslider")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="crossslider")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    replay = sub.add_parser("replay", help="Replay a JSONL pointer trace through a configured slider.")
    replay.add_argument("config", type=Path)
    replay.add_argument("trace", type=Path)

    describe = sub.add_parser("describe", help="Print the resolved slider config and initial layout.")
    describe.add_argument("config", type=Path)

    hit = sub.add_parser("hit", help="Report whether a pointer-down at `x,y` would grab the thumb.")
    hit.add_argument("config", type=Path)
    hit.add_argument("point", help="Track-local point as `x,y`.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "replay":
        config = load_slider_config(args.config)
        records = _read_trace(args.trace)
        result = replay_trace(config, records)
        print(
            f"replay complete: events={result['events']} ignored={result['ignored']} "
            f"notifications={result['notifications']} final={result['final_label']}"
        )
        return

    if args.command == "describe":
        config = load_slider_config(args.config)
        adapter = config.build_adapter()
        layout = adapter.layout()
        print(
            json.dumps(
                {
                    "x_range": [config.minimum_x, config.maximum_x],
                    "y_range": [config.minimum_y, config.maximum_y],
                    "step": config.step,
                    "track": [config.track_width, config.track_height],
                    "thumb": [layout.thumb.x, layout.thumb.y, layout.thumb.width, layout.thumb.height],
                    "label": adapter.value_label(),
                    "curvaceousness": layout.appearance.curvaceousness,
                },
                indent=2,
                sort_keys=True,
            )
        )
        return

    if args.command == "hit":
        config = load_slider_config(args.config)
        adapter = config.build_adapter()
        point = parse_coordinate_notation(args.point)
        captured = adapter.handle_hdi_event("click", {"phase": "down", "x": point.x, "y": point.y})
        print("captured" if captured else "not captured")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def replay_trace(config: SliderConfig, records: list[dict[str, object]], *, echo: bool = True) -> dict[str, object]:
    labels: list[str] = []
    adapter: CrossSliderAdapter

    def _on_value_changed(value: SliderValue) -> None:
        label = adapter.value_label()
        labels.append(label)
        if echo:
            print(label)

    adapter = config.build_adapter(on_value_changed=_on_value_changed)
    ignored = 0
    for index, record in enumerate(records):
        event_type = str(record.get("event_type", ""))
        event = parse_hdi_pointer_event(event_type, record.get("payload"))
        if event is None:
            LOGGER.warning("ignoring trace record %d: unsupported pointer event `%s`", index + 1, event_type)
            ignored += 1
            continue
        adapter.handle_pointer(event)
    return {
        "events": len(records),
        "ignored": ignored,
        "notifications": adapter.notification_count,
        "labels": labels,
        "final_label": adapter.value_label(),
    }


def _read_trace(path: Path) -> list[dict[str, object]]:
    if not path.exists():
        raise FileNotFoundError(f"trace not found: {path}")
    out: list[dict[str, object]] = []
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{line_no}: invalid JSON ({exc.msg})") from exc
            if not isinstance(record, dict):
                raise ValueError(f"{path}:{line_no}: trace record must be an object")
            out.append(record)
    return out


if __name__ == "__main__":
    main()
