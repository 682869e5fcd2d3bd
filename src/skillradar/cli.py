from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from skillradar import api
from skillradar.chart import chart_points
from skillradar.comment import generate_comment
from skillradar.config import AppConfig, load_app_config
from skillradar.core import Profile
from skillradar.exporter import ExportError, build_export, export_to_json, write_csv, write_csv_stream
from skillradar.scoring import format_score

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="skillradar",
        description="Headless utilities for skill radar profiles: comments, chart data and exports.",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    subparsers = ap.add_subparsers(dest="command", required=True)

    comment = subparsers.add_parser("comment", help="Print the generated comment for a profile.")
    _add_input_args(comment)
    comment.set_defaults(func=_cmd_comment)

    chart = subparsers.add_parser("chart", help="Print radar chart data for a profile.")
    _add_input_args(chart)
    chart.add_argument("--json", action="store_true", help="Emit JSON instead of CSV.")
    chart.set_defaults(func=_cmd_chart)

    export = subparsers.add_parser("export", help="Write profile, chart data and comment to a file.")
    _add_input_args(export)
    export.add_argument("--output", "-o", default=None, help="Output path. If omitted, output is printed to stdout.")
    export.add_argument("--json", action="store_true", help="Emit export JSON instead of CSV.")
    export.set_defaults(func=_cmd_export)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


# ---------------- CLI subcommands ----------------


def _add_input_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("axes", nargs="*", help="Axes as Label=value (value on a 0-5 scale).")
    ap.add_argument("--from", dest="from_path", default=None, help="JSON/YAML profile file (list of {label, value}).")
    ap.add_argument("--config", default=None, help="Optional YAML/JSON/TOML config override (merged with pyproject.toml).")
    ap.add_argument("--defaults", action="store_true", help="Start from the default five-axis profile.")
    ap.epilog = _INPUT_EPILOG


def _load_inputs(args: argparse.Namespace) -> Tuple[AppConfig, Profile]:
    app_cfg = load_app_config(override_path=Path(args.config) if args.config else None)
    app_cfg.validate()

    profile = api.collect_profile(
        args.axes,
        from_path=Path(args.from_path) if args.from_path else None,
        app_config=app_cfg,
        use_defaults=args.defaults,
    )
    logger.debug("loaded %d axes for %r", len(profile.axes), profile.title)
    return app_cfg, profile


def _cmd_comment(args: argparse.Namespace) -> int:
    try:
        app_cfg, profile = _load_inputs(args)
    except api.ProfileLoadError as e:
        print(str(e), file=sys.stderr)
        return 2

    store = api.store_from_profile(profile, app_config=app_cfg)
    sys.stdout.write(generate_comment(store.snapshot()))
    return 0


def _cmd_chart(args: argparse.Namespace) -> int:
    try:
        app_cfg, profile = _load_inputs(args)
    except api.ProfileLoadError as e:
        print(str(e), file=sys.stderr)
        return 2

    store = api.store_from_profile(profile, app_config=app_cfg)
    points = chart_points(store.snapshot(), placeholder=app_cfg.placeholder_label)

    if args.json:
        print(json.dumps([p.as_json() for p in points], indent=2, ensure_ascii=False))
        return 0

    writer = csv.writer(sys.stdout)
    writer.writerow(["subject", "score", "fullMark"])
    for p in points:
        writer.writerow([p.subject, format_score(p.score), format_score(p.full_mark)])
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    try:
        app_cfg, profile = _load_inputs(args)
    except api.ProfileLoadError as e:
        print(str(e), file=sys.stderr)
        return 2

    store = api.store_from_profile(profile, app_config=app_cfg)
    try:
        result = build_export(profile.title or app_cfg.title, store.snapshot(), placeholder=app_cfg.placeholder_label)
    except ExportError as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 1

    out_path = Path(args.output) if args.output else None
    if args.json:
        payload = json.dumps(export_to_json(result), indent=2, ensure_ascii=False)
        if out_path:
            out_path.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)
        return 0

    if out_path:
        write_csv(result, out_path)
    else:
        write_csv_stream(result, sys.stdout)
    return 0


_INPUT_EPILOG = """examples:
  skillradar comment Speed=3 Accuracy=4 Creativity=3
  skillradar chart --from profile.yaml --json
  skillradar export --defaults --output profile.csv

profile file (JSON or YAML):
  {"title": "<title>", "axes": [{"label": "<label>", "value": <0-5>}, ...]}
  or just the axes list.
"""


if __name__ == "__main__":
    raise SystemExit(main())
