#!/usr/bin/env python3
"""netmapper CLI - convert, check and summarize network map files."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .analysis import summarize_state
from .config import get_settings
from .csv_io import export_devices_to_csv, import_devices_from_csv
from .json_io import load_state, save_state
from .state import create_initial_state
from .validation import validate_state, validation_summary

logger = logging.getLogger("netmapper")


def _json_out(data):
    print(json.dumps(data))


def _load(path):
    state = create_initial_state()
    meta = load_state(state, path)
    return state, meta


# ── Interchange ──────────────────────────────────────────────────────────────

def cmd_csv_import(args):
    content = Path(args.csv_file).read_text(encoding="utf-8-sig")
    state = create_initial_state()
    added = import_devices_from_csv(
        state,
        content,
        grid_cols=args.grid_cols,
        snap_enabled=False if args.no_snap else None,
    )
    path = save_state(state, args.output, client_name=args.client, site_name=args.site)
    return {
        "status": "ok",
        "message": f"Imported {len(added)} devices",
        "devices": len(added),
        "file_path": str(path),
    }


def cmd_csv_export(args):
    state, _ = _load(args.json_file)
    content = export_devices_to_csv(state.devices)
    if args.output is None:
        sys.stdout.write(content)
        return None

    path = Path(args.output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return {
        "status": "ok",
        "message": f"Exported {len(state.devices)} devices",
        "devices": len(state.devices),
        "file_path": str(path),
    }


# ── Analysis ─────────────────────────────────────────────────────────────────

def cmd_validate(args):
    state, _ = _load(args.json_file)
    issues = validate_state(state)
    return {
        "status": "ok",
        "summary": validation_summary(issues),
        "issues": [i.to_dict() for i in issues],
    }


def cmd_summarize(args):
    state, meta = _load(args.json_file)
    return {"status": "ok", **meta, "summary": summarize_state(state).to_dict()}


def main(argv=None):
    parser = argparse.ArgumentParser(prog="netmapper", description="Network map file tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("csv-import", help="Build a network map from a device CSV")
    p.add_argument("csv_file")
    p.add_argument("--output", required=True)
    p.add_argument("--client", default="")
    p.add_argument("--site", default="")
    p.add_argument("--grid-cols", type=int, default=None)
    p.add_argument("--no-snap", action="store_true")

    p = sub.add_parser("csv-export", help="Write a network map's devices as CSV")
    p.add_argument("json_file")
    p.add_argument("--output", default=None)

    p = sub.add_parser("validate", help="Check a network map for structural issues")
    p.add_argument("json_file")

    p = sub.add_parser("summarize", help="Count devices, links and components")
    p.add_argument("json_file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_settings().log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cmd_map = {
        "csv-import": cmd_csv_import,
        "csv-export": cmd_csv_export,
        "validate": cmd_validate,
        "summarize": cmd_summarize,
    }

    try:
        result = cmd_map[args.command](args)
    except (OSError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _json_out({"status": "error", "error": str(e)})
        return 1

    if result is not None:
        _json_out(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
