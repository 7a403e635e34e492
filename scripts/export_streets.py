#!/usr/bin/env python3
"""Export street name lists for the areas of a KML file.

Examples:
    scripts/export_streets.py districts.kml --list
    scripts/export_streets.py districts.kml --area "Khamovniki"
    scripts/export_streets.py districts.kml --all --output-dir out/
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import LOG_FORMAT, get_export_dir, get_log_level
from core.exceptions import NotFoundError, ParseError
from core.http.session import cleanup_session
from street_export.service import StreetListService
from street_export.sinks import DirectorySink


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export named streets inside KML areas via the Overpass API.",
    )
    parser.add_argument("kml", type=Path, help="KML file with named polygon placemarks.")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--list", action="store_true", help="Print the area names and exit.")
    mode.add_argument("--area", help="Export the streets of one area.")
    mode.add_argument(
        "--all",
        action="store_true",
        help="Export the merged streets of every area into one file.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the exported files (default: STREET_EXPORT_DIR).",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    output_dir = args.output_dir or get_export_dir()
    sink = DirectorySink(output_dir)
    service = StreetListService(sink)

    try:
        raw = args.kml.read_bytes()
    except OSError as exc:
        print(f"Cannot open {args.kml}: {exc}", file=sys.stderr)
        return 2

    try:
        names = service.parse_boundaries(raw)
    except ParseError as exc:
        print(f"Cannot read {args.kml}: {exc.message}", file=sys.stderr)
        return 2

    if args.list:
        for name in names:
            print(name)
        return 0

    try:
        if args.all:
            result = await service.export_all()
        else:
            result = await service.export_one(args.area)
    except NotFoundError as exc:
        print(exc.message, file=sys.stderr)
        return 2
    finally:
        await cleanup_session()

    if result.delivered:
        print(f"{sink.target(result.filename)}: {len(result.names)} street(s)")
    for failure in result.failures:
        print(f"Failed: {failure.area_name}: {failure.message}", file=sys.stderr)
    return 1 if result.failures else 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
