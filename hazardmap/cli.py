#!/usr/bin/env python3
"""
Hazard Map CLI — serve the map, check a dataset, export filtered GeoJSON.

USAGE:
  python -m hazardmap.cli check                                   # Load summary + per-category counts
  python -m hazardmap.cli check --data ./data/hazards.csv

  python -m hazardmap.cli export                                  # Export everything
  python -m hazardmap.cli export --category speed blind --min-severity 2
  python -m hazardmap.cli export --search "crossing" --output ./dist

  python -m hazardmap.cli serve                                   # Start the map server
  python -m hazardmap.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from hazardmap.config import CATEGORIES, DATA_SOURCE, EXPORT_FOLDER, SEVERITY_MIN, SEVERITY_MAX
from hazardmap.controller import HazardMapController
from hazardmap.data.schemas import FilterCriteria
from hazardmap.export.geojson import write_geojson


def _build_criteria(args) -> FilterCriteria:
    """Build FilterCriteria from CLI args."""
    cats = getattr(args, "category", None)
    return FilterCriteria(
        categories=frozenset(cats) if cats is not None else frozenset(CATEGORIES),
        min_severity=getattr(args, "min_severity", SEVERITY_MIN),
        search=getattr(args, "search", "") or "",
    )


def _print_stats(rows: list[dict]) -> None:
    width = max(len(r["label"]) for r in rows)
    for r in rows:
        print(f"  {r['code']:<10}{r['label']:<{width + 2}}{r['count']:>6,}")


def cmd_check(args) -> int:
    """Load a dataset and report what survived normalization."""
    print("\n" + "=" * 70)
    print("  HAZARD MAP — DATASET CHECK")
    print("=" * 70 + "\n")

    controller = HazardMapController().load(args.data)
    store = controller.store
    if store.load_error:
        return 1

    s = store.summary
    print(f"\n  Rows read:  {s.rows_read:,}")
    print(f"  Points:     {s.kept:,}")
    print(f"  Rejected:   {s.rejected:,}\n")
    _print_stats(controller.view.panel.rows)
    print()
    return 0


def cmd_export(args) -> int:
    """Filter a dataset and write the subset as GeoJSON."""
    print("\n" + "=" * 70)
    print("  HAZARD MAP — GEOJSON EXPORT")
    print("=" * 70 + "\n")

    controller = HazardMapController().load(args.data)
    if controller.store.load_error:
        return 1

    state = controller.apply_filters(_build_criteria(args))
    path = write_geojson(controller.store.filtered, args.output)
    print(f"\n  {state['count']:,} of {state['total']:,} points match")
    _print_stats(state["stats"])
    print(f"\nExport saved to: {path}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the FastAPI server."""
    import uvicorn
    uvicorn.run("hazardmap.main:app", host="0.0.0.0", port=args.port, reload=args.reload)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Hazard Map — school-route hazard reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command")

    # check
    check_parser = subparsers.add_parser("check", help="Load a dataset and print a summary")
    check_parser.add_argument("--data", default=DATA_SOURCE, help="CSV path or URL")

    # export
    export_parser = subparsers.add_parser("export", help="Export the filtered subset as GeoJSON")
    export_parser.add_argument("--data", default=DATA_SOURCE, help="CSV path or URL")
    export_parser.add_argument("--category", nargs="*", choices=list(CATEGORIES),
                               help="Categories to keep (default: all)")
    export_parser.add_argument("--min-severity", type=int, default=SEVERITY_MIN,
                               choices=range(SEVERITY_MIN, SEVERITY_MAX + 1), help="Minimum severity (default 1)")
    export_parser.add_argument("--search", default="", help="Substring of description/status")
    export_parser.add_argument("--output", default=str(EXPORT_FOLDER), help="Output directory")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Start the map server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args(argv)
    commands = {"check": cmd_check, "export": cmd_export, "serve": cmd_serve}
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 2
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
