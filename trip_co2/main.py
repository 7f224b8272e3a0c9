"""
main.py – CLI entry point for trip CO₂ estimates.

Usage
-----
List transport modes and their factors:
    python -m trip_co2.main modes

Estimate a known distance:
    python -m trip_co2.main distance --mode bus --km 12.5

Estimate between two GPS points:
    python -m trip_co2.main points --mode car --start 48.8566,2.3522 --end 45.7640,4.8357

Estimate every trip in a JSON file:
    python -m trip_co2.main batch --file trips.json --out results.json

Common options:
    --json      print machine-readable JSON instead of tables
    --verbose   DEBUG logging

Exit code is 1 when any estimate fails or the input cannot be read.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from trip_co2.calculations import (
    EmissionEstimate,
    estimate_for_distance,
    estimate_from_geo_points,
    estimate_trip,
)
from trip_co2.config import get_config
from trip_co2.constants import (
    ALLOWED_MODES,
    CAR_MULTIPLIER,
    MODE_CAR,
    OUTPUT_JSON,
    ZERO_EMISSION_MODES,
)
from trip_co2.emission_factors import get_emission_factor
from trip_co2.geo import make_geo_point
from trip_co2.io_utils import build_result_payload, load_trip_requests, write_results

console = Console()
log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

def _parse_point(text: str):
    """Parse ``"LAT,LON"`` into a GeoPoint (argparse type)."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected LAT,LON, got {text!r}")
    try:
        return make_geo_point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"non-numeric coordinate in {text!r}") from None


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def _print_estimate(estimate: EmissionEstimate, as_json: bool) -> int:
    """Render a single estimate and return the exit code."""
    if as_json:
        _print_json(estimate.as_dict())
    elif estimate.ok:
        console.print(
            f"[green]{estimate.grams:,.2f} g CO₂[/] "
            f"for {estimate.distance_km:,.3f} km by [cyan]{estimate.mode}[/]"
        )
    else:
        console.print(
            f"[red]Error:[/] {estimate.error} (code {estimate.legacy_value})"
        )
    return 0 if estimate.ok else 1


# ─────────────────────────────────────────────────────────────
# Sub-commands
# ─────────────────────────────────────────────────────────────

def cmd_modes(args: argparse.Namespace) -> int:
    """Handle: python -m trip_co2.main modes."""
    rows = []
    for mode in ALLOWED_MODES:
        multiplier = CAR_MULTIPLIER if mode == MODE_CAR else 1.0
        rows.append({
            "mode": mode,
            "g_co2_per_km": get_emission_factor(mode),
            "multiplier": 0.0 if mode in ZERO_EMISSION_MODES else multiplier,
        })

    if args.json:
        _print_json(rows)
        return 0

    table = Table(title="Transport modes")
    table.add_column("Mode", style="cyan")
    table.add_column("g CO₂ / km", justify="right")
    table.add_column("Multiplier", justify="right", style="dim")
    for r in rows:
        table.add_row(r["mode"], f"{r['g_co2_per_km']:.1f}", f"{r['multiplier']:.1f}")
    console.print(table)
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    """Handle: python -m trip_co2.main distance --mode M --km D."""
    estimate = estimate_for_distance(args.km, args.mode)
    return _print_estimate(estimate, args.json)


def cmd_points(args: argparse.Namespace) -> int:
    """Handle: python -m trip_co2.main points --mode M --start LAT,LON --end LAT,LON."""
    estimate = estimate_from_geo_points(args.start, args.end, args.mode)
    return _print_estimate(estimate, args.json)


def cmd_batch(args: argparse.Namespace) -> int:
    """Handle: python -m trip_co2.main batch --file trips.json [--out results.json]."""
    path = Path(args.file)
    try:
        requests = load_trip_requests(path)
    except (OSError, ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        console.print(f"[red]Could not load {path}:[/] {exc}")
        return 1

    log.info("Loaded %d trip(s) from %s", len(requests), path)
    payloads = [build_result_payload(req, estimate_trip(req)) for req in requests]

    if args.out:
        dest = write_results(Path(args.out), payloads)
        log.info("Results written to %s", dest)

    if args.json:
        _print_json(payloads)
    else:
        _print_result_table(payloads)

    failed = sum(1 for p in payloads if p["error"] is not None)
    if failed and not args.json:
        console.print(f"[yellow]{failed} of {len(payloads)} trip(s) could not be estimated.[/]")
    return 1 if failed else 0


def _print_result_table(payloads: list[dict]) -> None:
    """Render a rich table of per-trip results."""
    table = Table(title="Trip Emissions", show_lines=True)
    table.add_column("Trip", style="bold")
    table.add_column("Mode", style="cyan")
    table.add_column("Distance (km)", justify="right")
    table.add_column("g CO₂", justify="right")
    table.add_column("Status")

    for i, p in enumerate(payloads, start=1):
        distance = p["distance_km"]
        grams = p["grams_co2"]
        status = "[green]ok[/]" if p["error"] is None else f"[red]{p['error']}[/]"
        table.add_row(
            p["id"] or f"#{i}",
            p["mode"],
            f"{distance:,.3f}" if distance is not None else "",
            f"{grams:,.2f}" if grams is not None else "",
            status,
        )
    console.print(table)


# ─────────────────────────────────────────────────────────────
# Argument parsing
# ─────────────────────────────────────────────────────────────

def _build_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by every sub-command."""
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Print JSON instead of tables (default: TRIP_CO2_OUTPUT or table)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable DEBUG logging",
    )


def _add_mode_arg(parser: argparse.ArgumentParser) -> None:
    # Not restricted with choices= so unknown modes reach the estimator
    parser.add_argument(
        "--mode",
        required=True,
        help=f"Transport mode, one of: {', '.join(ALLOWED_MODES)}",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser."""
    root = argparse.ArgumentParser(
        prog="trip-co2",
        description="Estimate CO₂ emissions (grams) for a trip.",
    )
    sub = root.add_subparsers(dest="command", required=True)

    # ── modes ──────────────────────────────────────────────────
    p_modes = sub.add_parser("modes", help="List transport modes and emission factors.")
    _build_shared_args(p_modes)

    # ── distance ───────────────────────────────────────────────
    p_distance = sub.add_parser("distance", help="Estimate emissions for a known distance.")
    _add_mode_arg(p_distance)
    p_distance.add_argument(
        "--km",
        type=float,
        required=True,
        help="Distance travelled in kilometres",
    )
    _build_shared_args(p_distance)

    # ── points ─────────────────────────────────────────────────
    p_points = sub.add_parser("points", help="Estimate emissions between two GPS points.")
    _add_mode_arg(p_points)
    p_points.add_argument(
        "--start",
        type=_parse_point,
        required=True,
        help='Start point as "LAT,LON", e.g. "48.8566,2.3522"',
    )
    p_points.add_argument(
        "--end",
        type=_parse_point,
        required=True,
        help='End point as "LAT,LON", e.g. "45.7640,4.8357"',
    )
    _build_shared_args(p_points)

    # ── batch ──────────────────────────────────────────────────
    p_batch = sub.add_parser("batch", help="Estimate every trip in a JSON file.")
    p_batch.add_argument(
        "--file",
        required=True,
        help='JSON array of trip requests, e.g. "trips.json"',
    )
    p_batch.add_argument(
        "--out",
        default=None,
        help="Optional path to write per-trip results as JSON",
    )
    _build_shared_args(p_batch)

    return root


# ─────────────────────────────────────────────────────────────
# Entry point
# ─────────────────────────────────────────────────────────────

def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, configure logging and dispatch. Returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = get_config()
    except EnvironmentError as exc:
        console.print(f"[red]Configuration error:[/] {exc}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level_value,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )
    if args.json is None:
        args.json = cfg.output_format == OUTPUT_JSON

    dispatch = {
        "modes": cmd_modes,
        "distance": cmd_distance,
        "points": cmd_points,
        "batch": cmd_batch,
    }
    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
