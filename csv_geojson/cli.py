"""Command-line entry point: CSV to GeoJSON conversion.

This module is purely the wiring layer between the process (arguments,
environment, exit status) and the conversion pipeline. Configuration
comes from ``CSV_GEOJSON_*`` environment variables; command-line
arguments override them.

Exit status: 0 on success, 1 on any conversion or configuration error,
2 on a command-line usage error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from csv_geojson import __version__
from csv_geojson.core.config import ConverterConfig
from csv_geojson.core.exceptions import ConversionError
from csv_geojson.orchestrators.convert_pipeline import convert

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("csv_geojson.cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Options left unset fall back to the environment."""
    parser = argparse.ArgumentParser(
        prog="csv-geojson",
        description="Convert latitude,longitude rows to a GeoJSON FeatureCollection of points.",
    )
    parser.add_argument(
        "input_path",
        nargs="?",
        help="delimited text source (default: $CSV_GEOJSON_INPUT_PATH or points.csv)",
    )
    parser.add_argument(
        "output_path",
        nargs="?",
        help="GeoJSON destination (default: $CSV_GEOJSON_OUTPUT_PATH or points.geojson)",
    )
    parser.add_argument("-d", "--delimiter", help="field delimiter (default: ',')")
    parser.add_argument("-e", "--encoding", help="source text encoding (default: utf-8)")
    parser.add_argument(
        "--skip-header",
        action="store_true",
        default=None,
        help="treat the first non-blank row as a header",
    )
    parser.add_argument(
        "--validate-range",
        action="store_true",
        default=None,
        help="reject latitudes outside [-90, 90] and longitudes outside [-180, 180]",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="indent the JSON output by this many spaces (default: compact)",
    )
    parser.add_argument(
        "--log-level",
        help="logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one conversion and return the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = ConverterConfig.from_env().with_overrides(**vars(args))
    except ConversionError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        return _report_failure(exc)

    logging.basicConfig(level=config.log_level_value, format=LOG_FORMAT)

    try:
        result = convert(config)
    except ConversionError as exc:
        return _report_failure(exc)

    print(f"Conversion complete! {result.feature_count} feature(s) written to {result.output_path}")
    return 0


def _report_failure(exc: ConversionError) -> int:
    logger.error("Conversion failed | %s", json.dumps(exc.to_error_dict(), default=str))
    print(f"error: {exc.message}", file=sys.stderr)
    return 1
