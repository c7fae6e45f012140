# Script Name: run.py
# Description:
# - Command-line entry point: CSV of point pairs in -> normalized CSV out.
# - Exit codes: 0 success (skipped rows included), 1 application error, 2 usage error.

from geopair_app.setup_imports import *

import argparse

from geopair_engine import GeoTolerance

from geopair_app.config import load_settings, parse_tolerance
from geopair_app.csv_io import read_input_csv, write_output_csv
from geopair_app.data_schema import InputFormat
from geopair_app.errors import AppError
from geopair_app.pipeline_controller import process_batch
from geopair_app.utils import configure_logging, log_error_and_continue

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def _tolerance_arg(text: str) -> float:
    try:
        return parse_tolerance(float(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geopair",
        description="Normalize CSV point pairs (DD / DMS / DDM) and compute their great-circle distance.",
    )
    parser.add_argument("-i", "--input", required=True, type=Path, help="Input CSV file path")
    parser.add_argument("-o", "--output", required=True, type=Path, help="Output CSV file path")
    parser.add_argument(
        "-f", "--input-format",
        required=True,
        type=InputFormat,
        choices=list(InputFormat),
        help="Coordinate input format",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strict mode: stop on first error (--no-strict overrides GEOPAIR_STRICT)",
    )
    parser.add_argument(
        "--tolerance",
        type=_tolerance_arg,
        default=None,
        help="Proximity tolerance in decimal degrees (default 1e-6, or GEOPAIR_TOLERANCE_DEG)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default INFO, or GEOPAIR_LOG_LEVEL)")
    return parser


def run(input_path, output_path, input_format, strict: bool, tolerance) -> int:
    """
    Read, normalize and write one batch. Returns the number of ignored rows.
    Raises AppError on anything that should stop the run.
    """
    input_df = read_input_csv(input_path)
    result = process_batch(input_df, input_format, tolerance=tolerance, strict=strict)
    write_output_csv(result.rows, output_path)
    return result.invalid


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()

    configure_logging(args.log_level or settings.log_level)

    strict = settings.strict if args.strict is None else args.strict
    tolerance = settings.tolerance if args.tolerance is None else GeoTolerance(deg=args.tolerance)

    LOG.info(
        "Starting geopair: input=%s output=%s format=%s strict=%s tolerance=%g",
        args.input, args.output, args.input_format, strict, tolerance.deg,
    )

    try:
        invalid = run(args.input, args.output, args.input_format, strict, tolerance)
    except AppError as e:
        log_error_and_continue("geopair run failed", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if invalid > 0:
        print(f"{invalid} ignored line(s)", file=sys.stderr)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
