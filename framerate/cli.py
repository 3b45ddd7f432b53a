#!/usr/bin/env python3
"""
Command Line Interface for the frame rate tools.
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from . import __version__
from .config import AppSettings
from .core import STANDARD_FRAME_RATES, dumps, json_schema, loads
from .utils import describe, is_standard, parse_frame_rate, setup_logging, to_frame_duration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="framerate",
        description="Inspect, normalize and serialize video frame rates.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 29.97                          # Describe a standard rate
  %(prog)s 200/4 --json                   # Normalize and serialize (-> 50 fps)
  %(prog)s 1001/30000s                    # Rate from an FCPXML frame duration
  %(prog)s --from-json '{"num": 6, "den": 9}'
  %(prog)s --list                         # Show the standard rates
        """,
    )

    parser.add_argument(
        "rate",
        type=str,
        nargs="?",
        default=None,
        help="Frame rate: label, ratio, decimal or frame duration (default: FRAMERATE_DEFAULT)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the serialized {num, den} record",
    )

    parser.add_argument(
        "--from-json",
        action="store_true",
        help="Read RATE as a serialized JSON record",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the standard frame rates",
    )

    parser.add_argument(
        "--schema",
        action="store_true",
        help="Print the JSON schema of the serialized record",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log output to this file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def print_standard_rates():
    """Print the table of standard frame rates."""
    print("Standard frame rates:")
    for frame_rate in STANDARD_FRAME_RATES:
        print(f"  {frame_rate.label:>7} fps  {frame_rate.numerator}/{frame_rate.denominator}")


def print_frame_rate(frame_rate):
    """Print a human readable summary of a frame rate."""
    rational = frame_rate.to_rational()
    print(f"🎬 {describe(frame_rate)}")
    print(f"   Exact:          {rational.numerator}/{rational.denominator}")
    print(f"   Float:          {float(frame_rate):.6f}")
    print(f"   Standard:       {'Yes' if is_standard(frame_rate) else 'No'}")
    if rational:
        print(f"   Frame duration: {to_frame_duration(frame_rate)}")


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.from_json and args.rate is None:
        parser.error("--from-json requires a RATE record")

    try:
        # Load settings from environment
        load_dotenv()
        settings = AppSettings.from_env()

        # Override with CLI arguments
        if args.verbose:
            settings.verbose_logging = True
        if args.log_file:
            settings.log_file = args.log_file

        # Validate settings
        settings.validate()

        setup_logging(verbose=settings.verbose_logging, log_file=settings.log_file)

        if args.list:
            print_standard_rates()
            return 0

        if args.schema:
            print(json.dumps(json_schema(), indent=2))
            return 0

        if args.from_json:
            frame_rate = loads(args.rate)
        elif args.rate is not None:
            frame_rate = parse_frame_rate(args.rate)
        else:
            frame_rate = settings.get_default_frame_rate()

        logger.debug(f"Resolved frame rate: {frame_rate!r}")

        if args.json:
            print(dumps(frame_rate, indent=settings.json_indent))
        else:
            print_frame_rate(frame_rate)
        return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user")
        return 130
    except ValueError as e:
        logger.error(f"Error: {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
