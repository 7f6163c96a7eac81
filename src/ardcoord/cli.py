"""
Command-line interface for ardcoord.

Give it any of WGS84 (lon, lat), UTM, or Maxar ARD grid coordinates to get
all three.
"""

import argparse
import itertools
import json
import sys
from typing import List, Optional, Sequence

from ardcoord import __version__
from ardcoord.core.config import get_settings
from ardcoord.core.converter import convert_tokens
from ardcoord.core.errors import ArdCoordException
from ardcoord.core.logging_config import get_logger, setup_logging
from ardcoord.core.parsing import DECIMAL_PATTERN
from ardcoord.models.coordinates import ConversionResult

logger = get_logger(__name__)

USAGE = """\
%(prog)s <grid cell in ZZ/QKQKQKQKQKQK format>
       %(prog)s <longitude> <latitude>
       %(prog)s <UTM zone> <easting> <northing>"""

EPILOG = """\
example:
  $ ardcoord -99.09357951534054 19.29675919163688
  Lon, lat: -99.09358, 19.29676
  Lat/lon: 19.29676/-99.09358
  UTM 14N 490168 2133666
  14/033113131312

conventions:
  1. Grid cells are treated as their centers in conversions, and are
     written at level 12.
  2. WGS84 and UTM coordinates are read at any precision but written at
     ~1 meter precision (whole meters for UTM, 5 decimals for WGS84).
  3. Grid cells and UTM coordinates are read in any zone but written in
     their canonical zone.
  4. Numbers may use exponents (-1.22667e2). Options may come before or
     after the coordinates, and anything after -- is read as a coordinate."""

VALUE_OPTIONS = ("--precision", "--log-level")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ardcoord",
        usage=USAGE,
        description=(
            "Coordinate conversions for Maxar ARD. Inputs are told apart by "
            "argument count."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="COORDINATE",
        help="grid cell, longitude and latitude, or UTM zone, easting and northing",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print all representations as JSON",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="decimals for longitude/latitude (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def separate_coordinates(argv: Sequence[str]) -> List[str]:
    """
    Reorder arguments so every coordinate follows a ``--``.

    argparse only takes plain negative numbers such as ``-45.5`` for
    positionals; ``-1.22667e2`` would be rejected as an unknown option.

    Args:
        argv: Arguments without the program name

    Returns:
        Options, then ``--``, then coordinate tokens in their original order
    """
    options: List[str] = []
    tokens: List[str] = []
    arguments = iter(argv)
    for argument in arguments:
        if argument == "--":
            tokens.extend(arguments)
        elif DECIMAL_PATTERN.match(argument) or not argument.startswith("-"):
            tokens.append(argument)
        else:
            options.append(argument)
            if argument in VALUE_OPTIONS:
                options.extend(itertools.islice(arguments, 1))
    return options + ["--"] + tokens


def format_text(result: ConversionResult, precision: int = 5) -> str:
    """
    Render a conversion as the four-line text report.

    Args:
        result: Conversion to render
        precision: Decimals for longitude and latitude

    Returns:
        Report without trailing newline
    """
    lon = f"{result.geographic.longitude:.{precision}f}"
    lat = f"{result.geographic.latitude:.{precision}f}"
    utm = result.utm

    lines: List[str] = [
        f"Lon, lat: {lon}, {lat}",
        f"Lat/lon: {lat}/{lon}",
        f"UTM {utm.designator} {int(utm.easting)} {int(utm.northing)}",
        result.cell.identifier,
    ]
    return "\n".join(lines)


def format_json(result: ConversionResult) -> str:
    """Render a conversion as indented JSON."""
    return json.dumps(result.to_dict(), indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Arguments without the program name; sys.argv[1:] if None

    Returns:
        Process exit status
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(separate_coordinates(argv))

    if args.precision is not None and not 0 <= args.precision <= 12:
        parser.error(f"--precision must be in 0..12, got {args.precision}")

    try:
        settings = get_settings()
        setup_logging(log_level=args.log_level)

        result = convert_tokens(args.tokens)
    except ArdCoordException as e:
        logger.debug(f"Conversion failed: {e.message}", extra={"error_code": e.error_code})
        print(e.message, file=sys.stderr)
        return e.exit_code

    if args.json:
        print(format_json(result))
    else:
        precision = settings.geographic_precision if args.precision is None else args.precision
        print(format_text(result, precision))

    return 0


if __name__ == "__main__":
    sys.exit(main())
