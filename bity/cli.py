"""
Bity CLI

Usage:
    bity parse byte 12.3kB
    bity format bps 1234
    python -m bity parse pps 2.44Mpps
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .serde import TRANSCODER_NAMES, get_transcoder

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bity",
        description="Parse and format SI prefixed data sizes, data rates, packet counts and packet rates",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a SI prefixed string into an integer")
    parse_parser.add_argument("domain", choices=TRANSCODER_NAMES, help="Unit domain")
    parse_parser.add_argument("text", help="String to parse, e.g. 12.3kB")

    format_parser = subparsers.add_parser("format", help="Format an integer into a SI prefixed string")
    format_parser.add_argument("domain", choices=TRANSCODER_NAMES, help="Unit domain")
    format_parser.add_argument("value", type=int, help="Integer count in base units")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    transcoder = get_transcoder(args.domain)
    try:
        if args.command == "parse":
            result = transcoder.decode(args.text)
        else:
            result = transcoder.encode(args.value)
    except (ValueError, TypeError) as err:
        logger.error("%s %s failed: %s", args.command, args.domain, err)
        return 1

    print(result)
    return 0
