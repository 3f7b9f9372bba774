"""Command line interface for jsonmask."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .engine import JsonMask
from .exceptions import ConfigurationError, JsonMaskError
from .models import (
    DEFAULT_FLOAT_RANGE,
    DEFAULT_INT_RANGE,
    EngineConfig,
    LogLevel,
    MaskRules,
    NumberMask,
    StringMask,
)
from .runner import load_rules_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonmask",
        description="Mask JSON fields globally or by path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jsonmask -f password -f /user/email --hash input.json
  jsonmask -c rules.yaml -o masked.json input.json
  cat input.json | jsonmask -f token --fill '*' --fill-length 8
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Path to JSON document (reads stdin when omitted)"
    )
    parser.add_argument("-o", "--output", help="Write masked JSON to this file")
    parser.add_argument("-c", "--config", help="Path to YAML/JSON rules file")
    parser.add_argument(
        "-f", "--field",
        dest="fields",
        action="append",
        default=[],
        help="Global field name or absolute path (repeatable)"
    )

    strings = parser.add_mutually_exclusive_group()
    strings.add_argument("--hash", action="store_true", help="Replace strings with their SHA-1 hex digest")
    strings.add_argument("--fill", metavar="CHAR", help="Replace strings with repeated CHAR")
    parser.add_argument("--fill-length", type=int, metavar="N", help="Fixed length for --fill")

    parser.add_argument(
        "--random-int",
        nargs="?",
        type=int,
        const=DEFAULT_INT_RANGE,
        metavar="BOUND",
        help=f"Replace integers with a random value below BOUND (default {DEFAULT_INT_RANGE})"
    )
    parser.add_argument(
        "--random-float",
        nargs="?",
        const=DEFAULT_FLOAT_RANGE,
        metavar="SHAPE",
        help=f"Replace numbers with a random decimal shaped INT.DIGITS (default {DEFAULT_FLOAT_RANGE})"
    )

    parser.add_argument(
        "--log-level",
        choices=[lvl.value for lvl in LogLevel],
        help="Logging level"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def build_rules(args: argparse.Namespace, data: dict) -> MaskRules:
    """Merge command line options over a rules file."""
    rules = MaskRules.from_dict(data)
    rules.fields.extend(args.fields)

    if args.hash:
        rules.string_mask = StringMask.HASH
    elif args.fill is not None:
        rules.string_mask = StringMask.FILL
        rules.fill_char = args.fill
    if args.fill_length is not None:
        if args.fill_length < 0:
            raise ConfigurationError("--fill-length must be non-negative")
        rules.fill_length = args.fill_length

    if args.random_int is not None:
        if args.random_int <= 0:
            raise ConfigurationError("--random-int bound must be positive")
        rules.int_mask = NumberMask.RANDOM
        rules.int_range = args.random_int
    if args.random_float is not None:
        rules.float_mask = NumberMask.RANDOM
        rules.float_range = args.random_float

    return rules


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        data = load_rules_file(args.config) if args.config else {}
        rules = build_rules(args, data)
        config = EngineConfig.from_dict(data.get("engine"))
        engine = JsonMask.from_rules(rules, config)
    except (JsonMaskError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.quiet:
        level = LogLevel.ERROR
    elif args.log_level:
        level = LogLevel(args.log_level)
    else:
        level = config.log_level
    logging.basicConfig(
        level=level.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    if not engine.selectors:
        logger.warning("No fields selected, output equals input")

    try:
        if args.input:
            source = Path(args.input)
            if not source.exists():
                print(f"Error: Input file not found: {source}", file=sys.stderr)
                return 2
            text = source.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        masked = engine.mask(text)
    except JsonMaskError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(masked + "\n", encoding="utf-8")
    else:
        sys.stdout.write(masked + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
