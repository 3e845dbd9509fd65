"""Command line entry point: ``palcheck validate`` and ``palcheck find``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import PRESETS, ValidatorConfig, api_url_from_env, get_preset
from .errors import InputSourceError
from .finder import DEFAULT_MIN_HALF_WIDTH, find_candidates, write_candidates
from .reporting import format_entry, human_summary, to_json
from .scanner import scan_directory
from .utils import get_logger
from .validators import digits_only

EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palcheck",
        description="Validate palindromic candidates in the digits of pi",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Validate candidates in a results directory")
    validate.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("full_results"),
        help="Directory holding result files (default: full_results)",
    )
    validate.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Named threshold/exclusion settings",
    )
    validate.add_argument("--threshold", type=int, help="Minimum candidate size to validate")
    validate.add_argument(
        "--exclude-digits",
        help="Disqualifying trailing digits, e.g. 0,2,4,6,8",
    )
    validate.add_argument("--pattern", help="Glob for result files inside the directory")
    validate.add_argument("--api-url", help="Digit service endpoint")
    validate.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    validate.add_argument("--json", type=Path, dest="json_out", help="Also write a JSON report")

    find = sub.add_parser("find", help="Search a block of digits for palindromes")
    find.add_argument("digits_file", type=Path, help="Text file containing the digit block")
    find.add_argument("--start", type=int, default=0, help="Absolute offset of the block")
    find.add_argument(
        "--out-dir",
        type=Path,
        default=Path("full_results"),
        help="Where to write batch-<start>.txt (default: full_results)",
    )
    find.add_argument(
        "--min-half-width",
        type=int,
        default=DEFAULT_MIN_HALF_WIDTH,
        help=f"Minimum half width of a kept palindrome (default: {DEFAULT_MIN_HALF_WIDTH})",
    )
    return parser


def resolve_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ValidatorConfig:
    """Combine the chosen preset with explicit flags."""
    if args.preset:
        base = get_preset(args.preset)
    elif args.threshold is not None and args.exclude_digits is not None:
        base = ValidatorConfig(
            threshold=args.threshold,
            excluded_digits=frozenset(),
            api_url=api_url_from_env(),
        )
    else:
        parser.error("choose --preset, or give both --threshold and --exclude-digits")

    try:
        return base.with_overrides(
            threshold=args.threshold,
            excluded_digits=args.exclude_digits,
            pattern=args.pattern,
            api_url=args.api_url,
            timeout=args.timeout,
        )
    except ValueError as e:
        parser.error(str(e))


def run_validate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    log = logging.getLogger("palcheck")
    config = resolve_config(args, parser)
    log.info(
        "threshold=%d excluded=%s pattern=%s",
        config.threshold,
        ",".join(sorted(config.excluded_digits)),
        config.pattern,
    )

    try:
        candidates = scan_directory(args.directory, config)
    except InputSourceError as e:
        log.error("%s", e)
        return EXIT_INPUT_ERROR

    for candidate in candidates:
        print(format_entry(candidate))

    if args.json_out:
        to_json(candidates, args.json_out)
        log.info("Wrote JSON report to %s", args.json_out)

    log.info("%s", human_summary(candidates))
    return 0


def run_find(args: argparse.Namespace) -> int:
    log = logging.getLogger("palcheck")
    try:
        digits = digits_only(args.digits_file.read_text(encoding="utf-8"))
    except OSError as e:
        log.error("Cannot read digits file %s: %s", args.digits_file, e)
        return EXIT_INPUT_ERROR

    records = find_candidates(digits, args.start, min_half_width=args.min_half_width)
    outfile = args.out_dir / f"batch-{args.start}.txt"
    count = write_candidates(records, outfile)
    log.info("Scanned %d digits, wrote %d candidate(s) to %s", len(digits), count, outfile)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger("palcheck", logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "find":
        return run_find(args)
    return run_validate(args, parser)


if __name__ == "__main__":
    sys.exit(main())
