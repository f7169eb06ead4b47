"""
Matcher CLI - Compare two token files for likely copying.

Usage:
    matcher-cli compare --a ./a.tokens --b ./b.tokens
    matcher-cli compare --a ./a.tokens --b ./b.tokens --json --report-raw
    matcher-cli demo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..matching import ComparisonResult, MatchingError, create_matcher
from .config import add_args, build_matcher_config, setup_logging
from .errors import MatcherCLIError
from .readers import read_token_file

logger = logging.getLogger(__name__)

DEMO_SEQUENCE_A = list(range(10, 30))
DEMO_SEQUENCE_B = [0, 1, 10, 11, 12, 13, 50, 51, *range(14, 27)]


def print_result(result: ComparisonResult, as_json: bool) -> None:
    """Print the five result fields."""
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print("Comparison Results:")
    print(f"  Significant:         {'yes' if result.is_significant else 'no'}")
    print(f"  Exact match length:  {result.exact_match_length}")
    print(f"  Long match length:   {result.long_match_length}")
    print(f"  Long match start A:  {result.long_match_start_a}")
    print(f"  Long match start B:  {result.long_match_start_b}")


def cmd_compare(args: argparse.Namespace) -> int:
    """Execute the compare command."""
    matcher_config = build_matcher_config(args)
    logger.info(f"Matcher config: {matcher_config.to_dict()}")

    tokens_a = read_token_file(args.path_a)
    tokens_b = read_token_file(args.path_b)

    result = create_matcher(matcher_config).compare(tokens_a, tokens_b)
    print_result(result, args.as_json)
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    """Execute the demo command on the built-in sample pair."""
    matcher_config = build_matcher_config(args)

    if not args.as_json:
        print(f"Sequence A: {DEMO_SEQUENCE_A}")
        print(f"Sequence B: {DEMO_SEQUENCE_B}")
        print()

    result = create_matcher(matcher_config).compare(DEMO_SEQUENCE_A, DEMO_SEQUENCE_B)
    print_result(result, args.as_json)
    return 0


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="matcher-cli",
        description="Matcher CLI - Score similarity between two token sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute",
    )

    # ─────────────────────────────────────────────────────────────────────────
    # COMPARE command
    # ─────────────────────────────────────────────────────────────────────────
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare two token files",
        description="Read two files of integer tokens and report their similarity.",
    )

    compare_parser.add_argument(
        "--a",
        dest="path_a",
        required=True,
        metavar="PATH",
        help="Token file for sequence A",
    )

    compare_parser.add_argument(
        "--b",
        dest="path_b",
        required=True,
        metavar="PATH",
        help="Token file for sequence B",
    )

    add_args(compare_parser)

    # ─────────────────────────────────────────────────────────────────────────
    # DEMO command
    # ─────────────────────────────────────────────────────────────────────────
    demo_parser = subparsers.add_parser(
        "demo",
        help="Compare the built-in sample pair",
        description="Run the matcher on a hardcoded pair of token sequences.",
    )

    add_args(demo_parser)

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        config = parse_args(args)
    except SystemExit as e:
        # argparse exits with 2 on usage errors and 0 on --help
        return e.code if isinstance(e.code, int) else 2

    setup_logging(config.log_level)

    try:
        if config.command == "compare":
            return cmd_compare(config)
        elif config.command == "demo":
            return cmd_demo(config)
        else:
            print(f"ERROR: Unknown command: {config.command}", file=sys.stderr)
            return 2

    except (MatcherCLIError, MatchingError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
