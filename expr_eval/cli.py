"""
expr-eval - evaluate an integer arithmetic expression from the command line.

Usage:
    expr-eval [EXPRESSION] [options]

Options:
    --json          Print the result as JSON
    --config PATH   Load settings from a YAML file
    --int-bits N    Integer width for overflow checks
    --unbounded     Use unbounded integers (huge powers may not finish)
    --lenient       Ignore trailing unrecognised text
    --log-level L   Logging level

Example:
    expr-eval "2 ^ 3 ^ 2"

Without an expression the demo expression is evaluated.
"""

import argparse
import sys

import yaml

from .config import Settings, get_settings
from .logging import get_evaluation_logger, setup_logging
from .models import EvaluationResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expr-eval",
        description="Evaluate an integer arithmetic expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  expr-eval                       # evaluate the demo expression
  expr-eval "(2 + 3) * 4"
  expr-eval "2 ^ 40" --int-bits 64
  expr-eval "1 / 0" --json
        """
    )
    parser.add_argument('expression', nargs='?', default=None,
                        help='Expression to evaluate (default: demo expression)')
    parser.add_argument('--json', action='store_true',
                        help='Print the result as JSON')
    parser.add_argument('--config', default=None,
                        help='YAML settings file')
    width = parser.add_mutually_exclusive_group()
    width.add_argument('--int-bits', type=int, default=None,
                       help='Integer width for overflow checks')
    width.add_argument('--unbounded', action='store_true',
                       help='Use unbounded integers (no overflow checks; huge powers such as 9^9^9 may not finish)')
    parser.add_argument('--lenient', action='store_true',
                        help='Ignore trailing unrecognised text')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (DEBUG, INFO, ...)')
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the config file and command-line overrides."""
    settings = Settings.from_yaml(args.config) if args.config else get_settings()

    overrides = {}
    if args.int_bits is not None:
        overrides['int_bits'] = args.int_bits
    if args.unbounded:
        overrides['int_bits'] = None
    if args.lenient:
        overrides['strict'] = False
    if args.log_level:
        overrides['log_level'] = args.log_level

    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})
    return settings


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return 2

    setup_logging(settings)

    source = args.expression if args.expression is not None else settings.demo_expression
    logger = get_evaluation_logger(__name__, source)
    logger.debug("Evaluating expression", extra_data={"int_bits": settings.int_bits, "strict": settings.strict})

    result = EvaluationResult.from_source(source, settings)

    if result.ok:
        logger.info("Evaluation succeeded", extra_data={"value": result.value})
    else:
        logger.info(
            "Evaluation failed",
            extra_data={"error_type": result.error.type, "error_message": result.error.message, **result.error.details},
        )

    if args.json:
        print(result.model_dump_json())
        return 0 if result.ok else 1

    if result.ok:
        print(f"expr = {source}")
        print(f"res = {result.value}")
        return 0

    print(f"error: {result.error.message}", file=sys.stderr)
    return 1


if __name__ == '__main__':
    sys.exit(main())
