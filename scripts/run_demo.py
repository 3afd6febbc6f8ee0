#!/usr/bin/env python3
"""Run the banking demonstration.

Opens a checking and a savings account, moves money between them, charges
the maintenance fee, applies interest and prints statements along the way.
Settings come from the environment (see ``BankConfig.from_env``) and can be
overridden on the command line.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_demo.config import OUTPUT_FORMATS, BankConfig, OutputConfig
from bank_demo.exceptions import ConfigurationError
from bank_demo.logging import get_logger, setup_logging
from bank_demo.scenarios import DemoScenario

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Run the banking demonstration")
    parser.add_argument(
        "--bank-name",
        type=str,
        default=None,
        help="Bank name (default: $BANK_NAME or 'Banco Digital')",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: $OUTPUT_FORMAT or text)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )
    parser.add_argument(
        "--generate-clients",
        action="store_true",
        help="Use generated clients instead of the fixed demo clients",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated clients",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=("standard", "json"),
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    return parser


def apply_args(config: BankConfig, args: argparse.Namespace) -> BankConfig:
    """Layer command line overrides on top of ``config``."""
    if args.bank_name:
        config.bank_name = args.bank_name
    if args.format or args.pretty:
        config.output = OutputConfig(
            format=args.format or config.output.format,
            pretty_json=args.pretty or config.output.pretty_json,
        )
    if args.generate_clients:
        config.demo.generate_clients = True
    if args.seed is not None:
        config.demo.seed = args.seed
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = apply_args(BankConfig.from_env(), args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info("Running demo for %s", config.bank_name)

    result = DemoScenario(config).run()
    logger.info(
        "Total balance held by %s: %s", result.bank.name, result.bank.total_balance()
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
