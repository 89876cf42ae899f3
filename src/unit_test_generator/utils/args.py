"""
Argument parsing utility for the unit test generator.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def add_verbose_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the generator.

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Generate a unit test file for a JavaScript or TypeScript module."
    )

    parser.add_argument(
        "source",
        type=Path,
        help="Source file to generate a unit test for.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a config.yaml (defaults to ./config.yaml, then the project root).",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing test file without asking.",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        default=None,
        help="Open the generated file in $VISUAL/$EDITOR.",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the test file instead of writing it.",
    )
    group.add_argument(
        "--dump-exports",
        action="store_true",
        help="Print the module's exports as JSON and exit.",
    )

    add_verbose_argument(parser)
    return parser.parse_args(argv)
