"""
Main entry point for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import sys
from typing import List, Optional

from . import __version__
from .checker import UpdateChecker
from .cli.output import OutputFormatter
from .config import Config
from .constants import (
    ENV_BASE_URL, ENV_EMAIL, ENV_TIMEOUT,
    EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK, EXIT_USAGE,
)
from .exceptions import ConfigurationError, VoidUpdatesError
from .utils.logger import get_logger, set_global_config

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create command line argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='void-updates',
        description='List upstream updates for the Void Linux packages you maintain or have installed'
    )
    parser.add_argument(
        '-e', '--email',
        help=f'Maintainer email used to fetch your own update report (env: {ENV_EMAIL})'
    )
    parser.add_argument(
        '--base-url',
        help=f'Location of the void-updates reports, without the .txt suffix (env: {ENV_BASE_URL})'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        help=f'Seconds to wait for each report download (env: {ENV_TIMEOUT})'
    )
    parser.add_argument(
        '-m', '--manual-only',
        action='store_true',
        help='Only match packages that were installed explicitly'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log progress to stderr'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log debugging details to stderr'
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """
    Build the configuration from the environment and parsed arguments.

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    config = Config.from_env().apply_overrides(
        base_url=args.base_url,
        maintainer_email=args.email,
        timeout=args.timeout,
        manual_only=args.manual_only,
        use_color=not args.no_color,
        debug=args.debug,
        verbose=args.verbose,
    )
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    formatter = OutputFormatter(use_color=not args.no_color)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        formatter.error(f"Configuration error: {e}")
        return EXIT_USAGE

    set_global_config(config.to_dict())
    formatter = OutputFormatter(use_color=config.use_color)

    checker = UpdateChecker(config)
    try:
        result = checker.check_updates()
        formatter.render(result)

        if not result.has_updates:
            logger.info("No updates available")

        if not result.has_useful_output:
            logger.error("No update information could be gathered")
            return EXIT_FAILURE
        return EXIT_OK

    except VoidUpdatesError as e:
        formatter.error(f"Error: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        formatter.error(f"Unexpected error: {e}")
        return EXIT_FAILURE
    finally:
        checker.close()


if __name__ == "__main__":
    sys.exit(main())
