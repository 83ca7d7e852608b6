"""
Output formatting utilities for the CLI.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import sys
from typing import List

from colorama import init, Fore, Style

from ..constants import INSTALLED_HEADING, MAINTAINER_HEADING
from ..models import UpdateCheckResult, UpdateMap
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Initialize colorama for cross-platform color support
init(autoreset=True)

# colorama has no underline attribute
UNDERLINE = '\033[4m'


class OutputFormatter:
    """Handles output formatting for the CLI."""

    def __init__(self, use_color: bool = True):
        """
        Initialize output formatter.

        Args:
            use_color: Whether to use ANSI colors
        """
        self.use_color = use_color

        # Color shortcuts
        self.red = Fore.RED if use_color else ''
        self.blue = Fore.BLUE if use_color else ''
        self.bright = Style.BRIGHT if use_color else ''
        self.underline = UNDERLINE if use_color else ''
        self.reset = Style.RESET_ALL if use_color else ''

    def warning(self, message: str) -> None:
        """Print a warning on stdout, in red."""
        print(f"{self.red}{message}{self.reset}")

    def error(self, message: str) -> None:
        """Print error message."""
        print(f"{self.red}{message}{self.reset}", file=sys.stderr)

    def heading(self, message: str) -> str:
        """Bold, blue, underlined section heading."""
        return f"{self.bright}{self.blue}{self.underline}{message}{self.reset}"

    def format_section(self, title: str, updates: UpdateMap) -> str:
        """
        Format one section of updates.

        Args:
            title: Section heading
            updates: Updates to list, sorted by package name

        Returns:
            Heading followed by one ``name<TAB>current -> new`` line per update
        """
        lines: List[str] = [self.heading(title)]
        lines.extend(updates.format_lines())
        return '\n'.join(lines)

    def render(self, result: UpdateCheckResult) -> None:
        """
        Print the result of an update check.

        Fetch warnings come first. A section is only printed when it has
        entries, so nothing but warnings is printed when there is nothing to
        update.
        """
        for failure in result.failures:
            logger.info(f"{failure.report_name} unavailable: {failure.message}")
            self.warning(f"Could not fetch {failure.report_name}")

        if result.package_query_error:
            self.error(f"Could not list installed packages: {result.package_query_error}")

        if result.maintainer_updates:
            print(self.format_section(MAINTAINER_HEADING, result.maintainer_updates))
            # Blank line between the two sections
            print()

        if result.installed_updates:
            print(self.format_section(INSTALLED_HEADING, result.installed_updates))
