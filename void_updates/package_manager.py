"""
Installed package discovery for Void Linux systems.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
import subprocess
from typing import Iterable, List, Set

from .constants import XBPS_LIST_INSTALLED_FLAG, XBPS_LIST_MANUAL_FLAG, XBPS_QUERY_COMMAND
from .exceptions import PackageManagerError
from .utils.logger import get_logger
from .utils.subprocess_wrapper import SecureSubprocess

logger = get_logger(__name__)

# First token holding a hyphen; the name ends at its last hyphen
PKGVER_PATTERN = re.compile(r'(\S+)-\S+')


def extract_package_names(lines: Iterable[str]) -> Set[str]:
    """
    Extract package names from ``xbps-query`` listing lines.

    ``ii python3-3.11.4_1  Python programming language`` and
    ``python3-3.11.4_1`` both yield ``python3``. Lines with no hyphenated
    token are skipped.

    Args:
        lines: Output lines

    Returns:
        Set of package names
    """
    names = set()
    for line in lines:
        match = PKGVER_PATTERN.search(line)
        if match:
            names.add(match.group(1))
    return names


class PackageManager:
    """Queries the XBPS package database."""

    def __init__(self, manual_only: bool = False) -> None:
        """
        Initialize the package manager.

        Args:
            manual_only: Only consider packages installed explicitly rather
                than every installed package
        """
        self.manual_only = manual_only
        logger.debug("Initialized PackageManager")

    @property
    def query_command(self) -> List[str]:
        """xbps-query invocation for the configured listing."""
        flag = XBPS_LIST_MANUAL_FLAG if self.manual_only else XBPS_LIST_INSTALLED_FLAG
        return [XBPS_QUERY_COMMAND, flag]

    def get_installed_package_names(self) -> Set[str]:
        """
        Get the names of installed packages.

        Returns:
            Set of package names

        Raises:
            PackageManagerError: If xbps-query cannot be run or its output
                is not text
        """
        command = self.query_command
        try:
            result = SecureSubprocess.run(command, capture_output=True, text=False, check=False)
        except FileNotFoundError:
            raise PackageManagerError(f"{XBPS_QUERY_COMMAND} command not found - is this a Void Linux system?")
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise PackageManagerError(f"Failed to run {' '.join(command)}: {e}")

        if result.returncode != 0:
            logger.warning(f"{' '.join(command)} exited with status {result.returncode}")

        try:
            output = result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise PackageManagerError(f"Output of {' '.join(command)} is not valid UTF-8: {e}")

        names = extract_package_names(output.splitlines())
        logger.info(f"Found {len(names)} installed packages")
        return names
