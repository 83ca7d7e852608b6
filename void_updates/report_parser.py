"""
Parsing of void-updates report files.

A report is plain text with one update per line::

    python-mock  3.0.5 -> 4.0.3    https://github.com/testing-cabal/mock

Header, footer and blank lines do not have this shape and are skipped.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re

from .models import PackageUpdate, UpdateMap
from .utils.logger import get_logger

logger = get_logger(__name__)

REPORT_LINE_PATTERN = re.compile(r'(\S+)\s+(\S+)\s+->\s+(\S+)')


def parse_report(body: str) -> UpdateMap:
    """
    Parse a report body into an update map.

    When a package is listed more than once, the line with the greater new
    version string is kept (see ``UpdateMap.add``).

    Args:
        body: Full report text

    Returns:
        UpdateMap, empty if no line matched
    """
    updates = UpdateMap()
    matched = 0

    for line in body.splitlines():
        match = REPORT_LINE_PATTERN.search(line)
        if not match:
            continue
        matched += 1
        name, current_version, new_version = match.groups()
        updates.add(name, PackageUpdate(current_version, new_version))

    logger.debug(f"Parsed {matched} report lines into {len(updates)} updates")
    return updates
