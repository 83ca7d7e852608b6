"""
Application constants for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from . import __version__

# Application info
APP_NAME = "void-update-notifier"
APP_VERSION = __version__
APP_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# Report locations
DEFAULT_BASE_URL = "https://alpha.de.repo.voidlinux.org/void-updates/void-updates"
MAINTAINER_REPORT_TEMPLATE = "updates_{email}.txt"
ALL_UPDATES_REPORT_SUFFIX = ".txt"

# Network timeouts (seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0

# Package query
XBPS_QUERY_COMMAND = "xbps-query"
XBPS_LIST_INSTALLED_FLAG = "-l"
XBPS_LIST_MANUAL_FLAG = "-m"

# Environment variables
ENV_BASE_URL = "VOID_UPDATES_BASE_URL"
ENV_EMAIL = "VOID_UPDATES_EMAIL"
ENV_TIMEOUT = "VOID_UPDATES_TIMEOUT"
ENV_NO_COLOR = "NO_COLOR"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# Section headings
MAINTAINER_HEADING = "Maintainer updates:"
INSTALLED_HEADING = "Updates for installed packages:"
