"""
Command line presentation for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from .output import OutputFormatter

__all__ = ["OutputFormatter"]
