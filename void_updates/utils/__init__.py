"""
Utils package for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from .logger import get_logger, set_global_config
from .subprocess_wrapper import SecureSubprocess
from .validators import validate_base_url, validate_maintainer_email

__all__ = [
    "get_logger",
    "set_global_config",
    "SecureSubprocess",
    "validate_base_url",
    "validate_maintainer_email",
]
