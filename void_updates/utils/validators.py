"""
Input validation utilities for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from urllib.parse import urlparse

from .logger import get_logger

logger = get_logger(__name__)

# A maintainer address as it appears in report file names
MAINTAINER_EMAIL_PATTERN = r'^[^\s/@]+@[^\s/@]+$'

BASE_URL_PATTERN = r'^https?://[a-zA-Z0-9\-._~:/?#[\]@!$&\'()*+,;=%]+$'


def validate_base_url(url: str) -> bool:
    """
    Validate the void-updates base URL.

    The report names are appended to this URL, so it must not already end in
    a report suffix.

    Args:
        url: URL to validate

    Returns:
        True if URL is usable
    """
    if not url:
        return False

    if not re.match(BASE_URL_PATTERN, url):
        logger.warning(f"Invalid URL format: {url}")
        return False

    try:
        parsed = urlparse(url)
    except ValueError as e:
        logger.warning(f"Failed to parse URL {url}: {e}")
        return False

    if parsed.scheme not in ['http', 'https']:
        logger.warning(f"Invalid URL scheme: {parsed.scheme}")
        return False

    if not parsed.hostname:
        logger.warning(f"No hostname in URL: {url}")
        return False

    if parsed.query or parsed.fragment:
        logger.warning(f"Base URL must not carry a query or fragment: {url}")
        return False

    if parsed.path.endswith('.txt'):
        logger.warning(f"Base URL must not name a report file: {url}")
        return False

    return True


def validate_maintainer_email(email: str) -> bool:
    """
    Validate a maintainer email address.

    Args:
        email: Address to validate

    Returns:
        True if the address can be placed in a report file name
    """
    if not email or len(email) > 254:
        return False

    if not re.match(MAINTAINER_EMAIL_PATTERN, email):
        logger.warning(f"Invalid maintainer email: {email}")
        return False

    return True
