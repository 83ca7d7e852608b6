"""
Configuration management for Void Update Notifier.

Settings come from built-in defaults, then environment variables, then
command line flags, each layer overriding the previous one.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .constants import (
    ALL_UPDATES_REPORT_SUFFIX,
    DEFAULT_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_BASE_URL,
    ENV_EMAIL,
    ENV_NO_COLOR,
    ENV_TIMEOUT,
    MAINTAINER_REPORT_TEMPLATE,
)
from .exceptions import ConfigurationError
from .utils.logger import get_logger
from .utils.validators import validate_base_url, validate_maintainer_email

logger = get_logger(__name__)


@dataclass
class Config:
    """Runtime configuration handed to the update checker."""
    base_url: str = DEFAULT_BASE_URL
    maintainer_email: Optional[str] = None
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    manual_only: bool = False
    use_color: bool = True
    debug: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        self.base_url = self.base_url.strip().rstrip('/')
        if self.maintainer_email is not None:
            self.maintainer_email = self.maintainer_email.strip() or None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """
        Create configuration from environment variables.

        Args:
            environ: Environment mapping, defaults to ``os.environ``

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        if environ is None:
            environ = os.environ

        timeout = DEFAULT_REQUEST_TIMEOUT
        raw_timeout = environ.get(ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}")

        return cls(
            base_url=environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            maintainer_email=environ.get(ENV_EMAIL) or None,
            timeout=timeout,
            # https://no-color.org: any non-empty value disables color
            use_color=not environ.get(ENV_NO_COLOR),
        )

    def apply_overrides(self, **overrides: Any) -> 'Config':
        """
        Override settings with values given on the command line.

        ``None`` means the flag was not given and leaves the setting alone.
        Boolean flags only ever switch a behavior on, except ``use_color``
        which only switches it off.

        Returns:
            self, for chaining
        """
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ConfigurationError(f"Unknown configuration key: {key}")
            if value is None:
                continue
            if key == 'use_color':
                self.use_color = self.use_color and bool(value)
            elif isinstance(value, bool):
                setattr(self, key, getattr(self, key) or value)
            else:
                setattr(self, key, value)
        self.__post_init__()
        return self

    def validate(self) -> None:
        """
        Check every setting.

        Raises:
            ConfigurationError: If a setting is invalid
        """
        if not validate_base_url(self.base_url):
            raise ConfigurationError(f"Invalid base URL: {self.base_url}")
        if self.maintainer_email is not None and not validate_maintainer_email(self.maintainer_email):
            raise ConfigurationError(f"Invalid maintainer email: {self.maintainer_email}")
        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {self.timeout}")
        logger.debug(f"Configuration validated: {self.to_dict()}")

    @property
    def has_maintainer(self) -> bool:
        """Whether a maintainer report can be requested."""
        return self.maintainer_email is not None

    def maintainer_report_name(self) -> str:
        """File name of the maintainer report, e.g. ``updates_me@example.org.txt``."""
        if self.maintainer_email is None:
            raise ConfigurationError("No maintainer email configured")
        return MAINTAINER_REPORT_TEMPLATE.format(email=self.maintainer_email)

    def maintainer_report_url(self) -> str:
        """URL of the report listing the maintainer's packages."""
        return f"{self.base_url}/{self.maintainer_report_name()}"

    def all_updates_report_url(self) -> str:
        """URL of the report covering every package."""
        return f"{self.base_url}{ALL_UPDATES_REPORT_SUFFIX}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "base_url": self.base_url,
            "maintainer_email": self.maintainer_email,
            "timeout": self.timeout,
            "manual_only": self.manual_only,
            "use_color": self.use_color,
            "debug": self.debug,
            "verbose": self.verbose,
        }
