"""
Custom exceptions for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later


class VoidUpdatesError(Exception):
    """Base exception for all Void Update Notifier errors."""

    pass


class NetworkError(VoidUpdatesError):
    """Raised when a report cannot be fetched or decoded."""

    def __init__(self, message: str, url: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.args[0]} (URL: {self.url})"
        return str(self.args[0])


class PackageManagerError(VoidUpdatesError):
    """Raised when the package query command cannot be run or read."""

    pass


class ConfigurationError(VoidUpdatesError):
    """Raised when configuration is invalid."""

    pass


# Aliases for the two failure classes
TransportError = NetworkError
ProcessError = PackageManagerError
