"""
Data models for Void Update Notifier.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple


class ReportKind(Enum):
    """Which void-updates report a result came from."""
    MAINTAINER = "maintainer"
    ALL = "all"


@dataclass(frozen=True)
class PackageUpdate:
    """Represents one upstream update reported for a package."""

    current_version: str
    new_version: str

    def __post_init__(self) -> None:
        """Validate package update data."""
        if not self.current_version:
            raise ValueError("Current version cannot be empty")
        if not self.new_version:
            raise ValueError("New version cannot be empty")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.current_version} -> {self.new_version}"


class UpdateMap(Dict[str, PackageUpdate]):
    """
    Mapping of package name to its reported update.

    Holds at most one entry per package. Output ordering is by package name
    and is applied when the map is rendered, not when it is filled.
    """

    def add(self, name: str, update: PackageUpdate) -> bool:
        """
        Record an update, keeping the greater new version on duplicates.

        New versions are compared as plain strings, so "2.0" outranks "10.0".

        Args:
            name: Package name
            update: Reported update

        Returns:
            True if the map was changed
        """
        existing = self.get(name)
        if existing is not None and update.new_version < existing.new_version:
            return False
        self[name] = update
        return True

    def retain(self, keep: Callable[[str], bool]) -> None:
        """Drop every entry whose package name fails ``keep``."""
        for name in [n for n in self if not keep(n)]:
            del self[name]

    def sorted_items(self) -> List[Tuple[str, PackageUpdate]]:
        """Entries sorted by package name."""
        return sorted(self.items())

    def format_lines(self) -> List[str]:
        """One ``name<TAB>current -> new`` line per entry, sorted by name."""
        return [f"{name}\t{update}" for name, update in self.sorted_items()]

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.format_lines())


@dataclass
class FetchFailure:
    """A report that could not be fetched."""
    kind: ReportKind
    url: str
    message: str

    @property
    def report_name(self) -> str:
        """File name of the report, as shown to the user."""
        return self.url.rstrip('/').rsplit('/', 1)[-1]


@dataclass
class UpdateCheckResult:
    """Result of an update check operation."""
    maintainer_updates: UpdateMap = field(default_factory=UpdateMap)
    installed_updates: UpdateMap = field(default_factory=UpdateMap)
    failures: List[FetchFailure] = field(default_factory=list)
    package_query_error: Optional[str] = None
    maintainer_report_checked: bool = True

    @property
    def update_count(self) -> int:
        """Get number of updates across both sections."""
        return len(self.maintainer_updates) + len(self.installed_updates)

    @property
    def has_updates(self) -> bool:
        """Check if there are any updates to show."""
        return self.update_count > 0

    def failed(self, kind: ReportKind) -> bool:
        """Check whether the given report failed to fetch."""
        return any(failure.kind == kind for failure in self.failures)

    @property
    def has_useful_output(self) -> bool:
        """
        Check whether at least one section could be produced.

        The maintainer section needs its report; the installed section needs
        both the all-updates report and the installed package list.
        """
        maintainer_ok = self.maintainer_report_checked and not self.failed(ReportKind.MAINTAINER)
        installed_ok = not self.failed(ReportKind.ALL) and self.package_query_error is None
        return maintainer_ok or installed_ok
