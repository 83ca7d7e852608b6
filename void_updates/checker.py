"""
Update checker for Void Linux systems.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Dict, Optional

from .config import Config
from .exceptions import NetworkError, PackageManagerError
from .models import FetchFailure, ReportKind, UpdateCheckResult, UpdateMap
from .package_manager import PackageManager
from .report_fetcher import FetchOutcome, ReportFetcher
from .utils.logger import get_logger

logger = get_logger(__name__)


class UpdateChecker:
    """Reconciles the void-updates reports with the local system."""

    def __init__(self, config: Config,
                 fetcher: Optional[ReportFetcher] = None,
                 package_manager: Optional[PackageManager] = None) -> None:
        """
        Initialize the update checker.

        Args:
            config: Configuration instance
            fetcher: Report fetcher, created from config if omitted
            package_manager: Package manager, created from config if omitted
        """
        self.config = config
        self.fetcher = fetcher or ReportFetcher(timeout=config.timeout)
        self.package_manager = package_manager or PackageManager(manual_only=config.manual_only)

        logger.info("Initialized UpdateChecker")

    def report_urls(self) -> Dict[ReportKind, str]:
        """URLs of the reports to fetch for this configuration."""
        urls = {}
        if self.config.has_maintainer:
            urls[ReportKind.MAINTAINER] = self.config.maintainer_report_url()
        else:
            logger.info("No maintainer email configured, skipping maintainer report")
        urls[ReportKind.ALL] = self.config.all_updates_report_url()
        return urls

    def check_updates(self) -> UpdateCheckResult:
        """
        Collect the updates relevant to this user.

        Both reports are fetched together. A report that cannot be fetched
        counts as empty and is listed in ``failures``. Updates from the
        all-updates report are kept only for packages that are installed and
        not already covered by the maintainer report.

        Returns:
            UpdateCheckResult
        """
        logger.info("Starting update check...")
        result = UpdateCheckResult(maintainer_report_checked=self.config.has_maintainer)

        urls = self.report_urls()
        outcomes = self.fetcher.fetch_reports(urls)

        result.maintainer_updates = self._take(outcomes, ReportKind.MAINTAINER, urls, result)
        all_updates = self._take(outcomes, ReportKind.ALL, urls, result)

        try:
            installed_packages = self.package_manager.get_installed_package_names()
        except PackageManagerError as e:
            logger.error(f"Could not list installed packages: {e}")
            result.package_query_error = str(e)
            installed_packages = set()

        maintainer_updates = result.maintainer_updates
        all_updates.retain(
            lambda name: name in installed_packages and name not in maintainer_updates
        )
        result.installed_updates = all_updates

        logger.info(
            f"Update check complete: {result.update_count} updates "
            f"({len(result.maintainer_updates)} maintained, {len(result.installed_updates)} installed)"
        )
        return result

    @staticmethod
    def _take(outcomes: Dict[ReportKind, FetchOutcome], kind: ReportKind,
              urls: Dict[ReportKind, str], result: UpdateCheckResult) -> UpdateMap:
        """Unwrap one fetch outcome, recording a failure in its place."""
        outcome = outcomes.get(kind)
        if isinstance(outcome, UpdateMap):
            return outcome
        if isinstance(outcome, NetworkError):
            result.failures.append(FetchFailure(kind=kind, url=urls[kind], message=str(outcome)))
        return UpdateMap()

    def close(self) -> None:
        """Release network resources."""
        self.fetcher.close()
