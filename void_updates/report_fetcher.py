"""
Fetching of void-updates reports over HTTP.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional, Union

import requests

from .constants import APP_USER_AGENT, DEFAULT_REQUEST_TIMEOUT
from .exceptions import NetworkError
from .models import ReportKind, UpdateMap
from .report_parser import parse_report
from .utils.logger import get_logger

logger = get_logger(__name__)

FetchOutcome = Union[UpdateMap, NetworkError]

CHARSET_PATTERN = re.compile(r'charset\s*=\s*["\']?([^"\';\s]+)', re.IGNORECASE)


def declared_charset(content_type: str) -> Optional[str]:
    """
    Charset named in a Content-Type header, if any.

    requests assumes ISO-8859-1 for text types without a charset; reports
    are UTF-8 unless the server says otherwise.
    """
    match = CHARSET_PATTERN.search(content_type)
    return match.group(1) if match else None


class ReportFetcher:
    """Downloads report files and turns them into update maps."""

    def __init__(self, timeout: float = DEFAULT_REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None) -> None:
        """
        Initialize the report fetcher.

        Args:
            timeout: Seconds to wait for the server on each request
            session: Session to reuse, a new one is created if omitted
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': APP_USER_AGENT,
            'Accept': 'text/plain',
        })

        logger.debug("Initialized ReportFetcher")

    def fetch(self, url: str) -> str:
        """
        Fetch a report and return its body as text.

        Args:
            url: Report URL

        Returns:
            Response body

        Raises:
            NetworkError: If the request fails, the server answers with an
                error status or the body is not text
        """
        logger.info(f"Fetching report: {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise NetworkError(f"Request timed out after {self.timeout}s", url=url)
        except requests.exceptions.HTTPError as e:
            raise NetworkError(f"Server returned an error: {e}", url=url)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch report: {e}", url=url)

        encoding = declared_charset(response.headers.get('Content-Type', '')) or 'utf-8'
        try:
            body = response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise NetworkError(f"Report is not valid {encoding} text: {e}", url=url)

        logger.debug(f"Fetched {len(body)} characters from {url}")
        return body

    def fetch_report(self, url: str) -> UpdateMap:
        """
        Fetch a report and parse it.

        Raises:
            NetworkError: If the report cannot be fetched
        """
        return parse_report(self.fetch(url))

    def fetch_reports(self, urls: Dict[ReportKind, str]) -> Dict[ReportKind, FetchOutcome]:
        """
        Fetch and parse several reports in parallel.

        Every report is attempted; a failure is returned in place of its map
        rather than raised, and the call only returns once all fetches have
        finished.

        Args:
            urls: Report URLs keyed by report kind

        Returns:
            UpdateMap or NetworkError for each requested kind
        """
        if not urls:
            return {}

        outcomes: Dict[ReportKind, FetchOutcome] = {}
        with ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix="report-fetch") as executor:
            futures = {
                kind: executor.submit(self.fetch_report, url)
                for kind, url in urls.items()
            }
            for kind, future in futures.items():
                try:
                    outcomes[kind] = future.result()
                except NetworkError as e:
                    logger.info(f"Failed to fetch {kind.value} report: {e}")
                    outcomes[kind] = e

        return outcomes

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
