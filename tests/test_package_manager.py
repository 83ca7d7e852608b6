"""
Tests for installed package discovery.
"""

import subprocess
from unittest.mock import patch

import pytest

from void_updates.exceptions import PackageManagerError, ProcessError
from void_updates.package_manager import PackageManager, extract_package_names


def completed(stdout: bytes, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["xbps-query", "-l"], returncode=returncode,
                                       stdout=stdout, stderr=b"")


class TestExtractPackageNames:
    """Test name extraction from xbps-query lines."""

    def test_pkgver_token(self):
        """Test the bare ``name-version`` form printed by ``xbps-query -m``."""
        assert extract_package_names(["python3-3.11.4_1"]) == {"python3"}

    def test_listing_line(self, sample_xbps_list):
        """Test the ``xbps-query -l`` form with state and description."""
        names = extract_package_names(sample_xbps_list.splitlines())
        assert names == {"python3", "neovim", "gtk+3"}

    def test_name_with_hyphens_splits_on_last_hyphen(self):
        assert extract_package_names(["ii python3-setuptools-69.0.3_1  Easily build"]) == {"python3-setuptools"}

    def test_no_hyphen_no_match(self):
        assert extract_package_names(["nohyphenhere", "", "ii bash"]) == set()

    def test_duplicates_collapse(self):
        assert extract_package_names(["foo-1.0_1", "foo-1.1_1"]) == {"foo"}


class TestPackageManager:
    """Test PackageManager queries."""

    def test_query_command(self):
        assert PackageManager().query_command == ["xbps-query", "-l"]
        assert PackageManager(manual_only=True).query_command == ["xbps-query", "-m"]

    @patch('void_updates.package_manager.SecureSubprocess.run')
    def test_get_installed_package_names(self, mock_run, sample_xbps_list):
        mock_run.return_value = completed(sample_xbps_list.encode("utf-8"))

        names = PackageManager().get_installed_package_names()

        assert names == {"python3", "neovim", "gtk+3"}
        assert mock_run.call_args[0][0] == ["xbps-query", "-l"]

    @patch('void_updates.package_manager.SecureSubprocess.run')
    def test_nonzero_exit_still_parsed(self, mock_run):
        mock_run.return_value = completed(b"foo-1.0_1\n", returncode=1)

        assert PackageManager(manual_only=True).get_installed_package_names() == {"foo"}

    @patch('void_updates.package_manager.SecureSubprocess.run')
    def test_command_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("Command not found: xbps-query")

        with pytest.raises(PackageManagerError, match="not found"):
            PackageManager().get_installed_package_names()

    @patch('void_updates.package_manager.SecureSubprocess.run')
    def test_spawn_failure(self, mock_run):
        mock_run.side_effect = PermissionError("Permission denied")

        with pytest.raises(ProcessError):
            PackageManager().get_installed_package_names()

    @patch('void_updates.package_manager.SecureSubprocess.run')
    def test_output_not_text(self, mock_run):
        mock_run.return_value = completed(b"\xff\xfe-\xfa\n")

        with pytest.raises(PackageManagerError, match="UTF-8"):
            PackageManager().get_installed_package_names()
