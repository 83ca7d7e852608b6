"""
Shared fixtures for the Void Update Notifier tests.
"""

import pytest

from void_updates.config import Config
from void_updates.constants import ENV_BASE_URL, ENV_EMAIL, ENV_NO_COLOR, ENV_TIMEOUT
from void_updates.utils.subprocess_wrapper import SecureSubprocess


SAMPLE_REPORT = """\
void-updates report, generated 2024-01-15

python-mock  3.0.5 -> 4.0.3    https://github.com/testing-cabal/mock
python3      3.11.4 -> 3.12.0  https://www.python.org/ftp/python/
neovim       0.9.4 -> 0.9.5    https://github.com/neovim/neovim/releases

3 packages with updates
"""

SAMPLE_XBPS_LIST = """\
ii python3-3.11.4_1                 Python programming language
ii neovim-0.9.4_1                   Fork of Vim aiming to improve user experience
ii gtk+3-3.24.38_1                  GTK+ toolkit
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's own settings out of the tests."""
    for name in (ENV_BASE_URL, ENV_EMAIL, ENV_TIMEOUT, ENV_NO_COLOR):
        monkeypatch.delenv(name, raising=False)
    SecureSubprocess._command_path_cache.clear()
    yield
    SecureSubprocess._command_path_cache.clear()


@pytest.fixture
def sample_report():
    """A report body in the void-updates format."""
    return SAMPLE_REPORT


@pytest.fixture
def sample_xbps_list():
    """Output of ``xbps-query -l``."""
    return SAMPLE_XBPS_LIST


@pytest.fixture
def config():
    """Configuration with a maintainer and the default base URL."""
    return Config(maintainer_email="me@example.org", use_color=False)
