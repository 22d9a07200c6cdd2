# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fedora_postinstall.config import DEFAULT_CONFIG  # noqa: E402


@pytest.fixture
def app_config():
    """A fresh copy of the built-in configuration."""
    return {key: list(value) for key, value in DEFAULT_CONFIG.items()}


class FakeInstaller:
    """Records every identifier it is asked to install; fails the ones listed."""

    def __init__(self, failing=(), raising=()):
        self.failing = set(failing)
        self.raising = set(raising)
        self.calls = []

    def __call__(self, identifier):
        self.calls.append(identifier)
        if identifier in self.raising:
            raise RuntimeError(f"boom: {identifier}")
        return identifier not in self.failing


@pytest.fixture
def fake_installer_factory():
    return FakeInstaller


@pytest.fixture
def console_calls(mocker):
    """Patches the console status printers used by the batch installer."""
    return {
        "info": mocker.patch("fedora_postinstall.batch_installer.con.print_info"),
        "success": mocker.patch("fedora_postinstall.batch_installer.con.print_success"),
        "warning": mocker.patch("fedora_postinstall.batch_installer.con.print_warning"),
    }
