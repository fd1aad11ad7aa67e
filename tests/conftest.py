import os
import pytest
import tempfile
import shutil
from pathlib import Path

from crosspath.utils.platform import PlatformInfo, set_platform


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CROSSPATH_* settings from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith('CROSSPATH_'):
            monkeypatch.delenv(name)


@pytest.fixture
def unix_host():
    """Pin the host platform to Linux."""
    previous = set_platform(PlatformInfo('linux'))
    yield
    set_platform(previous)


@pytest.fixture
def windows_host():
    """Pin the host platform to Windows."""
    previous = set_platform(PlatformInfo('win32'))
    yield
    set_platform(previous)


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)
