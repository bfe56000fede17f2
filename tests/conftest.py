"""Shared test fixtures for the embedlog test suite."""

import os
from unittest.mock import patch

import pytest

from embedlog.lib.log_lib import BufferSink, Logger, ProgramMemory
from embedlog.lib.log_lib import manager as _manager_mod
from embedlog.lib.log_lib.levels import VERBOSE


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: spawns a subprocess or opens a serial port")


# ---------------------------------------------------------------------------
# Isolation fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.embedlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def workdir(tmp_path, tmp_config_home, monkeypatch):
    """Run inside an empty project directory with an empty home."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture(autouse=True)
def _reset_default_logger():
    """Give every test a fresh module-level Logger slot."""
    saved = _manager_mod._logger
    _manager_mod._logger = None
    yield
    _manager_mod._logger = saved


# ---------------------------------------------------------------------------
# Logger fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """An in-memory byte sink."""
    return BufferSink()


@pytest.fixture
def log(buf):
    """A Logger at VERBOSE writing to ``buf``."""
    return Logger(VERBOSE, buf, disabled=False)


@pytest.fixture
def progmem():
    """A private program memory region."""
    return ProgramMemory()
