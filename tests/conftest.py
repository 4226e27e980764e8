"""Shared test fixtures for the clihelp test suite."""

import os
from unittest.mock import patch

import pytest

from clihelp.lib.help_lib import content_registry as _registry_mod
from clihelp.lib.log_lib import channels as _channels_mod
from clihelp.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_globals():
    """Reset the output singleton, channel set and help registry per test.

    cli.main() swaps in the clihelp channel set and registers help
    documents; without this, state would leak between tests.
    """
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    saved_docs = dict(_registry_mod.HELP_DOCUMENTS)
    _manager_mod._manager = None
    _registry_mod.HELP_DOCUMENTS.clear()
    yield
    _manager_mod._manager = None
    _registry_mod.HELP_DOCUMENTS.clear()
    _registry_mod.HELP_DOCUMENTS.update(saved_docs)
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.clihelp/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A project directory used as cwd, with an isolated home."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


# ---------------------------------------------------------------------------
# Sample help definitions
# ---------------------------------------------------------------------------
@pytest.fixture
def deploy_definition():
    """A complete command definition as it appears in config files."""
    return {
        "summary": "Deploy the application",
        "usage": ["[options] <env>", "--rollback <env>"],
        "descr": "Builds and ships the current tree.",
        "options": {
            "f,force": "Skip confirmation",
            "t,tag*:": "Release tag",
        },
    }
