"""Pytest configuration and fixtures for integration tests.

Provides an isolated working directory so tests never pick up a real
.mdlite/config.yaml or MDLITE_CONFIG from the developer's environment.
"""

import pytest

from src.cli.config import ConfigLoader


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory with no config environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ConfigLoader.CONFIG_ENV_VAR, raising=False)
    return tmp_path
