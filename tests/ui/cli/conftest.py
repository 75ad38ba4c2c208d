"""Shared pytest fixtures for CLI-focused tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from spotimeta.config.paths import ENV_CONFIG_FILE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration loading at a per-test file that does not exist yet."""

    config_file = tmp_path / "config.toml"
    monkeypatch.setenv(ENV_CONFIG_FILE, str(config_file))
    return config_file


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep CLI tests from reconfiguring the shared logger."""

    return mocker.patch("spotimeta.ui.cli.args.parser.setup_logger")
