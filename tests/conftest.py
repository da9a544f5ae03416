"""Pytest configuration and fixtures for numeral-systems tests."""
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from numeral_systems.config import Config


@pytest.fixture(scope="function")
def temp_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point NUMERAL_SYSTEMS_CONFIG_DIR at a temporary directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("NUMERAL_SYSTEMS_CONFIG_DIR", str(config_dir))
    yield config_dir


@pytest.fixture
def test_config(temp_config_dir: Path) -> Config:
    """Create a configuration backed by the temporary directory."""
    return Config()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CliRunner for testing CLI commands."""
    return CliRunner()
