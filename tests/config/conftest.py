"""Pytest fixtures for config module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Create a sample YAML config file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML config file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
profile: test
export:
  default_format: csv
  output_dir: /test/exports
logging:
  level: DEBUG
"""
    )
    return config_file


@pytest.fixture
def malformed_yaml_file(tmp_path: Path) -> Path:
    """Create a malformed YAML file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created malformed YAML file.
    """
    config_file = tmp_path / "bad.yaml"
    config_file.write_text(
        """
profile: test
  export:
    default_format: csv
    this is not valid yaml: [
"""
    )
    return config_file


@pytest.fixture
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up test environment variables.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture for modifying environment.

    Returns
    -------
    dict[str, str]
        Dictionary of environment variables that were set.
    """
    test_vars = {
        "TEXTANNOTATOR_LOGGING__LEVEL": "ERROR",
        "TEXTANNOTATOR_EXPORT__OUTPUT_DIR": "/env/exports",
        "TEXTANNOTATOR_EXPORT__OVERWRITE": "yes",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars
