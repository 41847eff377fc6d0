"""Test fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Create a document file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``news.txt``.
    """
    path = tmp_path / "news.txt"
    path.write_text("Barack Obama visited Paris.", encoding="utf-8")
    return path


@pytest.fixture
def ner_file(tmp_path: Path) -> Path:
    """Create a raw NER result file for ``text_file``.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``entities.json``.
    """
    path = tmp_path / "entities.json"
    path.write_text(
        json.dumps(
            [
                {"text": "Barack Obama", "type": "PERSON", "startIndex": 0},
                {"text": "Paris", "type": "LOCATION", "startIndex": 21, "endIndex": 26},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sentiment_file(tmp_path: Path) -> Path:
    """Create a raw sentiment result file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``sentiment.json``.
    """
    path = tmp_path / "sentiment.json"
    path.write_text(json.dumps({"sentiment": "positive", "confidence": 0.953}))
    return path


@pytest.fixture
def pos_file(tmp_path: Path) -> Path:
    """Create a raw POS result file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``pos.json``.
    """
    path = tmp_path / "pos.json"
    path.write_text(
        json.dumps(
            [
                {"token": "Barack", "tag": "PROPN"},
                {"token": "Obama", "tag": "PROPN"},
                {"token": "visited", "tag": "VERB"},
                {"token": "Paris", "tag": "PROPN"},
                {"token": ".", "tag": "PUNCT"},
            ]
        )
    )
    return path


@pytest.fixture
def bad_offsets_file(tmp_path: Path) -> Path:
    """Create an NER result file whose entity lies outside the text.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``bad.json``.
    """
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps([{"text": "x", "type": "X", "startIndex": 0, "endIndex": 500}])
    )
    return path


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a textannotator.yaml config file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to config file.
    """
    config_file = tmp_path / "textannotator.yaml"
    config_file.write_text(
        """
profile: test
export:
  default_format: csv
logging:
  level: WARNING
  console: false
"""
    )
    return config_file


@pytest.fixture
def undecodable_file(tmp_path: Path) -> Path:
    """Create a file that is not valid UTF-8.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to ``latin1.txt``.
    """
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe bad")
    return path
