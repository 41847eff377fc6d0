"""Root pytest configuration for textannotator package tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from textannotator.annotations.models import (
    Document,
    Entity,
    NerResult,
    PosResult,
    PosToken,
    SentimentResult,
)
from textannotator.config.logging import PACKAGE_LOGGER


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo logging changes made by CLI invocations between tests."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def obama_document() -> Document:
    """Provide a short document with two entities.

    Returns
    -------
    Document
        Document loaded from ``news.txt``.
    """
    return Document(text="Barack Obama visited Paris.", source_name="news.txt")


@pytest.fixture
def obama_entities() -> list[Entity]:
    """Provide the entities of ``obama_document``.

    Returns
    -------
    list[Entity]
        A PERSON and a LOCATION entity.
    """
    return [
        Entity(type="PERSON", text="Barack Obama", start_index=0, end_index=12),
        Entity(type="LOCATION", text="Paris", start_index=21, end_index=26),
    ]


@pytest.fixture
def ner_result(obama_entities: list[Entity]) -> NerResult:
    """Provide an NER result over ``obama_document``.

    Parameters
    ----------
    obama_entities : list[Entity]
        Entities fixture.

    Returns
    -------
    NerResult
        Result with two entities.
    """
    return NerResult(entities=tuple(obama_entities))


@pytest.fixture
def sentiment_result() -> SentimentResult:
    """Provide a sentiment result.

    Returns
    -------
    SentimentResult
        Positive sentiment with 0.95 confidence.
    """
    return SentimentResult(sentiment="Positive", confidence=0.95)


@pytest.fixture
def pos_result() -> PosResult:
    """Provide a POS result over ``obama_document``.

    Returns
    -------
    PosResult
        Five tagged tokens.
    """
    return PosResult(
        tokens=(
            PosToken(token="Barack", tag="PROPN"),
            PosToken(token="Obama", tag="PROPN"),
            PosToken(token="visited", tag="VERB"),
            PosToken(token="Paris", tag="PROPN"),
            PosToken(token=".", tag="PUNCT"),
        )
    )
