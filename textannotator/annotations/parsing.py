"""Validated parsing of raw analysis payloads.

The analysis step returns dynamically shaped JSON. This module converts
it into the strict result models, failing fast with an
``AnnotationParseError`` that names the offending item and field.

Raw payload shapes:

- ``ner``: ``[{"text", "type", "startIndex", "endIndex"?}, ...]``. A
  missing ``endIndex`` is computed as ``startIndex + len(text)``.
- ``sentiment``: ``{"sentiment", "confidence"}``.
- ``pos``: ``[{"token", "tag"}, ...]``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, cast

from pydantic import ValidationError

from textannotator.annotations.models import (
    ANALYSIS_TYPES,
    AnalysisType,
    AnnotationResult,
    Document,
    Entity,
    NerResult,
    PosResult,
    PosToken,
    SentimentResult,
)
from textannotator.annotations.validation import bind_entities
from textannotator.errors import AnnotationParseError

logger = logging.getLogger(__name__)


def _decode(raw: str | bytes | Any) -> Any:
    if isinstance(raw, str | bytes):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise AnnotationParseError(f"payload is not valid JSON: {e}") from e
    return raw


def _first_error(
    e: ValidationError, index: int | None = None
) -> AnnotationParseError:
    """Convert a pydantic ValidationError into an AnnotationParseError."""
    error = e.errors()[0]
    loc = [str(part) for part in error["loc"]]
    field = ".".join(loc) if loc else None
    return AnnotationParseError(error["msg"], index=index, field=field)


def _require_list(data: Any, analysis_type: str) -> list[Any]:
    if not isinstance(data, list):
        raise AnnotationParseError(
            f"{analysis_type} payload must be a list, got {type(data).__name__}"
        )
    return cast(list[Any], data)


def _require_mapping(item: Any, index: int | None) -> dict[str, Any]:
    if not isinstance(item, dict):
        raise AnnotationParseError(
            f"expected an object, got {type(item).__name__}", index=index
        )
    return cast(dict[str, Any], item)


def parse_entity(item: Any, index: int) -> Entity:
    """Parse one raw entity object.

    Parameters
    ----------
    item : Any
        Decoded entity object.
    index : int
        Position of the entity in the payload.

    Returns
    -------
    Entity
        Parsed entity.

    Raises
    ------
    AnnotationParseError
        If the object is missing fields or has the wrong field types.
    """
    data = dict(_require_mapping(item, index))
    if "endIndex" not in data and "end_index" not in data:
        start = data.get("startIndex", data.get("start_index"))
        text = data.get("text")
        if not isinstance(start, int) or isinstance(start, bool):
            raise AnnotationParseError(
                "startIndex must be an integer", index=index, field="startIndex"
            )
        if not isinstance(text, str):
            raise AnnotationParseError(
                "text must be a string", index=index, field="text"
            )
        data["endIndex"] = start + len(text)
    try:
        return Entity.model_validate(data)
    except ValidationError as e:
        raise _first_error(e, index) from e


def parse_ner(data: Any, document: Document | None = None) -> NerResult:
    """Parse a raw NER payload.

    Parameters
    ----------
    data : Any
        Decoded list of entity objects.
    document : Document | None
        When given, offsets are validated against its text and each
        entity's text is re-derived from the document.

    Returns
    -------
    NerResult
        Entities sorted by start offset.

    Raises
    ------
    AnnotationParseError
        If the payload is structurally invalid.
    MalformedAnnotationError
        If a document is given and an entity lies outside its text.
    """
    entities = [
        parse_entity(item, index)
        for index, item in enumerate(_require_list(data, "ner"))
    ]
    if document is not None:
        entities = bind_entities(document.text, entities)
    logger.debug("Parsed %d entities", len(entities))
    return NerResult(entities=tuple(entities))


def parse_sentiment(data: Any) -> SentimentResult:
    """Parse a raw sentiment payload.

    Parameters
    ----------
    data : Any
        Decoded ``{"sentiment", "confidence"}`` object.

    Returns
    -------
    SentimentResult
        Parsed sentiment.

    Raises
    ------
    AnnotationParseError
        If the payload is structurally invalid.
    """
    try:
        return SentimentResult.model_validate(_require_mapping(data, None))
    except ValidationError as e:
        raise _first_error(e) from e


def parse_pos(data: Any) -> PosResult:
    """Parse a raw POS payload.

    Parameters
    ----------
    data : Any
        Decoded list of ``{"token", "tag"}`` objects.

    Returns
    -------
    PosResult
        Parsed tokens in payload order.

    Raises
    ------
    AnnotationParseError
        If the payload is structurally invalid.
    """
    tokens: list[PosToken] = []
    for index, item in enumerate(_require_list(data, "pos")):
        try:
            tokens.append(PosToken.model_validate(_require_mapping(item, index)))
        except ValidationError as e:
            raise _first_error(e, index) from e
    return PosResult(tokens=tuple(tokens))


def parse_annotation_result(
    analysis_type: AnalysisType | str,
    raw: str | bytes | Any,
    document: Document | None = None,
) -> AnnotationResult:
    """Parse a raw analysis payload into a result model.

    Parameters
    ----------
    analysis_type : AnalysisType | str
        Which analysis produced the payload ("ner", "sentiment", "pos").
    raw : str | bytes | Any
        JSON text, or an already-decoded object.
    document : Document | None
        Document the analysis ran on. Used to validate NER offsets.

    Returns
    -------
    AnnotationResult
        The parsed result variant.

    Raises
    ------
    AnnotationParseError
        If the analysis type is unknown or the payload is malformed.
    MalformedAnnotationError
        If entity offsets fall outside the document text.

    Examples
    --------
    >>> result = parse_annotation_result(
    ...     "ner", '[{"text": "Paris", "type": "LOCATION", "startIndex": 4}]'
    ... )
    >>> result.entities[0].end_index
    9
    """
    data = _decode(raw)
    if analysis_type == "ner":
        return parse_ner(data, document)
    elif analysis_type == "sentiment":
        return parse_sentiment(data)
    elif analysis_type == "pos":
        return parse_pos(data)
    else:
        raise AnnotationParseError(
            f"Unknown analysis type: {analysis_type!r} "
            f"(expected one of {', '.join(ANALYSIS_TYPES)})",
            field="analysisType",
        )

