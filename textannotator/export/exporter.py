"""Export entry points.

``export_result`` turns a document and its analysis result into an
``ExportPayload``: the serialized text plus a suggested filename and MIME
type for the file-save collaborator.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from textannotator.annotations.models import AnnotationResult, Document
from textannotator.annotations.parsing import parse_annotation_result
from textannotator.annotations.session import AnnotationSession, base_filename
from textannotator.errors import AnnotationParseError, UnsupportedExportError
from textannotator.export.formats import ExportFormat, get_format_spec
from textannotator.export.serializers import to_bio, to_csv, to_json, to_jsonl, to_xml

logger = logging.getLogger(__name__)

_SERIALIZERS: dict[ExportFormat, Callable[[Document, AnnotationResult], str]] = {
    "json": to_json,
    "jsonl": to_jsonl,
    "csv": to_csv,
    "xml": to_xml,
    "bio": to_bio,
}


class ExportPayload(BaseModel):
    """A serialized export ready to be saved.

    Attributes
    ----------
    payload : str
        Serialized export text.
    suggested_filename : str
        Filename to save the payload under.
    mime_type : str
        MIME type of the payload.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    payload: str
    suggested_filename: str
    mime_type: str


def export_result(
    document: Document,
    result: AnnotationResult | None,
    fmt: ExportFormat | str,
    base_name: str | None = None,
) -> ExportPayload:
    """Serialize an analysis result in the requested format.

    Parameters
    ----------
    document : Document
        Source document.
    result : AnnotationResult | None
        Result to export.
    fmt : ExportFormat | str
        Export format ("json", "jsonl", "csv", "xml" or "bio").
    base_name : str | None
        Base filename. Defaults to the document's source name without its
        extension.

    Returns
    -------
    ExportPayload
        Payload, suggested filename and MIME type.

    Raises
    ------
    UnsupportedExportError
        If there is no result, the format is unknown, or the format does
        not apply to the result's analysis type.
    MalformedAnnotationError
        If an entity's offsets fall outside the document text.

    Examples
    --------
    >>> from textannotator.annotations.models import SentimentResult
    >>> doc = Document(text="Great!", source_name="review.txt")
    >>> out = export_result(doc, SentimentResult(sentiment="Positive", confidence=0.9), "csv")
    >>> out.suggested_filename
    'review_sentiment.csv'
    >>> out.payload
    'sentiment,confidence\\nPositive,0.9'
    """
    spec = get_format_spec(fmt)
    if result is None:
        raise UnsupportedExportError("No analysis result to export")
    if result.analysis_type not in spec.analysis_types:
        raise UnsupportedExportError(
            f"{spec.name.upper()} export is not available for "
            f"'{result.analysis_type}' results"
        )

    payload = _SERIALIZERS[spec.name](document, result)
    base = base_name if base_name is not None else base_filename(document.source_name)
    logger.debug(
        "Exported %s result as %s (%d characters)",
        result.analysis_type,
        spec.name,
        len(payload),
    )
    return ExportPayload(
        payload=payload,
        suggested_filename=spec.filename(base, result.analysis_type),
        mime_type=spec.mime_type,
    )


def export_session(session: AnnotationSession, fmt: ExportFormat | str) -> ExportPayload:
    """Export the current result of a session.

    Parameters
    ----------
    session : AnnotationSession
        Session holding a document and a result.
    fmt : ExportFormat | str
        Export format.

    Returns
    -------
    ExportPayload
        The export.

    Raises
    ------
    UnsupportedExportError
        If the session has no document or no result, or the format does
        not apply.
    """
    if session.document is None:
        raise UnsupportedExportError("No document loaded")
    return export_result(session.document, session.result, fmt, session.base_filename)


def load_json_export(
    payload: str, source_name: str = ""
) -> tuple[Document, AnnotationResult]:
    """Read back a JSON export.

    Parameters
    ----------
    payload : str
        Text produced by the JSON export.
    source_name : str
        Source name for the recovered document.

    Returns
    -------
    tuple[Document, AnnotationResult]
        The source document and the result.

    Raises
    ------
    AnnotationParseError
        If the payload is not a JSON export.
    MalformedAnnotationError
        If an entity lies outside the recovered source text.
    """
    try:
        data: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        raise AnnotationParseError(f"payload is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise AnnotationParseError("JSON export must be an object")
    for key in ("sourceText", "analysisType", "results"):
        if key not in data:
            raise AnnotationParseError("missing envelope field", field=key)
    if not isinstance(data["sourceText"], str):
        raise AnnotationParseError("sourceText must be a string", field="sourceText")

    document = Document(text=data["sourceText"], source_name=source_name)
    result = parse_annotation_result(data["analysisType"], data["results"], document)
    return document, result
