"""Serializers for analysis results.

Each function renders one result, together with its source document, as
the text of one export format. Entity offsets are validated before any
output is produced; a malformed entity never yields a partial payload.
Entity text is always written as the slice of the document at the
entity offsets.
"""

from __future__ import annotations

import json
from typing import Any

from textannotator.annotations.models import (
    AnnotationResult,
    Document,
    NerResult,
    PosResult,
    SentimentResult,
)
from textannotator.annotations.validation import bind_entities
from textannotator.errors import UnsupportedExportError
from textannotator.export.escaping import escape_csv_cell, escape_xml
from textannotator.tokenization.alignment import render_bio

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

NER_CSV_HEADERS = ("text", "type", "startIndex", "endIndex")
SENTIMENT_CSV_HEADERS = ("sentiment", "confidence")
POS_CSV_HEADERS = ("token", "tag")


def result_records(result: AnnotationResult) -> list[dict[str, Any]] | dict[str, Any]:
    """Convert a result to the plain records used by JSON exports.

    Parameters
    ----------
    result : AnnotationResult
        Result to convert.

    Returns
    -------
    list[dict[str, Any]] | dict[str, Any]
        One ``{type, text, startIndex, endIndex}`` record per entity, one
        ``{token, tag}`` record per POS token, or a single
        ``{sentiment, confidence}`` record.
    """
    if isinstance(result, NerResult):
        return [
            e.model_dump(mode="json", by_alias=True) for e in result.entities
        ]
    elif isinstance(result, PosResult):
        return [t.model_dump(mode="json", by_alias=True) for t in result.tokens]
    else:
        return result.model_dump(
            mode="json", by_alias=True, exclude={"analysis_type"}
        )


def _check(document: Document, result: AnnotationResult) -> AnnotationResult:
    # entity text is taken from the document at the validated offsets
    if isinstance(result, NerResult):
        entities = bind_entities(document.text, result.entities)
        return result.model_copy(update={"entities": tuple(entities)})
    return result


def to_json(document: Document, result: AnnotationResult, indent: int = 2) -> str:
    """Serialize a result as a JSON document with its source text.

    Parameters
    ----------
    document : Document
        Source document.
    result : AnnotationResult
        Result to serialize.
    indent : int
        Indentation width.

    Returns
    -------
    str
        ``{"sourceText", "analysisType", "results"}`` JSON object.
    """
    result = _check(document, result)
    envelope = {
        "sourceText": document.text,
        "analysisType": result.analysis_type,
        "results": result_records(result),
    }
    return json.dumps(envelope, indent=indent, ensure_ascii=False)


def to_jsonl(document: Document, result: AnnotationResult) -> str:
    """Serialize a result as JSON lines.

    Parameters
    ----------
    document : Document
        Source document.
    result : AnnotationResult
        Result to serialize.

    Returns
    -------
    str
        One compact JSON object per entity or token, or a single line for
        a sentiment result. No trailing newline.
    """
    result = _check(document, result)
    records = result_records(result)
    if isinstance(records, dict):
        records = [records]
    return "\n".join(
        json.dumps(record, ensure_ascii=False, separators=(",", ":"))
        for record in records
    )


def _csv_rows(headers: tuple[str, ...], rows: list[tuple[object, ...]]) -> str:
    lines = [",".join(headers)]
    lines.extend(",".join(escape_csv_cell(cell) for cell in row) for row in rows)
    return "\n".join(lines)


def to_csv(document: Document, result: AnnotationResult) -> str:
    """Serialize a result as CSV.

    Parameters
    ----------
    document : Document
        Source document.
    result : AnnotationResult
        Result to serialize.

    Returns
    -------
    str
        Header line and one row per entity, token or sentiment, joined by
        newlines.
    """
    result = _check(document, result)
    if isinstance(result, NerResult):
        return _csv_rows(
            NER_CSV_HEADERS,
            [(e.text, e.type, e.start_index, e.end_index) for e in result.entities],
        )
    elif isinstance(result, PosResult):
        return _csv_rows(POS_CSV_HEADERS, [(t.token, t.tag) for t in result.tokens])
    else:
        return _csv_rows(
            SENTIMENT_CSV_HEADERS, [(result.sentiment, result.confidence)]
        )


def _ner_xml(result: NerResult) -> list[str]:
    lines = ["  <entities>"]
    for e in result.entities:
        lines.append(f'    <entity type="{escape_xml(e.type)}">')
        lines.append(f"      <text>{escape_xml(e.text)}</text>")
        lines.append(f"      <startIndex>{e.start_index}</startIndex>")
        lines.append(f"      <endIndex>{e.end_index}</endIndex>")
        lines.append("    </entity>")
    lines.append("  </entities>")
    return lines


def _pos_xml(result: PosResult) -> list[str]:
    lines = ["  <tokens>"]
    for t in result.tokens:
        lines.append(f'    <token tag="{escape_xml(t.tag)}">')
        lines.append(f"      <text>{escape_xml(t.token)}</text>")
        lines.append("    </token>")
    lines.append("  </tokens>")
    return lines


def _sentiment_xml(result: SentimentResult) -> list[str]:
    return [
        f"  <sentiment>{escape_xml(result.sentiment)}</sentiment>",
        f"  <confidence>{result.confidence}</confidence>",
    ]


def to_xml(document: Document, result: AnnotationResult) -> str:
    """Serialize a result as XML.

    Parameters
    ----------
    document : Document
        Source document.
    result : AnnotationResult
        Result to serialize.

    Returns
    -------
    str
        XML declaration and a ``<results analysisType="...">`` element,
        indented two spaces per level.
    """
    result = _check(document, result)
    lines = [
        XML_DECLARATION,
        f'<results analysisType="{escape_xml(result.analysis_type)}">',
    ]
    if isinstance(result, NerResult):
        lines.extend(_ner_xml(result))
    elif isinstance(result, PosResult):
        lines.extend(_pos_xml(result))
    else:
        lines.extend(_sentiment_xml(result))
    lines.append("</results>")
    return "\n".join(lines)


def to_bio(document: Document, result: AnnotationResult) -> str:
    """Serialize an NER result as BIO-tagged tokens.

    Parameters
    ----------
    document : Document
        Source document; tokenized for alignment.
    result : AnnotationResult
        Result to serialize. Must be an NER result.

    Returns
    -------
    str
        ``"<token>\\t<tag>"`` lines.

    Raises
    ------
    UnsupportedExportError
        If the result is not an NER result.
    """
    if not isinstance(result, NerResult):
        raise UnsupportedExportError(
            f"BIO export is only available for NER results, "
            f"not '{result.analysis_type}'"
        )
    return render_bio(document.text, result.entities)
