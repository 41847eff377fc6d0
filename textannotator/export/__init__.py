"""Serialization of analysis results into interchange formats.

Supported formats are JSON, JSON lines, CSV, XML and (for named-entity
results) BIO-tagged tokens.
"""

from __future__ import annotations

from textannotator.export.escaping import escape_csv_cell, escape_xml, unescape_xml
from textannotator.export.exporter import (
    ExportPayload,
    export_result,
    export_session,
    load_json_export,
)
from textannotator.export.formats import (
    EXPORT_FORMATS,
    FORMAT_SPECS,
    ExportFormat,
    FormatSpec,
    available_formats,
    get_format_spec,
)
from textannotator.export.serializers import to_bio, to_csv, to_json, to_jsonl, to_xml
from textannotator.export.writer import ExportWriter

__all__ = [
    "EXPORT_FORMATS",
    "FORMAT_SPECS",
    "ExportFormat",
    "ExportPayload",
    "ExportWriter",
    "FormatSpec",
    "available_formats",
    "escape_csv_cell",
    "escape_xml",
    "export_result",
    "export_session",
    "get_format_spec",
    "load_json_export",
    "to_bio",
    "to_csv",
    "to_json",
    "to_jsonl",
    "to_xml",
    "unescape_xml",
]
