"""Export format registry.

Maps each export format to its filename pattern and MIME type, and
records which analysis types a format applies to.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from textannotator.annotations.models import ANALYSIS_TYPES, AnalysisType
from textannotator.errors import UnsupportedExportError

ExportFormat = Literal["json", "jsonl", "csv", "xml", "bio"]

EXPORT_FORMATS: tuple[ExportFormat, ...] = ("json", "jsonl", "csv", "xml", "bio")


class FormatSpec(BaseModel):
    """Static description of an export format.

    Attributes
    ----------
    name : ExportFormat
        Format name.
    filename_template : str
        ``str.format`` template with ``base`` and ``analysis_type`` fields.
    mime_type : str
        MIME type of the payload.
    analysis_types : tuple[AnalysisType, ...]
        Analysis types the format can represent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: ExportFormat
    filename_template: str
    mime_type: str
    analysis_types: tuple[AnalysisType, ...] = Field(default=ANALYSIS_TYPES)

    def filename(self, base: str, analysis_type: AnalysisType) -> str:
        """Build the suggested filename for an export.

        Parameters
        ----------
        base : str
            Base filename (source name without extension).
        analysis_type : AnalysisType
            Analysis type of the exported result.

        Returns
        -------
        str
            Suggested filename.
        """
        return self.filename_template.format(base=base, analysis_type=analysis_type)


FORMAT_SPECS: dict[ExportFormat, FormatSpec] = {
    "json": FormatSpec(
        name="json",
        filename_template="{base}_annotations.json",
        mime_type="application/json",
    ),
    "jsonl": FormatSpec(
        name="jsonl",
        filename_template="{base}_{analysis_type}.jsonl",
        mime_type="application/jsonl",
    ),
    "csv": FormatSpec(
        name="csv",
        filename_template="{base}_{analysis_type}.csv",
        mime_type="text/csv",
    ),
    "xml": FormatSpec(
        name="xml",
        filename_template="{base}_{analysis_type}.xml",
        mime_type="application/xml",
    ),
    "bio": FormatSpec(
        name="bio",
        filename_template="{base}_ner.bio.txt",
        mime_type="text/plain",
        analysis_types=("ner",),
    ),
}


def get_format_spec(fmt: str) -> FormatSpec:
    """Look up a format by name.

    Parameters
    ----------
    fmt : str
        Format name (case-insensitive).

    Returns
    -------
    FormatSpec
        The format description.

    Raises
    ------
    UnsupportedExportError
        If the format is unknown.
    """
    spec = FORMAT_SPECS.get(fmt.lower())  # type: ignore[call-overload]
    if spec is None:
        raise UnsupportedExportError(
            f"Unknown export format: '{fmt}'. "
            f"Available: {', '.join(EXPORT_FORMATS)}"
        )
    return spec


def available_formats(analysis_type: AnalysisType) -> list[ExportFormat]:
    """List the formats that can represent an analysis type.

    Parameters
    ----------
    analysis_type : AnalysisType
        Analysis type.

    Returns
    -------
    list[ExportFormat]
        Applicable formats, in registry order.

    Examples
    --------
    >>> available_formats("sentiment")
    ['json', 'jsonl', 'csv', 'xml']
    """
    return [
        name
        for name, spec in FORMAT_SPECS.items()
        if analysis_type in spec.analysis_types
    ]
