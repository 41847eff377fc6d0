"""Export configuration model."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ExportConfig(BaseModel):
    """Configuration for exports.

    Parameters
    ----------
    default_format : str
        Format used when none is requested.
    output_dir : Path
        Directory exports are written to.
    overwrite : bool
        Whether existing export files may be replaced.

    Examples
    --------
    >>> config = ExportConfig()
    >>> config.default_format
    'json'
    >>> config.overwrite
    False
    """

    default_format: Literal["json", "jsonl", "csv", "xml", "bio"] = Field(
        default="json", description="Default export format"
    )
    output_dir: Path = Field(default=Path("."), description="Export directory")
    overwrite: bool = Field(
        default=False, description="Replace existing export files"
    )
