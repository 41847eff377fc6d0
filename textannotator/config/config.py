"""Main configuration model for the textannotator package."""

from __future__ import annotations

from pydantic import BaseModel, Field

from textannotator.config.export import ExportConfig
from textannotator.config.logging import LoggingConfig


class AnnotatorConfig(BaseModel):
    """Main configuration for the textannotator package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    export : ExportConfig
        Export configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = AnnotatorConfig()
    >>> config.profile
    'default'
    >>> config.export.default_format
    'json'
    >>> config.logging.level
    'INFO'
    """

    profile: str = Field(default="default", description="Configuration profile name")
    export: ExportConfig = Field(
        default_factory=ExportConfig, description="Export configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
