"""CLI utility functions for the textannotator package.

Configuration loading, input file reading, error reporting and user
messages shared by all commands.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from textannotator.annotations.models import AnalysisType, AnnotationResult, Document
from textannotator.annotations.parsing import parse_annotation_result
from textannotator.errors import (
    AnnotationDataError,
    AnnotationParseError,
    AnnotatorError,
    ExportWriteError,
)

if TYPE_CHECKING:
    from textannotator.config import AnnotatorConfig

console = Console()

# exit codes distinguishing bad data from requests the core cannot serve
EXIT_DATA_ERROR = 2
EXIT_UNSUPPORTED = 3


def load_config_for_cli(
    config_file: str | None,
    profile: str,
    verbose: bool,
) -> AnnotatorConfig:
    """Load configuration with CLI options.

    Parameters
    ----------
    config_file : str | None
        Path to configuration file (None to use profile defaults).
    profile : str
        Configuration profile name (default, dev, test).
    verbose : bool
        Whether to enable verbose output.

    Returns
    -------
    AnnotatorConfig
        Loaded configuration object.
    """
    # Lazy import to avoid circular import
    from textannotator.config import load_config  # noqa: PLC0415

    config_path = Path(config_file) if config_file else None

    try:
        config = load_config(config_path=config_path, profile=profile)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}", exit_code=1)
        raise  # For type checking
    except Exception as e:
        print_error(f"Failed to load configuration: {e}", exit_code=1)
        raise  # For type checking

    if verbose:
        console.print(f"[green]✓[/green] Loaded configuration from profile: {profile}")
        if config_file:
            console.print(f"[green]✓[/green] Applied overrides from: {config_file}")
    return config


def read_text_file(path: Path) -> str:
    """Read a UTF-8 input file.

    Parameters
    ----------
    path : Path
        File to read.

    Returns
    -------
    str
        File contents.

    Raises
    ------
    AnnotationParseError
        If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise AnnotationParseError(f"{path.name} is not valid UTF-8: {e.reason}") from e


def read_document(text_file: Path) -> Document:
    """Read a text file as a document.

    Parameters
    ----------
    text_file : Path
        UTF-8 text file.

    Returns
    -------
    Document
        Document named after the file.

    Raises
    ------
    AnnotationParseError
        If the file is not valid UTF-8.
    """
    return Document(text=read_text_file(text_file), source_name=text_file.name)


def read_result(
    result_file: Path, analysis_type: AnalysisType, document: Document
) -> AnnotationResult:
    """Read and validate a raw analysis result file.

    Parameters
    ----------
    result_file : Path
        JSON file holding the raw analysis payload.
    analysis_type : AnalysisType
        Analysis type that produced the payload.
    document : Document
        Document the analysis ran on.

    Returns
    -------
    AnnotationResult
        The validated result.
    """
    return parse_annotation_result(analysis_type, read_text_file(result_file), document)


def exit_on_annotator_error(error: AnnotatorError) -> None:
    """Report an annotator error and exit with a matching code.

    Data errors exit with ``EXIT_DATA_ERROR``, write failures with 1 and
    everything else (requests the core cannot serve) with
    ``EXIT_UNSUPPORTED``.

    Parameters
    ----------
    error : AnnotatorError
        Error to report.
    """
    if isinstance(error, AnnotationDataError):
        print_error(f"Invalid annotation data: {error}", exit_code=EXIT_DATA_ERROR)
    elif isinstance(error, ExportWriteError):
        print_error(f"Export failed: {error}", exit_code=1)
    else:
        print_error(f"Not applicable: {error}", exit_code=EXIT_UNSUPPORTED)


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    console.print(f"[red]✗ Error:[/red] {escape(message)}", highlight=False)
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message.

    Parameters
    ----------
    message : str
        Success message to display.
    """
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_warning(message: str) -> None:
    """Print warning message.

    Parameters
    ----------
    message : str
        Warning message to display.
    """
    console.print(f"[yellow]⚠ Warning:[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message.

    Parameters
    ----------
    message : str
        Info message to display.
    """
    console.print(f"[blue]ℹ Info:[/blue] {escape(message)}")
