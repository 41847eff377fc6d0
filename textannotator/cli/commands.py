"""Annotation commands: export, BIO, tokenization and highlight preview."""

from __future__ import annotations

from pathlib import Path

import click

from textannotator.annotations.models import ANALYSIS_TYPES, NerResult, SentimentResult
from textannotator.cli.display import (
    create_entity_summary_table,
    create_token_table,
    render_segments,
)
from textannotator.cli.utils import (
    console,
    exit_on_annotator_error,
    print_info,
    print_success,
    print_warning,
    read_document,
    read_result,
)
from textannotator.errors import AnnotatorError
from textannotator.export.exporter import export_result
from textannotator.export.formats import EXPORT_FORMATS, available_formats
from textannotator.export.writer import ExportWriter
from textannotator.rendering.overlay import render_overlay
from textannotator.rendering.summary import format_confidence, group_entities_by_type
from textannotator.tokenization.tokenizers import tokenize

_TEXT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.argument("text_file", type=_TEXT_FILE)
@click.argument("result_file", type=_TEXT_FILE)
@click.option(
    "--type",
    "-t",
    "analysis_type",
    type=click.Choice(list(ANALYSIS_TYPES), case_sensitive=False),
    default="ner",
    help="Analysis type that produced RESULT_FILE (default: ner)",
)
@click.option(
    "--format",
    "-f",
    "format_name",
    type=click.Choice(list(EXPORT_FORMATS), case_sensitive=False),
    default=None,
    help="Export format (default: from configuration)",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write into (default: from configuration)",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the export instead of writing a file",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing export file",
)
@click.pass_context
def export(
    ctx: click.Context,
    text_file: Path,
    result_file: Path,
    analysis_type: str,
    format_name: str | None,
    output_dir: Path | None,
    to_stdout: bool,
    force: bool,
) -> None:
    r"""Export an analysis result.

    TEXT_FILE is the analysed document; RESULT_FILE holds the raw analysis
    output as JSON.

    \b
    Examples:
        $ textannotator export story.txt entities.json --format csv
        $ textannotator export review.txt sentiment.json -t sentiment -f xml
        $ textannotator export story.txt entities.json -f bio --stdout
    """
    cfg = ctx.obj["config"]
    fmt = format_name or cfg.export.default_format

    try:
        document = read_document(text_file)
        result = read_result(result_file, analysis_type.lower(), document)
        exported = export_result(document, result, fmt)
        if to_stdout:
            click.echo(exported.payload)
            return
        writer = ExportWriter(
            output_dir or cfg.export.output_dir,
            overwrite=force or cfg.export.overwrite,
        )
        path = writer.write(exported)
    except AnnotatorError as e:
        exit_on_annotator_error(e)
        return

    if isinstance(result, NerResult) and not result.entities:
        print_warning("No entities in result; exported headers only")
    if not ctx.obj.get("quiet"):
        print_success(f"Exported {exported.mime_type} to {path}")


@click.command()
@click.argument("text_file", type=_TEXT_FILE)
@click.argument("result_file", type=_TEXT_FILE)
def bio(text_file: Path, result_file: Path) -> None:
    r"""Print BIO tags for the entities in RESULT_FILE.

    \b
    Examples:
        $ textannotator bio story.txt entities.json
    """
    try:
        document = read_document(text_file)
        result = read_result(result_file, "ner", document)
        lines = export_result(document, result, "bio").payload
    except AnnotatorError as e:
        exit_on_annotator_error(e)
        return
    if lines:
        click.echo(lines)


@click.command(name="tokenize")
@click.argument("text_file", type=_TEXT_FILE)
def tokenize_cmd(text_file: Path) -> None:
    r"""List the tokens of TEXT_FILE with character offsets.

    \b
    Examples:
        $ textannotator tokenize story.txt
    """
    try:
        document = read_document(text_file)
    except AnnotatorError as e:
        exit_on_annotator_error(e)
        return
    tokens = list(tokenize(document.text))
    if not tokens:
        print_info("No tokens")
        return
    console.print(create_token_table(tokens))


@click.command()
@click.argument("text_file", type=_TEXT_FILE)
@click.argument("result_file", type=_TEXT_FILE)
@click.option(
    "--type",
    "-t",
    "analysis_type",
    type=click.Choice(list(ANALYSIS_TYPES), case_sensitive=False),
    default="ner",
    help="Analysis type that produced RESULT_FILE (default: ner)",
)
def highlight(text_file: Path, result_file: Path, analysis_type: str) -> None:
    r"""Preview an analysis result over its text.

    NER results are shown as highlighted spans with a per-type summary;
    sentiment results as label and confidence; POS results as a tag line.

    \b
    Examples:
        $ textannotator highlight story.txt entities.json
        $ textannotator highlight review.txt sentiment.json -t sentiment
    """
    try:
        document = read_document(text_file)
        result = read_result(result_file, analysis_type.lower(), document)
        if isinstance(result, NerResult):
            console.print(render_segments(render_overlay(document.text, result.entities)))
            groups = group_entities_by_type(result.entities)
            if groups:
                console.print(create_entity_summary_table(groups))
            else:
                print_info("No entities found")
        elif isinstance(result, SentimentResult):
            console.print(f"Sentiment: [bold]{result.sentiment}[/bold]")
            console.print(f"Confidence: {format_confidence(result.confidence)}")
        else:
            click.echo(" ".join(f"{t.token}/{t.tag}" for t in result.tokens))
    except AnnotatorError as e:
        exit_on_annotator_error(e)


@click.command()
@click.option(
    "--type",
    "-t",
    "analysis_type",
    type=click.Choice(list(ANALYSIS_TYPES), case_sensitive=False),
    default="ner",
    help="Analysis type (default: ner)",
)
def formats(analysis_type: str) -> None:
    r"""List the export formats available for an analysis type.

    \b
    Examples:
        $ textannotator formats --type sentiment
    """
    for name in available_formats(analysis_type.lower()):  # type: ignore[arg-type]
        click.echo(name)
