"""Rich display helpers for CLI commands.

Renders highlight overlays, entity summaries and token tables for the
terminal.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from textannotator.rendering.overlay import EntitySegment, Segment
from textannotator.tokenization.tokenizers import Token

# styles for common entity types; other types fall back to DEFAULT_ENTITY_STYLE
ENTITY_STYLES: dict[str, str] = {
    "PERSON": "bold black on cyan",
    "LOCATION": "bold black on green",
    "ORGANIZATION": "bold black on yellow",
    "DATE": "bold black on magenta",
    "MISC": "bold black on white",
}
DEFAULT_ENTITY_STYLE = "bold reverse"


def entity_style(entity_type: str) -> str:
    """Return the rich style for an entity type.

    Parameters
    ----------
    entity_type : str
        Entity type.

    Returns
    -------
    str
        Rich style string.
    """
    return ENTITY_STYLES.get(entity_type.upper(), DEFAULT_ENTITY_STYLE)


def render_segments(segments: Sequence[Segment]) -> Text:
    """Build styled terminal text from overlay segments.

    Parameters
    ----------
    segments : Sequence[Segment]
        Segments from ``render_overlay``.

    Returns
    -------
    Text
        Rich text with entity segments styled by type.
    """
    text = Text()
    for segment in segments:
        if isinstance(segment, EntitySegment):
            text.append(segment.text, style=entity_style(segment.entity_type))
        else:
            text.append(segment.text)
    return text


def create_entity_summary_table(groups: dict[str, list[str]]) -> Table:
    """Create a table of entity texts per type.

    Parameters
    ----------
    groups : dict[str, list[str]]
        Output of ``group_entities_by_type``.

    Returns
    -------
    Table
        Formatted Rich Table object.
    """
    table = Table(title="Entities", show_header=True, header_style="bold cyan")
    table.add_column("Type", no_wrap=True)
    table.add_column("Entities", style="white")
    for entity_type, texts in groups.items():
        table.add_row(Text(entity_type, style=entity_style(entity_type)), ", ".join(texts))
    return table


def create_token_table(tokens: Sequence[Token]) -> Table:
    """Create a table of tokens with their offsets.

    Parameters
    ----------
    tokens : Sequence[Token]
        Tokens to list.

    Returns
    -------
    Table
        Formatted Rich Table object.
    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", style="yellow")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for i, token in enumerate(tokens):
        table.add_row(str(i), Text(token.text), str(token.start), str(token.end))
    return table
