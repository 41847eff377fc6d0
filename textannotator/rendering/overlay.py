"""Highlight overlay segmentation.

Splits a text into an ordered sequence of plain and entity segments that
covers every character exactly once, ready for a display layer to style.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict

from textannotator.annotations.models import Entity
from textannotator.annotations.validation import validate_entities

logger = logging.getLogger(__name__)


class TextSegment(BaseModel):
    """A run of plain, unannotated text.

    Attributes
    ----------
    kind : Literal["text"]
        Segment tag.
    text : str
        Segment text.
    start : int
        Start offset in the source text.
    end : int
        End offset in the source text.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["text"] = "text"
    text: str
    start: int
    end: int


class EntitySegment(BaseModel):
    """A run of text covered by an entity.

    Attributes
    ----------
    kind : Literal["entity"]
        Segment tag.
    text : str
        Segment text.
    start : int
        Start offset in the source text.
    end : int
        End offset in the source text.
    entity_type : str
        Type of the entity, used for styling and as a tooltip label.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["entity"] = "entity"
    text: str
    start: int
    end: int
    entity_type: str

    @property
    def css_class(self) -> str:
        """CSS class for the entity type (``entity-<type>``, lowercased)."""
        return f"entity-{self.entity_type.lower()}"


Segment = TextSegment | EntitySegment


def render_overlay(text: str, entities: Sequence[Entity]) -> list[Segment]:
    """Segment a text around its entities.

    Entities are expected in ascending start order. An entity that starts
    before the end of the previously emitted entity is skipped, so the
    earliest-starting entity keeps any contested characters.

    Parameters
    ----------
    text : str
        Source text.
    entities : Sequence[Entity]
        Entities sorted by ``start_index``.

    Returns
    -------
    list[Segment]
        Segments in document order. Their texts concatenate to ``text``
        and their offsets partition ``[0, len(text))``. Empty segments are
        never emitted.

    Raises
    ------
    MalformedAnnotationError
        If an entity's offsets fall outside ``text``.

    Examples
    --------
    >>> e = Entity(type="LOCATION", text="Paris", start_index=3, end_index=8)
    >>> [s.text for s in render_overlay("In Paris.", [e])]
    ['In ', 'Paris', '.']
    """
    validate_entities(text, entities)
    segments: list[Segment] = []
    cursor = 0

    for index, entity in enumerate(entities):
        if entity.start_index < cursor:
            logger.debug(
                "Skipping entity %d [%d, %d): overlaps rendered text ending at %d",
                index,
                entity.start_index,
                entity.end_index,
                cursor,
            )
            continue
        if entity.start_index > cursor:
            segments.append(
                TextSegment(
                    text=text[cursor : entity.start_index],
                    start=cursor,
                    end=entity.start_index,
                )
            )
        if entity.end_index > entity.start_index:
            segments.append(
                EntitySegment(
                    text=text[entity.start_index : entity.end_index],
                    start=entity.start_index,
                    end=entity.end_index,
                    entity_type=entity.type,
                )
            )
        cursor = entity.end_index

    if cursor < len(text):
        segments.append(TextSegment(text=text[cursor:], start=cursor, end=len(text)))

    return segments
