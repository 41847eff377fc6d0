"""Offset validation for entity annotations.

Entity offsets come from an external analysis step and are untrusted.
Everything that slices the document text validates first and rejects bad
offsets instead of clamping them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textannotator.annotations.models import Entity
from textannotator.errors import MalformedAnnotationError

logger = logging.getLogger(__name__)


def validate_entity(text: str, entity: Entity, index: int) -> None:
    """Validate a single entity against the document text.

    Parameters
    ----------
    text : str
        Document text.
    entity : Entity
        Entity to validate.
    index : int
        Position of the entity in the caller's list (for error reporting).

    Raises
    ------
    MalformedAnnotationError
        If an offset falls outside ``[0, len(text)]`` or the start
        offset is greater than the end offset.
    """
    length = len(text)
    if not 0 <= entity.start_index <= length:
        raise MalformedAnnotationError(
            f"start offset outside text of length {length}",
            index,
            "startIndex",
            entity.start_index,
        )
    if not 0 <= entity.end_index <= length:
        raise MalformedAnnotationError(
            f"end offset outside text of length {length}",
            index,
            "endIndex",
            entity.end_index,
        )
    if entity.start_index > entity.end_index:
        raise MalformedAnnotationError(
            f"start offset {entity.start_index} is after end offset",
            index,
            "endIndex",
            entity.end_index,
        )


def validate_entities(text: str, entities: Sequence[Entity]) -> None:
    """Validate every entity against the document text.

    Parameters
    ----------
    text : str
        Document text.
    entities : Sequence[Entity]
        Entities to validate.

    Raises
    ------
    MalformedAnnotationError
        For the first entity with bad offsets.

    Examples
    --------
    >>> e = Entity(type="PERSON", text="Bob", start_index=0, end_index=3)
    >>> validate_entities("Bob", [e])
    """
    for index, entity in enumerate(entities):
        validate_entity(text, entity, index)


def bind_entities(text: str, entities: Sequence[Entity]) -> list[Entity]:
    """Validate entities and make their text agree with their offsets.

    Offsets are authoritative. When an entity's echoed ``text`` differs
    from the slice its offsets select, the slice wins.

    Parameters
    ----------
    text : str
        Document text.
    entities : Sequence[Entity]
        Entities to bind.

    Returns
    -------
    list[Entity]
        Entities whose ``text`` equals ``text[start_index:end_index]``.

    Raises
    ------
    MalformedAnnotationError
        If any entity has bad offsets.
    """
    bound: list[Entity] = []
    for index, entity in enumerate(entities):
        validate_entity(text, entity, index)
        surface = text[entity.start_index : entity.end_index]
        if surface != entity.text:
            logger.warning(
                "Entity %d text %r does not match offsets [%d, %d) -> %r; "
                "using document text",
                index,
                entity.text,
                entity.start_index,
                entity.end_index,
                surface,
            )
            entity = entity.model_copy(update={"text": surface})
        bound.append(entity)
    return bound
