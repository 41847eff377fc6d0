"""Display summaries of analysis results."""

from __future__ import annotations

from collections.abc import Iterable

from textannotator.annotations.models import Entity


def group_entities_by_type(entities: Iterable[Entity]) -> dict[str, list[str]]:
    """Group distinct entity texts by entity type.

    Parameters
    ----------
    entities : Iterable[Entity]
        Entities to group.

    Returns
    -------
    dict[str, list[str]]
        Entity texts per type. Types and texts keep first-seen order;
        repeated texts appear once.

    Examples
    --------
    >>> ents = [
    ...     Entity(type="PERSON", text="Ann", start_index=0, end_index=3),
    ...     Entity(type="PERSON", text="Ann", start_index=8, end_index=11),
    ... ]
    >>> group_entities_by_type(ents)
    {'PERSON': ['Ann']}
    """
    groups: dict[str, list[str]] = {}
    for entity in entities:
        texts = groups.setdefault(entity.type, [])
        if entity.text not in texts:
            texts.append(entity.text)
    return groups


def format_confidence(confidence: float) -> str:
    """Format a confidence score as a percentage for display.

    Display only; exports keep the full-precision value.

    Parameters
    ----------
    confidence : float
        Score in [0, 1].

    Returns
    -------
    str
        Percentage with one decimal place.

    Examples
    --------
    >>> format_confidence(0.953)
    '95.3%'
    """
    return f"{confidence * 100:.1f}%"
