"""Alignment between entity spans and tokens.

Maps character-offset entity annotations onto the tokens of a text,
producing one BIO tag per token. Overlapping entities are resolved
first-writer-wins: entities are visited in ascending start order and a
token keeps the first tag it receives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from textannotator.annotations.models import Entity
from textannotator.annotations.validation import validate_entities
from textannotator.tokenization.tokenizers import Token, tokenize

logger = logging.getLogger(__name__)

OUTSIDE_TAG = "O"


def align_bio_tags(
    text: str,
    entities: Sequence[Entity],
    tokens: Iterable[Token] | None = None,
) -> list[str]:
    """Assign a BIO tag to every token of a text.

    Parameters
    ----------
    text : str
        Source text.
    entities : Sequence[Entity]
        Entity spans over ``text``; may be unsorted and may overlap.
    tokens : Iterable[Token] | None
        Tokens of ``text``. When None, ``text`` is tokenized.

    Returns
    -------
    list[str]
        One tag per token: ``"O"``, ``"B-<type>"`` or ``"I-<type>"``.

    Raises
    ------
    MalformedAnnotationError
        If an entity's offsets fall outside ``text``.

    Examples
    --------
    >>> e = Entity(type="PERSON", text="Barack Obama", start_index=0, end_index=12)
    >>> align_bio_tags("Barack Obama visited", [e])
    ['B-PERSON', 'I-PERSON', 'O']
    """
    validate_entities(text, entities)
    token_list = list(tokens) if tokens is not None else list(tokenize(text))
    tags = [OUTSIDE_TAG] * len(token_list)

    for entity in sorted(entities, key=lambda e: e.start_index):
        first = True
        for i, token in enumerate(token_list):
            if token.start >= entity.start_index and token.end <= entity.end_index:
                if tags[i] == OUTSIDE_TAG:
                    tags[i] = f"{'B' if first else 'I'}-{entity.type}"
                    first = False

    logger.debug(
        "Aligned %d entities onto %d tokens", len(entities), len(token_list)
    )
    return tags


def render_bio(text: str, entities: Sequence[Entity]) -> str:
    """Render a text and its entities as BIO lines.

    Parameters
    ----------
    text : str
        Source text.
    entities : Sequence[Entity]
        Entity spans over ``text``.

    Returns
    -------
    str
        ``"<token>\\t<tag>"`` lines joined by newlines, without a trailing
        newline.

    Raises
    ------
    MalformedAnnotationError
        If an entity's offsets fall outside ``text``.
    """
    tokens = list(tokenize(text))
    tags = align_bio_tags(text, entities, tokens)
    return "\n".join(
        f"{token.text}\t{tag}" for token, tag in zip(tokens, tags, strict=True)
    )
