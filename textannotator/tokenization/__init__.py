"""Deterministic tokenization and BIO span alignment.

The tokenizer splits text into word and punctuation tokens with
character offsets. The alignment module maps character-offset entity
spans onto those tokens as BIO tags.
"""

from __future__ import annotations

from textannotator.tokenization.alignment import align_bio_tags, render_bio
from textannotator.tokenization.tokenizers import (
    Token,
    TokenStream,
    tokenize,
)

__all__ = [
    "Token",
    "TokenStream",
    "align_bio_tags",
    "render_bio",
    "tokenize",
]
