"""Word/punctuation tokenization with character offsets.

Splits text into maximal runs of word characters (Unicode letters, digits,
underscore and apostrophe) and single non-whitespace punctuation
characters. Whitespace produces no token. The tokenization depends on the
text alone, so every BIO export re-runs it and gets identical tokens.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

TOKEN_PATTERN = re.compile(r"[\w']+|[^\s\w']")


class Token(BaseModel):
    """A token with half-open character offsets.

    Attributes
    ----------
    text : str
        The token text, equal to ``source[start:end]``.
    start : int
        Character offset of the token start in the source text.
    end : int
        Character offset of the token end in the source text.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    start: int
    end: int


class TokenStream:
    """Lazy, restartable token sequence over a text.

    Each iteration scans the text again from the start, so a stream can
    be consumed any number of times.

    Parameters
    ----------
    text : str
        Source text.

    Examples
    --------
    >>> stream = TokenStream("Hi, Bob!")
    >>> stream.token_texts
    ['Hi', ',', 'Bob', '!']
    >>> [(t.start, t.end) for t in stream]
    [(0, 2), (2, 3), (4, 7), (7, 8)]
    """

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def original_text(self) -> str:
        """The source text."""
        return self._text

    def __iter__(self) -> Iterator[Token]:
        for match in TOKEN_PATTERN.finditer(self._text):
            yield Token(text=match.group(), start=match.start(), end=match.end())

    @property
    def token_texts(self) -> list[str]:
        """Plain token strings.

        Returns
        -------
        list[str]
            List of token text strings.
        """
        return [t.text for t in self]

    def render(self) -> str:
        """Reconstruct the source text from tokens.

        The whitespace between tokens (and before the first and after the
        last) is re-inserted from the source by offset.

        Returns
        -------
        str
            Reconstructed text, identical to the source.
        """
        parts: list[str] = []
        cursor = 0
        for token in self:
            parts.append(self._text[cursor : token.start])
            parts.append(token.text)
            cursor = token.end
        parts.append(self._text[cursor:])
        return "".join(parts)


def tokenize(text: str) -> TokenStream:
    """Tokenize text into words and punctuation.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    TokenStream
        Lazy, restartable token sequence; empty for empty or
        whitespace-only text.
    """
    return TokenStream(text)
