"""Core annotation models.

Provides the document model and the three analysis result variants
(named entities, sentiment, part-of-speech tags). Results form a tagged
union discriminated by ``analysis_type``. All models are frozen; the wire
names used by exports (``startIndex``, ``analysisType``, ...) are field
aliases.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

AnalysisType = Literal["ner", "sentiment", "pos"]
SentimentLabel = Literal["Positive", "Negative", "Neutral"]

ANALYSIS_TYPES: tuple[AnalysisType, ...] = ("ner", "sentiment", "pos")


class AnnotationBaseModel(BaseModel):
    """Base model shared by all annotation objects.

    Frozen, rejects unknown fields, and accepts both field names and
    their camelCase aliases on input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class Document(AnnotationBaseModel):
    """A text document loaded for analysis.

    Attributes
    ----------
    text : str
        The full document text. Offsets are codepoint indices into it.
    source_name : str
        Name of the file (or ``"pasted_text"``) the text came from.
    """

    text: str = Field(..., description="Document text")
    source_name: str = Field(
        default="", alias="sourceName", description="Source name"
    )


class Entity(AnnotationBaseModel):
    """A typed character span.

    Attributes
    ----------
    type : str
        Entity type (e.g. "PERSON", "LOCATION").
    text : str
        Surface text of the span, equal to ``document.text[start:end]``.
    start_index : int
        Inclusive start offset.
    end_index : int
        Exclusive end offset.
    """

    type: str = Field(..., description="Entity type")
    text: str = Field(..., description="Span surface text")
    start_index: int = Field(..., ge=0, alias="startIndex", description="Start offset")
    end_index: int = Field(..., ge=0, alias="endIndex", description="End offset")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate entity type is not empty.

        Parameters
        ----------
        v : str
            Entity type to validate.

        Returns
        -------
        str
            Validated entity type.

        Raises
        ------
        ValueError
            If the type is empty.
        """
        if not v or not v.strip():
            raise ValueError("type cannot be empty")
        return v.strip()

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` offsets of the entity."""
        return (self.start_index, self.end_index)


class PosToken(AnnotationBaseModel):
    """A token with its part-of-speech tag.

    Attributes
    ----------
    token : str
        Token text.
    tag : str
        POS tag (e.g. Universal Dependencies "NOUN").
    """

    token: str
    tag: str


class NerResult(AnnotationBaseModel):
    """Named-entity recognition result.

    Attributes
    ----------
    analysis_type : Literal["ner"]
        Variant tag.
    entities : tuple[Entity, ...]
        Entities in ascending ``start_index`` order.
    """

    analysis_type: Literal["ner"] = Field(default="ner", alias="analysisType")
    entities: tuple[Entity, ...] = Field(default=())

    @field_validator("entities")
    @classmethod
    def sort_entities(cls, v: tuple[Entity, ...]) -> tuple[Entity, ...]:
        """Keep entities in ascending start order (stable for ties)."""
        return tuple(sorted(v, key=lambda e: e.start_index))


class SentimentResult(AnnotationBaseModel):
    """Document-level sentiment classification.

    Attributes
    ----------
    analysis_type : Literal["sentiment"]
        Variant tag.
    sentiment : SentimentLabel
        One of "Positive", "Negative" or "Neutral".
    confidence : float
        Confidence score in [0, 1].
    """

    analysis_type: Literal["sentiment"] = Field(
        default="sentiment", alias="analysisType"
    )
    sentiment: SentimentLabel
    confidence: float = Field(..., ge=0.0, le=1.0)

    @field_validator("sentiment", mode="before")
    @classmethod
    def normalize_sentiment(cls, v: object) -> object:
        """Match the sentiment label case-insensitively.

        Parameters
        ----------
        v : object
            Raw sentiment value.

        Returns
        -------
        object
            Capitalized label for strings, the value unchanged otherwise.
        """
        if isinstance(v, str):
            return v.strip().capitalize()
        return v


class PosResult(AnnotationBaseModel):
    """Part-of-speech tagging result.

    Attributes
    ----------
    analysis_type : Literal["pos"]
        Variant tag.
    tokens : tuple[PosToken, ...]
        One tagged token per source token, in order.
    """

    analysis_type: Literal["pos"] = Field(default="pos", alias="analysisType")
    tokens: tuple[PosToken, ...] = Field(default=())


AnnotationResult = Annotated[
    NerResult | SentimentResult | PosResult,
    Field(discriminator="analysis_type"),
]

