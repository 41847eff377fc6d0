"""Annotation data models, validated parsing and session state."""

from __future__ import annotations

from textannotator.annotations.models import (
    ANALYSIS_TYPES,
    AnalysisType,
    AnnotationResult,
    Document,
    Entity,
    NerResult,
    PosResult,
    PosToken,
    SentimentLabel,
    SentimentResult,
)
from textannotator.annotations.parsing import (
    parse_annotation_result,
    parse_entity,
    parse_ner,
    parse_pos,
    parse_sentiment,
)
from textannotator.annotations.session import (
    PASTED_TEXT_SOURCE_NAME,
    AnnotationSession,
    base_filename,
)
from textannotator.annotations.validation import (
    bind_entities,
    validate_entities,
    validate_entity,
)

__all__ = [
    "ANALYSIS_TYPES",
    "PASTED_TEXT_SOURCE_NAME",
    "AnalysisType",
    "AnnotationResult",
    "AnnotationSession",
    "Document",
    "Entity",
    "NerResult",
    "PosResult",
    "PosToken",
    "SentimentLabel",
    "SentimentResult",
    "base_filename",
    "bind_entities",
    "parse_annotation_result",
    "parse_entity",
    "parse_ner",
    "parse_pos",
    "parse_sentiment",
    "validate_entities",
    "validate_entity",
]
