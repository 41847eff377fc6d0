"""Annotation session state.

An ``AnnotationSession`` is the caller-owned state of one analysis
workspace: the loaded document, the selected analysis type and the
current result. It is immutable; every transition returns a new session.
The core functions never hold a session themselves; they receive its
parts as plain arguments.
"""

from __future__ import annotations

from pydantic import Field

from textannotator.annotations.models import (
    AnalysisType,
    AnnotationBaseModel,
    AnnotationResult,
    Document,
    NerResult,
)
from textannotator.annotations.validation import validate_entities
from textannotator.errors import SessionStateError

PASTED_TEXT_SOURCE_NAME = "pasted_text"
DEFAULT_BASE_FILENAME = "annotations"


def base_filename(source_name: str | None) -> str:
    """Derive the export base filename from a source name.

    Strips the last extension. A name with nothing left after stripping
    (e.g. ``".env"``) is used whole; no name gives ``"annotations"``.

    Parameters
    ----------
    source_name : str | None
        Source file name.

    Returns
    -------
    str
        Base filename.

    Examples
    --------
    >>> base_filename("report.final.txt")
    'report.final'
    >>> base_filename("README")
    'README'
    >>> base_filename(None)
    'annotations'
    """
    if not source_name:
        return DEFAULT_BASE_FILENAME
    stem, dot, _ = source_name.rpartition(".")
    if not dot:
        return source_name
    return stem or source_name


class AnnotationSession(AnnotationBaseModel):
    """Immutable state of an analysis workspace.

    Attributes
    ----------
    document : Document | None
        Loaded document, if any.
    analysis_type : AnalysisType
        Selected analysis type.
    result : AnnotationResult | None
        Result of the last analysis of ``document``, if any.

    Examples
    --------
    >>> session = AnnotationSession().load(Document(text="Hi", source_name="a.txt"))
    >>> session.base_filename
    'a'
    >>> session.result is None
    True
    """

    document: Document | None = None
    analysis_type: AnalysisType = Field(default="ner", alias="analysisType")
    result: AnnotationResult | None = None

    @property
    def base_filename(self) -> str:
        """Base filename for exports of this session."""
        return base_filename(self.document.source_name if self.document else None)

    def load(self, document: Document) -> AnnotationSession:
        """Start a fresh session on a new document.

        Parameters
        ----------
        document : Document
            Newly loaded document.

        Returns
        -------
        AnnotationSession
            Session with the document, the default analysis type and no
            result.
        """
        return AnnotationSession(document=document)

    def load_text(self, text: str) -> AnnotationSession:
        """Start a fresh session on pasted text.

        Parameters
        ----------
        text : str
            Pasted text.

        Returns
        -------
        AnnotationSession
            Session on a document named ``"pasted_text"``.

        Raises
        ------
        SessionStateError
            If the text is empty or whitespace only.
        """
        if not text.strip():
            raise SessionStateError("Cannot load empty text")
        return self.load(Document(text=text, source_name=PASTED_TEXT_SOURCE_NAME))

    def with_analysis_type(self, analysis_type: AnalysisType) -> AnnotationSession:
        """Select an analysis type.

        Changing the type discards the current result.

        Parameters
        ----------
        analysis_type : AnalysisType
            Analysis type to select.

        Returns
        -------
        AnnotationSession
            Updated session.
        """
        if analysis_type == self.analysis_type:
            return self
        return self.model_copy(update={"analysis_type": analysis_type, "result": None})

    def with_result(self, result: AnnotationResult) -> AnnotationSession:
        """Attach an analysis result.

        Parameters
        ----------
        result : AnnotationResult
            Result of analysing the session's document.

        Returns
        -------
        AnnotationSession
            Updated session.

        Raises
        ------
        SessionStateError
            If no document is loaded or the result type does not match
            the selected analysis type.
        MalformedAnnotationError
            If an entity lies outside the document text.
        """
        if self.document is None:
            raise SessionStateError("No document loaded")
        if result.analysis_type != self.analysis_type:
            raise SessionStateError(
                f"Result type '{result.analysis_type}' does not match "
                f"selected analysis type '{self.analysis_type}'"
            )
        if isinstance(result, NerResult):
            validate_entities(self.document.text, result.entities)
        return self.model_copy(update={"result": result})

    def cleared(self) -> AnnotationSession:
        """Return an empty session."""
        return AnnotationSession()
