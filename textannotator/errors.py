"""Exceptions raised by the annotation core.

Data errors (bad offsets, malformed analysis payloads) derive from
``AnnotationDataError`` so callers can tell them apart from contract
violations such as requesting a BIO export for a sentiment result.
"""

from __future__ import annotations


class AnnotatorError(Exception):
    """Base exception for textannotator errors."""

    pass


class AnnotationDataError(AnnotatorError, ValueError):
    """Base exception for errors in annotation data."""

    pass


class MalformedAnnotationError(AnnotationDataError):
    """Exception raised when an entity's offsets do not fit its text.

    Parameters
    ----------
    message
        Error message describing the problem.
    entity_index
        Position of the offending entity in the caller's entity list.
    field
        Name of the bad field (``"startIndex"`` or ``"endIndex"``).
    value
        The offending value.

    Attributes
    ----------
    entity_index : int
        Position of the offending entity.
    field : str
        Name of the bad field.
    value : int
        The offending value.

    Examples
    --------
    >>> try:
    ...     raise MalformedAnnotationError("out of range", 3, "endIndex", 99)
    ... except MalformedAnnotationError as e:
    ...     print(e.entity_index, e.field)
    3 endIndex
    """

    def __init__(
        self,
        message: str,
        entity_index: int,
        field: str,
        value: int,
    ) -> None:
        self.entity_index = entity_index
        self.field = field
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message."""
        return (
            f"entity {self.entity_index}: {super().__str__()} "
            f"({self.field}={self.value})"
        )


class AnnotationParseError(AnnotationDataError):
    """Exception raised when a raw analysis payload has the wrong structure.

    Parameters
    ----------
    message
        Error message describing what went wrong.
    index
        Index of the offending item in a list payload. None if not applicable.
    field
        Name of the offending field. None if unknown.
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        field: str | None = None,
    ) -> None:
        self.index = index
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message."""
        parts = [super().__str__()]
        if self.index is not None:
            parts.append(f" at item {self.index}")
        if self.field is not None:
            parts.append(f", field '{self.field}'")
        return "".join(parts)


class UnsupportedExportError(AnnotatorError):
    """Exception raised when a format cannot be produced for the given input.

    Raised for caller contract violations, e.g. a BIO export of a
    non-NER result or an export with no result at all.
    """

    pass


class SessionStateError(AnnotatorError):
    """Exception raised on an invalid annotation session transition."""

    pass


class ExportWriteError(AnnotatorError):
    """Exception raised when an export payload cannot be written."""

    pass
