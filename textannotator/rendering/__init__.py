"""Display-side views of analysis results."""

from __future__ import annotations

from textannotator.rendering.overlay import (
    EntitySegment,
    Segment,
    TextSegment,
    render_overlay,
)
from textannotator.rendering.summary import format_confidence, group_entities_by_type

__all__ = [
    "EntitySegment",
    "Segment",
    "TextSegment",
    "format_confidence",
    "group_entities_by_type",
    "render_overlay",
]
