"""Annotation export and span-alignment toolkit.

Turns character-offset annotations produced by an external analysis step
(named entities, sentiment, part-of-speech tags) into BIO tag sequences,
interchange formats (JSON, JSONL, CSV, XML) and highlight overlays.
"""

from __future__ import annotations

__version__ = "0.1.0"
