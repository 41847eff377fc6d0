"""Tests for BIO alignment of entity spans to tokens."""

from __future__ import annotations

import pytest

from textannotator.annotations.models import Entity
from textannotator.errors import MalformedAnnotationError
from textannotator.tokenization.alignment import OUTSIDE_TAG, align_bio_tags, render_bio
from textannotator.tokenization.tokenizers import tokenize


class TestAlignBioTags:
    """Tests for align_bio_tags function."""

    def test_multi_token_entity(self, obama_entities: list[Entity]) -> None:
        """Test B then I tags over a multi-token entity."""
        tags = align_bio_tags("Barack Obama visited Paris.", obama_entities)
        assert tags == ["B-PERSON", "I-PERSON", "O", "B-LOCATION", "O"]

    def test_single_token_entity(self) -> None:
        """Test a one-token entity gets a single B tag."""
        entity = Entity(type="X", text="Bob", start_index=4, end_index=7)
        assert align_bio_tags("Hi, Bob!", [entity]) == ["O", "O", "B-X", "O"]

    def test_no_entities(self) -> None:
        """Test every token is outside when there are no entities."""
        assert align_bio_tags("Hi, Bob!", []) == [OUTSIDE_TAG] * 4

    def test_empty_text(self) -> None:
        """Test empty text yields no tags."""
        assert align_bio_tags("", []) == []

    def test_unsorted_entities(self, obama_entities: list[Entity]) -> None:
        """Test input order does not matter."""
        tags = align_bio_tags("Barack Obama visited Paris.", list(reversed(obama_entities)))
        assert tags == ["B-PERSON", "I-PERSON", "O", "B-LOCATION", "O"]

    def test_partially_covered_token_is_outside(self) -> None:
        """Test a token only partly inside an entity is not tagged."""
        entity = Entity(type="X", text="ob", start_index=5, end_index=7)
        assert align_bio_tags("Hi, Bob!", [entity]) == ["O", "O", "O", "O"]

    def test_same_start_first_writer_wins(self) -> None:
        """Test the earlier-listed entity keeps tokens when starts tie."""
        text = "New York Times"
        org = Entity(type="ORG", text=text, start_index=0, end_index=14)
        loc = Entity(type="LOC", text="New York", start_index=0, end_index=8)
        assert align_bio_tags(text, [org, loc]) == ["B-ORG", "I-ORG", "I-ORG"]
        assert align_bio_tags(text, [loc, org]) == ["B-LOC", "I-LOC", "B-ORG"]

    def test_nested_entity_keeps_outer_tags(self) -> None:
        """Test a later nested entity does not overwrite earlier tags."""
        text = "University of Paris"
        outer = Entity(type="ORG", text=text, start_index=0, end_index=19)
        inner = Entity(type="LOC", text="Paris", start_index=14, end_index=19)
        assert align_bio_tags(text, [outer, inner]) == ["B-ORG", "I-ORG", "I-ORG"]

    def test_uses_given_tokens(self) -> None:
        """Test precomputed tokens are used as is."""
        text = "Hi, Bob!"
        tokens = list(tokenize(text))[2:]
        entity = Entity(type="X", text="Bob", start_index=4, end_index=7)
        assert align_bio_tags(text, [entity], tokens) == ["B-X", "O"]

    def test_malformed_entity_raises(self) -> None:
        """Test offsets outside the text raise."""
        entity = Entity(type="X", text="?", start_index=0, end_index=100)
        with pytest.raises(MalformedAnnotationError):
            align_bio_tags("Hi, Bob!", [entity])

    def test_one_tag_per_token(self) -> None:
        """Test the tag count always equals the token count."""
        text = "A, b; c. D!"
        entity = Entity(type="X", text="b; c", start_index=3, end_index=7)
        assert len(align_bio_tags(text, [entity])) == len(list(tokenize(text)))


class TestRenderBio:
    """Tests for render_bio function."""

    def test_render_lines(self, obama_entities: list[Entity]) -> None:
        """Test tab-separated token and tag lines."""
        rendered = render_bio("Barack Obama visited Paris.", obama_entities)
        assert rendered == (
            "Barack\tB-PERSON\nObama\tI-PERSON\nvisited\tO\nParis\tB-LOCATION\n.\tO"
        )

    def test_render_without_final_punctuation(self) -> None:
        """Test the last token is tagged when the text ends in a word."""
        entities = [
            Entity(type="PERSON", text="Barack Obama", start_index=0, end_index=12),
            Entity(type="LOCATION", text="Paris", start_index=21, end_index=26),
        ]
        assert render_bio("Barack Obama visited Paris", entities).split("\n") == [
            "Barack\tB-PERSON",
            "Obama\tI-PERSON",
            "visited\tO",
            "Paris\tB-LOCATION",
        ]

    def test_no_trailing_newline(self) -> None:
        """Test output does not end with a newline."""
        assert not render_bio("Hi!", []).endswith("\n")

    def test_empty_text(self) -> None:
        """Test empty text renders as an empty string."""
        assert render_bio("", []) == ""
