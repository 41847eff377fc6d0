"""Tests for export entry points."""

from __future__ import annotations

import pytest

from textannotator.annotations.models import (
    Document,
    Entity,
    NerResult,
    PosResult,
    SentimentResult,
)
from textannotator.annotations.session import AnnotationSession
from textannotator.errors import (
    AnnotationParseError,
    MalformedAnnotationError,
    UnsupportedExportError,
)
from textannotator.export.exporter import export_result, export_session, load_json_export
from textannotator.export.formats import (
    EXPORT_FORMATS,
    available_formats,
    get_format_spec,
)


class TestFormatRegistry:
    """Tests for the format registry."""

    @pytest.mark.parametrize(
        ("fmt", "mime_type"),
        [
            ("json", "application/json"),
            ("jsonl", "application/jsonl"),
            ("csv", "text/csv"),
            ("xml", "application/xml"),
            ("bio", "text/plain"),
        ],
    )
    def test_mime_types(self, fmt: str, mime_type: str) -> None:
        """Test each format's MIME type."""
        assert get_format_spec(fmt).mime_type == mime_type

    def test_format_lookup_case_insensitive(self) -> None:
        """Test format names are matched case-insensitively."""
        assert get_format_spec("CSV").name == "csv"

    def test_unknown_format(self) -> None:
        """Test an unknown format name is rejected."""
        with pytest.raises(UnsupportedExportError, match="Unknown export format"):
            get_format_spec("yaml")

    def test_available_formats_ner(self) -> None:
        """Test all formats apply to NER."""
        assert available_formats("ner") == list(EXPORT_FORMATS)

    @pytest.mark.parametrize("analysis_type", ["sentiment", "pos"])
    def test_available_formats_without_bio(self, analysis_type: str) -> None:
        """Test BIO is offered for NER only."""
        assert "bio" not in available_formats(analysis_type)  # type: ignore[arg-type]


class TestExportResult:
    """Tests for export_result function."""

    @pytest.mark.parametrize(
        ("fmt", "filename"),
        [
            ("json", "news_annotations.json"),
            ("jsonl", "news_ner.jsonl"),
            ("csv", "news_ner.csv"),
            ("xml", "news_ner.xml"),
            ("bio", "news_ner.bio.txt"),
        ],
    )
    def test_ner_filenames(
        self,
        obama_document: Document,
        ner_result: NerResult,
        fmt: str,
        filename: str,
    ) -> None:
        """Test suggested filenames for NER exports."""
        assert export_result(obama_document, ner_result, fmt).suggested_filename == (
            filename
        )

    def test_sentiment_csv(self) -> None:
        """Test a sentiment CSV export end to end."""
        doc = Document(text="Great!", source_name="review.txt")
        out = export_result(
            doc, SentimentResult(sentiment="Positive", confidence=0.9), "csv"
        )
        assert out.payload == "sentiment,confidence\nPositive,0.9"
        assert out.suggested_filename == "review_sentiment.csv"
        assert out.mime_type == "text/csv"

    def test_pos_filename(self, obama_document: Document, pos_result: PosResult) -> None:
        """Test POS exports use the analysis type in the filename."""
        out = export_result(obama_document, pos_result, "xml")
        assert out.suggested_filename == "news_pos.xml"

    def test_base_name_override(
        self, obama_document: Document, ner_result: NerResult
    ) -> None:
        """Test an explicit base name replaces the source-derived one."""
        out = export_result(obama_document, ner_result, "csv", base_name="run1")
        assert out.suggested_filename == "run1_ner.csv"

    def test_pasted_text_filename(self, ner_result: NerResult) -> None:
        """Test pasted text exports are named after pasted_text."""
        doc = Document(text="Barack Obama visited Paris.", source_name="pasted_text")
        assert export_result(doc, ner_result, "json").suggested_filename == (
            "pasted_text_annotations.json"
        )

    def test_unnamed_document(self, ner_result: NerResult) -> None:
        """Test a document without a source name falls back to annotations."""
        doc = Document(text="Barack Obama visited Paris.")
        assert export_result(doc, ner_result, "bio").suggested_filename == (
            "annotations_ner.bio.txt"
        )

    @pytest.mark.parametrize("fmt", ["json", "jsonl", "csv", "xml", "bio"])
    def test_no_result(self, obama_document: Document, fmt: str) -> None:
        """Test exporting without a result is rejected for every format."""
        with pytest.raises(UnsupportedExportError, match="No analysis result"):
            export_result(obama_document, None, fmt)

    def test_bio_for_sentiment(
        self, obama_document: Document, sentiment_result: SentimentResult
    ) -> None:
        """Test BIO export of a sentiment result is rejected."""
        with pytest.raises(UnsupportedExportError, match="BIO export is not available"):
            export_result(obama_document, sentiment_result, "bio")

    def test_bio_for_pos(self, obama_document: Document, pos_result: PosResult) -> None:
        """Test BIO export of a POS result is rejected."""
        with pytest.raises(UnsupportedExportError):
            export_result(obama_document, pos_result, "bio")

    def test_unknown_format(self, obama_document: Document, ner_result: NerResult) -> None:
        """Test an unknown format is rejected."""
        with pytest.raises(UnsupportedExportError):
            export_result(obama_document, ner_result, "docx")

    def test_empty_ner_csv(self, obama_document: Document) -> None:
        """Test an empty NER result exports headers only."""
        out = export_result(obama_document, NerResult(), "csv")
        assert out.payload == "text,type,startIndex,endIndex"

    def test_malformed_entity(self, obama_document: Document) -> None:
        """Test bad offsets abort the export."""
        result = NerResult(
            entities=(Entity(type="X", text="?", start_index=0, end_index=999),)
        )
        with pytest.raises(MalformedAnnotationError):
            export_result(obama_document, result, "xml")

    def test_deterministic(self, obama_document: Document, ner_result: NerResult) -> None:
        """Test exporting twice gives identical payloads."""
        for fmt in EXPORT_FORMATS:
            first = export_result(obama_document, ner_result, fmt)
            second = export_result(obama_document, ner_result, fmt)
            assert first == second


class TestExportSession:
    """Tests for export_session function."""

    def test_export_session(self, obama_document: Document, ner_result: NerResult) -> None:
        """Test exporting a session's current result."""
        session = AnnotationSession().load(obama_document).with_result(ner_result)
        out = export_session(session, "csv")
        assert out.suggested_filename == "news_ner.csv"

    def test_session_without_document(self) -> None:
        """Test exporting an empty session is rejected."""
        with pytest.raises(UnsupportedExportError, match="No document"):
            export_session(AnnotationSession(), "json")

    def test_session_without_result(self, obama_document: Document) -> None:
        """Test exporting before analysis is rejected."""
        with pytest.raises(UnsupportedExportError):
            export_session(AnnotationSession().load(obama_document), "json")


class TestLoadJsonExport:
    """Tests for load_json_export function."""

    def test_ner_round_trip(self, obama_document: Document, ner_result: NerResult) -> None:
        """Test an NER JSON export reads back to the same result."""
        payload = export_result(obama_document, ner_result, "json").payload
        document, result = load_json_export(payload, "news.txt")
        assert document == obama_document
        assert result == ner_result

    def test_ner_round_trip_rebinds_text(self) -> None:
        """Test exported entity text matches what is read back."""
        document = Document(text="Bob met Ann", source_name="meeting.txt")
        stale = NerResult(
            entities=(Entity(type="PERSON", text="Robert", start_index=0, end_index=3),)
        )
        payload = export_result(document, stale, "json").payload
        _, result = load_json_export(payload, "meeting.txt")
        assert isinstance(result, NerResult)
        assert result.entities[0].text == "Bob"
        assert export_result(document, result, "json").payload == payload

    def test_sentiment_round_trip(
        self, obama_document: Document, sentiment_result: SentimentResult
    ) -> None:
        """Test a sentiment JSON export reads back to the same result."""
        payload = export_result(obama_document, sentiment_result, "json").payload
        _, result = load_json_export(payload)
        assert result == sentiment_result

    def test_pos_round_trip(self, obama_document: Document, pos_result: PosResult) -> None:
        """Test a POS JSON export reads back to the same result."""
        payload = export_result(obama_document, pos_result, "json").payload
        document, result = load_json_export(payload)
        assert document.text == obama_document.text
        assert result == pos_result

    def test_missing_envelope_field(self) -> None:
        """Test an export without results is rejected."""
        with pytest.raises(AnnotationParseError) as exc_info:
            load_json_export('{"sourceText": "x", "analysisType": "ner"}')
        assert exc_info.value.field == "results"

    def test_not_an_object(self) -> None:
        """Test a JSON list is rejected."""
        with pytest.raises(AnnotationParseError, match="must be an object"):
            load_json_export("[]")

    def test_invalid_json(self) -> None:
        """Test malformed JSON is rejected."""
        with pytest.raises(AnnotationParseError):
            load_json_export("{")
