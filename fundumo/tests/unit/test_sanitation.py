"""
Unit tests for input sanitation and identifier generation.
"""

import re

import pytest
from domain.exceptions import ValidationError
from domain.services.identifiers import generate_anonymous_code, generate_id, generate_short_id
from domain.services.sanitation import (
    clamp_media_count,
    clean_optional_text,
    clean_text,
    require_text,
    sanitize_highlights,
    sanitize_tags,
)

CODE_PATTERN = re.compile(r"^FUN-[A-Z0-9]{10}$")


class TestRequireText:
    """Tests for required-field trimming."""

    def test_trims_surrounding_whitespace(self):
        assert require_text("  Offsite  ", "title", "required") == "Offsite"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None])
    def test_blank_raises_validation_error(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_text(value, "title", "Event title cannot be empty.")

        assert exc_info.value.field == "title"
        assert str(exc_info.value) == "Event title cannot be empty."


class TestOptionalText:
    """Tests for optional field cleanup."""

    def test_clean_text_handles_none(self):
        assert clean_text(None) == ""
        assert clean_text("  hi ") == "hi"

    def test_blank_optional_becomes_none(self):
        assert clean_optional_text(None) is None
        assert clean_optional_text("   ") is None
        assert clean_optional_text(" calm ") == "calm"


class TestClampMediaCount:
    """Tests for media count clamping."""

    @pytest.mark.parametrize(
        "value,expected",
        [(-5, 0), (0, 0), (42, 42), (999, 999), (1500, 999), (3.7, 3)],
    )
    def test_clamps_into_range(self, value, expected):
        assert clamp_media_count(value) == expected


class TestSanitizeTags:
    """Tests for tag normalization."""

    def test_trims_lowercases_and_drops_blanks(self):
        assert sanitize_tags(["  Team ", "", "OFFSITE", "   "], limit=8) == ["team", "offsite"]

    def test_drops_repeats_keeping_first_position(self):
        assert sanitize_tags(["fun", "Food", "FUN", "food", "music"], limit=8) == ["fun", "food", "music"]

    def test_caps_count(self):
        tags = [f"tag{i}" for i in range(20)]
        assert sanitize_tags(tags, limit=8) == tags[:8]
        assert len(sanitize_tags(tags, limit=10)) == 10

    def test_cap_counts_only_kept_tags(self):
        tags = ["", "a", "A", "b", "c"]
        assert sanitize_tags(tags, limit=3) == ["a", "b", "c"]


class TestSanitizeHighlights:
    """Tests for highlight sanitation."""

    def test_trims_and_drops_blank_lines(self):
        highlights = sanitize_highlights(["  Keynote ", "", "   ", "Dinner"])

        assert [h.text for h in highlights] == ["Keynote", "Dinner"]

    def test_caps_at_eight_with_fresh_ids(self):
        highlights = sanitize_highlights([f"line {i}" for i in range(12)])

        assert len(highlights) == 8
        assert highlights[0].text == "line 0"
        assert all(len(h.id) == 8 for h in highlights)
        assert len({h.id for h in highlights}) == 8


class TestIdentifiers:
    """Tests for id and anonymous code generation."""

    def test_generate_id_is_unique(self):
        ids = {generate_id() for _ in range(200)}
        assert len(ids) == 200

    def test_short_id_length(self):
        assert len(generate_short_id()) == 8
        assert len(generate_short_id(4)) == 4

    def test_anonymous_code_format(self):
        for _ in range(200):
            assert CODE_PATTERN.match(generate_anonymous_code())

    def test_anonymous_codes_are_unique_in_a_session(self):
        codes = {generate_anonymous_code() for _ in range(500)}
        assert len(codes) == 500
