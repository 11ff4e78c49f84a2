"""Unit tests for text normalization and tokenization utilities."""

import pytest

from litsearch.core.normalization import (
    normalize_term,
    normalize_title,
    split_fragments,
    tokenize,
)


class TestNormalizeTerm:
    """Tests for term normalization."""

    def test_normalize_term_lowercase_and_whitespace(self) -> None:
        """Test case and whitespace are normalized."""
        assert normalize_term("  Fire   Ecology ") == "fire ecology"
        assert normalize_term("Fire\tEcology\n") == "fire ecology"

    def test_normalize_term_strips_surrounding_punctuation(self) -> None:
        """Test punctuation around a term is removed."""
        assert normalize_term("(fire ecology).") == "fire ecology"
        assert normalize_term('"woodpecker"') == "woodpecker"

    def test_normalize_term_keeps_inner_hyphen(self) -> None:
        """Test hyphenated words survive normalization."""
        assert normalize_term("Black-Backed") == "black-backed"

    def test_normalize_term_empty(self) -> None:
        """Test empty input returns empty string."""
        assert normalize_term("") == ""
        assert normalize_term("  ;  ") == ""


class TestTokenize:
    """Tests for word tokenization."""

    def test_tokenize_basic(self) -> None:
        """Test text is split into lower-case words."""
        assert tokenize("Fire Severity affects Woodpecker") == ["fire", "severity", "affects", "woodpecker"]

    def test_tokenize_keeps_hyphenated_words(self) -> None:
        """Test inner hyphens and apostrophes stay inside tokens."""
        assert tokenize("black-backed woodpecker's nest") == ["black-backed", "woodpecker's", "nest"]

    def test_tokenize_drops_punctuation(self) -> None:
        """Test punctuation never becomes a token."""
        assert tokenize("fire, (ecology).") == ["fire", "ecology"]

    def test_tokenize_empty(self) -> None:
        """Test empty text yields no tokens."""
        assert tokenize("") == []


class TestSplitFragments:
    """Tests for clause splitting."""

    def test_split_fragments_at_punctuation(self) -> None:
        """Test fragments end at clause punctuation."""
        result = split_fragments("Fire ecology: woodpecker occupancy, burned forests.")
        assert result == [["fire", "ecology"], ["woodpecker", "occupancy"], ["burned", "forests"]]

    def test_split_fragments_keeps_hyphenated_words(self) -> None:
        """Test hyphens inside words do not split fragments."""
        assert split_fragments("post-fire logging") == [["post-fire", "logging"]]

    def test_split_fragments_dash_between_spaces(self) -> None:
        """Test a spaced dash separates clauses."""
        assert split_fragments("fire - birds") == [["fire"], ["birds"]]


class TestNormalizeTitle:
    """Tests for title normalization."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Fire Severity and Woodpeckers", "fire severity and woodpeckers"),
            ("Title: A Survey!", "title a survey"),
            ("  Spaced   title ", "spaced title"),
            ("", ""),
        ],
    )
    def test_normalize_title(self, title: str, expected: str) -> None:
        """Test titles are lower-cased without punctuation."""
        assert normalize_title(title) == expected
