"""
Tests for slug generation and list-field normalization.

System role: Verification of URL slug rules used by every admin form
"""

import pytest

from tourbook.core.exceptions import ValidationError
from tourbook.core.slugs import generate_slug, resolve_slug, split_languages


class TestGenerateSlug:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Museums & Galleries", "museums-galleries"),
            ("  --Milford Sound Cruise!! ", "milford-sound-cruise"),
            ("Top 10 Walks", "top-10-walks"),
            ("already-a-slug", "already-a-slug"),
        ],
    )
    def test_generate_slug_collapses_non_alphanumerics(self, text: str, expected: str) -> None:
        assert generate_slug(text) == expected

    def test_generate_slug_rejects_text_without_letters_or_digits(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            generate_slug("!!! ---")
        assert exc_info.value.details["field"] == "slug"


class TestResolveSlug:
    def test_explicit_slug_is_normalized(self) -> None:
        assert resolve_slug("Custom Slug", "Ignored Title") == "custom-slug"

    def test_blank_slug_is_derived_from_source(self) -> None:
        assert resolve_slug(None, "Doubtful Sound") == "doubtful-sound"
        assert resolve_slug("   ", "Doubtful Sound") == "doubtful-sound"


class TestSplitLanguages:
    def test_comma_separated_text(self) -> None:
        assert split_languages("English, German,, French ") == ["English", "German", "French"]

    def test_list_is_cleaned(self) -> None:
        assert split_languages([" English", "", "Maori "]) == ["English", "Maori"]

    def test_none_gives_empty_list(self) -> None:
        assert split_languages(None) == []
