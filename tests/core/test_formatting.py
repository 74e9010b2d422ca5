"""
Tests for display formatting helpers.

System role: Verification of stat, excerpt and paragraph formatting
"""

from tourbook.core.formatting import excerpt, format_stat_value, split_paragraphs
from tourbook.core.toggles import toggle_status


def test_average_rating_renders_out_of_five() -> None:
    assert format_stat_value("Average Rating", 4.8) == "4.8/5"
    assert format_stat_value("Average Rating", 5.0) == "5/5"


def test_large_counts_are_abbreviated() -> None:
    assert format_stat_value("Happy Customers", 1_200_000) == "1M+"
    assert format_stat_value("Tours Booked", 15_000) == "15K+"


def test_halves_round_up() -> None:
    assert format_stat_value("Tours Booked", 2_500) == "3K+"
    assert format_stat_value("Happy Customers", 2_500_000) == "3M+"
    assert format_stat_value("Tours Booked", 1_499) == "1K+"


def test_small_counts_are_plain() -> None:
    assert format_stat_value("Destinations", 250) == "250"
    assert format_stat_value("Destinations", 250.0) == "250"


def test_excerpt_cuts_to_length() -> None:
    assert excerpt("a" * 200) == "a" * 160
    assert excerpt("short") == "short"
    assert excerpt(None) == ""


def test_split_paragraphs_drops_blank_runs() -> None:
    assert split_paragraphs("First.\n\nSecond.\n\n\n\n Third. ") == ["First.", "Second.", "Third."]
    assert split_paragraphs(None) == []


def test_toggle_status() -> None:
    assert toggle_status("active") == "inactive"
    assert toggle_status("inactive") == "active"
    assert toggle_status("draft") == "active"
    assert toggle_status(None) == "active"
