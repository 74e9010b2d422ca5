"""
Tests for page metadata fallback chains.

System role: Verification of SEO head metadata assembly
"""

from types import SimpleNamespace

from tourbook.core.seo import build_page_metadata, resolve_robots


def _seo_row(**overrides) -> SimpleNamespace:
    fields = {
        "seo_title": None,
        "seo_description": None,
        "seo_keywords": None,
        "canonical_url": None,
        "robots_index": None,
        "robots_follow": None,
        "robots_nosnippet": None,
        "og_title": None,
        "og_description": None,
        "og_image": None,
        "og_image_alt": None,
        "twitter_title": None,
        "twitter_description": None,
        "twitter_image": None,
        "twitter_image_alt": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_defaults_flow_from_content() -> None:
    metadata = build_page_metadata(
        _seo_row(),
        url="https://tours.example.com/tour/cruise",
        default_title="Cruise - Example",
        description_candidates=[None, "x" * 300],
        image="https://img.example.com/cruise.jpg",
        image_alt="Cruise image",
    )

    assert metadata.title == "Cruise - Example"
    assert metadata.description == "x" * 160
    assert metadata.canonical == "https://tours.example.com/tour/cruise"
    assert metadata.open_graph.title == "Cruise - Example"
    assert metadata.open_graph.image == "https://img.example.com/cruise.jpg"
    assert metadata.twitter.image_alt == "Cruise image"
    assert metadata.robots_content == "index, follow"


def test_editable_fields_win_and_twitter_falls_back_to_open_graph() -> None:
    row = _seo_row(
        seo_title="Custom title",
        seo_description="Custom description",
        canonical_url="https://canonical.example.com/cruise",
        og_title="OG title",
        og_image="https://img.example.com/og.jpg",
    )

    metadata = build_page_metadata(
        row,
        url="https://tours.example.com/tour/cruise",
        default_title="Cruise - Example",
        description_candidates=["Short description"],
    )

    assert metadata.title == "Custom title"
    assert metadata.description == "Custom description"
    assert metadata.canonical == "https://canonical.example.com/cruise"
    assert metadata.twitter.title == "OG title"
    assert metadata.twitter.image == "https://img.example.com/og.jpg"
    assert metadata.twitter.description == "Custom description"


def test_page_without_row_uses_defaults() -> None:
    metadata = build_page_metadata(
        None,
        url="https://tours.example.com",
        default_title="Example - Tours",
        description_candidates=["Site description"],
    )

    assert metadata.title == "Example - Tours"
    assert metadata.description == "Site description"
    assert metadata.structured_data == []


def test_robots_null_means_permissive() -> None:
    robots = resolve_robots(_seo_row(robots_index=False, robots_nosnippet=True))

    assert robots.index is False
    assert robots.follow is True
    assert robots.content == "noindex, follow, nosnippet"
