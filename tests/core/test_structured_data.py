"""
Tests for schema.org JSON-LD generation.

System role: Verification of structured-data formatting
"""

import json

from tourbook.core.structured_data import (
    combine_structured_data,
    generate_structured_data,
    global_structured_data,
    render_json_ld,
)


def _product_data(**overrides) -> dict:
    data = {
        "id": "5b6f",
        "title": "Fiord Cruise",
        "description": "Two hours on the water",
        "url": "https://tours.example.com/tour/fiord-cruise",
        "category": "Cruises",
        "brand": "Example Tours",
        "price": 49,
        "currency": "NZD",
        "rating": 4.5,
        "review_count": 12,
        "duration": "2 hours",
        "location": "Milford Sound",
    }
    data.update(overrides)
    return data


class TestProduct:
    def test_offer_and_rating(self) -> None:
        [product] = generate_structured_data("Product", _product_data())

        assert product["@type"] == "Product"
        assert product["offers"]["price"] == "49.00"
        assert product["offers"]["priceCurrency"] == "NZD"
        assert product["aggregateRating"]["reviewCount"] == 12
        assert product["brand"] == {"@type": "Brand", "name": "Example Tours"}

    def test_rating_omitted_without_reviews(self) -> None:
        [product] = generate_structured_data("Product", _product_data(review_count=0))
        assert "aggregateRating" not in product

    def test_empty_values_pruned(self) -> None:
        [product] = generate_structured_data("Product", _product_data(description=None, brand=None))
        assert "description" not in product
        assert "brand" not in product


class TestOverride:
    def test_valid_override_replaces_generated_output(self) -> None:
        custom = '{"@context": "https://schema.org", "@type": "TouristTrip", "name": "Custom"}'

        schemas = generate_structured_data("Product", _product_data(), override=custom)

        assert schemas == [{"@context": "https://schema.org", "@type": "TouristTrip", "name": "Custom"}]

    def test_invalid_override_falls_back(self) -> None:
        schemas = generate_structured_data("Product", _product_data(), override="{not json")
        assert schemas[0]["@type"] == "Product"

    def test_override_that_is_not_objects_falls_back(self) -> None:
        schemas = generate_structured_data("Product", _product_data(), override="[1, 2]")
        assert schemas[0]["@type"] == "Product"


def test_breadcrumbs_are_numbered_from_one() -> None:
    [schema] = generate_structured_data("BreadcrumbList", {"breadcrumbs": [
        {"name": "Home", "url": "https://tours.example.com"},
        {"name": "Tours", "url": "https://tours.example.com/tours"},
    ]})

    positions = [item["position"] for item in schema["itemListElement"]]
    assert positions == [1, 2]


def test_faq_page_needs_questions() -> None:
    assert generate_structured_data("FAQPage", {"faqs": []}) == []
    [schema] = generate_structured_data("FAQPage", {"faqs": [{"question": "Q?", "answer": "A."}]})
    assert schema["mainEntity"][0]["acceptedAnswer"]["text"] == "A."


def test_unknown_type_gives_nothing() -> None:
    assert generate_structured_data("Recipe", {"name": "x"}) == []


def test_combine_drops_duplicates_and_empties() -> None:
    a = {"@type": "WebSite", "name": "x"}
    combined = combine_structured_data(a, None, {}, {"name": "x", "@type": "WebSite"})
    assert combined == [a]


def test_global_schemas(site) -> None:
    schemas = global_structured_data(site)

    assert [s["@type"] for s in schemas] == ["WebSite", "Organization", "LocalBusiness"]
    assert schemas[0]["potentialAction"]["target"].startswith("https://tours.example.com/search")
    assert schemas[2]["geo"]["@type"] == "GeoCoordinates"


def test_render_json_ld_is_compact() -> None:
    rendered = render_json_ld({"@type": "WebSite", "name": "Ōhau"})
    assert rendered == '{"@type":"WebSite","name":"Ōhau"}'
    assert json.loads(render_json_ld([{"a": 1}])) == [{"a": 1}]
