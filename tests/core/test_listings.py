"""
Tests for search filtering and sorting.

System role: Verification of listing filter/sort rules
"""

from types import SimpleNamespace

import pytest

from tourbook.core.exceptions import ValidationError
from tourbook.core.listings import (
    ResultType,
    SearchResult,
    filter_results,
    in_price_band,
    sort_results,
    split_featured,
)


def _result(title: str, type_: ResultType = ResultType.EXPERIENCE, **kwargs) -> SearchResult:
    return SearchResult(type=type_, title=title, slug=title.lower(), url=f"/tour/{title.lower()}", **kwargs)


@pytest.fixture
def results() -> list[SearchResult]:
    return [
        _result("Cruise", price=120.0, rating=4.9),
        _result("Kayak", price=45.0, rating=None, featured=True),
        _result("Walk", price=20.0, rating=4.2),
        _result("Adventure", ResultType.CATEGORY),
        _result("Queenstown", ResultType.DESTINATION, featured=True),
    ]


class TestPriceBands:
    @pytest.mark.parametrize(
        "price,band,expected",
        [
            (25, "0-25", True),
            (25, "25-50", False),
            (50, "25-50", True),
            (100, "100+", False),
            (150, "100+", True),
            (0, "0-25", False),
            (None, "0-25", False),
        ],
    )
    def test_band_bounds(self, price, band, expected) -> None:
        assert in_price_band(price, band) is expected

    def test_unknown_band_rejected(self) -> None:
        with pytest.raises(ValidationError):
            in_price_band(10, "cheap")


class TestFilterResults:
    def test_all_keeps_everything(self, results) -> None:
        assert len(filter_results(results, "all")) == 5

    def test_type_filter(self, results) -> None:
        filtered = filter_results(results, "destination")
        assert [r.title for r in filtered] == ["Queenstown"]

    def test_price_filter_drops_unpriced_rows(self, results) -> None:
        filtered = filter_results(results, "all", "25-50")
        assert [r.title for r in filtered] == ["Kayak"]

    def test_unknown_type_rejected(self, results) -> None:
        with pytest.raises(ValidationError) as exc_info:
            filter_results(results, "hotel")
        assert exc_info.value.details["field"] == "type"

    def test_unknown_price_range_rejected_on_empty_input(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            filter_results([], "all", "bogus")
        assert exc_info.value.details["field"] == "price_range"


class TestSortResults:
    def test_relevance_keeps_input_order(self, results) -> None:
        assert sort_results(results, "relevance") == results

    def test_price_low_and_high(self, results) -> None:
        tours = filter_results(results, "experience")
        assert [r.title for r in sort_results(tours, "price-low")] == ["Walk", "Kayak", "Cruise"]
        assert [r.title for r in sort_results(tours, "price-high")] == ["Cruise", "Kayak", "Walk"]

    def test_rating_treats_missing_as_zero(self, results) -> None:
        tours = filter_results(results, "experience")
        assert [r.title for r in sort_results(tours, "rating")] == ["Cruise", "Walk", "Kayak"]

    def test_popular_puts_featured_first_stably(self, results) -> None:
        ordered = [r.title for r in sort_results(results, "popular")]
        assert ordered == ["Kayak", "Queenstown", "Cruise", "Walk", "Adventure"]

    def test_unknown_sort_rejected(self, results) -> None:
        with pytest.raises(ValidationError):
            sort_results(results, "newest")


def test_split_featured() -> None:
    rows = [SimpleNamespace(n=1, featured=True), SimpleNamespace(n=2, featured=False), SimpleNamespace(n=3)]

    featured, regular = split_featured(rows)

    assert [r.n for r in featured] == [1]
    assert [r.n for r in regular] == [2, 3]
