"""
Unit tests for the Filter/Search Projector.
"""

import pytest
from review_aggregator.engine.normalization import normalize_batch
from review_aggregator.engine.search import (
    filter_records,
    matches,
)


@pytest.fixture
def sources():
    return normalize_batch([
        {"source": "Agoda"},
        {"source": "Booking"},
        {"source": "TripAdvisor"},
    ])


@pytest.fixture
def listings():
    return normalize_batch([
        {"name": "Grand Hotel", "category": "Hotel"},
        {"name": "Blue Door", "category": "Cafe"},
        {"name": "Hotel Cafe Royal", "category": "Restaurant"},
    ], kind="business")


def test_substring_match_preserves_order(sources):
    """Test the 'a' query keeps Agoda and TripAdvisor in order."""
    result = filter_records(sources, "a")
    assert [r.source for r in result] == ["Agoda", "TripAdvisor"]


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_blank_query_is_identity(sources, query):
    assert filter_records(sources, query) == sources


def test_case_insensitive(sources):
    assert filter_records(sources, "BOOK") == filter_records(sources, "book")


def test_idempotent(sources):
    once = filter_records(sources, "o")
    assert filter_records(once, "o") == once


def test_no_match(sources):
    assert filter_records(sources, "expedia") == ()


def test_not_fuzzy(sources):
    """Test that out-of-order letters do not match."""
    assert filter_records(sources, "Agdoa") == ()


def test_listing_searches_name_and_category(listings):
    assert [r.name for r in filter_records(listings, "hotel")] == [
        "Grand Hotel", "Hotel Cafe Royal"
    ]
    assert [r.name for r in filter_records(listings, "cafe")] == [
        "Blue Door", "Hotel Cafe Royal"
    ]


def test_custom_fields(listings):
    """Test that a key function narrows the searchable text."""
    result = filter_records(listings, "cafe", fields=lambda r: (r.category,))
    assert [r.name for r in result] == ["Blue Door"]


def test_accepts_generator(sources):
    result = filter_records((r for r in sources), "book")
    assert [r.source for r in result] == ["Booking"]


def test_linear_scan_over_large_batch():
    records = normalize_batch([{"source": f"Source {i}"} for i in range(3000)])
    result = filter_records(records, "source 29")
    assert result[0].source == "Source 29"
    assert len(result) == 111  # 29, 290-299, 2900-2999


def test_default_fields_come_from_the_record(sources, listings):
    """Test each record kind supplies its own searchable text."""
    assert matches(sources[0], "goda")
    assert not matches(sources[1], "goda")
    assert matches(listings[1], "caf")
    assert not matches(listings[0], "caf")
