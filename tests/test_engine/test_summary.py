"""
Unit tests for the Summary Aggregator.
"""

import pytest
from review_aggregator.engine.normalization import normalize_batch
from review_aggregator.engine.summary import summarize


def test_three_source_scenario():
    """Test counts and weighted rating for the reference batch."""
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4, "count": 100, "distribution": {"5": 60, "4": 40}},
        {"source": "B", "rating": 5, "count": 50, "distribution": {"5": 50}},
        {"source": "C"},
    ]))

    assert summary.source_count == 3
    assert summary.total_reviews == 150
    assert summary.weighted_average_rating == 4.33
    assert summary.rated_source_count == 2


def test_empty_batch():
    summary = summarize(())
    assert summary.source_count == 0
    assert summary.total_reviews == 0
    assert summary.weighted_average_rating == 0


def test_no_reviews_gives_zero_rating():
    """Test zero denominator yields 0 rather than an error."""
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4.8, "count": 0},
        {"source": "B", "rating": 3.1},
    ]))

    assert summary.total_reviews == 0
    assert summary.weighted_average_rating == 0


def test_zero_count_rating_is_excluded():
    """Test a rated source with no reviews does not act as weight 1."""
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 1.0, "count": 0},
        {"source": "B", "rating": 4.0, "count": 10},
    ]))

    assert summary.weighted_average_rating == 4.0
    assert summary.source_count == 2


def test_missing_rating_does_not_dilute_average():
    """Test reviews without a rating count toward totals but not the mean."""
    summary = summarize(normalize_batch([
        {"source": "A", "count": 500},
        {"source": "B", "rating": 4.5, "count": 100},
    ]))

    assert summary.total_reviews == 600
    assert summary.weighted_average_rating == 4.5
    assert summary.rated_source_count == 1


def test_rounding_happens_once():
    """Test the weighted rating is rounded to two decimals at the end."""
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4.26, "count": 1},
        {"source": "B", "rating": 4.26, "count": 1},
        {"source": "C", "rating": 4.0, "count": 2},
    ]))
    # (4.26 + 4.26 + 4.0 * 2) / 4
    assert summary.weighted_average_rating == 4.13


def test_simple_average():
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4, "count": 100},
        {"source": "B", "rating": 5, "count": 50},
        {"source": "C", "rating": 3},
    ]))
    assert summary.simple_average_rating == 4.0


@pytest.mark.parametrize("batch", [
    [(4.2, 10), (3.9, 250), (4.8, 3)],
    [(1.0, 1), (5.0, 1_000_000)],
    [(2.5, 40), (2.5, 60)],
    [(0.0, 7), (4.4, 0), (3.3, 12)],
    [(4.336, 3)],
    [(4.336, 7), (4.338, 2)],
])
def test_weighted_average_is_bounded(batch):
    """Test the weighted mean stays within the contributing ratings."""
    records = normalize_batch([
        {"source": f"S{i}", "rating": rating, "count": count}
        for i, (rating, count) in enumerate(batch)
    ])
    contributing = [rating for rating, count in batch if count > 0]

    summary = summarize(records)

    assert min(contributing) <= summary.weighted_average_exact <= max(contributing)
    assert abs(summary.weighted_average_rating - summary.weighted_average_exact) <= 0.005 + 1e-9


def test_business_listings_are_weighted_by_review_count():
    summary = summarize(normalize_batch([
        {"name": "X", "rating": 4.0, "reviews": 30},
        {"name": "Y", "rating": 5.0, "reviews": 10},
    ], kind="business"))

    assert summary.total_reviews == 40
    assert summary.weighted_average_rating == 4.25


def test_duplicates_are_summed():
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4, "count": 10},
        {"source": "A", "rating": 2, "count": 10},
    ]))
    assert summary.source_count == 2
    assert summary.total_reviews == 20
    assert summary.weighted_average_rating == 3.0


def test_display_rating_is_rounded_exact_is_not():
    summary = summarize(normalize_batch([{"source": "A", "rating": 4.336, "count": 3}]))

    assert summary.weighted_average_rating == 4.34
    assert summary.weighted_average_exact == 4.336


def test_counts_beyond_float_range():
    """Test totals stay exact and the mean stays finite for huge counts."""
    summary = summarize(normalize_batch([
        {"source": "A", "rating": 4, "count": 10 ** 400},
        {"source": "B", "rating": 5, "count": 10 ** 400},
        {"source": "C", "rating": 1, "count": 2 ** 53 + 1},
    ]))

    assert summary.total_reviews == 2 * 10 ** 400 + 2 ** 53 + 1
    assert summary.weighted_average_rating == 4.5
