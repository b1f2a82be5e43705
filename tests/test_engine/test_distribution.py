"""
Unit tests for the Distribution Combiner.
"""

import itertools

import pytest
from review_aggregator.engine.distribution import combine_distributions
from review_aggregator.engine.normalization import normalize_batch


@pytest.fixture
def three_sources():
    return normalize_batch([
        {"source": "A", "rating": 4, "count": 100, "distribution": {"5": 60, "4": 40}},
        {"source": "B", "rating": 5, "count": 50, "distribution": {"5": 50}},
        {"source": "C"},
    ])


def test_combined_scenario(three_sources):
    """Test the three-source scenario sums per bucket."""
    combined = combine_distributions(three_sources)

    assert combined.entries() == [(5, 110), (4, 40), (3, 0), (2, 0), (1, 0)]
    assert combined[5] == 110
    assert combined.total == 150


def test_order_is_five_to_one():
    combined = combine_distributions(normalize_batch([
        {"source": "A", "distribution": {"1": 1, "2": 2, "3": 3, "4": 4, "5": 5}}
    ]))

    assert combined.stars == (5, 4, 3, 2, 1)
    assert combined.counts == (5, 4, 3, 2, 1)


def test_empty_batch():
    combined = combine_distributions(())
    assert combined.counts == (0, 0, 0, 0, 0)
    assert combined.total == 0


def test_unrecognized_buckets_ignored():
    """Test that stars outside 1..5 contribute nothing."""
    combined = combine_distributions(normalize_batch([
        {"source": "A", "distribution": {"0": 9, "6": 9, "5": 1, "bad": 9}}
    ]))

    assert combined.as_dict() == {5: 1, 4: 0, 3: 0, 2: 0, 1: 0}


def test_record_order_does_not_matter(three_sources):
    """Test the combiner is commutative over records."""
    expected = combine_distributions(three_sources)
    for perm in itertools.permutations(three_sources):
        assert combine_distributions(perm) == expected


def test_total_equals_sum_of_recognized_buckets():
    records = normalize_batch([
        {"source": "A", "distribution": {"5": 3, "3": 7, "9": 100}},
        {"source": "B", "distribution": {"1": 2, "2": 4}},
        {"source": "C", "distribution": {"4": 11}},
    ])

    expected = sum(
        n for r in records for star, n in r.distribution.items() if 1 <= star <= 5
    )
    assert combine_distributions(records).total == expected == 27


def test_duplicate_sources_are_both_counted():
    records = normalize_batch([
        {"source": "A", "distribution": {"5": 1}},
        {"source": "A", "distribution": {"5": 1}},
    ])
    assert combine_distributions(records)[5] == 2


def test_fresh_value_each_call(three_sources):
    first = combine_distributions(three_sources)
    second = combine_distributions(three_sources)
    assert first == second
    assert first is not second


def test_to_dict_uses_string_keys(three_sources):
    assert combine_distributions(three_sources).to_dict() == {
        "5": 110, "4": 40, "3": 0, "2": 0, "1": 0
    }
