"""
Summary Aggregator.

Computes review totals and the review-weighted overall rating of a batch.
"""

import logging
from fractions import Fraction
from typing import Iterable

from review_aggregator.models.summary import AggregateSummary
import config.settings as settings

logger = logging.getLogger(__name__)


def summarize(records: Iterable) -> AggregateSummary:
    """
    Aggregate a batch of normalized records.

    The weighted rating is sum(rating * count) / sum(count) over records
    that report a rating and have count > 0. It is 0 when that sum of
    counts is 0. The sums are exact, so counts of any size are accepted.

    `weighted_average_exact` keeps the unrounded mean, which always lies
    between the lowest and highest contributing rating.
    `weighted_average_rating` is the same value rounded to two decimals
    for display, so it may sit up to 0.005 outside that range.

    Args:
        records: Normalized records exposing `rating` and `review_count`

    Returns:
        AggregateSummary
    """
    source_count = 0
    total_reviews = 0
    weighted_sum = Fraction(0)
    weight = 0
    rated_source_count = 0
    reported_ratings = []

    for record in records:
        source_count += 1
        count = record.review_count
        total_reviews += count

        if record.rating is None:
            continue
        reported_ratings.append(record.rating)

        if count > 0:
            weighted_sum += Fraction(record.rating) * count
            weight += count
            rated_source_count += 1

    weighted_average = float(weighted_sum / weight) if weight else 0.0
    simple_average = sum(reported_ratings) / len(reported_ratings) if reported_ratings else 0.0

    logger.debug(
        f"Summarized {source_count} sources: {total_reviews} reviews, "
        f"weighted rating {weighted_average:.4f}"
    )

    return AggregateSummary(
        source_count=source_count,
        total_reviews=total_reviews,
        weighted_average_rating=round(weighted_average, settings.RATING_DECIMALS),
        simple_average_rating=round(simple_average, settings.RATING_DECIMALS),
        rated_source_count=rated_source_count,
        weighted_average_exact=weighted_average
    )
