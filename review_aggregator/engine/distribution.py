"""
Distribution Combiner.

Merges per-source star histograms into one combined histogram.
"""

import logging
from typing import Iterable

from review_aggregator.models.summary import CombinedDistribution
import config.settings as settings

logger = logging.getLogger(__name__)


def combine_distributions(records: Iterable) -> CombinedDistribution:
    """
    Sum every record's star buckets into a five-entry histogram.

    Keys outside the recognized buckets are ignored. Output order is
    fixed at 5, 4, 3, 2, 1 regardless of input order.

    Args:
        records: Normalized records exposing a `distribution` mapping

    Returns:
        CombinedDistribution
    """
    buckets = {star: 0 for star in settings.STAR_BUCKETS}

    for record in records:
        for star, count in record.distribution.items():
            if star in buckets:
                buckets[star] += count
            else:
                logger.debug(f"Ignoring unrecognized star bucket {star!r} for {record.label!r}")

    return CombinedDistribution(
        counts=tuple(buckets[star] for star in settings.STAR_BUCKETS),
        stars=tuple(settings.STAR_BUCKETS)
    )
