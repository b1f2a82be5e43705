"""
Derived aggregate models.

Every instance is recomputed from the current batch; nothing here is
persisted or updated in place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class AggregateSummary:
    """Cross-source totals for one batch."""
    source_count: int = 0
    total_reviews: int = 0
    weighted_average_rating: float = 0.0
    simple_average_rating: float = 0.0  # Unweighted mean of reported ratings
    rated_source_count: int = 0  # Sources contributing to the weighted mean
    weighted_average_exact: float = 0.0  # Unrounded weighted mean

    def to_dict(self) -> dict:
        return {
            "source_count": self.source_count,
            "total_reviews": self.total_reviews,
            "weighted_average_rating": self.weighted_average_rating,
            "simple_average_rating": self.simple_average_rating,
            "rated_source_count": self.rated_source_count,
            "weighted_average_exact": self.weighted_average_exact
        }


@dataclass(frozen=True)
class CombinedDistribution:
    """
    Combined five-bucket star histogram.

    `counts[i]` belongs to `stars[i]`; stars run 5 down to 1.
    """
    counts: Tuple[int, ...] = (0, 0, 0, 0, 0)
    stars: Tuple[int, ...] = (5, 4, 3, 2, 1)

    def __getitem__(self, star: int) -> int:
        return self.counts[self.stars.index(star)]

    def entries(self) -> List[Tuple[int, int]]:
        """(star, count) pairs in display order."""
        return list(zip(self.stars, self.counts))

    def as_dict(self) -> Dict[int, int]:
        return dict(self.entries())

    @property
    def total(self) -> int:
        return sum(self.counts)

    def to_dict(self) -> dict:
        return {str(star): count for star, count in self.entries()}


@dataclass(frozen=True)
class DashboardView:
    """
    Display-ready projection of the current batch and search term.

    `summary` and `distribution` cover the whole batch; `records` and
    `chart_rows` cover only the records matching `query`.
    """
    summary: AggregateSummary
    distribution: CombinedDistribution
    records: tuple = ()
    chart_rows: List[dict] = field(default_factory=list)
    duplicate_sources: List[str] = field(default_factory=list)
    query: str = ""

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "summary": self.summary.to_dict(),
            "distribution": self.distribution.to_dict(),
            "records": [r.to_dict() for r in self.records],
            "duplicate_sources": list(self.duplicate_sources)
        }
