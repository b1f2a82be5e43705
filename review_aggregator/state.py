"""
Dashboard state.

Holds the latest fetched batch and the current search term, and derives
the display view from them on demand.
"""

import logging
from collections import Counter
from typing import Any, Iterable, List, Optional

from review_aggregator.engine.distribution import combine_distributions
from review_aggregator.engine.normalization import normalize_batch
from review_aggregator.engine.search import filter_records
from review_aggregator.engine.summary import summarize
from review_aggregator.models.summary import DashboardView

logger = logging.getLogger(__name__)


class DashboardState:
    """
    Explicit state-and-recompute holder for the dashboard.

    The batch is an immutable tuple replaced wholesale by `load_batch`;
    `view()` re-derives everything from the batch and query on each call.
    """

    def __init__(self, kind: str = "source"):
        """
        Args:
            kind: Record schema of the batches this state will hold
                ("source" or "business")
        """
        self.kind = kind
        self._records: tuple = ()
        self._query: str = ""

    @property
    def records(self) -> tuple:
        return self._records

    @property
    def query(self) -> str:
        return self._query

    def load_batch(self, raw_records: Optional[Iterable[Any]]) -> tuple:
        """Replace the current batch with a freshly normalized one."""
        self._records = normalize_batch(raw_records, kind=self.kind)
        logger.info(f"Loaded batch of {len(self._records)} {self.kind} records")
        return self._records

    def clear(self) -> None:
        """Drop the current batch (e.g. before a new fetch or after a failure)."""
        self._records = ()

    def set_query(self, query: Optional[str]) -> None:
        self._query = query or ""

    def view(self) -> DashboardView:
        """Recompute the display view from the current batch and query."""
        records = self._records
        filtered = filter_records(records, self._query)

        duplicates = self._duplicate_labels(records)
        if duplicates:
            logger.debug(f"Duplicate source labels in batch: {', '.join(duplicates)}")

        return DashboardView(
            summary=summarize(records),
            distribution=combine_distributions(records),
            records=filtered,
            chart_rows=[
                {"name": r.label, "Overall Rating": r.rating}
                for r in filtered
            ],
            duplicate_sources=duplicates,
            query=self._query
        )

    @staticmethod
    def _duplicate_labels(records: tuple) -> List[str]:
        counts = Counter(r.label for r in records)
        return sorted(label for label, n in counts.items() if n > 1)
