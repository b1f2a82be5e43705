"""
Exceptions raised outside the aggregation engine.

The engine itself is total over its input domain; only the I/O around it
(fetching a batch, writing reports) can fail.
"""


class ReviewAggregatorError(Exception):
    """Base class for all review aggregator errors."""


class ProviderError(ReviewAggregatorError):
    """
    The scraping backend could not deliver a batch.

    The message is user-facing and is shown as-is.
    """


class ReportError(ReviewAggregatorError):
    """A report could not be written to disk."""
