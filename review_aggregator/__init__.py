"""
Review Aggregator.

Consolidates per-source hotel and business review summaries into one
weighted rating, a combined star histogram and a searchable source list.
"""

__version__ = "0.1.0"
