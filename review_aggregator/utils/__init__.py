"""
Utility modules for the Review Aggregator.

Cross-cutting concerns:
- Storage: Batch loading and report export
- Formatting: Console rendering of the dashboard view
"""
