"""
Review aggregation engine.

Pure, stateless transformations over a batch of source records:
- Normalizer (raw dict -> SourceRecord / BusinessListing)
- Distribution Combiner (five-bucket star histogram)
- Summary Aggregator (totals and review-weighted rating)
- Filter/Search Projector (case-insensitive substring search)
"""
