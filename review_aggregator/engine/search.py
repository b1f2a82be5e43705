"""
Filter/Search Projector.

Case-insensitive substring search over a batch of records. Matching is
plain containment, not tokenized or fuzzy.
"""

from typing import Callable, Iterable, Optional


def matches(record, query: str, fields: Optional[Callable] = None) -> bool:
    """True if any searchable field contains `query`, ignoring case."""
    if not query or not query.strip():
        return True
    needle = query.casefold()
    get_fields = fields or (lambda r: r.search_fields)
    return any(needle in (text or "").casefold() for text in get_fields(record))


def filter_records(records: Iterable, query: Optional[str], fields: Optional[Callable] = None) -> tuple:
    """
    Project the records matching `query`, preserving order.

    A blank or whitespace-only query returns every record.

    Args:
        records: Normalized records
        query: Free-text search term
        fields: Callable returning the searchable strings of a record;
            defaults to the record's own `search_fields`

    Returns:
        Tuple of matching records in their original order
    """
    records = tuple(records)
    if not query or not query.strip():
        return records
    return tuple(r for r in records if matches(r, query, fields))
