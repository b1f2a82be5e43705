"""
SourceRecord Normalizer.

Converts raw provider records of unknown completeness into canonical
models. Absence or malformation of any field is valid input: it resolves
to a neutral default and never raises.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from review_aggregator.models.source_record import BusinessListing, ReviewSnippet, SourceRecord
import config.settings as settings

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    """Parse a float (possibly infinite), or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        # Integers too large for a float
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _to_rating(value: Any) -> Optional[float]:
    rating = _to_float(value)
    if rating is None:
        return None
    return min(max(rating, 0.0), settings.MAX_RATING)


def _to_count(value: Any) -> int:
    """Parse a non-negative integer count; anything unusable is 0."""
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    number = _to_float(value)
    if number is None or math.isinf(number):
        return 0
    return max(int(number), 0)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _to_star(key: Any) -> Optional[int]:
    """Star keys arrive as "5" or 5; non-integral keys are dropped."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    number = _to_float(key)
    if number is None or math.isinf(number) or not number.is_integer():
        return None
    return int(number)


def _normalize_distribution(raw: Any) -> Dict[int, int]:
    if not isinstance(raw, Mapping):
        return {}

    distribution: Dict[int, int] = {}
    for key, value in raw.items():
        star = _to_star(key)
        if star is None:
            logger.debug(f"Dropping non-numeric distribution key {key!r}")
            continue
        distribution[star] = distribution.get(star, 0) + _to_count(value)
    return distribution


def _normalize_reviews(raw: Any) -> Tuple[ReviewSnippet, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()

    snippets = []
    for item in raw:
        if isinstance(item, Mapping):
            text = item.get("snippet")
            snippets.append(ReviewSnippet(
                rating=_to_rating(item.get("rating")),
                snippet=None if text is None else str(text)
            ))
        elif isinstance(item, str):
            snippets.append(ReviewSnippet(snippet=item))
    return tuple(snippets)


def normalize_record(raw: Any) -> SourceRecord:
    """
    Normalize one hotel-review source record.

    Args:
        raw: Provider dict with optional source, rating, count,
            distribution and reviews fields

    Returns:
        SourceRecord with every field defaulted
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Non-mapping record {type(raw).__name__} normalized to empty source")
        raw = {}

    return SourceRecord(
        source=_to_text(raw.get("source")),
        rating=_to_rating(raw.get("rating")),
        count=_to_count(raw.get("count")),
        distribution=_normalize_distribution(raw.get("distribution")),
        reviews=_normalize_reviews(raw.get("reviews"))
    )


def _pick(raw: Mapping, *keys: str) -> Any:
    """First present value among camelCase/snake_case spellings."""
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def normalize_listing(raw: Any) -> BusinessListing:
    """Normalize one business-listing record."""
    if not isinstance(raw, Mapping):
        raw = {}

    return BusinessListing(
        name=_to_text(raw.get("name")),
        category=_to_text(raw.get("category")),
        address=_to_text(raw.get("address")),
        rating=_to_rating(raw.get("rating")),
        reviews=_to_count(raw.get("reviews")),
        website=_to_text(raw.get("website")),
        phone=_to_text(raw.get("phone")),
        price_level=_to_text(_pick(raw, "priceLevel", "price_level")),
        hours=_to_text(raw.get("hours")),
        service_options=_to_text(_pick(raw, "serviceOptions", "service_options")),
        latitude=_to_float(raw.get("latitude")),
        longitude=_to_float(raw.get("longitude"))
    )


RECORD_NORMALIZERS: Dict[str, Callable[[Any], Any]] = {
    "source": normalize_record,
    "business": normalize_listing,
}


def normalize_batch(raw_records: Optional[Iterable[Any]], kind: str = "source") -> tuple:
    """
    Normalize a whole batch, preserving order.

    Args:
        raw_records: Raw provider records (None is an empty batch)
        kind: "source" for hotel-review records, "business" for listings

    Returns:
        Tuple of normalized records
    """
    normalizer = RECORD_NORMALIZERS[kind]
    if raw_records is None:
        return ()
    return tuple(normalizer(raw) for raw in raw_records)
