"""
Source record data models.

One record per scraped source (hotel-review variant) or per business
(listing variant). Both expose the same read-only surface so the engine can
combine, aggregate and search them without knowing which variant it holds.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ReviewSnippet:
    """A single review excerpt shown under a source."""
    rating: Optional[float] = None
    snippet: Optional[str] = None

    def to_dict(self) -> dict:
        return {"rating": self.rating, "snippet": self.snippet}


@dataclass(frozen=True)
class SourceRecord:
    """
    Canonical per-source review summary.
    Output of the SourceRecord normalizer; every field is always present.
    """
    source: str  # Identifying label (e.g. "Booking.com")
    rating: Optional[float] = None  # 0-5, None when the source reported none
    count: int = 0  # Number of reviews backing the rating
    distribution: Dict[int, int] = field(default_factory=dict)  # star -> count
    reviews: Tuple[ReviewSnippet, ...] = ()

    @property
    def label(self) -> str:
        return self.source

    @property
    def review_count(self) -> int:
        return self.count

    @property
    def search_fields(self) -> Tuple[str, ...]:
        return (self.source,)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "source": self.source,
            "rating": self.rating,
            "count": self.count,
            "distribution": {str(star): n for star, n in sorted(self.distribution.items())},
            "reviews": [r.to_dict() for r in self.reviews]
        }

    def to_row(self) -> dict:
        """Flat row for the per-source report table."""
        row = {
            "Source": self.source,
            "Rating": self.rating,
            "Reviews": self.count,
        }
        for star in (5, 4, 3, 2, 1):
            row[f"{star} Star"] = self.distribution.get(star, 0)
        row["Snippets"] = len(self.reviews)
        return row


@dataclass(frozen=True)
class BusinessListing:
    """
    A scraped business listing (maps-style result).

    `reviews` is the review count reported by the listing, not a list of
    snippets. Listings carry no star histogram.
    """
    name: str
    category: str = ""
    address: str = ""
    rating: Optional[float] = None
    reviews: int = 0
    website: str = ""
    phone: str = ""
    price_level: str = ""
    hours: str = ""
    service_options: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def label(self) -> str:
        return self.name

    @property
    def review_count(self) -> int:
        return self.reviews

    @property
    def distribution(self) -> Dict[int, int]:
        return {}

    @property
    def search_fields(self) -> Tuple[str, ...]:
        return (self.name, self.category)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict using the provider's field names."""
        return {
            "name": self.name,
            "category": self.category,
            "address": self.address,
            "rating": self.rating,
            "reviews": self.reviews,
            "website": self.website,
            "phone": self.phone,
            "priceLevel": self.price_level,
            "hours": self.hours,
            "serviceOptions": self.service_options,
            "latitude": self.latitude,
            "longitude": self.longitude
        }

    def to_row(self) -> dict:
        return {
            "Name": self.name,
            "Category": self.category,
            "Address": self.address,
            "Rating": self.rating,
            "Reviews": self.reviews,
            "Website": self.website,
            "Phone": self.phone,
            "Price Level": self.price_level,
            "Hours": self.hours,
            "Service Options": self.service_options,
            "Latitude": self.latitude,
            "Longitude": self.longitude,
        }
