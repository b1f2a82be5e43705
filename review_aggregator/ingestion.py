"""
Review provider client.

Fetches a batch of per-source review records from the scraping backend.
Supports both the real HTTP backend and mock data for testing.
"""

import logging
import zlib
from typing import Dict, List, Optional
from urllib.parse import urlparse

import requests

from review_aggregator.exceptions import ProviderError
import config.settings as settings

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch data from the backend."
NO_URLS_MESSAGE = "Please enter at least one URL."


def parse_url_list(text: str) -> List[str]:
    """Split newline-separated URL input, dropping blank lines."""
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def source_name_from_url(url: str) -> str:
    """Readable source label from a URL, e.g. "Booking" for booking.com."""
    netloc = urlparse(url).netloc.lower()
    if netloc.startswith("www."):
        netloc = netloc[4:]
    name = netloc.split(".")[0] if netloc else url
    return name.capitalize()


class ReviewProvider:
    """
    Client for the `/scrape-reviews` endpoint.

    The backend either returns the full batch or the fetch fails as a
    whole; partial batches are never passed on.
    """

    def __init__(
        self,
        api_url: str = settings.API_URL,
        timeout_seconds: int = settings.REQUEST_TIMEOUT_SECONDS,
        use_mock_data: bool = False,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize provider client.

        Args:
            api_url: Base URL of the scraping backend
            timeout_seconds: HTTP request timeout
            use_mock_data: If True, generate a synthetic batch instead of calling the backend
            session: Optional requests session (reused across fetches)
        """
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.use_mock_data = use_mock_data
        self.session = session or requests.Session()

        if use_mock_data:
            logger.info("Initialized ReviewProvider in MOCK mode")
        else:
            logger.info(f"Initialized ReviewProvider for {self.api_url}")

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}{settings.SCRAPE_ENDPOINT}"

    def fetch(self, urls: List[str]) -> List[Dict]:
        """
        Fetch raw review records for the given listing URLs.

        Args:
            urls: Hotel/business page URLs; blank entries are ignored

        Returns:
            List of raw record dicts (possibly empty)

        Raises:
            ProviderError: No URLs given, or the backend failed
        """
        url_list = [u.strip() for u in urls if u and u.strip()]
        if not url_list:
            raise ProviderError(NO_URLS_MESSAGE)

        if self.use_mock_data:
            return self._generate_mock_records(url_list)

        logger.info(f"Requesting reviews for {len(url_list)} URLs from {self.endpoint}")
        try:
            response = self.session.post(
                self.endpoint,
                json={"urls": url_list},
                timeout=self.timeout_seconds
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Backend request failed: {e}")
            raise ProviderError(FETCH_FAILED_MESSAGE) from e
        except ValueError as e:
            logger.error(f"Backend returned invalid JSON: {e}")
            raise ProviderError(FETCH_FAILED_MESSAGE) from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if data is None:
            logger.warning("Backend response has no 'data' field, using empty batch")
            return []
        if not isinstance(data, list):
            logger.error(f"Backend 'data' field is {type(data).__name__}, expected list")
            raise ProviderError(FETCH_FAILED_MESSAGE)

        logger.info(f"Received {len(data)} records")
        return data

    def _generate_mock_records(self, urls: List[str]) -> List[Dict]:
        """
        Generate one synthetic record per URL.

        Values are derived from a checksum of the URL, so the same URL
        always yields the same record.
        """
        templates = [
            "Spotless rooms and friendly staff",
            "Great location, breakfast could be better",
            "Check-in took far too long",
            "Excellent pool and spa",
            "Noisy at night, thin walls",
        ]

        records = []
        for url in urls:
            seed = zlib.crc32(url.encode("utf-8"))
            distribution = {
                "5": 40 + seed % 200,
                "4": 20 + (seed >> 3) % 120,
                "3": (seed >> 6) % 60,
                "2": (seed >> 9) % 25,
                "1": (seed >> 12) % 20,
            }
            count = sum(distribution.values())
            rating = sum(int(star) * n for star, n in distribution.items()) / count

            reviews = []
            for i in range(settings.MOCK_REVIEWS_PER_SOURCE):
                reviews.append({
                    "rating": 5 - (seed + i) % 5,
                    "snippet": templates[(seed + i) % len(templates)]
                })

            records.append({
                "source": source_name_from_url(url),
                "rating": round(rating, 1),
                "count": count,
                "distribution": distribution,
                "reviews": reviews
            })

        logger.info(f"Generated {len(records)} mock records")
        return records
