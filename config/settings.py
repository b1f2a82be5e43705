"""
Configuration settings for the Review Aggregator.

Centralized configuration for the provider client, the aggregation engine
and report export.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Scraping backend
API_URL = os.getenv("REVIEW_API_URL", os.getenv("NEXT_PUBLIC_API_URL", "http://localhost:8000"))
SCRAPE_ENDPOINT = "/scrape-reviews"
REQUEST_TIMEOUT_SECONDS = int(os.getenv("REVIEW_REQUEST_TIMEOUT", "60"))

# Ingestion
USE_MOCK_DATA = os.getenv("REVIEW_USE_MOCK_DATA", "false").lower() in ("1", "true", "yes")
MOCK_REVIEWS_PER_SOURCE = 3  # Snippets attached to each mock source

# Aggregation engine
STAR_BUCKETS = (5, 4, 3, 2, 1)  # Display order of the combined histogram
MAX_RATING = 5.0
RATING_DECIMALS = 2

# Record kinds accepted by the CLI
DEFAULT_RECORD_KIND = "source"  # "source" (hotel reviews) or "business" (listings)

# Report export
DEFAULT_REPORT_NAME = "reviews"

# Logging
LOG_LEVEL = os.getenv("REVIEW_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_aggregator.log"
