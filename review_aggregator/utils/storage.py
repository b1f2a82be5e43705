"""
Storage utility.

File I/O helpers for raw record batches and exported reports.
"""

import json
import os
import logging
from typing import Dict, List, Optional
from datetime import datetime

import pandas as pd

from review_aggregator.exceptions import ReportError
from review_aggregator.models.summary import DashboardView

logger = logging.getLogger(__name__)


def load_raw_records(filepath: str) -> Optional[List[Dict]]:
    """
    Load a raw record batch from a JSON file.

    Accepts either a bare list of records or the backend's
    `{"data": [...]}` envelope.

    Args:
        filepath: Path to the JSON file

    Returns:
        List of raw record dicts, or None if the file is missing or unreadable
    """
    if not os.path.exists(filepath):
        logger.warning(f"No record file found at {filepath}")
        return None

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load records from {filepath}: {e}")
        return None

    if isinstance(payload, dict):
        payload = payload.get("data") or []
    if not isinstance(payload, list):
        logger.error(f"Record file {filepath} does not contain a list of records")
        return None

    logger.debug(f"Loaded {len(payload)} raw records from {filepath}")
    return payload


class ReportWriter:
    """
    Writes aggregation reports under one output directory.

    Handles:
    - Per-source table (output/<name>.csv)
    - Summary and distribution (output/<name>_summary.json)
    """

    def __init__(self, output_dir: str):
        """
        Initialize report writer.

        Args:
            output_dir: Directory for report files (created if missing)
        """
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)
        logger.info(f"Initialized ReportWriter with output_dir={output_dir}")

    def build_table(self, records: tuple) -> pd.DataFrame:
        """Per-source table in batch order, one row per record."""
        return pd.DataFrame([r.to_row() for r in records])

    def write_table(self, records: tuple, name: str) -> str:
        """
        Save the per-source table as CSV.

        Returns:
            Path to the CSV file
        """
        filepath = os.path.join(self.output_dir, f"{name}.csv")
        df = self.build_table(records)

        try:
            df.to_csv(filepath, index=False)
        except OSError as e:
            logger.error(f"Failed to write table {filepath}: {e}")
            raise ReportError(f"Could not write {filepath}") from e

        logger.info(f"Saved {len(df)} rows to {filepath}")
        return filepath

    def write_summary(self, view: DashboardView, name: str) -> str:
        """
        Save summary, combined distribution and the filtered records as JSON.

        Returns:
            Path to the JSON file
        """
        filepath = os.path.join(self.output_dir, f"{name}_summary.json")
        report = view.to_dict()
        report["generated_at"] = datetime.utcnow().isoformat() + "Z"

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(report, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write summary {filepath}: {e}")
            raise ReportError(f"Could not write {filepath}") from e

        logger.info(f"Saved summary to {filepath}")
        return filepath
