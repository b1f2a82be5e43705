"""
Pipeline Orchestrator.

Coordinates one aggregation request: fetch → normalize → aggregate → export.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from review_aggregator.ingestion import ReviewProvider
from review_aggregator.models.summary import DashboardView
from review_aggregator.state import DashboardState
from review_aggregator.utils.storage import ReportWriter
import config.settings as settings

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    view: DashboardView
    table_path: str
    summary_path: str


class AggregationPipeline:
    """
    Orchestrates a single aggregation request.

    Coordinates:
    1. Fetch (or load) raw batch → 2. Replace dashboard state
    → 3. Apply search term → 4. Derive view → 5. Export reports
    """

    def __init__(
        self,
        api_url: str = settings.API_URL,
        output_dir: str = str(settings.OUTPUT_ROOT),
        kind: str = settings.DEFAULT_RECORD_KIND,
        use_mock_data: bool = settings.USE_MOCK_DATA,
        provider: Optional[ReviewProvider] = None
    ):
        """
        Initialize pipeline.

        Args:
            api_url: Base URL of the scraping backend
            output_dir: Directory for CSV/JSON reports
            kind: Record schema ("source" or "business")
            use_mock_data: Generate a synthetic batch instead of calling the backend
            provider: Pre-built provider client (overrides api_url/use_mock_data)
        """
        logger.info("Initializing aggregation pipeline...")

        self.provider = provider or ReviewProvider(
            api_url=api_url,
            timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
            use_mock_data=use_mock_data
        )
        self.state = DashboardState(kind=kind)
        self.writer = ReportWriter(output_dir)

    def run(
        self,
        urls: Optional[List[str]] = None,
        raw_records: Optional[List[Dict]] = None,
        query: str = "",
        report_name: str = settings.DEFAULT_REPORT_NAME
    ) -> PipelineResult:
        """
        Run one aggregation request.

        Args:
            urls: Listing URLs to fetch through the provider
            raw_records: Pre-fetched batch; skips the provider when given
            query: Search term applied to the per-source projection
            report_name: Base file name for exported reports

        Returns:
            PipelineResult with the derived view and report paths

        Raises:
            ProviderError: The backend could not deliver a batch
        """
        if raw_records is None:
            self.state.clear()
            raw_records = self.provider.fetch(urls or [])

        self.state.load_batch(raw_records)
        self.state.set_query(query)
        view = self.state.view()

        summary = view.summary
        logger.info(
            f"Aggregated {summary.source_count} sources, {summary.total_reviews} reviews, "
            f"weighted rating {summary.weighted_average_rating}"
        )
        if view.duplicate_sources:
            logger.warning(f"Duplicate sources summed into totals: {', '.join(view.duplicate_sources)}")
        if query:
            logger.info(f"Search '{query}' matched {len(view.records)}/{len(self.state.records)} records")

        table_path = self.writer.write_table(view.records, report_name)
        summary_path = self.writer.write_summary(view, report_name)

        return PipelineResult(view=view, table_path=table_path, summary_path=summary_path)
