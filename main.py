"""
Review Aggregator - Multi-source Review Dashboard

CLI entry point for aggregating review summaries from several sources.
"""

import argparse
import logging
import sys

from review_aggregator.exceptions import ProviderError
from review_aggregator.ingestion import parse_url_list
from review_aggregator.orchestrator import AggregationPipeline
from review_aggregator.utils.formatting import render_view
from review_aggregator.utils.storage import load_raw_records
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Review Aggregator - consolidate reviews from multiple sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Aggregate two hotel pages through the scraping backend
  python main.py --url https://www.booking.com/hotel/in/the-leela-palace-chennai.html \\
                 --url https://www.tripadvisor.in/Hotel_Review-g304556-d3240217.html

  # Read URLs from a file and show only matching sources
  python main.py --urls-file hotels.txt --search booking

  # Aggregate an already scraped batch of business listings
  python main.py --input listings.json --kind business --search cafe

Note: Set REVIEW_API_URL to point at the scraping backend.
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--url",
        action="append",
        dest="urls",
        help="Listing URL to aggregate (repeatable)"
    )
    source.add_argument(
        "--urls-file",
        help="Text file with one URL per line"
    )
    source.add_argument(
        "--input",
        help="JSON file with raw records (list or {\"data\": [...]})"
    )

    parser.add_argument(
        "--search",
        default="",
        help="Only list records whose name contains this text (case-insensitive)"
    )

    parser.add_argument(
        "--kind",
        default=settings.DEFAULT_RECORD_KIND,
        choices=["source", "business"],
        help=f"Record schema (default: {settings.DEFAULT_RECORD_KIND})"
    )

    parser.add_argument(
        "--api-url",
        default=settings.API_URL,
        help=f"Scraping backend base URL (default: {settings.API_URL})"
    )

    parser.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--report-name",
        default=settings.DEFAULT_REPORT_NAME,
        help=f"Base name of report files (default: {settings.DEFAULT_REPORT_NAME})"
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        default=settings.USE_MOCK_DATA,
        help="Generate synthetic records instead of calling the backend"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    urls = None
    raw_records = None
    if args.input:
        raw_records = load_raw_records(args.input)
        if raw_records is None:
            logger.error(f"Could not read records from {args.input}")
            sys.exit(1)
    elif args.urls_file:
        try:
            with open(args.urls_file, "r", encoding="utf-8") as f:
                urls = parse_url_list(f.read())
        except OSError as e:
            logger.error(f"Could not read URL file {args.urls_file}: {e}")
            sys.exit(1)
    else:
        urls = args.urls

    print("=" * 60)
    print("Review Aggregator")
    print("=" * 60)
    if raw_records is not None:
        print(f"Input: {args.input} ({len(raw_records)} records)")
    else:
        print(f"URLs: {len(urls or [])}")
    print(f"Kind: {args.kind}")
    if args.search:
        print(f"Search: {args.search}")
    print(f"Mock Data: {args.mock}")
    print("=" * 60)
    print()

    try:
        pipeline = AggregationPipeline(
            api_url=args.api_url,
            output_dir=args.output_dir,
            kind=args.kind,
            use_mock_data=args.mock
        )

        result = pipeline.run(
            urls=urls,
            raw_records=raw_records,
            query=args.search,
            report_name=args.report_name
        )

        for line in render_view(result.view):
            print(line)

        print()
        print("=" * 60)
        print(f"Table: {result.table_path}")
        print(f"Summary: {result.summary_path}")
        print("=" * 60)

        logger.info("Review aggregation completed successfully")
        sys.exit(0)

    except ProviderError as e:
        logger.error(f"Fetch failed: {e}", exc_info=True)
        print(f"\n❌ {e}")
        sys.exit(1)

    except KeyboardInterrupt:
        logger.warning("Aggregation interrupted by user")
        print("\n⚠️  Aggregation interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Aggregation failed: {e}", exc_info=True)
        print(f"\n❌ Aggregation failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
