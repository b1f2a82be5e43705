"""
Console formatting helpers for the CLI view.
"""

from typing import List, Optional

from review_aggregator.models.summary import CombinedDistribution, DashboardView

BAR_WIDTH = 30


def format_rating(rating: Optional[float]) -> str:
    """One decimal, or N/A when the source reported no rating."""
    return "N/A" if rating is None else f"{rating:.1f}"


def format_count(count: Optional[int]) -> str:
    return "N/A" if count is None else f"{count:,}"


def render_distribution(distribution: CombinedDistribution) -> List[str]:
    """Text histogram, one line per star from 5 down to 1."""
    peak = max(distribution.counts) if distribution.counts else 0
    lines = []
    for star, count in distribution.entries():
        width = round(BAR_WIDTH * count / peak) if peak else 0
        lines.append(f"{star}★ {'█' * width:<{BAR_WIDTH}} {count:,}")
    return lines


def render_view(view: DashboardView) -> List[str]:
    summary = view.summary
    lines = [
        f"Sources: {summary.source_count}",
        f"Total reviews: {summary.total_reviews:,}",
        f"Weighted rating: {summary.weighted_average_rating:.2f}/5",
        f"Average rating: {summary.simple_average_rating:.2f}/5",
        "",
        "Rating distribution:",
    ]
    lines.extend(render_distribution(view.distribution))
    lines.append("")

    if view.query:
        lines.append(f"Matching '{view.query}': {len(view.records)}")
    for record in view.records:
        lines.append(
            f"  {record.label:<30} {format_rating(record.rating)}/5  "
            f"{format_count(record.review_count)} reviews"
        )

    if view.duplicate_sources:
        lines.append("")
        lines.append(f"Warning: duplicate sources {', '.join(view.duplicate_sources)}")
    return lines
