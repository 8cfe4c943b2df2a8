"""Grouped count aggregation over enriched records.

This module computes the monthly summary, per-council and per-age-group
totals, and the month-only counts from one enriched record set. Every
output counts the same records, so each table sums to the total.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from core.logging_config import get_logger
from core.types import (
    AgeGroupTotalRow,
    AggregationResult,
    CouncilTotalRow,
    EnrichedRecord,
    MonthCountRow,
    MonthlySummaryRow,
)

_LOGGER = get_logger(__name__)


def aggregate_records(records: Sequence[EnrichedRecord]) -> AggregationResult:
    """Count records per group key and overall.

    Only observed key combinations appear; an empty input yields empty
    tables and a zero total.

    Args:
        records: Fully transformed record set.

    Returns:
        Aggregation outputs with rows sorted by key.
    """
    summary_counts = Counter(
        (record.month, record.council_area, record.age_group) for record in records
    )
    council_counts = Counter(record.council_area for record in records)
    age_group_counts = Counter(record.age_group for record in records)
    month_counts = Counter(record.month for record in records)
    result = AggregationResult(
        monthly_summary=tuple(
            MonthlySummaryRow(month=month, council_area=council_area, age_group=age_group, n=n)
            for (month, council_area, age_group), n in sorted(summary_counts.items())
        ),
        totals_by_council=tuple(
            CouncilTotalRow(council_area=council_area, total_deaths=count)
            for council_area, count in sorted(council_counts.items())
        ),
        totals_by_age_group=tuple(
            AgeGroupTotalRow(age_group=age_group, total_deaths_age=count)
            for age_group, count in sorted(age_group_counts.items())
        ),
        counts_by_month=tuple(
            MonthCountRow(month=month, n=count) for month, count in sorted(month_counts.items())
        ),
        total_records=len(records),
    )
    _LOGGER.info(
        "records_aggregated",
        total_records=result.total_records,
        summary_rows=len(result.monthly_summary),
        council_count=len(result.totals_by_council),
        month_count=len(result.counts_by_month),
    )
    return result
