"""Pagination of the monthly series for the results table."""

from __future__ import annotations

import math
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from backend.core.projection import SeriesEntry
from backend.domain.formatting import format_currency

DEFAULT_ROWS_PER_PAGE = 50


class TableRow(BaseModel):
    """One table line with every money cell already formatted for display."""

    model_config = ConfigDict(extra="forbid")

    month: int
    totalContributed: str
    interestAccumulated: str
    totalValue: str


class TablePage(BaseModel):
    model_config = ConfigDict(extra="forbid")

    items: List[SeriesEntry]
    rows: List[TableRow]
    page: int
    totalPages: int
    hasPrevious: bool
    hasNext: bool
    label: str


def paginate_series(
    series: Sequence[SeriesEntry],
    page: int = 1,
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
) -> TablePage:
    """
    Slice one page out of the series.

    The requested page is clamped into [1, total_pages], so out-of-range
    navigation lands on the first or last page instead of an empty one.
    """
    if rows_per_page < 1:
        raise ValueError("rows_per_page must be >= 1")

    total_pages = max(1, math.ceil(len(series) / rows_per_page))
    current = min(max(page, 1), total_pages)

    start = (current - 1) * rows_per_page
    items = list(series[start:start + rows_per_page])

    if series:
        label = f"Página {current} / {total_pages}"
    else:
        label = "Página 0 / 0"

    return TablePage(
        items=items,
        rows=[_format_row(entry) for entry in items],
        page=current,
        totalPages=total_pages,
        hasPrevious=current > 1,
        hasNext=bool(series) and current < total_pages,
        label=label,
    )


def _format_row(entry: SeriesEntry) -> TableRow:
    return TableRow(
        month=entry.month,
        totalContributed=format_currency(entry.totalContributed),
        interestAccumulated=format_currency(entry.interestAccumulated),
        totalValue=format_currency(entry.totalValue),
    )
