"""CSV export of the full monthly series."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from backend.core.projection import SeriesEntry
from backend.domain.formatting import format_number

CSV_HEADER = ("Mes", "Aportación acumulada", "Intereses acumulados", "Valor total")
CSV_FILENAME = "investment-simulator.csv"
CSV_MIMETYPE = "text/csv; charset=utf-8"


def series_to_csv(series: Sequence[SeriesEntry]) -> str:
    """
    Render the series as CSV text.

    Amounts use es-ES formatting, so a value like "12.345,60" contains the
    delimiter and is quoted by the writer. No trailing newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for entry in series:
        writer.writerow(
            [
                entry.month,
                format_number(entry.totalContributed),
                format_number(entry.interestAccumulated),
                format_number(entry.totalValue),
            ]
        )
    return buffer.getvalue().rstrip("\n")
