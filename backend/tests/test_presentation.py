from __future__ import annotations

import math

from backend.core.projection import SeriesEntry
from backend.domain.chart import build_chart_data
from backend.domain.formatting import format_currency, format_number
from backend.domain.table import paginate_series


def make_series(months: int) -> list:
    return [
        SeriesEntry(month=m, totalContributed=100.0 * m, interestAccumulated=0.0, totalValue=100.0 * m)
        for m in range(1, months + 1)
    ]


def test_number_formatting_follows_spanish_grouping():
    assert format_number(0) == "0,00"
    assert format_number(999.999) == "1000,00"
    assert format_number(1234.5) == "1234,50"
    assert format_number(12345.678) == "12.345,68"
    assert format_number(1234567.1) == "1.234.567,10"
    assert format_number(-25000) == "-25.000,00"
    assert format_number(math.inf) == ""
    assert format_number(math.nan) == ""


def test_currency_formatting_marks_missing_values():
    assert format_currency(3400) == "3400,00 €"
    assert format_currency(math.inf) == "—"


def test_empty_series_has_no_pages():
    page = paginate_series([])

    assert page.items == []
    assert page.page == 1
    assert page.totalPages == 1
    assert page.hasNext is False
    assert page.hasPrevious is False
    assert page.label == "Página 0 / 0"


def test_pages_cover_every_month_once():
    series = make_series(120)
    months = []
    for number in range(1, 4):
        months.extend(entry.month for entry in paginate_series(series, page=number).items)

    assert months == list(range(1, 121))
    assert paginate_series(series, page=3).label == "Página 3 / 3"


def test_chart_tracks_contributions_and_value():
    chart = build_chart_data(make_series(3))

    assert chart.labels == ["Mes 1", "Mes 2", "Mes 3"]
    contributed, value = chart.datasets
    assert contributed.data == [100.0, 200.0, 300.0]
    assert contributed.borderColor == "#f97316"
    assert value.data == [100.0, 200.0, 300.0]
    assert value.borderColor == "#2563eb"
