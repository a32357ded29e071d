"""Line-chart datasets: cumulative contributions against portfolio value."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from backend.core.projection import SeriesEntry


class ChartDataset(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    data: List[float]
    borderColor: str
    backgroundColor: str
    tension: float = 0.2
    fill: bool = False


class ChartData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    labels: List[str]
    datasets: List[ChartDataset]


def build_chart_data(series: Sequence[SeriesEntry]) -> ChartData:
    return ChartData(
        labels=[f"Mes {entry.month}" for entry in series],
        datasets=[
            ChartDataset(
                label="Total aportado acumulado",
                data=[entry.totalContributed for entry in series],
                borderColor="#f97316",
                backgroundColor="rgba(249, 115, 22, 0.2)",
            ),
            ChartDataset(
                label="Valor total de la cartera",
                data=[entry.totalValue for entry in series],
                borderColor="#2563eb",
                backgroundColor="rgba(37, 99, 235, 0.2)",
            ),
        ],
    )
