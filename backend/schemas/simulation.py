"""Data contracts for the simulation API."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from backend.core.projection import ProjectionSummary, SimulationParameters
from backend.domain.chart import ChartData
from backend.domain.formatting import Kpis
from backend.domain.table import TablePage

# Field-level messages shown next to each form input.
FIELD_MESSAGES: Dict[str, str] = {
    "initialCapital": "Introduce un número mayor o igual a 0.",
    "monthlyContribution": "Introduce un número mayor o igual a 0.",
    "grossAnnualReturn": "Introduce un número válido.",
    "annualFee": "Introduce una comisión mayor o igual a 0.",
    "annualInflation": "Introduce una inflación mayor o igual a 0.",
    "years": "La duración debe ser un entero entre 1 y 50.",
}


class SimulationRequest(SimulationParameters):
    """Validated inputs for a projection. Rejects anything the engine should never see."""

    model_config = ConfigDict(extra="forbid")

    initialCapital: float = Field(..., ge=0, strict=True, allow_inf_nan=False, description="Starting capital.")
    monthlyContribution: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Contribution added at the end of each month.",
    )
    grossAnnualReturn: float = Field(
        ...,
        strict=True,
        allow_inf_nan=False,
        description="Gross annual return as a percentage (e.g. 5 for 5%).",
    )
    annualFee: float = Field(..., ge=0, strict=True, allow_inf_nan=False, description="Annual TER as a percentage.")
    annualInflation: float = Field(..., ge=0, strict=True, allow_inf_nan=False, description="Annual inflation as a percentage.")
    years: int = Field(..., ge=1, le=50, strict=True, description="Duration in whole years.")


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Collapse a pydantic error list into one message per offending field."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        name = str(loc[0])
        if name in errors:
            continue
        errors[name] = FIELD_MESSAGES.get(name, error.get("msg", "Valor no válido."))
    return errors


class SimulationResponse(BaseModel):
    """What the page needs to render one projection."""

    summary: ProjectionSummary
    kpis: Kpis
    table: TablePage
    chart: ChartData


class ThemeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    theme: Literal["light", "dark"]


class ThemeResponse(BaseModel):
    theme: Optional[Literal["light", "dark"]] = None


class ParametersResponse(BaseModel):
    parameters: Optional[SimulationParameters] = None


class HealthResponse(BaseModel):
    status: str


__all__ = [
    "FIELD_MESSAGES",
    "SimulationRequest",
    "SimulationResponse",
    "ThemeRequest",
    "ThemeResponse",
    "ParametersResponse",
    "HealthResponse",
    "field_errors",
]
