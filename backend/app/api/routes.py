"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from backend import database
from backend.config import AppConfig
from backend.core.projection import SimulationParameters, generate_monthly_series
from backend.domain.chart import build_chart_data
from backend.domain.export import CSV_FILENAME, CSV_MIMETYPE, series_to_csv
from backend.domain.formatting import build_kpis
from backend.domain.table import paginate_series
from backend.logging_config import get_logger
from backend.schemas.simulation import (
    HealthResponse,
    ParametersResponse,
    SimulationRequest,
    SimulationResponse,
    ThemeRequest,
    ThemeResponse,
    field_errors,
)

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


def _config() -> AppConfig:
    return current_app.config["SIMULATOR"]


def _json(model: BaseModel) -> Response:
    """Serialize a response model; non-finite floats (overflowed projections) become null."""
    return current_app.response_class(model.model_dump_json(), mimetype="application/json")


def _read_simulation_request() -> SimulationRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return SimulationRequest.model_validate(raw_payload)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses with per-field messages."""
    errors = field_errors(exc)
    logger.info("rejected input for fields: %s", ", ".join(sorted(errors)))
    body = {"detail": exc.errors(include_url=False, include_context=False), "errors": errors}
    return jsonify(body), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.post("/simulate")
def simulate() -> Any:
    """Projection with KPIs, one page of the table, and the chart datasets."""
    payload = _read_simulation_request()
    page = request.args.get("page", default=1, type=int)
    rows_per_page = request.args.get("rowsPerPage", default=_config().rows_per_page, type=int)

    result = generate_monthly_series(payload)
    response = SimulationResponse(
        summary=result.summary,
        kpis=build_kpis(result.summary),
        table=paginate_series(result.series, page=page, rows_per_page=max(rows_per_page, 1)),
        chart=build_chart_data(result.series),
    )
    return _json(response)


@api_bp.post("/simulate/series")
def simulate_series() -> Any:
    """Raw engine output: the full monthly series and the summary."""
    payload = _read_simulation_request()
    result = generate_monthly_series(payload)
    return _json(result)


@api_bp.post("/simulate/export")
def export_csv() -> Any:
    payload = _read_simulation_request()
    result = generate_monthly_series(payload)
    return Response(
        series_to_csv(result.series),
        content_type=CSV_MIMETYPE,
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@api_bp.get("/parameters")
def get_parameters() -> Any:
    stored = database.load_parameters(_config().db_path)
    parameters = None
    if stored is not None:
        try:
            parameters = SimulationParameters.model_validate(stored)
        except ValidationError:
            logger.error("stored parameters do not match the expected fields, ignoring them")
    return jsonify(ParametersResponse(parameters=parameters).model_dump())


@api_bp.put("/parameters")
def put_parameters() -> Any:
    payload = _read_simulation_request()
    database.save_parameters(_config().db_path, payload.model_dump())
    logger.info("parameters saved")
    saved = SimulationParameters.model_validate(payload.model_dump())
    return jsonify(ParametersResponse(parameters=saved).model_dump())


@api_bp.delete("/parameters")
def delete_parameters() -> Any:
    database.clear_parameters(_config().db_path)
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/theme")
def get_theme() -> Any:
    stored = database.load_theme(_config().db_path)
    theme = stored if stored in ("light", "dark") else None
    return jsonify(ThemeResponse(theme=theme).model_dump())


@api_bp.put("/theme")
def put_theme() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ThemeRequest.model_validate(raw_payload)
    database.save_theme(_config().db_path, payload.theme)
    return jsonify(ThemeResponse(theme=payload.theme).model_dump())
