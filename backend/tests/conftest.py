from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.config import AppConfig


@pytest.fixture()
def app_config(tmp_path) -> AppConfig:
    return AppConfig(environment="test", db_path=tmp_path / "simulator.db")


@pytest.fixture()
def client(app_config: AppConfig) -> FlaskClient:
    flask_app = create_app(app_config)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client
