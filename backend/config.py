"""Environment-based application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_DB_PATH = Path(__file__).with_name("simulator.db")
DEFAULT_ROWS_PER_PAGE = 50
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


@dataclass(frozen=True)
class AppConfig:
    environment: str = "development"
    db_path: Path = DEFAULT_DB_PATH
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE

    @staticmethod
    def load() -> "AppConfig":
        """Read SIMULATOR_* variables, falling back to local-dev defaults."""
        env = os.getenv("SIMULATOR_ENV", "development")
        db_path = Path(os.getenv("SIMULATOR_DB_PATH", str(DEFAULT_DB_PATH)))
        debug_flag = os.getenv("SIMULATOR_DEBUG", "false").lower() == "true"
        log_level = os.getenv("SIMULATOR_LOG_LEVEL", "INFO")
        rows_per_page = max(1, int(os.getenv("SIMULATOR_ROWS_PER_PAGE", str(DEFAULT_ROWS_PER_PAGE))))

        raw_origins = os.getenv("SIMULATOR_CORS_ORIGINS", "")
        origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

        return AppConfig(
            environment=env,
            db_path=db_path,
            debug=debug_flag,
            log_level=log_level,
            cors_origins=origins or list(DEFAULT_CORS_ORIGINS),
            rows_per_page=rows_per_page,
        )
