"""sqlite key-value store for saved simulation parameters and the UI theme."""

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from backend.logging_config import get_logger

PARAMS_KEY = "investment-simulator-params"
THEME_KEY = "investment-simulator-theme"

logger = get_logger(__name__)


def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Path) -> None:
    conn = _connect(db_path)
    try:
        conn.execute(
            """
            create table if not exists preferences (
                key text primary key,
                value text not null,
                updated_at text not null
            )
            """
        )
        conn.commit()
    finally:
        conn.close()


def set_preference(db_path: Path, key: str, value: str) -> None:
    conn = _connect(db_path)
    try:
        conn.execute(
            """
            insert into preferences (key, value, updated_at)
            values (?, ?, ?)
            on conflict(key) do update set
                value = excluded.value,
                updated_at = excluded.updated_at
            """,
            (
                key,
                value,
                datetime.now(timezone.utc).isoformat(timespec="seconds"),
            ),
        )
        conn.commit()
    finally:
        conn.close()


def get_preference(db_path: Path, key: str) -> Optional[str]:
    conn = _connect(db_path)
    try:
        row = conn.execute(
            "select value from preferences where key = ?",
            (key,),
        ).fetchone()
        if row is None:
            return None
        return row["value"]
    finally:
        conn.close()


def delete_preference(db_path: Path, key: str) -> None:
    conn = _connect(db_path)
    try:
        conn.execute("delete from preferences where key = ?", (key,))
        conn.commit()
    finally:
        conn.close()


def save_parameters(db_path: Path, parameters: Dict[str, Any]) -> None:
    set_preference(db_path, PARAMS_KEY, json.dumps(parameters))


def load_parameters(db_path: Path) -> Optional[Dict[str, Any]]:
    """Stored parameters, or None when nothing usable is saved."""
    stored = get_preference(db_path, PARAMS_KEY)
    if stored is None:
        return None
    try:
        values = json.loads(stored)
    except json.JSONDecodeError:
        logger.error("stored parameters are not valid JSON, ignoring them")
        return None
    if not isinstance(values, dict):
        logger.error("stored parameters are not an object, ignoring them")
        return None
    return values


def clear_parameters(db_path: Path) -> None:
    delete_preference(db_path, PARAMS_KEY)


def save_theme(db_path: Path, theme: str) -> None:
    set_preference(db_path, THEME_KEY, theme)


def load_theme(db_path: Path) -> Optional[str]:
    return get_preference(db_path, THEME_KEY)
