"""SQLite request logging for API."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from core.config import DB_PATH
from core.database import create_schema, get_connection


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    year: int | None = None
    winter_semester: bool | None = None
    courses_requested: int | None = None
    items_returned: int | None = None  # events or tracks, depending on endpoint
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0


def log_request(log: RequestLog, db_path: Path = DB_PATH) -> None:
    """Write request log to SQLite database."""
    conn = get_connection(db_path)
    try:
        create_schema(conn)
        conn.execute(
            """
            INSERT INTO api_requests (
                request_id, timestamp, endpoint, method, client_ip,
                year, winter_semester, courses_requested, items_returned,
                status_code, error_code, error_message, processing_time_ms
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                log.request_id,
                log.timestamp,
                log.endpoint,
                log.method,
                log.client_ip,
                log.year,
                log.winter_semester,
                log.courses_requested,
                log.items_returned,
                log.status_code,
                log.error_code,
                log.error_message,
                log.processing_time_ms,
            ),
        )
        conn.commit()
    finally:
        conn.close()
