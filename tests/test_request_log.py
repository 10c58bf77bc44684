"""Tests for the SQLite request log."""

import sqlite3

from api.logging import RequestLog, log_request


def test_log_request_creates_schema_and_inserts(tmp_path):
    db_path = tmp_path / "db" / "requests.db"
    log = RequestLog(
        endpoint="/calendar",
        method="GET",
        client_ip="127.0.0.1",
        year=2024,
        winter_semester=True,
        courses_requested=2,
        items_returned=5,
        status_code=200,
        processing_time_ms=12,
    )

    log_request(log, db_path=db_path)
    log_request(RequestLog(endpoint="/eventCategories", method="GET", status_code=200), db_path=db_path)

    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute(
            "SELECT request_id, endpoint, year, winter_semester, items_returned, status_code"
            " FROM api_requests ORDER BY id"
        ).fetchall()
    finally:
        conn.close()

    assert rows[0] == (log.request_id, "/calendar", 2024, 1, 5, 200)
    assert rows[1][1] == "/eventCategories"
    assert rows[1][2] is None
