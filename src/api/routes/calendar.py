"""Calendar feed and course catalog endpoints."""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from api.dependencies import get_fetcher
from api.logging import RequestLog, log_request
from api.models.responses import CategoryResponse, ErrorCodes
from core.config import CALENDAR_FILENAME, CALENDAR_MEDIA_TYPE, REQUEST_LOG_ENABLED
from models.semester import Semester
from services.calendar import build_calendar
from services.schedule import ScheduleFetcher
from services.selection import collect_categories, select_events

router = APIRouter()


def client_ip(request: Request) -> str:
    """First X-Forwarded-For hop behind a proxy, otherwise the peer address."""
    first_hop = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.client.host if request.client else "unknown"


def write_log(request_log: RequestLog, start_time: float) -> None:
    """Finish and store a request log entry. Never raises."""
    request_log.processing_time_ms = int((time.time() - start_time) * 1000)
    if not REQUEST_LOG_ENABLED:
        return
    try:
        log_request(request_log)
    except Exception as e:
        # Don't fail the request if logging fails
        print(f"  Request log write failed: {e}")


@router.get("/calendar")
async def get_calendar(
    request: Request,
    winter_semester: bool,
    year: int,
    curses: Annotated[list[str], Query(description="Course names to include")] = [],
    fetcher: ScheduleFetcher = Depends(get_fetcher),
):
    """
    iCalendar feed with the events of the selected courses.

    Upstream problems degrade to an empty calendar rather than an error.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/calendar",
        method="GET",
        client_ip=client_ip(request),
        year=year,
        winter_semester=winter_semester,
        courses_requested=len(curses),
    )

    try:
        semester = Semester(year=year, is_winter=winter_semester)
        events = await select_events(fetcher, semester, curses)
        body = build_calendar(events)

        request_log.status_code = 200
        request_log.items_returned = len(events)

        return Response(
            content=body,
            media_type=CALENDAR_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{CALENDAR_FILENAME}"'},
        )

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        raise

    finally:
        write_log(request_log, start_time)


@router.get("/eventCategories", response_model=list[CategoryResponse])
async def get_event_categories(
    request: Request,
    winter_semester: bool,
    year: int,
    fetcher: ScheduleFetcher = Depends(get_fetcher),
):
    """Distinct non-holiday course names per track, in track order."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/eventCategories",
        method="GET",
        client_ip=client_ip(request),
        year=year,
        winter_semester=winter_semester,
    )

    try:
        semester = Semester(year=year, is_winter=winter_semester)
        categories = await collect_categories(fetcher, semester)

        request_log.status_code = 200
        request_log.items_returned = len(categories)

        return [CategoryResponse.from_categories(c) for c in categories]

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        raise

    finally:
        write_log(request_log, start_time)
