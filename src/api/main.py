"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import calendar_router, health_router
from core.config import API_DEBUG, API_VERSION
from services.schedule import get_schedule_fetcher


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release the upstream connection pool
    await get_schedule_fetcher().aclose()


app = FastAPI(
    title="MATSE Timetable Calendar API",
    description="iCalendar feed and course catalog for the MATSE timetable",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)
app.include_router(health_router)
app.include_router(calendar_router)


def error_response(status_code: int, error: str, code: str, details: list[str]) -> JSONResponse:
    body = ErrorResponse(error=error, code=code, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed query parameters, e.g. a non-numeric year."""
    details = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid value')}"
        for error in exc.errors()
    ]
    return error_response(422, "Invalid query parameters", ErrorCodes.VALIDATION_ERROR, details)


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    return error_response(500, "Internal server error", ErrorCodes.INTERNAL_ERROR, [])


if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, reload=API_DEBUG)
