"""Pydantic response models for API endpoints."""

from pydantic import BaseModel

from models.events import EventCategories


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy"
    version: str
    cached_entries: int
    timestamp: str  # ISO 8601 UTC


class CategoryResponse(BaseModel):
    """Course names offered in one track."""

    name: str
    curses: list[str]

    @classmethod
    def from_categories(cls, categories: EventCategories) -> "CategoryResponse":
        return cls(name=categories.track_label, curses=sorted(categories.course_names))


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
