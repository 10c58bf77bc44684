"""API Pydantic models."""

from .responses import CategoryResponse, ErrorCodes, ErrorResponse, HealthResponse

__all__ = ["HealthResponse", "CategoryResponse", "ErrorResponse", "ErrorCodes"]
