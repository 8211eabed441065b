"""
Noteful API - Shared Response Schemas
=======================================

What:  Error and health payloads shared by every route module.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {"error": {"message": "Folder doesn't exist"}}
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
