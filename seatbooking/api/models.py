"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field


class BookSeatRequest(BaseModel):
    """Request model for booking a seat."""

    user_id: str = Field(..., min_length=1, description="Id of the user taking the seat")


class BookSeatResponse(BaseModel):
    """Response model for a successful booking."""

    success: bool
    message: str


class ParticipationResponse(BaseModel):
    """A single participation."""

    user_id: str
    webinar_id: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
