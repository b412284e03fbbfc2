"""Response models for the voice upload API."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Response returned after a successful upload."""

    message: str
    transcription: str
    file_url: str


class ErrorResponse(BaseModel):
    """Response returned when an upload is rejected or fails."""

    error: str


class HealthResponse(BaseModel):
    status: str
