"""Domain models for the voice upload service."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel


class UploadedFile(BaseModel, frozen=True):
    """An audio upload staged on local disk for the duration of one request."""

    path: Path
    original_filename: str
    content_type: str
    size: int


class TranscriptionRecord(BaseModel, frozen=True):
    """Result of a processed upload, as written to the transcriptions table."""

    filename: str
    transcription: str
    file_url: str
    uploaded_at: datetime
