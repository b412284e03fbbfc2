"""Domain layer exports."""

from .models import TranscriptionRecord, UploadedFile
from .naming import build_object_name, build_public_url, safe_filename

__all__ = [
    "TranscriptionRecord",
    "UploadedFile",
    "build_object_name",
    "build_public_url",
    "safe_filename",
]
