"""Concrete implementations of infrastructure interfaces."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .minio_storage import MinioStorage

__all__ = ["AssemblyAITranscriber", "MinioStorage"]
