"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path) -> str:
        """
        Transcribes an audio file stored on local disk.

        Args:
            audio_path: Path to the audio file.

        Returns:
            The transcript text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
