"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import assemblyai as aai

from voice_upload.exceptions import TranscriptionError
from voice_upload.interfaces import TranscriptionService
from voice_upload.logging import setup_logging

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_path: Path) -> str:
        """
        Transcribes a local audio file using AssemblyAI.

        The SDK uploads the file, waits for the transcript and returns it.
        An error status reported by the API is treated the same as a raised
        exception.
        """
        file_name = Path(audio_path).name
        try:
            transcription = self._transcriber.transcribe(str(audio_path))

            if transcription.status == aai.TranscriptStatus.error:
                logger.error(
                    "AssemblyAI reported a transcription error",
                    extra={"file_name": file_name, "error": transcription.error},
                )
                raise TranscriptionError(file_name, Exception(transcription.error))

            if transcription.text is None:
                raise TranscriptionError(
                    file_name,
                    Exception("Transcription returned no text"),
                )

            logger.info(
                "Audio transcription successful",
                extra={"file_name": file_name, "characters": len(transcription.text)},
            )
            return transcription.text

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed",
                extra={"file_name": file_name},
            )
            raise TranscriptionError(file_name, e) from e
