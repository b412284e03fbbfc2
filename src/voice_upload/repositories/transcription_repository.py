"""Repository for transcription record persistence."""

from voice_upload.db_models import Transcription
from voice_upload.domain.models import TranscriptionRecord
from voice_upload.exceptions import TranscriptPersistenceError
from voice_upload.logging import setup_logging

logger = setup_logging()


class TranscriptionRepository:
    """
    Handles database writes for transcription records.

    Each record is inserted once in its own transaction; rows are never
    updated or deleted by this service.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def save(self, record: TranscriptionRecord) -> int:
        """
        Inserts one transcription row.

        Args:
            record: The processed upload to persist.

        Returns:
            The generated row id.

        Raises:
            TranscriptPersistenceError: If the insert fails.
        """
        try:
            with self._session_factory() as db_session:
                row = Transcription(
                    filename=record.filename,
                    transcription=record.transcription,
                    file_url=record.file_url,
                    uploaded_at=record.uploaded_at,
                )
                db_session.add(row)
                db_session.commit()
                db_session.refresh(row)

                logger.info(
                    "Transcription persisted",
                    extra={"row_id": row.id, "file_name": record.filename},
                )
                return row.id

        except Exception as e:
            logger.exception(
                "Failed to persist transcription",
                extra={"file_name": record.filename},
            )
            raise TranscriptPersistenceError(record.filename, cause=e) from e
