"""Handler for processing uploaded audio files."""

import asyncio
from datetime import datetime, timezone
from typing import Callable

from voice_upload.domain import (
    TranscriptionRecord,
    UploadedFile,
    build_object_name,
    build_public_url,
)
from voice_upload.exceptions import (
    StorageDeleteError,
    StorageUploadError,
    TranscriptionError,
    TranscriptPersistenceError,
    TranscriptPersistenceTimeoutError,
)
from voice_upload.interfaces import StorageClient, TranscriptionService
from voice_upload.logging import setup_logging
from voice_upload.repositories import TranscriptionRepository

logger = setup_logging()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UploadHandler:
    """Orchestrates transcription, storage and persistence of one upload."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        storage: StorageClient,
        repository: TranscriptionRepository,
        *,
        bucket_name: str,
        public_base_url: str,
        transcription_timeout: float = 300.0,
        storage_timeout: float = 60.0,
        database_timeout: float = 30.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._transcription_service = transcription_service
        self._storage = storage
        self._repository = repository
        self._bucket_name = bucket_name
        self._public_base_url = public_base_url
        self._transcription_timeout = transcription_timeout
        self._storage_timeout = storage_timeout
        self._database_timeout = database_timeout
        self._clock = clock

    async def process(self, upload: UploadedFile) -> TranscriptionRecord:
        """
        Transcribes, stores and records an uploaded audio file.

        Steps run strictly in order and the first failure aborts the rest.
        If the database insert fails, the already stored object is removed.
        A timed out insert may still commit, so its object is kept.

        Args:
            upload: The staged upload.

        Returns:
            The persisted TranscriptionRecord.

        Raises:
            TranscriptionError: If transcription fails or times out.
            StorageUploadError: If the audio upload fails or times out.
            TranscriptPersistenceError: If the insert fails or times out.
        """
        logger.info(
            "Processing upload",
            extra={
                "file_name": upload.original_filename,
                "content_type": upload.content_type,
                "size": upload.size,
            },
        )

        transcript = await self._transcribe(upload)

        object_name = build_object_name(self._clock(), upload.original_filename)
        await self._store_audio(upload, object_name)

        record = TranscriptionRecord(
            filename=object_name,
            transcription=transcript,
            file_url=build_public_url(
                self._public_base_url, self._bucket_name, object_name
            ),
            uploaded_at=self._clock(),
        )

        try:
            await self._persist(record)
        except TranscriptPersistenceTimeoutError:
            logger.warning(
                "Stored audio kept, insert outcome unknown",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
            raise
        except TranscriptPersistenceError:
            await self._discard_stored_audio(object_name)
            raise

        logger.info(
            "Upload processed",
            extra={"object_name": object_name, "file_url": record.file_url},
        )
        return record

    async def _transcribe(self, upload: UploadedFile) -> str:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._transcription_service.transcribe, upload.path),
                timeout=self._transcription_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Transcription timed out",
                extra={
                    "file_name": upload.original_filename,
                    "timeout": self._transcription_timeout,
                },
            )
            raise TranscriptionError(upload.original_filename, e) from e

    async def _store_audio(self, upload: UploadedFile, object_name: str) -> None:
        def _upload() -> None:
            with open(upload.path, "rb") as data:
                self._storage.upload_file(
                    object_name=object_name,
                    data=data,
                    size=upload.size,
                    content_type=upload.content_type,
                )

        try:
            await asyncio.wait_for(
                asyncio.to_thread(_upload), timeout=self._storage_timeout
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Storage upload timed out",
                extra={"object_name": object_name, "timeout": self._storage_timeout},
            )
            raise StorageUploadError(object_name, e) from e
        except OSError as e:
            logger.exception(
                "Staged upload could not be read",
                extra={"object_name": object_name, "path": str(upload.path)},
            )
            raise StorageUploadError(object_name, e) from e

    async def _persist(self, record: TranscriptionRecord) -> None:
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._repository.save, record),
                timeout=self._database_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Transcription insert timed out",
                extra={"file_name": record.filename, "timeout": self._database_timeout},
            )
            raise TranscriptPersistenceTimeoutError(record.filename, e) from e

    async def _discard_stored_audio(self, object_name: str) -> None:
        try:
            await asyncio.wait_for(
                asyncio.to_thread(self._storage.delete_file, object_name),
                timeout=self._storage_timeout,
            )
            logger.info(
                "Removed stored audio after failed insert",
                extra={"object_name": object_name},
            )
        except (StorageDeleteError, asyncio.TimeoutError):
            logger.exception(
                "Stored audio left orphaned after failed insert",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
