"""Staging of multipart uploads onto local disk."""

import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from starlette.datastructures import UploadFile

from voice_upload.domain.models import UploadedFile
from voice_upload.exceptions import NoFileUploadedError, UploadTooLargeError
from voice_upload.logging import setup_logging

logger = setup_logging()

CHUNK_SIZE = 1024 * 1024
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@asynccontextmanager
async def stage_upload(
    upload: UploadFile | str | None,
    upload_dir: Path,
    max_bytes: int,
) -> AsyncIterator[UploadedFile]:
    """
    Copies an uploaded file into a uniquely named file under ``upload_dir``.

    The staged file is removed when the context exits, whatever the outcome.

    Raises:
        NoFileUploadedError: If no file was sent, the field is not a file, or
            the file is empty.
        UploadTooLargeError: If the file is larger than ``max_bytes``.
    """
    if not isinstance(upload, UploadFile):
        raise NoFileUploadedError("audio field is not a file" if upload else "no file in request")
    if not upload.filename:
        raise NoFileUploadedError()

    upload_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(dir=upload_dir, prefix="upload-")
    path = Path(name)
    try:
        size = 0
        with os.fdopen(fd, "wb") as out:
            while chunk := await upload.read(CHUNK_SIZE):
                size += len(chunk)
                if size > max_bytes:
                    raise UploadTooLargeError(upload.filename, max_bytes)
                out.write(chunk)

        if size == 0:
            raise NoFileUploadedError("file is empty")

        logger.info(
            "Upload staged",
            extra={"file_name": upload.filename, "path": str(path), "size": size},
        )
        yield UploadedFile(
            path=path,
            original_filename=upload.filename,
            content_type=upload.content_type or DEFAULT_CONTENT_TYPE,
            size=size,
        )
    finally:
        path.unlink(missing_ok=True)
