"""Audio upload endpoint."""

import asyncio
from contextlib import suppress
from pathlib import Path
from typing import Annotated, Awaitable, TypeVar

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from voice_upload.config import AppConfig
from voice_upload.dependencies import get_config, get_upload_handler
from voice_upload.exceptions import (
    ClientDisconnectedError,
    NoFileUploadedError,
    StorageUploadError,
    TranscriptionError,
    TranscriptPersistenceError,
    UploadTooLargeError,
)
from voice_upload.handlers import UploadHandler
from voice_upload.logging import setup_logging
from voice_upload.response_models import ErrorResponse, UploadResponse
from voice_upload.uploads import stage_upload

logger = setup_logging()

router = APIRouter(tags=["upload"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
HandlerDep = Annotated[UploadHandler, Depends(get_upload_handler)]

T = TypeVar("T")

DISCONNECT_POLL_SECONDS = 0.5
CLIENT_CLOSED_REQUEST = 499


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def _cancel_on_disconnect(
    request: Request, work: Awaitable[T], file_name: str
) -> T:
    """Awaits ``work``, cancelling it if the client disconnects first."""
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_SECONDS)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise ClientDisconnectedError(file_name)
    finally:
        if not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        CLIENT_CLOSED_REQUEST: {"model": ErrorResponse},
    },
)
async def upload_audio(
    request: Request,
    handler: HandlerDep,
    config: ConfigDep,
    audio: Annotated[UploadFile | str | None, File()] = None,
):
    """
    Transcribes an uploaded audio file and records the result.

    Stores the original audio in object storage and inserts the transcript
    with the public URL of the stored audio.
    """
    file_name = getattr(audio, "filename", None)
    logger.info("Received upload request", extra={"file_name": file_name})

    try:
        async with stage_upload(
            audio,
            Path(config.server.upload_dir),
            config.server.max_upload_bytes,
        ) as staged:
            record = await _cancel_on_disconnect(
                request, handler.process(staged), staged.original_filename
            )
    except NoFileUploadedError as e:
        logger.warning("Upload rejected", extra={"reason": e.reason})
        return _error(400, "No file uploaded")
    except UploadTooLargeError as e:
        logger.warning(
            "Upload rejected",
            extra={"file_name": e.file_name, "max_bytes": e.max_bytes},
        )
        return _error(413, "File too large")
    except TranscriptionError as e:
        logger.error(
            "Transcription error",
            extra={"file_name": e.file_name, "cause": repr(e.cause)},
        )
        return _error(500, "Transcription failed")
    except StorageUploadError as e:
        logger.error(
            "Storage error",
            extra={"object_name": e.object_name, "cause": repr(e.cause)},
        )
        return _error(500, "Failed to upload audio to storage")
    except TranscriptPersistenceError as e:
        logger.error(
            "Insert error",
            extra={"file_name": e.file_name, "cause": repr(e.cause)},
        )
        return _error(500, "Failed to save transcription")
    except ClientDisconnectedError as e:
        logger.warning("Client disconnected", extra={"file_name": e.file_name})
        return _error(CLIENT_CLOSED_REQUEST, "Client disconnected")
    except Exception:
        logger.exception("Unexpected error processing upload", extra={"file_name": file_name})
        return _error(500, "Transcription failed")

    return UploadResponse(
        message="Transcription successful",
        transcription=record.transcription,
        file_url=record.file_url,
    )
