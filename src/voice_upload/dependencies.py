"""FastAPI dependency injection configuration."""

from functools import lru_cache

import assemblyai as aai
import urllib3
from minio import Minio
from sqlmodel import Session as DBSession

from voice_upload.config import AppConfig, load_config
from voice_upload.database import get_engine
from voice_upload.handlers import UploadHandler
from voice_upload.infrastructure import AssemblyAITranscriber, MinioStorage
from voice_upload.interfaces import TranscriptionService
from voice_upload.repositories import TranscriptionRepository


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return load_config()


@lru_cache(maxsize=1)
def get_engine_for_app():
    """Returns the process-wide database engine."""
    return get_engine(get_config().database)


@lru_cache(maxsize=1)
def get_storage() -> MinioStorage:
    """Returns the configured storage client."""
    cfg = get_config().storage
    timeout = urllib3.Timeout(connect=cfg.timeout_seconds, read=cfg.timeout_seconds)
    client = Minio(
        endpoint=cfg.endpoint,
        access_key=cfg.user,
        secret_key=cfg.password,
        secure=cfg.secure,
        http_client=urllib3.PoolManager(timeout=timeout),
    )
    return MinioStorage(client, cfg.bucket_name)


@lru_cache(maxsize=1)
def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    cfg = get_config().assemblyai
    aai.settings.api_key = cfg.api_key
    aai.settings.http_timeout = cfg.timeout_seconds
    aai_config = aai.TranscriptionConfig(language_code=cfg.language_code)
    return AssemblyAITranscriber(aai.Transcriber(config=aai_config))


@lru_cache(maxsize=1)
def get_repository() -> TranscriptionRepository:
    """Returns the transcription repository bound to the app engine."""
    engine = get_engine_for_app()
    return TranscriptionRepository(lambda: DBSession(engine))


def get_upload_handler() -> UploadHandler:
    """Returns an UploadHandler wired to the process-wide clients."""
    config = get_config()
    return UploadHandler(
        get_transcription_service(),
        get_storage(),
        get_repository(),
        bucket_name=config.storage.bucket_name,
        public_base_url=config.storage.public_base_url,
        transcription_timeout=config.assemblyai.timeout_seconds,
        storage_timeout=config.storage.timeout_seconds,
        database_timeout=config.database.timeout_seconds,
    )
