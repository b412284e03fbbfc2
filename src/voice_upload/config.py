"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field

MAX_UPLOAD_BYTES = 25 * 1024 * 1024


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    language_code: str | None = None
    timeout_seconds: float = 300.0


class StorageConfig(BaseModel, frozen=True):
    """Object storage connection configuration."""

    endpoint: str
    user: str
    password: str
    secure: bool = False
    bucket_name: str = "audio"
    public_base_url: str = "http://localhost:9000"
    timeout_seconds: float = 60.0


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full PostgreSQL connection URL."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and upload handling configuration."""

    port: int = 4000
    upload_dir: str = "uploads"
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    cors_allow_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    storage: StorageConfig
    database: DatabaseConfig
    server: ServerConfig = ServerConfig()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> tuple[str, ...]:
    return tuple(
        item.strip() for item in os.getenv(name, default).split(",") if item.strip()
    )


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            language_code=os.getenv("ASSEMBLYAI_LANGUAGE_CODE") or None,
            timeout_seconds=float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "300")),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            secure=_env_flag("MINIO_SECURE"),
            bucket_name=os.getenv("STORAGE_BUCKET", "audio"),
            public_base_url=os.getenv("STORAGE_BASE_URL", "http://localhost:9000"),
            timeout_seconds=float(os.getenv("STORAGE_TIMEOUT_SECONDS", "60")),
        ),
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "transcriptions"),
            timeout_seconds=float(os.getenv("DATABASE_TIMEOUT_SECONDS", "30")),
        ),
        server=ServerConfig(
            port=int(os.getenv("PORT", "4000")),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES))),
            cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS", "*"),
        ),
    )
