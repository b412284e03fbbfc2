from sqlmodel import SQLModel, create_engine

from voice_upload import db_models  # noqa: F401  registers table metadata
from voice_upload.config import DatabaseConfig


def connect_args(config: DatabaseConfig) -> dict:
    """psycopg connection options; statements are cancelled server side past the timeout."""
    statement_timeout_ms = int(config.timeout_seconds * 1000)
    return {
        "connect_timeout": max(1, int(config.timeout_seconds)),
        "options": f"-c statement_timeout={statement_timeout_ms}",
    }


def get_engine(config: DatabaseConfig):
    return create_engine(
        config.url,
        pool_pre_ping=True,
        connect_args=connect_args(config),
    )


def init_db(engine):
    SQLModel.metadata.create_all(engine)
