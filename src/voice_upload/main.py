"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voice_upload.database import init_db
from voice_upload.dependencies import get_config, get_engine_for_app, get_storage
from voice_upload.logging import setup_logging
from voice_upload.routes import health_router, upload_router

patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    Path(config.server.upload_dir).mkdir(parents=True, exist_ok=True)
    get_storage().ensure_bucket_exists()
    init_db(get_engine_for_app())
    logger.info(
        "Voice upload service started",
        extra={"port": config.server.port, "bucket": config.storage.bucket_name},
    )
    yield


def create_app() -> FastAPI:
    config = get_config()
    app = FastAPI(title="Voice Upload Service", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(upload_router)
    return app


app = create_app()


def run() -> None:
    """Serves the application on the configured port."""
    uvicorn.run(app, host="0.0.0.0", port=get_config().server.port, log_config=None)
