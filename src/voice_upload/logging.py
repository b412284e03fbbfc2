import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "voice-upload"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def build_formatter() -> JsonFormatter:
    return JsonFormatter(
        LOG_FORMAT,
        rename_fields={"asctime": "timestamp", "levelname": "level"},
        static_fields={"service": SERVICE_NAME},
    )


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Sends JSON logs for the upload service and Uvicorn to stdout.

    Every line carries the service name; trace_id and span_id are filled
    when ddtrace log injection is on. The level comes from ``LOG_LEVEL``
    unless given. Repeated calls replace the handler instead of stacking.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False

    return root_logger
