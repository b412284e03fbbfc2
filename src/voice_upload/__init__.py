"""Voice upload service: transcribes audio uploads and records the results."""

__version__ = "0.1.0"
