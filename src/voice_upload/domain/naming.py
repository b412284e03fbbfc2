"""Object naming and public URL helpers."""

from datetime import datetime
from pathlib import PurePosixPath, PureWindowsPath

PUBLIC_OBJECT_PATH = "storage/v1/object/public"


def safe_filename(original_filename: str | None) -> str:
    """Strips directory components from a client supplied filename."""
    name = PureWindowsPath(PurePosixPath(original_filename or "").name).name
    return name or "upload"


def build_object_name(uploaded_at: datetime, original_filename: str) -> str:
    """Returns the storage key ``{epochMillis}-{filename}`` for an upload."""
    millis = int(uploaded_at.timestamp() * 1000)
    return f"{millis}-{safe_filename(original_filename)}"


def build_public_url(base_url: str, bucket_name: str, object_name: str) -> str:
    """
    Composes the public URL of a stored object.

    The path layout is fixed by the storage backend's public object scheme:
    ``{base}/storage/v1/object/public/{bucket}/{object}``. The object is not
    checked for reachability.
    """
    return f"{base_url.rstrip('/')}/{PUBLIC_OBJECT_PATH}/{bucket_name}/{object_name}"
