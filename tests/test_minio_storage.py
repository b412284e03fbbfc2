import io

import pytest

from voice_upload.exceptions import StorageDeleteError, StorageUploadError
from voice_upload.infrastructure import MinioStorage


class DummyMinio:
    def __init__(self, exists: bool = True, error: Exception | None = None):
        self.exists = exists
        self.error = error
        self.put_calls: list[dict] = []
        self.removed: list[tuple[str, str]] = []
        self.made: list[str] = []

    def put_object(self, **kwargs):
        if self.error:
            raise self.error
        self.put_calls.append(kwargs)

    def remove_object(self, bucket_name, object_name):
        if self.error:
            raise self.error
        self.removed.append((bucket_name, object_name))

    def bucket_exists(self, bucket_name):
        return self.exists

    def make_bucket(self, bucket_name):
        self.made.append(bucket_name)


def test_upload_file_puts_object_in_bucket():
    client = DummyMinio()
    storage = MinioStorage(client, "audio")
    data = io.BytesIO(b"RIFF....")

    storage.upload_file("1714564800000-note.wav", data, 8, "audio/wav")

    assert client.put_calls == [
        {
            "bucket_name": "audio",
            "object_name": "1714564800000-note.wav",
            "data": data,
            "length": 8,
            "content_type": "audio/wav",
        }
    ]


def test_upload_failure_is_wrapped():
    cause = ConnectionError("connection refused")
    storage = MinioStorage(DummyMinio(error=cause), "audio")

    with pytest.raises(StorageUploadError) as exc_info:
        storage.upload_file("a.wav", io.BytesIO(b"x"), 1, "audio/wav")

    assert exc_info.value.object_name == "a.wav"
    assert exc_info.value.cause is cause
    assert exc_info.value.__cause__ is cause


def test_delete_file_removes_object():
    client = DummyMinio()
    MinioStorage(client, "audio").delete_file("a.wav")

    assert client.removed == [("audio", "a.wav")]


def test_delete_failure_is_wrapped():
    storage = MinioStorage(DummyMinio(error=ConnectionError("reset")), "audio")

    with pytest.raises(StorageDeleteError):
        storage.delete_file("a.wav")


def test_ensure_bucket_creates_missing_bucket():
    client = DummyMinio(exists=False)
    MinioStorage(client, "audio").ensure_bucket_exists()

    assert client.made == ["audio"]


def test_ensure_bucket_keeps_existing_bucket():
    client = DummyMinio(exists=True)
    MinioStorage(client, "audio").ensure_bucket_exists()

    assert client.made == []
