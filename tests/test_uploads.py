import asyncio
import io

import pytest
from starlette.datastructures import Headers, UploadFile

from voice_upload.exceptions import NoFileUploadedError, UploadTooLargeError
from voice_upload.uploads import stage_upload


def _upload(content: bytes, filename: str = "note.wav", content_type: str | None = "audio/wav") -> UploadFile:
    headers = Headers({"content-type": content_type}) if content_type else None
    return UploadFile(file=io.BytesIO(content), filename=filename, headers=headers)


def test_staged_file_holds_upload_and_is_removed(tmp_path):
    seen = {}

    async def run():
        async with stage_upload(_upload(b"abc" * 10), tmp_path, 1024) as staged:
            seen["exists"] = staged.path.exists()
            seen["bytes"] = staged.path.read_bytes()
            seen["parent"] = staged.path.parent
            seen["staged"] = staged

    asyncio.run(run())

    assert seen["exists"] is True
    assert seen["bytes"] == b"abc" * 10
    assert seen["parent"] == tmp_path
    assert seen["staged"].size == 30
    assert seen["staged"].original_filename == "note.wav"
    assert seen["staged"].content_type == "audio/wav"
    assert list(tmp_path.iterdir()) == []


def test_staged_file_removed_when_body_raises(tmp_path):
    async def run():
        async with stage_upload(_upload(b"abc"), tmp_path, 1024):
            raise RuntimeError("downstream failure")

    with pytest.raises(RuntimeError):
        asyncio.run(run())

    assert list(tmp_path.iterdir()) == []


def test_missing_upload_is_rejected(tmp_path):
    async def run():
        async with stage_upload(None, tmp_path, 1024):
            pass

    with pytest.raises(NoFileUploadedError):
        asyncio.run(run())


def test_text_field_instead_of_file_is_rejected(tmp_path):
    async def run():
        async with stage_upload("not a file", tmp_path, 1024):
            pass

    with pytest.raises(NoFileUploadedError) as exc_info:
        asyncio.run(run())

    assert exc_info.value.reason == "audio field is not a file"
    assert list(tmp_path.iterdir()) == []


def test_empty_upload_is_rejected(tmp_path):
    async def run():
        async with stage_upload(_upload(b""), tmp_path, 1024):
            pass

    with pytest.raises(NoFileUploadedError):
        asyncio.run(run())

    assert list(tmp_path.iterdir()) == []


def test_upload_over_limit_is_rejected(tmp_path):
    async def run():
        async with stage_upload(_upload(b"x" * 11), tmp_path, 10):
            pass

    with pytest.raises(UploadTooLargeError) as exc_info:
        asyncio.run(run())

    assert exc_info.value.max_bytes == 10
    assert list(tmp_path.iterdir()) == []


def test_upload_at_limit_is_accepted(tmp_path):
    sizes = []

    async def run():
        async with stage_upload(_upload(b"x" * 10), tmp_path, 10) as staged:
            sizes.append(staged.size)

    asyncio.run(run())

    assert sizes == [10]


def test_missing_content_type_defaults_to_octet_stream(tmp_path):
    types = []

    async def run():
        async with stage_upload(_upload(b"abc", content_type=None), tmp_path, 1024) as staged:
            types.append(staged.content_type)

    asyncio.run(run())

    assert types == ["application/octet-stream"]


def test_upload_dir_is_created(tmp_path):
    target = tmp_path / "nested" / "uploads"

    async def run():
        async with stage_upload(_upload(b"abc"), target, 1024):
            pass

    asyncio.run(run())

    assert target.is_dir()
