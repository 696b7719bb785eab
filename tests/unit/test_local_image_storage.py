"""Unit tests for LocalImageStorage — token naming, round trip and path safety."""

import pytest

from rent_inspector.domain.exceptions import ImageNotFoundError
from rent_inspector.infrastructure.storage.local_image_storage import LocalImageStorage


@pytest.fixture
def storage(tmp_path) -> LocalImageStorage:
    return LocalImageStorage(tmp_path / "photos")


@pytest.mark.asyncio
async def test_save_then_load(storage):
    token = await storage.save_image(b"\xff\xd8jpeg-bytes")

    assert token.endswith(".jpg")
    assert "/" not in token
    assert storage.file_exists(token)
    assert await storage.load_image(token) == b"\xff\xd8jpeg-bytes"


@pytest.mark.asyncio
async def test_each_save_gets_a_new_token(storage):
    first = await storage.save_image(b"a")
    second = await storage.save_image(b"a")
    assert first != second


@pytest.mark.asyncio
async def test_delete_reports_whether_file_existed(storage):
    token = await storage.save_image(b"a")

    assert await storage.delete_image(token) is True
    assert await storage.delete_image(token) is False
    assert not storage.file_exists(token)


@pytest.mark.asyncio
async def test_load_missing_raises(storage):
    with pytest.raises(ImageNotFoundError):
        await storage.load_image("0f8fad5b-d9cb-469f-a165-70867728950e.jpg")


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["../secret.jpg", "sub/dir.jpg", "notes.txt", ""])
async def test_tokens_cannot_escape_photo_dir(storage, token):
    with pytest.raises(ImageNotFoundError):
        await storage.load_image(token)
    assert storage.file_exists(token) is False


def test_creates_photo_directory(tmp_path):
    target = tmp_path / "nested" / "photos"
    LocalImageStorage(target)
    assert target.is_dir()
