"""Unit tests for upload validation and object key construction."""

import re

import pytest

from blog_api.application.services import UploadService, build_object_key
from blog_api.domain.exceptions import (
    StorageError,
    UnsupportedMediaTypeError,
    UploadTooLargeError,
    ValidationError,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def service(object_storage) -> UploadService:
    return UploadService(storage=object_storage, max_size_bytes=1024)


# ── build_object_key ────────────────────────────────────────────────

def test_key_uses_default_prefix_slug_suffix_and_extension():
    key = build_object_key(None, "My Holiday Photo.JPG")
    assert re.fullmatch(r"blog/my-holiday-photo-[0-9a-f]{12}\.JPG", key)


def test_key_honours_custom_prefix_and_strips_slashes():
    key = build_object_key("/covers/2024/", "cover.png")
    assert key.startswith("covers/2024/cover-")
    assert key.endswith(".png")


def test_blank_prefix_falls_back_to_default():
    assert build_object_key("   ", "a.gif").startswith("blog/a-")


def test_invalid_filename_characters_are_dropped():
    key = build_object_key(None, 'we<ird>:na"me?.webp')
    assert re.fullmatch(r"blog/we-ird-na-me-[0-9a-f]{12}\.webp", key)


def test_directory_components_are_ignored():
    assert build_object_key(None, "C:\\Users\\me\\photo.jpg").startswith("blog/photo-")
    assert build_object_key(None, "../../etc/photo.jpg").startswith("blog/photo-")


def test_empty_stem_becomes_file():
    assert re.fullmatch(r"blog/file-[0-9a-f]{12}\.png", build_object_key(None, "  .png"))


def test_same_filename_never_collides():
    assert build_object_key(None, "photo.jpg") != build_object_key(None, "photo.jpg")


# ── UploadService ───────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_upload_forwards_to_storage(service: UploadService, object_storage):
    stored = await service.upload(PNG_BYTES, "logo.png", "image/png")

    assert stored.key.startswith("blog/logo-")
    assert stored.url == f"https://cdn.test/{stored.key}"
    assert stored.size == len(PNG_BYTES)
    assert stored.content_type == "image/png"
    assert object_storage.uploads == [
        {"key": stored.key, "size": len(PNG_BYTES), "content_type": "image/png", "public": True}
    ]


@pytest.mark.asyncio
async def test_disallowed_content_type_never_reaches_storage(service: UploadService, object_storage):
    with pytest.raises(UnsupportedMediaTypeError):
        await service.upload(b"%PDF-1.7", "doc.pdf", "application/pdf")
    assert object_storage.uploads == []


@pytest.mark.asyncio
async def test_oversized_upload_never_reaches_storage(service: UploadService, object_storage):
    with pytest.raises(UploadTooLargeError):
        await service.upload(b"\x00" * 1025, "big.png", "image/png")
    assert object_storage.uploads == []


@pytest.mark.asyncio
async def test_empty_upload_is_rejected(service: UploadService):
    with pytest.raises(ValidationError):
        await service.upload(b"", "empty.png", "image/png")


@pytest.mark.asyncio
async def test_two_uploads_of_same_name_get_distinct_keys(service: UploadService, object_storage):
    first = await service.upload(PNG_BYTES, "photo.jpg", "image/jpeg")
    second = await service.upload(PNG_BYTES, "photo.jpg", "image/jpeg")
    assert first.key != second.key
    assert len({u["key"] for u in object_storage.uploads}) == 2


@pytest.mark.asyncio
async def test_storage_failure_propagates(object_storage):
    object_storage.fail = True
    service = UploadService(storage=object_storage)
    with pytest.raises(StorageError):
        await service.upload(PNG_BYTES, "photo.png", "image/png")


@pytest.mark.asyncio
async def test_delete_requires_key(service: UploadService, object_storage):
    with pytest.raises(ValidationError):
        await service.delete("  ")
    await service.delete("blog/photo-abc.jpg")
    assert object_storage.deleted == ["blog/photo-abc.jpg"]


# ── check (declared metadata, before the body is read) ──────────────

def test_check_rejects_declared_oversize(service: UploadService):
    with pytest.raises(UploadTooLargeError) as exc:
        service.check("image/png", 5 * 1024 * 1024)
    assert exc.value.size == 5 * 1024 * 1024
    assert exc.value.max_size == 1024


def test_check_rejects_declared_empty_and_bad_type(service: UploadService):
    with pytest.raises(ValidationError, match="No file uploaded"):
        service.check("image/png", 0)
    with pytest.raises(UnsupportedMediaTypeError):
        service.check("application/pdf", 10)


def test_check_defers_size_when_undeclared(service: UploadService):
    service.check("image/png", None)
