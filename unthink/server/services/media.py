"""
Media Service.

Validates uploads against the bucket rules (content type family and size
limit) and stores them through the hosted object storage.
"""

from __future__ import annotations

import mimetypes
import secrets
import time
from typing import Optional

from fastapi import UploadFile

from unthink.content.text import format_file_size
from unthink.core.errors import PayloadTooLargeError, UnsupportedMediaTypeError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import MediaBucket
from unthink.core.models.io import MediaUploadResult
from unthink.integrations import StorageClient

logger = get_logger(__name__)


def file_extension(filename: Optional[str], content_type: str) -> str:
    """Extension for a stored object, from the file name or else the content type."""
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[1].strip().lower()
        if ext:
            return ext
    guessed = mimetypes.guess_extension(content_type) or ""
    return guessed.lstrip(".") or "bin"


def check_upload(bucket: MediaBucket, content_type: Optional[str], size: int) -> str:
    """Validate an upload for ``bucket`` and return its content type.

    Raises:
        UnsupportedMediaTypeError: if the content type is not of the bucket's family
        PayloadTooLargeError: if the file exceeds the bucket limit
    """
    content_type = (content_type or "").lower()
    if not content_type.startswith(bucket.content_type_prefix):
        raise UnsupportedMediaTypeError(
            f"Bucket {bucket.value} only accepts {bucket.content_type_prefix}* files, got {content_type or 'unknown'}"
        )
    if size > bucket.max_bytes:
        raise PayloadTooLargeError(
            f"File is too large ({format_file_size(size)}); the limit is {format_file_size(bucket.max_bytes)}"
        )
    return content_type


async def read_upload(bucket: MediaBucket, file: UploadFile) -> bytes:
    """Read an uploaded file for ``bucket`` without buffering more than the bucket allows.

    The declared size and content type are checked before any byte is read, and
    at most one byte past the limit is read so that unsized uploads still fail.
    """
    check_upload(bucket, file.content_type, file.size or 0)
    data = await file.read(bucket.max_bytes + 1)
    check_upload(bucket, file.content_type, len(data))
    return data


def object_path(bucket: MediaBucket, ext: str) -> str:
    """Unique object path of the form ``{bucket}/{epoch_ms}-{random}.{ext}``."""
    return f"{bucket.value}/{int(time.time() * 1000)}-{secrets.token_hex(4)}.{ext}"


class MediaService:
    def __init__(self, storage: StorageClient) -> None:
        self.storage = storage

    async def upload(
        self, bucket: MediaBucket, data: bytes, *, filename: Optional[str], content_type: Optional[str]
    ) -> MediaUploadResult:
        content_type = check_upload(bucket, content_type, len(data))
        path = object_path(bucket, file_extension(filename, content_type))
        await self.storage.upload(bucket.value, path, data, content_type=content_type)
        logger.info(f"Media uploaded: bucket={bucket.value} path={path} size={len(data)}")
        return MediaUploadResult(
            url=self.storage.public_url(bucket.value, path),
            path=path,
            bucket=bucket.value,
            content_type=content_type,
            size=len(data),
            formatted_size=format_file_size(len(data)),
        )
