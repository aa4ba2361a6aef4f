"""
Media Upload Endpoints.

Images, videos and audio files are stored in the hosted object storage; the
returned public URL is what posts and episodes reference.
"""

from __future__ import annotations

from fastapi import APIRouter, File, UploadFile, status

from unthink.core.models.domain import MediaBucket
from unthink.core.models.io import MediaUploadResult
from unthink.server.services.deps import CurrentUser, MediaServiceDep
from unthink.server.services.media import read_upload

router = APIRouter()


@router.post(
    "/{bucket}",
    response_model=MediaUploadResult,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Media",
    description="Upload a file to the images, videos or audio bucket.",
    response_description="Where the file was stored.",
    responses={
        413: {"description": "File larger than the bucket limit"},
        415: {"description": "File type not accepted by the bucket"},
        502: {"description": "Object storage rejected the upload"},
    },
)
async def upload_media(bucket: MediaBucket, user: CurrentUser, service: MediaServiceDep, file: UploadFile = File(...)):
    """
    Upload a media file.

    - **images**: ``image/*`` up to 5 MB.
    - **videos**: ``video/*`` up to 500 MB.
    - **audio**: ``audio/*`` up to 100 MB.
    """
    data = await read_upload(bucket, file)
    return await service.upload(bucket, data, filename=file.filename, content_type=file.content_type)
