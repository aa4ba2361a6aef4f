"""
Essay Endpoints.

Long-form essays and Sparks share these endpoints; ``post_type`` tells them
apart. Drafts are only visible to their author.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status

from unthink.core.logging_config import get_logger
from unthink.core.models.io import ArticleRead, EssayCreate, EssayRead, EssayUpdate
from unthink.server.services.deps import CurrentUser, EssayServiceDep, OptionalUser

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EssayRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Essay",
    description="Publish an essay or Spark, or save it as a draft.",
    response_description="The stored essay; ``status`` tells whether it was published or saved as a draft.",
    responses={
        201: {"description": "Essay created"},
        401: {"description": "Not authenticated"},
        422: {"description": "Invalid title, content or tags"},
    },
)
async def create_essay(payload: EssayCreate, user: CurrentUser, service: EssayServiceDep):
    """
    Create a new essay.

    - **title**: 1 to 200 characters after trimming.
    - **content**: At least 100 characters for ``post_type=essay``; any non-empty text for Sparks.
    - **post_type**: ``essay`` or a Spark type (text, thread, audio, video, image, notes).
    - **tldr**: Optional summary of up to 300 characters.
    - **excerpt**: Optional; defaults to the first 200 characters of the content.
    - **tags**: Up to 10 tags; blanks and duplicates are dropped.
    - **published**: ``false`` saves a draft.
    """
    return await service.create(user, payload)


@router.get(
    "",
    response_model=List[EssayRead],
    summary="List Essays",
    description="Published essays, newest first, optionally filtered by author or tag.",
    response_description="A list of essays.",
)
async def list_essays(
    service: EssayServiceDep,
    author_id: Optional[str] = None,
    tag: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    return await service.list_published(author_id=author_id, tag=tag, limit=limit, offset=offset)


@router.get(
    "/drafts",
    response_model=List[EssayRead],
    summary="List My Drafts",
    description="The caller's unpublished essays, most recently edited first.",
)
async def list_my_drafts(user: CurrentUser, service: EssayServiceDep):
    return await service.list_drafts(user)


@router.get(
    "/{essay_id}",
    response_model=ArticleRead,
    summary="Get Article",
    description="A single essay with its author and engagement counters.",
    response_description="The article.",
    responses={404: {"description": "Essay not found or not published"}},
)
async def get_article(essay_id: str, viewer: OptionalUser, service: EssayServiceDep):
    """
    Get an essay page.

    Anonymous readers and other users only see published essays. ``is_hearted``
    is only true when the caller is signed in and has hearted the essay.
    """
    return await service.get_article(essay_id, viewer)


@router.patch(
    "/{essay_id}",
    response_model=EssayRead,
    summary="Update Essay",
    description="Edit an essay. Only the fields present in the body change.",
    response_description="The updated essay.",
    responses={
        403: {"description": "Not the author"},
        404: {"description": "Essay not found"},
        422: {"description": "Invalid field values"},
    },
)
async def update_essay(essay_id: str, payload: EssayUpdate, user: CurrentUser, service: EssayServiceDep):
    """
    Update an essay.

    The same rules as creation apply to the provided fields. When the content
    changes without an explicit excerpt, the excerpt is derived again.
    """
    return await service.update(user, essay_id, payload)


@router.delete(
    "/{essay_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Essay",
    description="Delete an essay with its comments, hearts, reposts and reading list entries.",
    responses={
        403: {"description": "Not the author"},
        404: {"description": "Essay not found"},
    },
)
async def delete_essay(essay_id: str, user: CurrentUser, service: EssayServiceDep) -> None:
    await service.delete(user, essay_id)
