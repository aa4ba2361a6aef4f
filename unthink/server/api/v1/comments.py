"""
Comment Endpoints.

Threaded comments on essays, hot takes and belief cards. Comments are
returned as trees; replies nest up to three levels deep, deeper replies are
attached at the third level.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from unthink.core.models.domain import ContentKind
from unthink.core.models.io import CommentCreate, CommentNode, CommentRead, ReplyCreate
from unthink.core.models.io.comments import CommentTarget
from unthink.server.services.deps import CommentServiceDep, CurrentUser, OptionalUser

router = APIRouter()


@router.post(
    "",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Comment",
    description="Start a new comment thread on an essay, hot take or belief card.",
    response_description="The created comment.",
    responses={404: {"description": "Target not found"}},
)
async def add_comment(payload: CommentCreate, user: CurrentUser, service: CommentServiceDep):
    """
    Add a top-level comment.

    - **target_kind**: ``essay``, ``hot_take`` or ``belief_card``.
    - **target_id**: Id of the item being commented on.
    - **content**: 1 to 5000 characters after trimming.
    """
    return await service.add_comment(user, payload)


@router.post(
    "/{comment_id}/replies",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Reply to Comment",
    description="Reply to an existing comment. The reply joins the parent's thread.",
    responses={404: {"description": "Parent comment not found"}},
)
async def add_reply(comment_id: str, payload: ReplyCreate, user: CurrentUser, service: CommentServiceDep):
    return await service.add_reply(user, comment_id, payload)


@router.get(
    "/{target_kind}/{target_id}",
    response_model=List[CommentNode],
    summary="List Comments",
    description="All comments of an item as threads, oldest first, with authors and hearts.",
    response_description="Root comments with nested replies.",
    responses={404: {"description": "Target not found"}},
)
async def list_comments(
    target_kind: CommentTarget,
    target_id: str,
    viewer: OptionalUser,
    service: CommentServiceDep,
):
    return await service.list_comments(ContentKind(target_kind), target_id, viewer)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Comment",
    description="Delete one of the caller's comments together with its replies.",
    responses={403: {"description": "Not the author"}, 404: {"description": "Comment not found"}},
)
async def delete_comment(comment_id: str, user: CurrentUser, service: CommentServiceDep) -> None:
    await service.delete_comment(user, comment_id)
