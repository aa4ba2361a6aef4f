"""
Tag Endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from unthink.content.tags import PREDEFINED_TAGS, suggest_tags
from unthink.core.models.io import TagSuggestions

router = APIRouter()


@router.get(
    "",
    response_model=List[str],
    summary="List Predefined Tags",
    description="The built-in topics offered by the tag picker.",
)
async def list_tags():
    return list(PREDEFINED_TAGS)


@router.get(
    "/suggestions",
    response_model=TagSuggestions,
    summary="Suggest Tags",
    description="Predefined tags containing the query that are not selected yet.",
)
async def tag_suggestions(q: str = "", selected: Optional[List[str]] = Query(None)):
    return TagSuggestions(query=q, suggestions=suggest_tags(q, selected or []))
