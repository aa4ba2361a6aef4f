"""Topic tags: the built-in catalogue, normalization and suggestions."""

from __future__ import annotations

from typing import Iterable, List

MAX_TAGS = 10

PREDEFINED_TAGS: tuple[str, ...] = (
    "Tech Ethics",
    "Creativity",
    "Healing",
    "Philosophy",
    "Science",
    "Art",
    "Psychology",
    "Spirituality",
    "Politics",
    "Environment",
    "Education",
    "Health",
    "Business",
    "Relationships",
    "Travel",
    "Food",
    "Music",
    "Books",
    "Film",
    "Gaming",
    "Fitness",
    "Parenting",
    "Career",
    "Finance",
    "AI",
    "Web3",
    "Design",
)


def normalize_tags(tags: Iterable[str] | None, max_tags: int = MAX_TAGS) -> List[str]:
    """Trim tags, drop blanks and exact duplicates, and keep at most ``max_tags``.

    The first occurrence of a tag wins, so the caller's ordering is preserved.
    """
    result: List[str] = []
    for raw in tags or ():
        tag = raw.strip()
        if not tag or tag in result:
            continue
        result.append(tag)
        if len(result) >= max_tags:
            break
    return result


def suggest_tags(query: str, selected: Iterable[str] = ()) -> List[str]:
    """Predefined tags containing ``query`` (case-insensitive) that are not already selected."""
    needle = query.strip().lower()
    chosen = set(selected)
    return [tag for tag in PREDEFINED_TAGS if needle in tag.lower() and tag not in chosen]
