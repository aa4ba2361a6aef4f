"""Comment threading.

Comments are stored flat with a ``parent_id`` pointer. These helpers decide
the depth of new replies and turn a flat, chronologically ordered list back
into nested threads.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from unthink.core.models.io.comments import CommentNode, CommentRead

MAX_COMMENT_DEPTH = 3


def reply_depth(parent_depth: int) -> int:
    """Depth of a reply to a comment at ``parent_depth``; never deeper than 3."""
    return min(parent_depth + 1, MAX_COMMENT_DEPTH)


def build_comment_tree(comments: Sequence[CommentRead]) -> List[CommentNode]:
    """Arrange flat comments into threads.

    Roots are the comments without a parent, in input order, and every node's
    replies keep input order. A reply whose parent is not in ``comments`` is
    dropped, and so is everything below it.
    """
    nodes: Dict[str, CommentNode] = {
        comment.id: CommentNode(**comment.model_dump(), replies=[]) for comment in comments
    }

    roots: List[CommentNode] = []
    for comment in comments:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
        elif comment.parent_id in nodes:
            nodes[comment.parent_id].replies.append(node)
    return roots
