"""
Explore page I/O models.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .belief_cards import BeliefCardRead
from .essays import EssayRead


class ExploreResponse(BaseModel):
    essays: List[EssayRead]
    belief_cards: List[BeliefCardRead]
    all_tags: List[str]
