from __future__ import annotations

from datetime import datetime
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class QuoteEntity(TypedDict):
    """
    A lightweight domain model representing a stored quote.

    Fields:
    - id: Unique integer identifier assigned by the store
    - name: Unique name of the quote (1..100 chars after trimming)
    - content: Optional quote body, exposed as "description" on the wire
    - author: Optional author, passed through untouched
    - source: Optional source, passed through untouched
    - category: Optional category, passed through untouched
    - created_at: Creation timestamp stamped by the store, never changed
    - completed: Boolean completion flag
    """

    id: int
    name: str
    content: Optional[str]
    author: Optional[str]
    source: Optional[str]
    category: Optional[str]
    created_at: datetime
    completed: bool
