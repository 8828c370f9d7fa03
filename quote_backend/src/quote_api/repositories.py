from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from functools import lru_cache
from threading import RLock
from typing import List, Optional

from .errors import DuplicateName, InvalidInput, NotFound
from .models import QuoteEntity
from .schemas import QuoteIn
from .settings import get_settings


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for quote storage backends."""

    @abstractmethod
    def create(self, data: QuoteIn) -> QuoteEntity:
        """Validate and store a new quote. Raise InvalidInput or DuplicateName."""

    @abstractmethod
    def get(self, quote_id: int) -> QuoteEntity:
        """Return a quote by id. Raise NotFound if absent."""

    @abstractmethod
    def list(self) -> List[QuoteEntity]:
        """Return all quotes ordered by ascending id."""

    @abstractmethod
    def update(self, quote_id: int, data: QuoteIn) -> QuoteEntity:
        """Replace name, content and completed of a quote. Raise NotFound, InvalidInput or DuplicateName."""

    @abstractmethod
    def delete(self, quote_id: int) -> None:
        """Delete a quote by id. Raise NotFound if absent."""

    @abstractmethod
    def search_by_name(self, query: Optional[str]) -> List[QuoteEntity]:
        """Return quotes whose name contains query, case-insensitively, ordered by id."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored quotes."""

    @abstractmethod
    def reset(self) -> None:
        """Drop every quote and restart ids at 1. Intended for test harnesses."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory quote store.

    A single re-entrant lock guards the collection and the id counter, so the
    duplicate-name check and the write that follows it commit as one step.
    The counter only advances when a quote is actually stored. Reads take the
    same lock to copy a consistent snapshot, so they are serialized against
    writes and against each other.
    """

    def __init__(self, name_max_length: int = 100) -> None:
        self._lock = RLock()
        self._items: dict[int, QuoteEntity] = {}
        self._next_id = 1
        self._name_max_length = name_max_length

    def _now(self) -> datetime:
        return datetime.now()

    def _validate_name(self, name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise InvalidInput("name is required", field="name")
        if len(name.strip()) > self._name_max_length:
            raise InvalidInput(
                f"name length must be between 1 and {self._name_max_length} characters",
                field="name",
            )
        return name

    def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        # Caller holds the lock.
        return any(
            other["name"] == name
            for other_id, other in self._items.items()
            if other_id != exclude_id
        )

    def _ordered(self) -> List[QuoteEntity]:
        return [self._items[i].copy() for i in sorted(self._items)]

    def create(self, data: QuoteIn) -> QuoteEntity:
        name = self._validate_name(data.name)
        with self._lock:
            if self._name_taken(name):
                raise DuplicateName(name)
            entity: QuoteEntity = {
                "id": self._next_id,
                "name": name,
                "content": data.content,
                "author": data.author,
                "source": data.source,
                "category": data.category,
                "created_at": self._now(),
                "completed": data.completed,
            }
            self._next_id += 1
            self._items[entity["id"]] = entity
            return entity.copy()

    def get(self, quote_id: int) -> QuoteEntity:
        with self._lock:
            item = self._items.get(quote_id)
            if item is None:
                raise NotFound(quote_id)
            return item.copy()

    def list(self) -> List[QuoteEntity]:
        with self._lock:
            return self._ordered()

    def update(self, quote_id: int, data: QuoteIn) -> QuoteEntity:
        with self._lock:
            existing = self._items.get(quote_id)
            if existing is None:
                raise NotFound(quote_id)
            name = self._validate_name(data.name)
            if self._name_taken(name, exclude_id=quote_id):
                raise DuplicateName(name)

            # id and created_at are never touched
            existing["name"] = name
            existing["content"] = data.content
            existing["completed"] = data.completed
            return existing.copy()

    def delete(self, quote_id: int) -> None:
        with self._lock:
            if self._items.pop(quote_id, None) is None:
                raise NotFound(quote_id)

    def search_by_name(self, query: Optional[str]) -> List[QuoteEntity]:
        if query is None:
            raise InvalidInput("name query parameter is required", field="name")
        s = query.lower()
        with self._lock:
            return [t for t in self._ordered() if s in t["name"].lower()]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def reset(self) -> None:
        with self._lock:
            self._items.clear()
            self._next_id = 1


# PUBLIC_INTERFACE
@lru_cache(maxsize=None)
def get_repository() -> Repository:
    """
    Return the process-wide quote store, creating it on first use.

    Routes receive it through FastAPI's dependency injection; tests can swap
    it via app.dependency_overrides or clear it with reset().
    """
    settings = get_settings()
    return InMemoryRepository(name_max_length=settings.name_max_length)
