"""Failures raised by the quote store.

Every failure is a deterministic outcome of the input and the current store
state. The transport layer maps each class to a status code.
"""
from __future__ import annotations

from typing import Optional


class StoreError(Exception):
    """Base class for store failures."""

    code: str = "store_error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidInput(StoreError):
    """A required field is missing or blank, or a query is malformed."""

    code = "invalid_input"


class NotFound(StoreError):
    """The referenced identifier does not exist."""

    code = "not_found"

    def __init__(self, quote_id: int) -> None:
        super().__init__(f"Quote {quote_id} not found")
        self.quote_id = quote_id


class DuplicateName(StoreError):
    """Another stored quote already uses the name."""

    code = "duplicate_name"

    def __init__(self, name: str) -> None:
        super().__init__(f"A quote named {name!r} already exists", field="name")
        self.name = name
