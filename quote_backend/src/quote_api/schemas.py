from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class QuoteIn(BaseModel):
    """
    Candidate quote parsed from a create or replace request.

    The name is optional at this layer; a missing or blank name is rejected
    by the store as invalid input. Any "id", "createdAt" or "content" key
    sent by the client is ignored; the quote text travels as "description".
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Stay hungry",
                "description": "Stay hungry, stay foolish.",
                "author": "Stewart Brand",
                "source": "Whole Earth Catalog",
                "category": "inspiration",
                "completed": False,
            }
        },
    )

    name: Optional[str] = Field(default=None, description="Unique name of the quote (1..100 chars)")
    content: Optional[str] = Field(
        default=None, alias="description", description="Optional quote text"
    )
    author: Optional[str] = Field(default=None, description="Optional author")
    source: Optional[str] = Field(default=None, description="Optional source")
    category: Optional[str] = Field(default=None, description="Optional category")
    completed: bool = Field(default=False, description="Completion status flag")


# PUBLIC_INTERFACE
class QuoteOut(BaseModel):
    """
    Schema returned by the API for a quote.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Stay hungry",
                "description": "Stay hungry, stay foolish.",
                "author": "Stewart Brand",
                "source": "Whole Earth Catalog",
                "category": "inspiration",
                "createdAt": "2025-01-25T10:15:30.123456",
                "completed": False,
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the quote")
    name: str = Field(..., description="Unique name of the quote")
    content: Optional[str] = Field(default=None, alias="description", description="Optional quote text")
    author: Optional[str] = Field(default=None, description="Optional author")
    source: Optional[str] = Field(default=None, description="Optional source")
    category: Optional[str] = Field(default=None, description="Optional category")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    completed: bool = Field(..., description="Completion status flag")
