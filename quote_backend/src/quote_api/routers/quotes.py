from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ..repositories import Repository, get_repository
from ..schemas import QuoteIn, QuoteOut

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/items",
    tags=["quotes"],
)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[QuoteOut],
    summary="List Quotes",
    description="Return every quote ordered by ascending id.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_quotes(repo: Repository = Depends(get_repository)) -> List[QuoteOut]:
    return [QuoteOut(**it) for it in repo.list()]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/search",
    response_model=List[QuoteOut],
    summary="Search Quotes",
    description="Case-insensitive substring search on the quote name. An empty value matches every quote.",
    responses={
        200: {"description": "Matching quotes, ordered by id"},
        400: {"description": "Missing name parameter"},
    },
)
def search_quotes(
    name: Optional[str] = Query(None, description="Substring to look for in quote names"),
    repo: Repository = Depends(get_repository),
) -> List[QuoteOut]:
    return [QuoteOut(**it) for it in repo.search_by_name(name)]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{quote_id}",
    response_model=QuoteOut,
    summary="Get Quote",
    description="Get a single quote by id.",
    responses={
        200: {"description": "Quote found"},
        404: {"description": "Quote not found"},
    },
)
def get_quote(quote_id: int, repo: Repository = Depends(get_repository)) -> QuoteOut:
    return QuoteOut(**repo.get(quote_id))  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=QuoteOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Quote",
    description="Create a new quote. The server assigns id and createdAt; names must be unique.",
    responses={
        201: {"description": "Quote created successfully"},
        400: {"description": "Name missing or blank"},
        409: {"description": "Name already in use"},
    },
)
def create_quote(payload: QuoteIn, repo: Repository = Depends(get_repository)) -> QuoteOut:
    created = repo.create(payload)
    logger.info("Created quote %s", created["id"])
    return QuoteOut(**created)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.put(
    "/{quote_id}",
    response_model=QuoteOut,
    summary="Replace Quote",
    description=(
        "Replace name, description and completed of an existing quote. "
        "id and createdAt are never changed."
    ),
    responses={
        200: {"description": "Quote updated"},
        400: {"description": "Name missing or blank"},
        404: {"description": "Quote not found"},
        409: {"description": "Name already used by another quote"},
    },
)
def put_quote(quote_id: int, payload: QuoteIn, repo: Repository = Depends(get_repository)) -> QuoteOut:
    updated = repo.update(quote_id, payload)
    logger.info("Updated quote %s", quote_id)
    return QuoteOut(**updated)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.delete(
    "/{quote_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Quote",
    description="Delete a quote by id.",
    responses={
        204: {"description": "Quote deleted"},
        404: {"description": "Quote not found"},
    },
)
def delete_quote(quote_id: int, repo: Repository = Depends(get_repository)) -> Response:
    """
    Delete a quote. Returns 204 on success, 404 if not found.
    """
    repo.delete(quote_id)
    logger.info("Deleted quote %s", quote_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
