"""Favorites API routes.

Endpoints:
- GET /favorites: List favorites grouped by language
- POST /favorites: Add a favorite
- DELETE /favorites/{language}/{word}: Remove a favorite
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_favorite_repo
from api.models import FavoriteGroupResponse, FavoriteRequest, FavoriteResponse
from domain.model.errors import NotFoundError, StorageError
from domain.model.favorite import FavoriteEntry
from port.favorite_repository import FavoriteRepository
from services.favorite_service import (
    add_favorite,
    group_by_language,
    list_favorites,
    remove_favorite,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


def _to_response(entry: FavoriteEntry) -> FavoriteResponse:
    return FavoriteResponse(
        language=entry.language,
        word=entry.word,
        markdown=entry.markdown,
        url=entry.url,
    )


@router.get("", response_model=list[FavoriteGroupResponse])
async def get_favorites(
    search: str = "",
    repo: FavoriteRepository = Depends(get_favorite_repo),
):
    """List favorites grouped by language, optionally filtered by word."""
    grouped = group_by_language(list_favorites(repo), search_text=search)
    return [
        FavoriteGroupResponse(language=language, entries=[_to_response(e) for e in entries])
        for language, entries in grouped.items()
    ]


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def create_favorite(
    request: FavoriteRequest,
    response: Response,
    repo: FavoriteRepository = Depends(get_favorite_repo),
):
    """Add a favorite. Returns 200 with the stored entry if it already exists."""
    entry, created = add_favorite(
        repo,
        language=request.language,
        word=request.word,
        markdown=request.markdown,
        url=request.url,
    )
    if entry is None:
        raise HTTPException(status_code=500, detail="Failed to save favorite")
    if not created:
        response.status_code = status.HTTP_200_OK
    return _to_response(entry)


@router.delete("/{language}/{word}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_favorite(
    language: str,
    word: str,
    repo: FavoriteRepository = Depends(get_favorite_repo),
):
    """Remove a favorite."""
    try:
        remove_favorite(repo, language, word)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
