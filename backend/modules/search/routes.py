"""
Search API endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_search_service
from modules.artworks.models import ArtworkListItem

from .service import DEFAULT_LIMIT, SearchService

router = APIRouter()


@router.get("/search", response_model=list[ArtworkListItem])
async def search_artworks(
    q: Optional[str] = Query(default=None, max_length=200, description="Free-text query"),
    category: Optional[str] = Query(default=None, description="Category, or 'all'"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=100),
    service: SearchService = Depends(get_search_service),
) -> list[ArtworkListItem]:
    """
    Search approved listings.

    Matching tolerates common typos: missing or extra letters, swapped
    neighbours and look-alike spellings.
    """
    return await service.search(q, category, limit)
