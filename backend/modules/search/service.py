"""
Marketplace search.

Approved listings are fetched newest first and filtered in process against
the typo-tolerant term list, so "wiskey" still finds "Whiskey Still Life".
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from modules.artworks.models import ArtworkListItem, ArtworkStatus
from modules.artworks.repository import ArtworkRepository

from .fuzzy import create_fuzzy_search_terms, matches

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
ALL_CATEGORIES = "all"


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Lower-case a category filter; empty or "all" means no filter."""
    if not category:
        return None
    category = category.strip().lower()
    if not category or category == ALL_CATEGORIES:
        return None
    return category


class SearchService:
    """Fuzzy search over approved listings."""

    def __init__(self, repository: ArtworkRepository):
        self._repo = repository

    async def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[ArtworkListItem]:
        """
        Search approved listings by title, description and artist name.

        A blank query returns the newest approved listings in the category.
        """
        candidates = await run_in_threadpool(
            self._repo.list_artworks,
            status=ArtworkStatus.APPROVED,
            category=normalize_category(category),
        )

        terms = create_fuzzy_search_terms(query or "")
        if not terms:
            return candidates[:limit]

        results = [
            item
            for item in candidates
            if matches(item.title, terms)
            or matches(item.description, terms)
            or matches(item.artist_name, terms)
        ]
        logger.debug(
            "Search %r: %d terms, %d of %d listings matched",
            query, len(terms), len(results), len(candidates),
        )
        return results[:limit]
