"""
Admin repository for curation tables and account approvals.

Tables:
- admin_trending_products
- future_masters_artists
- profiles (approval columns only)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from shared.exceptions import ExternalServiceError
from shared.repository import BaseRepository

from .models import (
    FutureMastersArtist,
    TrendingArtwork,
    TrendingProduct,
)

logger = logging.getLogger(__name__)

TRENDING_TABLE = "admin_trending_products"
FUTURE_MASTERS_TABLE = "future_masters_artists"

TRENDING_WITH_ARTWORK = (
    "*, artwork:artworks(id, title, artist_name, price, currency, description, "
    "category, status, artwork_images(file_path, is_primary))"
)


class AdminRepository(BaseRepository[TrendingProduct]):
    """
    Repository for admin-only tables.

    Note: callers must already have checked the admin role.
    """

    # -------------------------------------------------------------------------
    # Trending products
    # -------------------------------------------------------------------------

    def list_trending(self) -> list[TrendingProduct]:
        query = self._db.table(TRENDING_TABLE).select(TRENDING_WITH_ARTWORK).order("display_order")
        rows = self._execute(query, "list trending products").data
        return [self._map_to_trending(row) for row in rows]

    def create_trending(self, artwork_id: str, display_order: int) -> TrendingProduct:
        query = self._db.table(TRENDING_TABLE).insert(
            {"artwork_id": artwork_id, "display_order": display_order}
        )
        rows = self._execute(query, "create trending product").data
        return self._map_to_trending(rows[0])

    def update_trending(self, item_id: str, changes: dict[str, Any]) -> Optional[TrendingProduct]:
        query = self._db.table(TRENDING_TABLE).update(changes).eq("id", item_id)
        rows = self._execute(query, "update trending product").data
        return self._map_to_trending(rows[0]) if rows else None

    def delete_trending(self, item_id: str) -> None:
        self._execute(
            self._db.table(TRENDING_TABLE).delete().eq("id", item_id),
            "delete trending product",
        )

    # -------------------------------------------------------------------------
    # Future masters artists
    # -------------------------------------------------------------------------

    def list_future_masters(self) -> list[FutureMastersArtist]:
        query = self._db.table(FUTURE_MASTERS_TABLE).select("*").order("display_order")
        rows = self._execute(query, "list future masters artists").data
        return [FutureMastersArtist(**row) for row in rows]

    def create_future_master(self, data: dict[str, Any]) -> FutureMastersArtist:
        rows = self._execute(
            self._db.table(FUTURE_MASTERS_TABLE).insert(data),
            "create future masters artist",
        ).data
        return FutureMastersArtist(**rows[0])

    def update_future_master(
        self,
        artist_id: str,
        changes: dict[str, Any],
    ) -> Optional[FutureMastersArtist]:
        query = self._db.table(FUTURE_MASTERS_TABLE).update(changes).eq("id", artist_id)
        rows = self._execute(query, "update future masters artist").data
        return FutureMastersArtist(**rows[0]) if rows else None

    def delete_future_master(self, artist_id: str) -> None:
        self._execute(
            self._db.table(FUTURE_MASTERS_TABLE).delete().eq("id", artist_id),
            "delete future masters artist",
        )

    # -------------------------------------------------------------------------
    # Account approvals
    # -------------------------------------------------------------------------

    def update_user_status(
        self,
        user_id: str,
        new_status: str,
        admin_id: str,
        notes: str,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        """
        Record an approval decision.

        Uses the update_user_status RPC (which also writes the audit trail)
        and falls back to updating profiles directly when the RPC is not
        available.

        Returns:
            True if the RPC was used, False for the direct update
        """
        params = {
            "user_id": user_id,
            "new_status": new_status,
            "admin_id": admin_id,
            "notes": notes,
        }
        if rejection_reason is not None:
            params["rejection_reason"] = rejection_reason

        try:
            self._execute(self._db.rpc("update_user_status", params), "update_user_status rpc")
            return True
        except ExternalServiceError as e:
            logger.warning("update_user_status RPC unavailable (%s), updating profiles directly", e.message)

        now = datetime.now(timezone.utc).isoformat()
        changes = {
            "user_status": new_status,
            "status_changed_at": now,
            "status_changed_by": admin_id,
            "admin_notes": notes,
            "updated_at": now,
        }
        if rejection_reason is not None:
            changes["rejection_reason"] = rejection_reason

        self._execute(
            self._db.table("profiles").update(changes).eq("id", user_id),
            "update profile status",
        )
        return False

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_trending(self, data: dict[str, Any]) -> TrendingProduct:
        artwork = data.get("artwork")
        trending_artwork = None
        if artwork:
            images = artwork.get("artwork_images") or []
            primary = next((img["file_path"] for img in images if img.get("is_primary")), None)
            trending_artwork = TrendingArtwork(
                **{k: v for k, v in artwork.items() if k != "artwork_images"},
                primary_image_path=primary,
                image_paths=[img["file_path"] for img in images],
            )

        return TrendingProduct(
            id=str(data["id"]),
            artwork_id=str(data["artwork_id"]) if data.get("artwork_id") else None,
            display_order=data["display_order"] if data.get("display_order") is not None else 1,
            is_active=data.get("is_active") is not False,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            artwork=trending_artwork,
        )
