"""
Profile repository.

Reads and counts rows of the profiles table and wraps the get_user_status
RPC. Writes to profiles belong to the admin module.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import UserProfile, UserStatus


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for profiles data access."""

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        query = self._db.table("profiles").select("*").eq("id", user_id)
        rows = self._execute(query, "get profile").data
        if not rows:
            return None
        return UserProfile(**rows[0])

    def list_profiles(
        self,
        role: Optional[str] = None,
        pending_only: bool = False,
    ) -> list[UserProfile]:
        """
        List profiles newest first.

        pending_only keeps rows whose user_status is pending or unset.
        """
        query = self._db.table("profiles").select("*")
        if role is not None:
            query = query.eq("role", role)
        if pending_only:
            query = query.or_("user_status.is.null,user_status.eq.pending")
        query = query.order("created_at", desc=True)

        rows = self._execute(query, "list profiles").data
        return [UserProfile(**row) for row in rows]

    def count_profiles(self, user_type: Optional[str] = None) -> int:
        query = self._db.table("profiles").select("id", count="exact", head=True)
        if user_type is not None:
            query = query.eq("user_type", user_type)
        return self._count(self._execute(query, "count profiles"))

    def get_user_status(self, user_id: str) -> Optional[UserStatus]:
        rpc = self._db.rpc("get_user_status", {"user_id": user_id})
        data: Any = self._execute(rpc, "get_user_status rpc").data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            return None
        if isinstance(data, str):
            return UserStatus(status=data)
        return UserStatus(**data)
