"""Services for looking up the profiles of authenticated users."""

from typing import Any, Dict, Optional
import logging

from fastapi import HTTPException, status

from contactdesk.core.config import settings
from contactdesk.services.supabase_service import SupabaseService, supabase_service

logger = logging.getLogger(__name__)


class UserService:
    """Read-only access to ``user_profiles``."""

    def __init__(self, db: Optional[SupabaseService] = None):
        self.db = db or supabase_service

    async def get_basic_profile(self, user_id: str) -> Dict[str, Any]:
        """Fetch the id, email and role of a user.

        Args:
            user_id: Supabase auth user ID

        Returns:
            The profile row

        Raises:
            HTTPException: 404 if the user has no profile
        """
        rows = self.db.select_data(
            settings.USER_PROFILES_TABLE,
            query="id, email, role",
            cols={"id": user_id},
        )
        if not rows:
            logger.warning(f"No profile found for user {user_id}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User profile not found",
            )
        return rows[0]


user_service = UserService()
