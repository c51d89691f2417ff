import logging
from supabase import Client
from profile_service.config import settings
from profile_service.modules.users.schemas import UserResponse
from typing import Optional

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.table = settings.users_table

    def get_user_by_id(self, user_id: str) -> Optional[UserResponse]:
        """Get user by ID, None when absent"""
        result = self.supabase.table(self.table)\
            .select("*")\
            .eq("id", user_id)\
            .limit(1)\
            .execute()

        if not result.data:
            return None

        return UserResponse(**result.data[0])

    def delete_user(self, user_id: str) -> bool:
        """Delete user; deleting an absent user is not an error"""
        result = self.supabase.table(self.table)\
            .delete()\
            .eq("id", user_id)\
            .execute()

        deleted = bool(result.data)
        logger.info("Deleted user %s (existed=%s)", user_id, deleted)
        return deleted
