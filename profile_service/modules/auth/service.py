import logging
from supabase import Client
from profile_service.core.errors import AuthenticationFailed
from typing import Dict, Any

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Resolve the bearer token to the Supabase Auth user it was issued for."""
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.warning("Token verification failed: %s", e)
            raise AuthenticationFailed("Token is not valid") from e
        if not user_response or not user_response.user:
            raise AuthenticationFailed("Token is not valid")
        user = user_response.user
        return {
            "id": user.id,
            "email": user.email,
            "user_metadata": user.user_metadata or {},
        }
