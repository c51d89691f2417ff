from profile_service.config.settings import settings

__all__ = ["settings"]
