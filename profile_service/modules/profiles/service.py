import logging
import uuid
from datetime import datetime, timezone
from supabase import Client
from profile_service.config import settings
from profile_service.core.errors import ProfileNotFound
from profile_service.modules.profiles.schemas import (
    ProfileCreate, ProfileResponse, ExperienceCreate, EducationCreate
)
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

PROFILE_SELECT = "*, user:users(id, name, avatar)"

NO_PROFILE_MSG = "There is no profile for this user"
PROFILE_NOT_FOUND_MSG = "Profile not found"

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def parse_skills(raw: str) -> List[str]:
    """Split a comma separated skills string, trimming each entry; empty entries are dropped."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def build_profile_fields(data: ProfileCreate) -> Dict[str, Any]:
    """Partial column set for an upsert: only keys the caller actually supplied."""
    fields: Dict[str, Any] = {}
    for name in PROFILE_FIELDS:
        value = getattr(data, name)
        if value:
            fields[name] = value
    if data.skills:
        fields["skills"] = parse_skills(data.skills)

    social = {name: getattr(data, name) for name in SOCIAL_FIELDS if getattr(data, name)}
    if social:
        fields["social"] = social
    return fields


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def is_valid_id(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.table = settings.profiles_table

    def find_profile_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Raw profile row with its owner embedded, None when absent"""
        result = self.supabase.table(self.table)\
            .select(PROFILE_SELECT)\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()

        if not result.data:
            return None
        return result.data[0]

    def get_profile_by_user(self, user_id: str) -> ProfileResponse:
        """Profile of the authenticated user"""
        profile = self.find_profile_by_user(user_id)
        if profile is None:
            raise ProfileNotFound(NO_PROFILE_MSG)
        return ProfileResponse(**profile)

    def get_profile_for_public(self, user_id: str) -> ProfileResponse:
        """Profile looked up by an id taken from the URL; malformed ids read as absent"""
        if not is_valid_id(user_id):
            logger.info("Rejected malformed user id %r", user_id)
            raise ProfileNotFound(PROFILE_NOT_FOUND_MSG)
        profile = self.find_profile_by_user(user_id)
        if profile is None:
            raise ProfileNotFound(PROFILE_NOT_FOUND_MSG)
        return ProfileResponse(**profile)

    def list_profiles(self) -> List[ProfileResponse]:
        result = self.supabase.table(self.table)\
            .select(PROFILE_SELECT)\
            .order("created_at", desc=True)\
            .execute()
        return [ProfileResponse(**profile) for profile in result.data or []]

    def upsert_profile(self, user_id: str, data: ProfileCreate) -> ProfileResponse:
        """Create the user's profile or merge the supplied fields into it.

        Uniqueness per owner is left to the unique index on user_id; the
        upsert only touches the columns present in the payload.
        """
        fields = build_profile_fields(data)
        fields["user_id"] = user_id
        fields["updated_at"] = _utcnow()

        self.supabase.table(self.table)\
            .upsert(fields, on_conflict="user_id")\
            .execute()

        logger.info("Upserted profile for user %s (%s)", user_id, ", ".join(sorted(fields)))
        return self.get_profile_by_user(user_id)

    def add_experience(self, user_id: str, entry: ExperienceCreate) -> ProfileResponse:
        return self._prepend_entry(user_id, "experience", entry)

    def add_education(self, user_id: str, entry: EducationCreate) -> ProfileResponse:
        return self._prepend_entry(user_id, "education", entry)

    def remove_experience(self, user_id: str, entry_id: str) -> ProfileResponse:
        return self._remove_entry(user_id, "experience", entry_id)

    def remove_education(self, user_id: str, entry_id: str) -> ProfileResponse:
        return self._remove_entry(user_id, "education", entry_id)

    def delete_profile(self, user_id: str) -> bool:
        """Delete the user's profile; absence is not an error"""
        result = self.supabase.table(self.table)\
            .delete()\
            .eq("user_id", user_id)\
            .execute()

        deleted = bool(result.data)
        logger.info("Deleted profile for user %s (existed=%s)", user_id, deleted)
        return deleted

    def _require_profile(self, user_id: str) -> Dict[str, Any]:
        profile = self.find_profile_by_user(user_id)
        if profile is None:
            raise ProfileNotFound(NO_PROFILE_MSG)
        return profile

    def _prepend_entry(
        self,
        user_id: str,
        section: str,
        entry: Union[ExperienceCreate, EducationCreate]
    ) -> ProfileResponse:
        profile = self._require_profile(user_id)
        item = {"id": str(uuid.uuid4()), **entry.model_dump(by_alias=True, mode="json")}
        entries = [item] + list(profile.get(section) or [])
        logger.info("Adding %s entry %s for user %s", section, item["id"], user_id)
        return self._write_section(user_id, section, entries)

    def _remove_entry(self, user_id: str, section: str, entry_id: str) -> ProfileResponse:
        profile = self._require_profile(user_id)
        current = list(profile.get(section) or [])
        entries = [item for item in current if item.get("id") != entry_id]
        if len(entries) == len(current):
            # Unknown ids are tolerated: nothing is removed and the profile is returned as is
            logger.info("No %s entry %s for user %s", section, entry_id, user_id)
        return self._write_section(user_id, section, entries)

    def _write_section(self, user_id: str, section: str, entries: List[Dict[str, Any]]) -> ProfileResponse:
        self.supabase.table(self.table)\
            .update({section: entries, "updated_at": _utcnow()})\
            .eq("user_id", user_id)\
            .execute()
        return self.get_profile_by_user(user_id)
