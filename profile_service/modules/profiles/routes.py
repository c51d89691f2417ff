from fastapi import APIRouter, Depends
from profile_service.database.supabase_client import get_supabase
from profile_service.core.dependencies import get_current_user_id
from profile_service.core.errors import RequestValidationFailed
from profile_service.core.validation import (
    validate_fields, PROFILE_RULES, EXPERIENCE_RULES, EDUCATION_RULES
)
from profile_service.modules.profiles.schemas import (
    ProfileCreate, ProfileResponse, ExperienceCreate, EducationCreate, MessageResponse
)
from profile_service.modules.profiles.service import ProfileService
from profile_service.modules.users.service import UserService
from profile_service.modules.github.client import GithubClient, get_github_client
from supabase import Client
from typing import Any, Dict, List

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


def _check(rules, data: Dict[str, Any]) -> None:
    errors = validate_fields(rules, data)
    if errors:
        raise RequestValidationFailed(errors)


def _delete_account(user_id: str, profiles: ProfileService, users: UserService) -> MessageResponse:
    # Profile before user; any failure aborts the request
    profiles.delete_profile(user_id)
    users.delete_user(user_id)
    return MessageResponse(msg="User deleted")


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get current user's profile"""
    return service.get_profile_by_user(user_data["id"])


@router.post("", response_model=ProfileResponse)
async def create_or_update_profile(
    profile_data: ProfileCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update current user's profile"""
    _check(PROFILE_RULES, profile_data.model_dump())
    return service.upsert_profile(user_data["id"], profile_data)


@router.delete("/me", response_model=MessageResponse)
async def delete_my_account(
    user_data: Dict = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
    users: UserService = Depends(get_user_service)
):
    """Delete profile and user"""
    return _delete_account(user_data["id"], profiles, users)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    """Get all profiles"""
    return service.list_profiles()


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    """Get profile by user ID"""
    return service.get_profile_for_public(user_id)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user_data: Dict = Depends(get_current_user_id),
    profiles: ProfileService = Depends(get_profile_service),
    users: UserService = Depends(get_user_service)
):
    """Delete profile and user"""
    return _delete_account(user_data["id"], profiles, users)


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    experience: ExperienceCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Add profile experience"""
    _check(EXPERIENCE_RULES, experience.model_dump(by_alias=True))
    return service.add_experience(user_data["id"], experience)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Delete experience from profile"""
    return service.remove_experience(user_data["id"], exp_id)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    education: EducationCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Add profile education"""
    _check(EDUCATION_RULES, education.model_dump(by_alias=True))
    return service.add_education(user_data["id"], education)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Delete education from profile"""
    return service.remove_education(user_data["id"], edu_id)


@router.get("/github/{username}")
def get_github_repos(
    username: str,
    github: GithubClient = Depends(get_github_client)
):
    """Get user repos from GitHub"""
    return github.list_repos(username)
