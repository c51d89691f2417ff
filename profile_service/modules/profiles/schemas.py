from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import date, datetime
from profile_service.modules.users.schemas import OwnerSummary


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProfileCreate(BaseModel):
    """Create-or-update body; only these keys are ever read from the request."""
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[str] = None  # comma separated, e.g. "python, fastapi, sql"
    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_date: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_date", "to", mode="before")
    @classmethod
    def blank_date_is_unset(cls, value):
        return _blank_to_none(value)


class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_date: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_date", "to", mode="before")
    @classmethod
    def blank_date_is_unset(cls, value):
        return _blank_to_none(value)


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user: Optional[OwnerSummary] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: List[str] = []
    social: Optional[SocialLinks] = None
    experience: List[ExperienceResponse] = []
    education: List[EducationResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("skills", "experience", "education", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return value or []


class MessageResponse(BaseModel):
    msg: str
