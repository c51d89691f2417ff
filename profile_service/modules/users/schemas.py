from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserResponse(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OwnerSummary(BaseModel):
    """Owner reference as embedded into profile reads."""
    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None
