from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

ProfileType = Literal["customer", "provider", "admin"]


class UserResponse(BaseModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: str
    last_signed_in: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    id: int
    user_id: int
    user_type: ProfileType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileTypeUpdate(BaseModel):
    user_type: ProfileType
