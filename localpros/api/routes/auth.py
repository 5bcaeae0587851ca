from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from localpros.core.exceptions import Forbidden
from localpros.core.permissions import require_user
from localpros.core.security import get_optional_user
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.db.queries.users import create_or_update_user_profile, get_user_profile
from localpros.schemas.user import ProfileResponse, ProfileTypeUpdate, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Optional[UserResponse])
def me(current_user: Optional[User] = Depends(get_optional_user)):
    return current_user


# Get or lazily create the caller's profile
@router.get("/profile", response_model=ProfileResponse)
def get_profile(db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    profile = get_user_profile(db, current_user.id)
    if not profile:
        profile = create_or_update_user_profile(db, current_user.id, "customer")
    return profile


@router.put("/profile", response_model=ProfileResponse)
def update_profile_type(
    payload: ProfileTypeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    # only accounts holding the admin role may switch to an admin profile
    if payload.user_type == "admin" and current_user.role != "admin":
        raise Forbidden("Admin access required")
    return create_or_update_user_profile(db, current_user.id, payload.user_type)
