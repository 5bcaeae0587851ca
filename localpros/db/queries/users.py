# localpros/db/queries/users.py
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from localpros.db.models.user import User, UserProfile
from localpros.db.queries.paths import read_path, write_path

TEXT_FIELDS = ("name", "email", "login_method")


@write_path
def upsert_user(db: Session, open_id: str, role: Optional[str] = None, **fields) -> User:
    """
    Insert the user on first sign-in, otherwise refresh last_signed_in and any
    text field that was passed. `role` is only applied when given explicitly or
    on creation.
    """
    user = db.query(User).filter(User.open_id == open_id).first()
    now = datetime.now(timezone.utc)

    if user is None:
        user = User(open_id=open_id, role=role or "user", last_signed_in=now)
        db.add(user)
    elif role is not None:
        user.role = role

    for field in TEXT_FIELDS:
        if field in fields:
            setattr(user, field, fields[field])
    user.last_signed_in = now

    db.commit()
    db.refresh(user)
    return user


@read_path()
def get_user_profile(db: Session, user_id: int) -> Optional[UserProfile]:
    return db.query(UserProfile).filter(UserProfile.user_id == user_id).first()


@write_path
def create_or_update_user_profile(db: Session, user_id: int, user_type: str) -> UserProfile:
    profile = db.query(UserProfile).filter(UserProfile.user_id == user_id).first()
    if profile:
        profile.user_type = user_type
    else:
        profile = UserProfile(user_id=user_id, user_type=user_type)
        db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile
