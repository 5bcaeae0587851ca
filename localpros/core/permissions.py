# localpros/core/permissions.py
"""
Capability gates.

Each gate is a plain function returning a Decision; `require_capability`
chains them into a FastAPI dependency that raises the denial before the
route body runs. The profile is read from storage on every call, so a
change of profile type takes effect on the very next request.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from localpros.core.exceptions import AppError, Forbidden, Unauthorized
from localpros.core.security import get_current_user
from localpros.db.base import get_db
from localpros.db.models.user import User, UserProfile
from localpros.db.queries.users import get_user_profile


class Capability(IntEnum):
    PUBLIC = 0
    AUTHENTICATED = 1
    PROVIDER = 2
    ADMIN = 3


PROFILE_CAPABILITY = {
    "customer": Capability.AUTHENTICATED,
    "provider": Capability.PROVIDER,
    "admin": Capability.ADMIN,
}

DENIAL_MESSAGES = {
    Capability.PROVIDER: "Provider access required",
    Capability.ADMIN: "Admin access required",
}


@dataclass(frozen=True)
class Decision:
    allowed: bool
    error: Optional[AppError] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(True)

    @classmethod
    def deny(cls, error: AppError) -> "Decision":
        return cls(False, error)


def check_authenticated(user: Optional[User]) -> Decision:
    if user is None:
        return Decision.deny(Unauthorized())
    return Decision.allow()


def check_profile(profile: Optional[UserProfile], required: Capability) -> Decision:
    granted = PROFILE_CAPABILITY.get(profile.user_type) if profile else None
    if granted is None or granted < required:
        return Decision.deny(Forbidden(DENIAL_MESSAGES.get(required, "Forbidden")))
    return Decision.allow()


def check_capability(
    user: Optional[User],
    required: Capability,
    load_profile: Callable[[int], Optional[UserProfile]],
) -> Decision:
    """Run the gates in order, stopping at the first denial."""
    if required == Capability.PUBLIC:
        return Decision.allow()
    decision = check_authenticated(user)
    if not decision.allowed or required == Capability.AUTHENTICATED:
        return decision
    return check_profile(load_profile(user.id), required)


def require_capability(required: Capability):
    def dependency(
        db: Optional[Session] = Depends(get_db),
        current_user: Optional[User] = Depends(get_current_user),
    ) -> Optional[User]:
        decision = check_capability(current_user, required, lambda user_id: get_user_profile(db, user_id))
        if not decision.allowed:
            raise decision.error
        return current_user

    dependency.__name__ = f"require_{required.name.lower()}"
    return dependency


require_user = require_capability(Capability.AUTHENTICATED)
require_provider = require_capability(Capability.PROVIDER)
require_admin = require_capability(Capability.ADMIN)
