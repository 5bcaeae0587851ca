# localpros/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from localpros.core.config import settings
from localpros.core.exceptions import Unauthorized, Unavailable
from localpros.core.logging import get_logger
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.db.queries.users import upsert_user

LOGGER = get_logger(__name__, level=settings.log_level)

SESSION_TTL_SECONDS = 60 * 60 * 24 * 365
PROFILE_CLAIMS = ("name", "email", "login_method")

bearer_scheme = HTTPBearer(auto_error=False)


def issue_session_token(open_id: str, ttl_seconds: int = SESSION_TTL_SECONDS, **claims) -> str:
    now = datetime.now(timezone.utc)
    body = {
        "iss": settings.session_issuer,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl_seconds)).timestamp()),
        "sub": open_id,
        **{k: v for k, v in claims.items() if k in PROFILE_CLAIMS},
    }
    return jwt.encode(body, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> dict:
    try:
        claims = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm],
            issuer=settings.session_issuer,
        )
    except JWTError as e:
        raise Unauthorized("Invalid session token", original_error=e) from e
    if not claims.get("sub"):
        raise Unauthorized("Invalid session token")
    return claims


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Optional[Session] = Depends(get_db),
) -> Optional[User]:
    """
    Resolve the calling actor, or None for anonymous calls.
    A bad token is treated as anonymous; the sign-in is recorded on every
    resolved call and the configured owner is promoted to admin.
    """
    if credentials is None:
        return None
    try:
        claims = decode_session_token(credentials.credentials)
    except Unauthorized as e:
        LOGGER.info(f"Ignoring session token: {e.message}")
        return None

    open_id = claims["sub"]
    role = "admin" if settings.owner_open_id and open_id == settings.owner_open_id else None
    fields = {k: claims[k] for k in PROFILE_CLAIMS if k in claims}
    return upsert_user(db, open_id, role=role, **fields)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Optional[Session] = Depends(get_db),
) -> Optional[User]:
    """Like `get_current_user`, but a storage outage resolves to anonymous."""
    try:
        return get_current_user(credentials, db)
    except Unavailable:
        LOGGER.warning("Storage unavailable; resolving caller as anonymous")
        return None
