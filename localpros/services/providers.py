# localpros/services/providers.py
"""
Provider lifecycle.

    [none]  --create-->          pending
    pending --approve-->         approved   (sets approved_at)
    pending --reject(reason)-->  rejected   (sets rejection_reason)

approved and rejected have no outbound transition to another status.
Re-applying the same decision is accepted: approving again refreshes
approved_at, rejecting again replaces the reason. To open a re-review path,
add the source status to the relevant entry of TRANSITIONS.

is_active (owner) and is_featured (admin) are plain toggles independent of status.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from localpros.core.config import settings
from localpros.core.exceptions import BadRequest, NotFound, Unavailable
from localpros.core.logging import get_logger
from localpros.db.models.provider import ServiceProvider
from localpros.db.queries import providers as provider_queries
from localpros.db.queries.categories import get_category_by_id
from localpros.db.queries.neighborhoods import get_neighborhood_by_id
from localpros.services.notifications import notify_admins

LOGGER = get_logger(__name__, level=settings.log_level)

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"

# action -> {current status: next status}
TRANSITIONS = {
    "approve": {PENDING: APPROVED, APPROVED: APPROVED},
    "reject": {PENDING: REJECTED, REJECTED: REJECTED},
}

PATCHABLE_FIELDS = ("name", "phone", "description", "category_id", "neighborhood_id")
NULLABLE_FIELDS = ("description",)


def require_storage(db: Optional[Session]):
    if db is None:
        raise Unavailable()


def _next_status(action: str, provider: ServiceProvider) -> str:
    allowed = TRANSITIONS[action]
    if provider.status not in allowed:
        raise BadRequest(f"Cannot {action} a provider that is {provider.status}")
    return allowed[provider.status]


# -------------------------
# Reads
# -------------------------
def get_provider(db: Optional[Session], provider_id: int) -> ServiceProvider:
    provider = provider_queries.get_provider_by_id(db, provider_id)
    if not provider:
        raise NotFound("Provider not found")
    return provider


def get_owned_providers(db: Optional[Session], user_id: int) -> List[ServiceProvider]:
    return provider_queries.get_providers_by_user_id(db, user_id)


def get_owned_provider(db: Optional[Session], user_id: int) -> Optional[ServiceProvider]:
    owned = get_owned_providers(db, user_id)
    return owned[0] if owned else None


def get_approved_providers(
    db: Optional[Session],
    category_id: Optional[int] = None,
    neighborhood_id: Optional[int] = None,
) -> List[ServiceProvider]:
    # inactive providers are kept; the caller decides how to surface them
    return provider_queries.list_providers(
        db, status=APPROVED, category_id=category_id, neighborhood_id=neighborhood_id
    )


def get_featured_providers(db: Optional[Session]) -> List[ServiceProvider]:
    return provider_queries.list_providers(db, status=APPROVED, featured=True)


def get_pending_providers(db: Optional[Session]) -> List[ServiceProvider]:
    return provider_queries.list_providers(db, status=PENDING)


# -------------------------
# Owner operations
# -------------------------
def create_provider(
    db: Optional[Session],
    user_id: int,
    name: str,
    phone: str,
    category_id: int,
    neighborhood_id: int,
    description: Optional[str] = None,
    notifier: Callable[[str, str], object] = notify_admins,
) -> List[ServiceProvider]:
    require_storage(db)

    # 1) one listing per owner
    if get_owned_providers(db, user_id):
        raise BadRequest("Provider profile already exists")

    # 2) and 3) references must resolve
    category = get_category_by_id(db, category_id)
    if not category:
        raise BadRequest("Invalid category")
    if not get_neighborhood_by_id(db, neighborhood_id):
        raise BadRequest("Invalid neighborhood")

    provider = provider_queries.insert_provider(
        db,
        user_id=user_id,
        name=name,
        phone=phone,
        category_id=category_id,
        neighborhood_id=neighborhood_id,
        description=description,
        status=PENDING,
        is_active=True,
        is_featured=False,
    )
    LOGGER.info(f"Provider {provider.id} created by user {user_id}; awaiting approval")

    try:
        notifier(
            "New provider awaiting approval",
            f"{name} signed up as {category.name}. Open the admin panel to review.",
        )
    except Exception as e:
        LOGGER.warning(f"Admin notification for provider {provider.id} failed: {e}")

    return get_owned_providers(db, user_id)


def update_provider(db: Optional[Session], user_id: int, changes: dict) -> List[ServiceProvider]:
    """Patch the caller's own listing. Status and approval fields are never touched here."""
    require_storage(db)
    provider = get_owned_provider(db, user_id)
    if not provider:
        raise NotFound("Provider not found")

    updates = {}
    for field in PATCHABLE_FIELDS:
        if field not in changes:
            continue
        value = changes[field]
        if value is None and field not in NULLABLE_FIELDS:
            continue
        updates[field] = value

    if "category_id" in updates and updates["category_id"] != provider.category_id:
        if not get_category_by_id(db, updates["category_id"]):
            raise BadRequest("Invalid category")
    if "neighborhood_id" in updates and updates["neighborhood_id"] != provider.neighborhood_id:
        if not get_neighborhood_by_id(db, updates["neighborhood_id"]):
            raise BadRequest("Invalid neighborhood")

    if updates:
        provider_queries.update_provider(db, provider.id, updates)
    return get_owned_providers(db, user_id)


def toggle_active(db: Optional[Session], user_id: int) -> List[ServiceProvider]:
    require_storage(db)
    provider = get_owned_provider(db, user_id)
    if not provider:
        raise NotFound("Provider not found")
    provider_queries.update_provider(db, provider.id, {"is_active": not provider.is_active})
    return get_owned_providers(db, user_id)


# -------------------------
# Admin operations
# -------------------------
def approve_provider(db: Optional[Session], provider_id: int) -> ServiceProvider:
    require_storage(db)
    provider = get_provider(db, provider_id)
    status = _next_status("approve", provider)
    updated = provider_queries.update_provider(
        db, provider_id, {"status": status, "approved_at": datetime.now(timezone.utc)}
    )
    LOGGER.info(f"Provider {provider_id} approved")
    return updated


def reject_provider(db: Optional[Session], provider_id: int, reason: str) -> ServiceProvider:
    require_storage(db)
    provider = get_provider(db, provider_id)
    status = _next_status("reject", provider)
    updated = provider_queries.update_provider(
        db, provider_id, {"status": status, "rejection_reason": reason}
    )
    LOGGER.info(f"Provider {provider_id} rejected: {reason}")
    return updated


def toggle_featured(db: Optional[Session], provider_id: int) -> ServiceProvider:
    require_storage(db)
    provider = get_provider(db, provider_id)
    return provider_queries.update_provider(db, provider_id, {"is_featured": not provider.is_featured})
