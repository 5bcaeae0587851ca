# localpros/services/feedback.py
"""Reviews and contact logs: append-only children of a provider."""

from typing import List, Optional

from sqlalchemy.orm import Session

from localpros.db.models.contact_log import ContactLog
from localpros.db.models.review import Review
from localpros.db.queries import contacts as contact_queries
from localpros.db.queries import reviews as review_queries
from localpros.services.providers import require_storage, get_provider


def create_review(
    db: Optional[Session], provider_id: int, user_id: int, rating: int, comment: Optional[str] = None
) -> Review:
    # rating range is checked by the request schema; repeated reviews are allowed
    require_storage(db)
    get_provider(db, provider_id)
    return review_queries.insert_review(db, provider_id, user_id, rating, comment)


def get_reviews(db: Optional[Session], provider_id: int) -> List[Review]:
    return review_queries.get_provider_reviews(db, provider_id)


def log_contact(
    db: Optional[Session], provider_id: int, user_id: Optional[int] = None, contact_method: str = "whatsapp"
) -> ContactLog:
    require_storage(db)
    get_provider(db, provider_id)
    return contact_queries.insert_contact(db, provider_id, user_id, contact_method)


def get_contacts(db: Optional[Session], provider_id: int) -> List[ContactLog]:
    return contact_queries.get_provider_contacts(db, provider_id)

