# localpros/db/queries/contacts.py
from typing import List, Optional

from sqlalchemy.orm import Session

from localpros.db.models.contact_log import ContactLog
from localpros.db.queries.paths import read_path, write_path


@read_path(default=list)
def get_provider_contacts(db: Session, provider_id: int) -> List[ContactLog]:
    return db.query(ContactLog).filter(ContactLog.provider_id == provider_id).order_by(ContactLog.id).all()


@write_path
def insert_contact(db: Session, provider_id: int, user_id: Optional[int] = None, contact_method: str = "whatsapp") -> ContactLog:
    contact = ContactLog(provider_id=provider_id, user_id=user_id, contact_method=contact_method)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact
