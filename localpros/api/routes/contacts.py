# localpros/api/routes/contacts.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from localpros.core.permissions import require_user
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.schemas.contact import ContactCreate, ContactResponse, ProviderContactsResponse
from localpros.services import feedback
from localpros.services.aggregates import contact_count

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def log_contact(payload: ContactCreate, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return feedback.log_contact(db, payload.provider_id, current_user.id, payload.contact_method)


@router.get("/provider/{provider_id}", response_model=ProviderContactsResponse)
def provider_contacts(provider_id: int, db: Session = Depends(get_db)):
    contacts = feedback.get_contacts(db, provider_id)
    return ProviderContactsResponse(provider_id=provider_id, count=contact_count(contacts), contacts=contacts)
