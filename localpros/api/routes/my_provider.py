# localpros/api/routes/my_provider.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from localpros.core.permissions import require_provider
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.schemas.provider import ProviderCreate, ProviderResponse, ProviderUpdate
from localpros.services import providers as provider_service

router = APIRouter(prefix="/my-provider", tags=["my-provider"])


# Caller's own listing (null when none)
@router.get("", response_model=Optional[ProviderResponse])
def get_my_provider(db: Session = Depends(get_db), current_user: User = Depends(require_provider)):
    return provider_service.get_owned_provider(db, current_user.id)


@router.post("", response_model=List[ProviderResponse])
def create_my_provider(
    payload: ProviderCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_provider),
):
    return provider_service.create_provider(
        db,
        current_user.id,
        name=payload.name,
        phone=payload.phone,
        category_id=payload.category_id,
        neighborhood_id=payload.neighborhood_id,
        description=payload.description,
    )


@router.patch("", response_model=List[ProviderResponse])
def update_my_provider(
    payload: ProviderUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_provider),
):
    return provider_service.update_provider(db, current_user.id, payload.model_dump(exclude_unset=True))


# Flips is_active (not the approval status)
@router.post("/toggle-status", response_model=List[ProviderResponse])
def toggle_my_provider_status(db: Session = Depends(get_db), current_user: User = Depends(require_provider)):
    return provider_service.toggle_active(db, current_user.id)
