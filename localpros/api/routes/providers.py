# localpros/api/routes/providers.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from localpros.db.base import get_db
from localpros.schemas.provider import ProviderResponse
from localpros.services import providers as provider_service

router = APIRouter(prefix="/providers", tags=["providers"])


# Approved providers, optionally narrowed by category and/or neighborhood.
# Inactive providers are included; clients mark them as unavailable.
@router.get("", response_model=List[ProviderResponse])
def list_providers(
    category_id: Optional[int] = Query(None),
    neighborhood_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    return provider_service.get_approved_providers(db, category_id=category_id, neighborhood_id=neighborhood_id)


@router.get("/featured", response_model=List[ProviderResponse])
def featured_providers(db: Session = Depends(get_db)):
    return provider_service.get_featured_providers(db)


@router.get("/{provider_id}", response_model=ProviderResponse)
def get_provider(provider_id: int, db: Session = Depends(get_db)):
    return provider_service.get_provider(db, provider_id)
