# localpros/api/routes/admin.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from localpros.core.permissions import require_admin
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.db.queries import categories as category_queries
from localpros.db.queries import neighborhoods as neighborhood_queries
from localpros.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    NeighborhoodCreate,
    NeighborhoodResponse,
    SuccessResponse,
)
from localpros.schemas.provider import ProviderReject, ProviderResponse
from localpros.services import providers as provider_service

router = APIRouter(prefix="/admin", tags=["admin"])


# --------------------------------------------------
# 1. Provider approvals
# --------------------------------------------------
@router.get("/providers/pending", response_model=List[ProviderResponse])
def pending_approvals(db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    return provider_service.get_pending_providers(db)


@router.post("/providers/reject", response_model=ProviderResponse)
def reject_provider(
    payload: ProviderReject,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return provider_service.reject_provider(db, payload.provider_id, payload.reason)


@router.post("/providers/{provider_id}/approve", response_model=ProviderResponse)
def approve_provider(provider_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    return provider_service.approve_provider(db, provider_id)


@router.post("/providers/{provider_id}/toggle-featured", response_model=ProviderResponse)
def toggle_featured(provider_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    return provider_service.toggle_featured(db, provider_id)


# --------------------------------------------------
# 2. Categories
# --------------------------------------------------
@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    return category_queries.get_all_categories(db)


@router.post("/categories", response_model=CategoryResponse)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return category_queries.insert_category(db, **payload.model_dump())


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    updates = payload.model_dump(exclude_unset=True)
    # name is required on the row; an explicit null leaves it unchanged
    if updates.get("name") is None:
        updates.pop("name", None)
    return category_queries.update_category(db, category_id, updates)


@router.delete("/categories/{category_id}", response_model=SuccessResponse)
def delete_category(category_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    category_queries.delete_category(db, category_id)
    return SuccessResponse()


# --------------------------------------------------
# 3. Neighborhoods
# --------------------------------------------------
@router.get("/neighborhoods", response_model=List[NeighborhoodResponse])
def list_neighborhoods(db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    return neighborhood_queries.get_all_neighborhoods(db)


@router.post("/neighborhoods", response_model=NeighborhoodResponse)
def create_neighborhood(
    payload: NeighborhoodCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return neighborhood_queries.insert_neighborhood(db, payload.name)


@router.delete("/neighborhoods/{neighborhood_id}", response_model=SuccessResponse)
def delete_neighborhood(neighborhood_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_admin)):
    neighborhood_queries.delete_neighborhood(db, neighborhood_id)
    return SuccessResponse()
