# localpros/db/queries/providers.py
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from localpros.core.exceptions import BadRequest
from localpros.db.models.provider import ServiceProvider
from localpros.db.queries.paths import read_path, write_path


@read_path()
def get_provider_by_id(db: Session, provider_id: int) -> Optional[ServiceProvider]:
    return db.query(ServiceProvider).filter(ServiceProvider.id == provider_id).first()


@read_path(default=list)
def get_providers_by_user_id(db: Session, user_id: int) -> List[ServiceProvider]:
    return db.query(ServiceProvider).filter(ServiceProvider.user_id == user_id).order_by(ServiceProvider.id).all()


@read_path(default=list)
def list_providers(
    db: Session,
    status: Optional[str] = None,
    category_id: Optional[int] = None,
    neighborhood_id: Optional[int] = None,
    featured: Optional[bool] = None,
    active: Optional[bool] = None,
) -> List[ServiceProvider]:
    q = db.query(ServiceProvider)
    if status:
        q = q.filter(ServiceProvider.status == status)
    if category_id is not None:
        q = q.filter(ServiceProvider.category_id == category_id)
    if neighborhood_id is not None:
        q = q.filter(ServiceProvider.neighborhood_id == neighborhood_id)
    if featured is not None:
        q = q.filter(ServiceProvider.is_featured == featured)
    if active is not None:
        q = q.filter(ServiceProvider.is_active == active)
    return q.order_by(ServiceProvider.id).all()


@write_path
def insert_provider(db: Session, **values) -> ServiceProvider:
    provider = ServiceProvider(**values)
    db.add(provider)
    try:
        db.commit()
    except IntegrityError as e:
        # unique owner constraint lost a race with a concurrent create
        db.rollback()
        raise BadRequest("Provider profile already exists", original_error=e) from e
    db.refresh(provider)
    return provider


@write_path
def update_provider(db: Session, provider_id: int, updates: dict) -> Optional[ServiceProvider]:
    provider = db.query(ServiceProvider).filter(ServiceProvider.id == provider_id).first()
    if not provider:
        return None
    for field, value in updates.items():
        setattr(provider, field, value)
    db.commit()
    db.refresh(provider)
    return provider

