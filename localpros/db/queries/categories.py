# localpros/db/queries/categories.py
from typing import List, Optional

from sqlalchemy.orm import Session

from localpros.core.exceptions import NotFound
from localpros.db.models.category import Category
from localpros.db.queries.paths import read_path, write_path


@read_path(default=list)
def get_all_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name).all()


@read_path()
def get_category_by_id(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


@write_path
def insert_category(db: Session, **values) -> Category:
    category = Category(**values)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@write_path
def update_category(db: Session, category_id: int, updates: dict) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise NotFound("Category not found")
    for field, value in updates.items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    return category


@write_path
def delete_category(db: Session, category_id: int) -> bool:
    """Hard delete. Providers referencing the category are left untouched."""
    deleted = db.query(Category).filter(Category.id == category_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
