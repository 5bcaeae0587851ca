# localpros/api/routes/data.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from localpros.db.base import get_db
from localpros.db.queries.categories import get_all_categories
from localpros.db.queries.neighborhoods import get_all_neighborhoods
from localpros.schemas.category import CategoryResponse, NeighborhoodResponse

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/categories", response_model=List[CategoryResponse])
def categories(db: Session = Depends(get_db)):
    return get_all_categories(db)


@router.get("/neighborhoods", response_model=List[NeighborhoodResponse])
def neighborhoods(db: Session = Depends(get_db)):
    return get_all_neighborhoods(db)
