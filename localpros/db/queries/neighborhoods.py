# localpros/db/queries/neighborhoods.py
from typing import List, Optional

from sqlalchemy.orm import Session

from localpros.db.models.neighborhood import Neighborhood
from localpros.db.queries.paths import read_path, write_path


@read_path(default=list)
def get_all_neighborhoods(db: Session) -> List[Neighborhood]:
    return db.query(Neighborhood).order_by(Neighborhood.name).all()


@read_path()
def get_neighborhood_by_id(db: Session, neighborhood_id: int) -> Optional[Neighborhood]:
    return db.query(Neighborhood).filter(Neighborhood.id == neighborhood_id).first()


@write_path
def insert_neighborhood(db: Session, name: str) -> Neighborhood:
    neighborhood = Neighborhood(name=name)
    db.add(neighborhood)
    db.commit()
    db.refresh(neighborhood)
    return neighborhood


@write_path
def delete_neighborhood(db: Session, neighborhood_id: int) -> bool:
    deleted = db.query(Neighborhood).filter(Neighborhood.id == neighborhood_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
