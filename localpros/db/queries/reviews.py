# localpros/db/queries/reviews.py
from typing import List, Optional

from sqlalchemy.orm import Session

from localpros.db.models.review import Review
from localpros.db.queries.paths import read_path, write_path


@read_path(default=list)
def get_provider_reviews(db: Session, provider_id: int) -> List[Review]:
    return (
        db.query(Review)
        .filter(Review.provider_id == provider_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


@write_path
def insert_review(db: Session, provider_id: int, user_id: int, rating: int, comment: Optional[str] = None) -> Review:
    review = Review(provider_id=provider_id, user_id=user_id, rating=rating, comment=comment)
    db.add(review)
    db.commit()
    db.refresh(review)
    return review
