# localpros/api/routes/review.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from localpros.core.permissions import require_user
from localpros.db.base import get_db
from localpros.db.models.user import User
from localpros.schemas.review import AverageRatingResponse, ReviewCreate, ReviewResponse
from localpros.services import feedback
from localpros.services.aggregates import provider_average_rating

router = APIRouter(prefix="/reviews", tags=["reviews"])


# Any signed-in user may review, repeatedly
@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(review_in: ReviewCreate, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return feedback.create_review(db, review_in.provider_id, current_user.id, review_in.rating, review_in.comment)


# List reviews for a provider (public)
@router.get("/provider/{provider_id}", response_model=List[ReviewResponse])
def list_provider_reviews(provider_id: int, db: Session = Depends(get_db)):
    return feedback.get_reviews(db, provider_id)


@router.get("/provider/{provider_id}/average", response_model=AverageRatingResponse)
def get_average_rating(provider_id: int, db: Session = Depends(get_db)):
    reviews = feedback.get_reviews(db, provider_id)
    return AverageRatingResponse(
        provider_id=provider_id,
        average_rating=provider_average_rating(reviews),
        review_count=len(reviews),
    )
