# localpros/schemas/review.py
from pydantic import BaseModel, Field, conint
from typing import Optional
from datetime import datetime

class ReviewCreate(BaseModel):
    provider_id: int
    rating: conint(ge=1, le=5) = Field(..., description="Rating 1-5")
    comment: Optional[str] = None

class ReviewResponse(BaseModel):
    id: int
    provider_id: int
    user_id: int
    rating: int
    comment: Optional[str]
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class AverageRatingResponse(BaseModel):
    provider_id: int
    average_rating: float
    review_count: int
