# localpros/schemas/provider.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# Owner creates listing
class ProviderCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=150)
    phone: str = Field(..., min_length=10, max_length=20, description="WhatsApp number")
    category_id: int
    neighborhood_id: int
    description: Optional[str] = None


# Owner patches listing; status fields are not accepted here
class ProviderUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=150)
    phone: Optional[str] = Field(None, min_length=10, max_length=20)
    description: Optional[str] = None
    category_id: Optional[int] = None
    neighborhood_id: Optional[int] = None


class ProviderReject(BaseModel):
    provider_id: int
    reason: str


# What API returns
class ProviderResponse(BaseModel):
    id: int
    user_id: int
    name: str
    phone: str
    category_id: int
    neighborhood_id: int
    description: Optional[str] = None

    is_active: bool
    status: str
    is_featured: bool
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
