# localpros/schemas/contact.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class ContactCreate(BaseModel):
    provider_id: int
    contact_method: str = Field("whatsapp", min_length=1, max_length=50)

class ContactResponse(BaseModel):
    id: int
    provider_id: int
    user_id: Optional[int] = None
    contact_method: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ProviderContactsResponse(BaseModel):
    provider_id: int
    count: int
    contacts: List[ContactResponse]
