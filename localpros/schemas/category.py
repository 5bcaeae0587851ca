# localpros/schemas/category.py
from pydantic import BaseModel, Field
from typing import List, Optional


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    synonyms: Optional[List[str]] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    synonyms: Optional[List[str]] = None


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    synonyms: Optional[List[str]] = None

    class Config:
        from_attributes = True


class NeighborhoodCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)


class NeighborhoodResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    success: bool = True
