# localpros/db/models/category.py
from sqlalchemy import Column, Integer, String, DateTime, JSON, func
from localpros.db.base import Base


class Category(Base):
    __tablename__ = "service_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(String, nullable=True)
    icon = Column(String(50), nullable=True)
    synonyms = Column(JSON, nullable=True)  # list of alternative names

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
