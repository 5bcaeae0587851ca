# localpros/db/models/provider.py
from sqlalchemy import Column, DateTime, Integer, String, ForeignKey, Boolean, func
from localpros.db.base import Base


class ServiceProvider(Base):
    """
    A provider listing owned by one user.
    status: pending -> approved | rejected (set only by the admin operations)
    is_active and is_featured are independent of status.
    """
    __tablename__ = "service_providers"

    id = Column(Integer, primary_key=True, index=True)

    # one listing per owner
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    category_id = Column(Integer, ForeignKey("service_categories.id"), nullable=False)
    neighborhood_id = Column(Integer, ForeignKey("neighborhoods.id"), nullable=False)

    name = Column(String(150), nullable=False)
    phone = Column(String(20), nullable=False)  # WhatsApp number
    description = Column(String, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)
    status = Column(String, nullable=False, default="pending", server_default="pending")
    is_featured = Column(Boolean, nullable=False, default=False)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    rejection_reason = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
