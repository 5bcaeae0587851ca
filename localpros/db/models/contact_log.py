# localpros/db/models/contact_log.py
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, func
from localpros.db.base import Base


class ContactLog(Base):
    """Append-only record of a customer reaching out to a provider."""
    __tablename__ = "contact_logs"

    id = Column(Integer, primary_key=True, index=True)
    provider_id = Column(Integer, ForeignKey("service_providers.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # anonymous contacts allowed
    contact_method = Column(String(50), nullable=False, default="whatsapp", server_default="whatsapp")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
