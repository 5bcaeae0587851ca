# localpros/db/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from localpros.db.base import Base


class User(Base):
    """
    An actor, keyed by the external identity (open_id) of the sign-in provider.
    role is assigned at first sign-in: "admin" for the configured owner, else "user".
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    open_id = Column(String(64), unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(String, nullable=False, default="user", server_default="user")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    last_signed_in = Column(DateTime(timezone=True), server_default=func.now())


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    user_type = Column(String, nullable=False, default="customer", server_default="customer")  # customer/provider/admin

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
