"""User database model.

This module defines the User database model using SQLAlchemy.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, utc_now_iso


class UserModel(Base):
    """User database model."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(50), nullable=False)
    email = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(String, nullable=False)  # 'student', 'teacher', or 'admin'
    created_at = Column(String, nullable=False, default=utc_now_iso)  # ISO format string
    updated_at = Column(
        String, nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    threads = relationship(
        "ThreadModel",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    replies = relationship(
        "ReplyModel",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
