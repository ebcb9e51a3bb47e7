from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base, utc_now_iso


class ThreadModel(Base):
    __tablename__ = "threads"

    thread_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    posted_anonymously = Column(Boolean, nullable=False, default=False)
    created_at = Column(String, nullable=False, default=utc_now_iso)
    updated_at = Column(
        String, nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    author = relationship("UserModel", back_populates="threads")
    replies = relationship(
        "ReplyModel",
        back_populates="thread",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
