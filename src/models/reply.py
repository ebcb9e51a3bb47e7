from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, utc_now_iso


class ReplyModel(Base):
    __tablename__ = "replies"

    reply_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    thread_id = Column(
        Integer,
        ForeignKey("threads.thread_id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    content = Column(String(500), nullable=False)
    correct = Column(Boolean, nullable=False, default=False)
    created_at = Column(String, nullable=False, default=utc_now_iso)
    updated_at = Column(
        String, nullable=False, default=utc_now_iso, onupdate=utc_now_iso
    )

    author = relationship("UserModel", back_populates="replies")
    thread = relationship("ThreadModel", back_populates="replies")
