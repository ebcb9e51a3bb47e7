"""Dependency injection module for FastAPI.

This module provides request-scoped managers for FastAPI routes. Each
manager wraps the database session of the current request.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import reply_manager
from utils import thread_manager
from utils import user_manager


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(db)


def get_thread_manager(db: Session = Depends(get_db)) -> thread_manager.ThreadManager:
    """Get ThreadManager instance with request-scoped DB session."""
    return thread_manager.ThreadManager(db)


def get_reply_manager(db: Session = Depends(get_db)) -> reply_manager.ReplyManager:
    """Get ReplyManager instance with request-scoped DB session."""
    return reply_manager.ReplyManager(db)


# Type aliases for dependency injection
UserManagerDep = Annotated[
    user_manager.UserManager, Depends(get_user_manager)
]
ThreadManagerDep = Annotated[
    thread_manager.ThreadManager, Depends(get_thread_manager)
]
ReplyManagerDep = Annotated[
    reply_manager.ReplyManager, Depends(get_reply_manager)
]
