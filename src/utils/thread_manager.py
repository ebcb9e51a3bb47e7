"""Thread management utilities."""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from core.outcomes import Listing, to_listing
from models.base import utc_now_iso
from models.thread import ThreadModel
from models.user import UserModel
from utils.identifiers import coerce_identifier, parse_identifier
from utils.validators import check_thread_content, check_thread_title

logger = logging.getLogger(__name__)

UPDATABLE_THREAD_FIELDS = ["user_id", "title", "content", "posted_anonymously"]


class ThreadManager:
    """Manages thread operations using SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    def _find_user(self, user_id: Any) -> Optional[UserModel]:
        value = coerce_identifier(user_id)
        if value is None:
            return None
        return self.db.query(UserModel).filter(UserModel.user_id == value).first()

    def find_thread(self, thread_id: Any) -> Optional[ThreadModel]:
        value = coerce_identifier(thread_id)
        if value is None:
            return None
        return (
            self.db.query(ThreadModel)
            .filter(ThreadModel.thread_id == value)
            .first()
        )

    def create_thread(
        self,
        user_id: Any,
        title: Any,
        content: Any,
        posted_anonymously: Any = False,
    ) -> ThreadModel:
        """Create a thread for an existing user.

        Args:
            user_id: Author of the thread.
            title: Thread title, checked by check_thread_title.
            content: Thread body, checked by check_thread_content.
            posted_anonymously: Whether to hide the author, defaults to False.

        Returns:
            The created ThreadModel.

        Raises:
            ValidationError: If user_id is missing or title/content are invalid.
            NotFoundError: If the user does not exist.
        """
        if not user_id:
            raise ValidationError("You need to be logged in to post a thread")

        if not check_thread_title(title) or not check_thread_content(content):
            raise ValidationError(
                "You need a title and content to create a new thread"
            )

        if not isinstance(posted_anonymously, bool):
            raise ValidationError(
                "Invalid data type", "posted_anonymously must be a boolean."
            )

        user = self._find_user(user_id)
        if user is None:
            raise NotFoundError("User does not exist")

        model = ThreadModel(
            user_id=user.user_id,
            title=title,
            content=content,
            posted_anonymously=posted_anonymously,
        )
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info("Created thread %s for user %s", model.thread_id, user.user_id)
        return model

    def get_thread(self, thread_id: Any) -> ThreadModel:
        """Fetch a thread by path id.

        Raises:
            InvalidIdentifierError: If the id is not a positive 32-bit integer.
            NotFoundError: If no thread has this id.
        """
        value = parse_identifier(thread_id, "thread_id")
        model = (
            self.db.query(ThreadModel)
            .filter(ThreadModel.thread_id == value)
            .first()
        )
        if model is None:
            raise NotFoundError(
                "Thread not found", f"No thread exists with the thread_id: {value}"
            )
        return model

    def list_threads(self) -> Listing:
        models = self.db.query(ThreadModel).order_by(ThreadModel.thread_id).all()
        return to_listing(models, "No threads available at the moment.")

    def list_threads_for_user(self, user_id: Any) -> Listing:
        """List the threads written by one user.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = self._find_user(user_id)
        if user is None:
            raise NotFoundError("User not found")

        models = (
            self.db.query(ThreadModel)
            .filter(ThreadModel.user_id == user.user_id)
            .order_by(ThreadModel.thread_id)
            .all()
        )
        return to_listing(models, "No threads found for this user")

    def update_thread(self, thread_id: Any, fields: Dict[str, Any]) -> ThreadModel:
        """Apply a partial update to a thread.

        Title and content are only type-checked here, the format rules of
        creation are not applied again.

        Raises:
            ValidationError: On unknown keys, an empty update or wrong types.
            NotFoundError: If the thread, or a new author, does not exist.
        """
        invalid_fields = [key for key in fields if key not in UPDATABLE_THREAD_FIELDS]
        if invalid_fields:
            raise ValidationError(
                "Invalid fields",
                f"The following fields are not valid: {', '.join(invalid_fields)}",
            )
        if not fields:
            raise ValidationError(
                "No fields provided for update. At least one valid field must be included."
            )

        for key in ("title", "content"):
            if key in fields and not isinstance(fields[key], str):
                raise ValidationError(
                    "Invalid data type", "Title and content must be strings."
                )
        if "posted_anonymously" in fields and not isinstance(
            fields["posted_anonymously"], bool
        ):
            raise ValidationError(
                "Invalid data type", "posted_anonymously must be a boolean."
            )

        values = dict(fields)
        if "user_id" in values:
            user = self._find_user(values["user_id"])
            if user is None:
                raise NotFoundError("User does not exist")
            values["user_id"] = user.user_id

        value = coerce_identifier(thread_id)
        if value is None:
            raise NotFoundError("Thread not found")

        values["updated_at"] = utc_now_iso()
        stmt = (
            update(ThreadModel)
            .where(ThreadModel.thread_id == value)
            .values(**values)
            .returning(ThreadModel)
        )
        model = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if model is None:
            raise NotFoundError("Thread not found")
        self.db.refresh(model)
        return model

    def delete_thread(self, thread_id: Any) -> None:
        """Delete a thread; its replies go with it.

        Raises:
            NotFoundError: If the thread does not exist.
        """
        value = coerce_identifier(thread_id)
        if value is None:
            raise NotFoundError("Thread not found")

        stmt = (
            delete(ThreadModel)
            .where(ThreadModel.thread_id == value)
            .returning(ThreadModel.thread_id)
        )
        deleted = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if deleted is None:
            raise NotFoundError("Thread not found")
        logger.info("Deleted thread %s", value)
