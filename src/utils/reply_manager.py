"""Reply management utilities.

Replies hang off a thread and a user. Every lookup scoped by a parent checks
that the parent exists first, so a missing thread or user is reported as
such instead of as an empty result.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from core.outcomes import Listing, to_listing
from models.base import utc_now_iso
from models.reply import ReplyModel
from models.thread import ThreadModel
from models.user import UserModel
from utils.identifiers import coerce_identifier, parse_identifier
from utils.validators import check_reply_content

logger = logging.getLogger(__name__)

UPDATABLE_REPLY_FIELDS = ["content", "correct"]


class ReplyManager:
    """Manages reply operations using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize ReplyManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def _require_thread(self, thread_id: Any) -> ThreadModel:
        value = coerce_identifier(thread_id)
        model = None
        if value is not None:
            model = (
                self.db.query(ThreadModel)
                .filter(ThreadModel.thread_id == value)
                .first()
            )
        if model is None:
            raise NotFoundError(f"Thread with ID {thread_id} not found.")
        return model

    def _require_user(self, user_id: Any) -> UserModel:
        value = coerce_identifier(user_id)
        model = None
        if value is not None:
            model = self.db.query(UserModel).filter(UserModel.user_id == value).first()
        if model is None:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return model

    def create_reply(self, thread_id: Any, user_id: Any, content: Any) -> ReplyModel:
        """Post a reply in a thread.

        Args:
            thread_id: Thread receiving the reply.
            user_id: Author of the reply.
            content: Reply text, checked by check_reply_content.

        Returns:
            The created ReplyModel.

        Raises:
            ValidationError: If content is invalid or user_id is missing.
            NotFoundError: If the thread or the user does not exist.
        """
        if not check_reply_content(content):
            raise ValidationError("Invalid content.")
        if not user_id or not content:
            raise ValidationError(
                "Missing required fields: user_id and content are required."
            )

        thread = self._require_thread(thread_id)
        user = self._require_user(user_id)

        model = ReplyModel(
            thread_id=thread.thread_id,
            user_id=user.user_id,
            content=content,
        )
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info(
            "Created reply %s in thread %s by user %s",
            model.reply_id,
            thread.thread_id,
            user.user_id,
        )
        return model

    def get_reply(self, reply_id: Any = None) -> Any:
        """Fetch one reply, or every reply when no id is given.

        Args:
            reply_id: Path id of the reply, or None.

        Returns:
            A ReplyModel, or a list of all replies (possibly empty) when
            reply_id is None.

        Raises:
            InvalidIdentifierError: If the id is not a positive 32-bit integer.
            NotFoundError: If no reply has this id.
        """
        if reply_id is None or reply_id == "":
            return self._all_replies()

        value = parse_identifier(reply_id, "reply_id", error="Invalid Reply ID.")
        model = self.db.query(ReplyModel).filter(ReplyModel.reply_id == value).first()
        if model is None:
            raise NotFoundError(f"Reply with ID {reply_id} not found.")
        return model

    def _all_replies(self) -> List[ReplyModel]:
        return self.db.query(ReplyModel).order_by(ReplyModel.reply_id).all()

    def list_replies(self) -> Listing:
        return to_listing(self._all_replies(), "No replies found in the database")

    def list_replies_for_thread(self, thread_id: Any) -> Listing:
        thread = self._require_thread(thread_id)
        models = (
            self.db.query(ReplyModel)
            .filter(ReplyModel.thread_id == thread.thread_id)
            .order_by(ReplyModel.reply_id)
            .all()
        )
        return to_listing(
            models, f"No replies found for thread with ID {thread_id}."
        )

    def list_replies_for_user(self, user_id: Any) -> Listing:
        user = self._require_user(user_id)
        models = (
            self.db.query(ReplyModel)
            .filter(ReplyModel.user_id == user.user_id)
            .order_by(ReplyModel.reply_id)
            .all()
        )
        return to_listing(models, f"No replies found for user with ID {user_id}.")

    def list_replies_for_thread_and_user(self, thread_id: Any, user_id: Any) -> Listing:
        thread = self._require_thread(thread_id)
        user = self._require_user(user_id)
        models = (
            self.db.query(ReplyModel)
            .filter(
                ReplyModel.thread_id == thread.thread_id,
                ReplyModel.user_id == user.user_id,
            )
            .order_by(ReplyModel.reply_id)
            .all()
        )
        return to_listing(
            models,
            f"No replies found for thread with ID {thread_id} "
            f"and user with ID {user_id}.",
        )

    def update_reply(self, reply_id: Any, fields: Dict[str, Any]) -> ReplyModel:
        """Edit a reply's content or mark it as correct.

        Raises:
            ValidationError: On unknown keys, an empty update, blank content
                or a non-boolean ``correct``.
            NotFoundError: If the reply does not exist.
        """
        invalid_fields = [key for key in fields if key not in UPDATABLE_REPLY_FIELDS]
        if invalid_fields:
            raise ValidationError(f"Invalid fields: {', '.join(invalid_fields)}")
        if not fields:
            raise ValidationError(
                "No fields provided for update. At least one valid field must be included."
            )

        content = fields.get("content")
        if "content" in fields and (
            not isinstance(content, str) or content.strip() == ""
        ):
            raise ValidationError("Content must be a non-empty string.")
        if "correct" in fields and not isinstance(fields["correct"], bool):
            raise ValidationError("The 'correct' field must be a boolean value.")

        value = coerce_identifier(reply_id)
        if value is None:
            raise NotFoundError(f"Reply with ID {reply_id} not found.")

        stmt = (
            update(ReplyModel)
            .where(ReplyModel.reply_id == value)
            .values(**fields, updated_at=utc_now_iso())
            .returning(ReplyModel)
        )
        model: Optional[ReplyModel] = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if model is None:
            raise NotFoundError(f"Reply with ID {reply_id} not found.")
        self.db.refresh(model)
        return model

    def delete_reply(self, reply_id: Any) -> None:
        """Delete a reply.

        Raises:
            NotFoundError: If the reply does not exist.
        """
        value = coerce_identifier(reply_id)
        if value is None:
            raise NotFoundError("Reply not found")

        stmt = (
            delete(ReplyModel)
            .where(ReplyModel.reply_id == value)
            .returning(ReplyModel.reply_id)
        )
        deleted = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if deleted is None:
            raise NotFoundError("Reply not found")
        logger.info("Deleted reply %s", value)
