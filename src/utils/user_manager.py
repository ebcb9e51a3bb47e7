"""User management utilities.

This module provides user registration, credential checks, lookup, update
and removal. Roles are derived from the email domain at registration and
cannot be chosen by the client.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import STUDENT_EMAIL_DOMAIN, TEACHER_EMAIL_DOMAIN
from core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from core.outcomes import Listing, to_listing
from models.base import utc_now_iso
from models.user import UserModel
from utils.identifiers import coerce_identifier, parse_identifier
from utils.passwords import hash_password, verify_password
from utils.validators import check_email, check_password, check_username

logger = logging.getLogger(__name__)

UPDATABLE_USER_FIELDS = ["username", "email", "password"]

_FIELD_VALIDATORS = {
    "username": check_username,
    "email": check_email,
    "password": check_password,
}


def derive_role(email: Any) -> Optional[str]:
    """Return the role granted by an email domain, or None if it grants none."""
    if not isinstance(email, str):
        return None
    if email.endswith(f"@{STUDENT_EMAIL_DOMAIN}"):
        return "student"
    if email.endswith(f"@{TEACHER_EMAIL_DOMAIN}"):
        return "teacher"
    return None


def user_not_found(user_id: Any) -> NotFoundError:
    return NotFoundError(
        "User not found", f"No user exists with the user_id: {user_id}"
    )


class UserManager:
    """Manages user persistence and credential checks using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize UserManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def register(self, username: Any, email: Any, password: Any) -> UserModel:
        """Create a new user.

        Args:
            username: Display name for the new user.
            email: School email; its domain decides the role.
            password: Plain text password, hashed before it is stored.

        Returns:
            Created UserModel.

        Raises:
            ValidationError: If a field is missing, the email domain is not
                accepted, or username or password is not a string.
            ConflictError: If the email is already registered.
        """
        if not username or not email or not password:
            raise ValidationError("Missing required fields")

        if isinstance(email, str) and self.get_user_by_email(email) is not None:
            raise ConflictError("Email already exists")

        role = derive_role(email)
        if role is None:
            raise ValidationError("Invalid email domain")
        if not isinstance(username, str) or not isinstance(password, str):
            raise ValidationError(
                "Invalid data type", "Username and password must be strings."
            )

        model = UserModel(
            username=username,
            email=email,
            password=hash_password(password),
            role=role,
        )

        # A concurrent registration can pass the check above; the unique
        # constraint on email catches it
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already exists") from e

        logger.info("Registered user %s with role %s", model.user_id, role)
        return model

    def login(self, email: Any, password: Any) -> UserModel:
        """Check credentials and return the matching user.

        Raises:
            ValidationError: If email, password or both are missing.
            AuthError: If the email is unknown or the password is wrong. The
                message is the same for both cases.
        """
        if not email and not password:
            raise ValidationError("Both email and password are required")
        if not email:
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")

        user = self.get_user_by_email(email) if isinstance(email, str) else None
        if user is None or not verify_password(password, user.password):
            raise AuthError("Invalid credentials")
        return user

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        return self.db.query(UserModel).filter(UserModel.email == email).first()

    def find_user(self, user_id: Any) -> Optional[UserModel]:
        """Look up a user without raising; malformed ids match nothing."""
        value = coerce_identifier(user_id)
        if value is None:
            return None
        return self.db.query(UserModel).filter(UserModel.user_id == value).first()

    def get_user(self, user_id: Any) -> UserModel:
        """Fetch a user by path id.

        Raises:
            InvalidIdentifierError: If the id is not a positive 32-bit integer.
            NotFoundError: If no user has this id.
        """
        value = parse_identifier(user_id, "user_id")
        model = self.db.query(UserModel).filter(UserModel.user_id == value).first()
        if model is None:
            raise user_not_found(value)
        return model

    def list_users(self) -> Listing:
        models = self.db.query(UserModel).order_by(UserModel.user_id).all()
        return to_listing(models, "No current users")

    def update_user(self, user_id: Any, fields: Dict[str, Any]) -> UserModel:
        """Apply a partial update to a user.

        Only username, email and password can change; each must pass its
        format check. A new password is hashed; the role never changes.

        Args:
            user_id: Path id of the user.
            fields: Keys and values sent by the client.

        Returns:
            The updated UserModel.

        Raises:
            ValidationError: On unknown keys, an empty update or invalid values.
            ConflictError: If the new email belongs to another user.
            NotFoundError: If the user does not exist.
        """
        invalid_fields = [key for key in fields if key not in UPDATABLE_USER_FIELDS]
        if invalid_fields:
            raise ValidationError(
                "Invalid fields",
                f"The following fields are not valid: {', '.join(invalid_fields)}",
            )
        if not fields:
            raise ValidationError(
                "No fields provided for update. At least one valid field must be included."
            )
        for key, value in fields.items():
            if not _FIELD_VALIDATORS[key](value):
                raise ValidationError(f"Invalid {key}")

        value = coerce_identifier(user_id)
        if value is None:
            raise NotFoundError("User not found")

        values = dict(fields)
        if "email" in values:
            owner = self.get_user_by_email(values["email"])
            if owner is not None and owner.user_id != value:
                raise ConflictError("Email already exists")
        if "password" in values:
            values["password"] = hash_password(values["password"])
        values["updated_at"] = utc_now_iso()

        stmt = (
            update(UserModel)
            .where(UserModel.user_id == value)
            .values(**values)
            .returning(UserModel)
        )
        try:
            model = self.db.execute(stmt).scalar_one_or_none()
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already exists") from e

        if model is None:
            raise NotFoundError("User not found")
        self.db.refresh(model)
        logger.info("Updated user %s (%s)", value, ", ".join(fields))
        return model

    def delete_user(self, user_id: Any) -> None:
        """Delete a user; the store cascades to their threads and replies.

        Raises:
            NotFoundError: If the user does not exist.
        """
        value = coerce_identifier(user_id)
        if value is None:
            raise user_not_found(user_id)

        stmt = (
            delete(UserModel)
            .where(UserModel.user_id == value)
            .returning(UserModel.user_id)
        )
        deleted = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if deleted is None:
            raise user_not_found(value)
        logger.info("Deleted user %s", value)
