"""Field validators for users, threads and replies.

Each validator takes a raw request value, which may be of any type, and
returns True only when it is a string in the accepted format. They do not
touch storage.
"""

import re
from typing import Any

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+(?: [a-zA-Z0-9-]+)*$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@(student\.ehb\.be|ehb\.be)$")
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,20}$",
    re.ASCII,
)
THREAD_TITLE_PATTERN = re.compile(r"^[a-zA-Z0-9\-_.!@]+(?: [a-zA-Z0-9\-_.!@]+)*$")
MULTI_SPACE_PATTERN = re.compile(r"\s{2,}")


def _has_length(value: str, minimum: int, maximum: int) -> bool:
    return minimum <= len(value) <= maximum


def check_username(username: Any) -> bool:
    """Check a username.

    Args:
        username: The username to validate.

    Returns:
        True for 2-20 characters of letters, digits and hyphens, with words
        separated by single spaces; False otherwise.
    """
    if not isinstance(username, str):
        return False

    trimmed = username.strip()
    if not _has_length(trimmed, 2, 20):
        return False
    return bool(USERNAME_PATTERN.fullmatch(trimmed))


def check_email(email: Any) -> bool:
    """Check an email address against the accepted school domains.

    Args:
        email: The email to validate.

    Returns:
        True if the address belongs to student.ehb.be or ehb.be.
    """
    if not isinstance(email, str) or not email.strip():
        return False
    return bool(EMAIL_PATTERN.fullmatch(email))


def check_password(password: Any) -> bool:
    """Check password strength.

    Args:
        password: The password to validate.

    Returns:
        True for 8-20 characters with at least one lowercase letter, one
        uppercase letter, one digit and one of ``@$!%*?&``.
    """
    if not isinstance(password, str) or not password.strip():
        return False
    return bool(PASSWORD_PATTERN.fullmatch(password))


def check_thread_title(title: Any) -> bool:
    """Check the title of a thread."""
    if not isinstance(title, str):
        return False

    trimmed = title.strip()
    if not _has_length(trimmed, 3, 100):
        return False
    if MULTI_SPACE_PATTERN.search(trimmed):
        return False
    return bool(THREAD_TITLE_PATTERN.fullmatch(trimmed))


def check_thread_content(content: Any) -> bool:
    """Check the content of a thread (10-1000 characters once trimmed)."""
    if not isinstance(content, str):
        return False
    return _has_length(content.strip(), 10, 1000)


def check_reply_content(content: Any) -> bool:
    """Check the content of a reply (2-500 characters once trimmed)."""
    if not isinstance(content, str):
        return False
    return _has_length(content.strip(), 2, 500)
