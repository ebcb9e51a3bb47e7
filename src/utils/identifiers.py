"""Parsing of numeric path identifiers."""

import re
from typing import Any, Optional

from config import MAX_IDENTIFIER
from core.exceptions import InvalidIdentifierError

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


def coerce_identifier(raw: Any) -> Optional[int]:
    """Convert a raw identifier to an int in 1..MAX_IDENTIFIER.

    The whole value must be an optionally signed run of ASCII digits, so
    "12abc" and "1.5" are rejected rather than read as 12 and 1.

    Args:
        raw: Path or body value, e.g. "42" or 42.

    Returns:
        The identifier, or None if it is not a positive 32-bit integer.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _INTEGER_PATTERN.match(raw.strip()):
        value = int(raw.strip())
    else:
        return None

    if value <= 0 or value > MAX_IDENTIFIER:
        return None
    return value


def parse_identifier(raw: Any, name: str, error: Optional[str] = None) -> int:
    """Parse a fetch-by-id path parameter.

    Args:
        raw: The raw path value.
        name: Parameter name used in the error, e.g. "thread_id".
        error: Replaces the default error text when given.

    Returns:
        The identifier as an int.

    Raises:
        InvalidIdentifierError: If the value is non-numeric, not positive or
            larger than MAX_IDENTIFIER.
    """
    value = coerce_identifier(raw)
    if value is None:
        raise InvalidIdentifierError(name, error)
    return value
