"""Declarative base shared by all database models."""

from datetime import datetime

import pytz
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string, used for timestamp columns."""
    return datetime.now(pytz.utc).isoformat()
