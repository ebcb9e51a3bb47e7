"""Thread schema definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CreateThreadRequest(BaseModel):
    user_id: Any = None
    title: Any = None
    content: Any = None
    posted_anonymously: Any = False


class UpdateThreadRequest(BaseModel):
    """Partial thread update; unknown keys are kept so they can be rejected."""

    model_config = ConfigDict(extra="allow")


class Thread(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    thread_id: int
    user_id: int
    title: str
    content: str
    posted_anonymously: bool
    created_at: str
    updated_at: str
