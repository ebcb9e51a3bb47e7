"""Reply schema definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CreateReplyRequest(BaseModel):
    user_id: Any = None
    content: Any = None


class UpdateReplyRequest(BaseModel):
    """Partial reply update; unknown keys are kept so they can be rejected."""

    model_config = ConfigDict(extra="allow")


class Reply(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reply_id: int
    thread_id: int
    user_id: int
    content: str
    correct: bool
    created_at: str
    updated_at: str
