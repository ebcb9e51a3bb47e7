"""Response envelopes shared by all resources."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
