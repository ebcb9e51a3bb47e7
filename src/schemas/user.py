"""User schema definitions.

Request bodies keep every field as ``Any`` so that type and format checks
happen in the field validators, which report them as 400 errors. Response
models never include the password hash.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    username: Any = None
    email: Any = None
    password: Any = None


class LoginRequest(BaseModel):
    email: Any = None
    password: Any = None


class UpdateUserRequest(BaseModel):
    """Partial user update; unknown keys are kept so they can be rejected."""

    model_config = ConfigDict(extra="allow")


class User(BaseModel):
    """Public view of a user."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    username: str
    email: str
    role: str = Field(description="'student', 'teacher' or 'admin'")
    created_at: str
    updated_at: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: User
