"""User routes.

This module handles HTTP endpoints for registration, login and user
maintenance. Errors raised by UserManager are turned into responses by the
status mapper.
"""

from typing import List

from fastapi import APIRouter, status

from config import API_PREFIX
from core.dependencies import UserManagerDep
from core.status_mapper import deleted_body, resolve_listing
from schemas.common import MessageResponse
from schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UpdateUserRequest,
    User,
)

router = APIRouter(prefix=f"{API_PREFIX}/users", tags=["User"])


@router.get("", response_model=List[User], summary="List users")
def list_users(user_manager: UserManagerDep) -> List[User]:
    """Return every user; 404 when there are none."""
    return resolve_listing(user_manager.list_users())


@router.get("/{user_id}", response_model=User, summary="Get user")
def get_user(user_id: str, user_manager: UserManagerDep) -> User:
    """Get user information by user_id.

    Args:
        user_id: Raw path value; must be a positive 32-bit integer.
        user_manager: Injected UserManager instance.

    Returns:
        User without the password hash.
    """
    return user_manager.get_user(user_id)


@router.post(
    "/register",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
)
def register(req: RegisterRequest, user_manager: UserManagerDep) -> User:
    """Register a new user.

    The role comes from the email domain: student.ehb.be addresses become
    students and ehb.be addresses become teachers.

    Args:
        req: Registration request with username, email and password.
        user_manager: Injected UserManager instance.

    Returns:
        The created user.
    """
    return user_manager.register(
        username=req.username,
        email=req.email,
        password=req.password,
    )


@router.post("/login", response_model=LoginResponse, summary="Login")
def login(req: LoginRequest, user_manager: UserManagerDep) -> LoginResponse:
    """Check an email and password pair.

    Args:
        req: Login request with email and password.
        user_manager: Injected UserManager instance.

    Returns:
        LoginResponse with the user information.
    """
    user = user_manager.login(req.email, req.password)
    return LoginResponse(user=User.model_validate(user))


@router.put("/{user_id}", response_model=User, summary="Update user")
def update_user(
    user_id: str,
    req: UpdateUserRequest,
    user_manager: UserManagerDep,
) -> User:
    return user_manager.update_user(user_id, req.model_extra or {})


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
def delete_user(user_id: str, user_manager: UserManagerDep) -> dict:
    """Delete a user together with their threads and replies."""
    user_manager.delete_user(user_id)
    return deleted_body("User")
