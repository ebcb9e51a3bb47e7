"""Thread routes."""

from typing import List

from fastapi import APIRouter, status

from config import API_PREFIX
from core.dependencies import ThreadManagerDep
from core.status_mapper import deleted_body, resolve_listing
from schemas.common import MessageResponse
from schemas.thread import CreateThreadRequest, Thread, UpdateThreadRequest

router = APIRouter(prefix=f"{API_PREFIX}/threads", tags=["Thread"])


@router.get("", response_model=List[Thread], summary="List threads")
def list_threads(thread_manager: ThreadManagerDep) -> List[Thread]:
    return resolve_listing(thread_manager.list_threads())


@router.get("/user/{user_id}", response_model=List[Thread], summary="List threads of a user")
def list_threads_for_user(user_id: str, thread_manager: ThreadManagerDep) -> List[Thread]:
    """List all threads created by one user.

    Args:
        user_id: The ID of the user whose threads to retrieve.
        thread_manager: Injected ThreadManager instance.

    Returns:
        The user's threads; 404 if the user is unknown or has none.
    """
    return resolve_listing(thread_manager.list_threads_for_user(user_id))


@router.get("/{thread_id}", response_model=Thread, summary="Get thread")
def get_thread(thread_id: str, thread_manager: ThreadManagerDep) -> Thread:
    return thread_manager.get_thread(thread_id)


@router.post(
    "",
    response_model=Thread,
    status_code=status.HTTP_201_CREATED,
    summary="Create thread",
)
def create_thread(req: CreateThreadRequest, thread_manager: ThreadManagerDep) -> Thread:
    """Create a thread.

    Args:
        req: user_id of the author, title and content, and optionally
            posted_anonymously.
        thread_manager: Injected ThreadManager instance.

    Returns:
        The created thread.
    """
    return thread_manager.create_thread(
        user_id=req.user_id,
        title=req.title,
        content=req.content,
        posted_anonymously=req.posted_anonymously,
    )


@router.put("/{thread_id}", response_model=Thread, summary="Update thread")
def update_thread(
    thread_id: str,
    req: UpdateThreadRequest,
    thread_manager: ThreadManagerDep,
) -> Thread:
    """Update user_id, title, content or posted_anonymously of a thread."""
    return thread_manager.update_thread(thread_id, req.model_extra or {})


@router.delete("/{thread_id}", response_model=MessageResponse, summary="Delete thread")
def delete_thread(thread_id: str, thread_manager: ThreadManagerDep) -> dict:
    thread_manager.delete_thread(thread_id)
    return deleted_body("Thread")
