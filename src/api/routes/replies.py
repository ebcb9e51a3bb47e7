"""Reply routes.

This module handles HTTP endpoints for replies, optionally scoped by thread,
by user, or by both.
"""

from typing import List

from fastapi import APIRouter, status

from config import API_PREFIX
from core.dependencies import ReplyManagerDep
from core.status_mapper import deleted_body, resolve_listing
from schemas.common import MessageResponse
from schemas.reply import CreateReplyRequest, Reply, UpdateReplyRequest

router = APIRouter(prefix=f"{API_PREFIX}/replies", tags=["Reply"])


@router.get("", response_model=List[Reply], summary="List replies")
def list_replies(reply_manager: ReplyManagerDep) -> List[Reply]:
    return resolve_listing(reply_manager.list_replies())


@router.get("/thread/{thread_id}", response_model=List[Reply], summary="List replies of a thread")
def list_replies_for_thread(thread_id: str, reply_manager: ReplyManagerDep) -> List[Reply]:
    return resolve_listing(reply_manager.list_replies_for_thread(thread_id))


@router.get("/user/{user_id}", response_model=List[Reply], summary="List replies of a user")
def list_replies_for_user(user_id: str, reply_manager: ReplyManagerDep) -> List[Reply]:
    return resolve_listing(reply_manager.list_replies_for_user(user_id))


@router.get(
    "/thread/{thread_id}/user/{user_id}",
    response_model=List[Reply],
    summary="List replies of a user in a thread",
)
def list_replies_for_thread_and_user(
    thread_id: str,
    user_id: str,
    reply_manager: ReplyManagerDep,
) -> List[Reply]:
    """List the replies one user posted in one thread.

    Args:
        thread_id: The ID of the thread.
        user_id: The ID of the user.
        reply_manager: Injected ReplyManager instance.

    Returns:
        Matching replies; 404 if the thread or user is unknown, or if
        nothing matches.
    """
    return resolve_listing(
        reply_manager.list_replies_for_thread_and_user(thread_id, user_id)
    )


@router.get("/{reply_id}", response_model=Reply, summary="Get reply")
def get_reply(reply_id: str, reply_manager: ReplyManagerDep) -> Reply:
    return reply_manager.get_reply(reply_id)


@router.post(
    "/thread/{thread_id}",
    response_model=Reply,
    status_code=status.HTTP_201_CREATED,
    summary="Create reply",
)
def create_reply(
    thread_id: str,
    req: CreateReplyRequest,
    reply_manager: ReplyManagerDep,
) -> Reply:
    """Post a reply in a thread.

    Args:
        thread_id: The ID of the thread where the reply will be posted.
        req: user_id of the author and the reply content.
        reply_manager: Injected ReplyManager instance.

    Returns:
        The created reply.
    """
    return reply_manager.create_reply(thread_id, req.user_id, req.content)


@router.put("/{reply_id}", response_model=Reply, summary="Update reply")
def update_reply(
    reply_id: str,
    req: UpdateReplyRequest,
    reply_manager: ReplyManagerDep,
) -> Reply:
    """Update the content of a reply or mark it as correct."""
    return reply_manager.update_reply(reply_id, req.model_extra or {})


@router.delete("/{reply_id}", response_model=MessageResponse, summary="Delete reply")
def delete_reply(reply_id: str, reply_manager: ReplyManagerDep) -> dict:
    reply_manager.delete_reply(reply_id)
    return deleted_body("Reply")
