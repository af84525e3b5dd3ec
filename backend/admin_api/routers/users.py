# users router — list/inspect app users and the admin's user-management actions
# every mutation is a single-document write; deletion is permanent

import logging
from typing import Optional, Literal

from fastapi import APIRouter, Depends, HTTPException, status, Query

from admin_api.models.user import UserRecord, RejectRequest, ActiveUpdate, ActionResponse
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_users, fetch_user
from admin_api.services import user_actions
from admin_api.services.user_actions import UserNotFound
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def _not_found(user_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found",
    )


@router.get("", response_model=list[UserRecord])
async def list_users(
    role: Optional[Literal["user", "consultant"]] = Query(None),
    verified: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, description="match on display name or email"),
    page_size: int = Query(100, ge=1, le=1000, alias="pageSize"),
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """users newest first, with optional role/verified filters and text search"""
    return await fetch_users(db, role=role, verified=verified, search_term=search, page_size=page_size)


@router.get("/{user_id}", response_model=UserRecord)
async def get_user(
    user_id: str,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    user = await fetch_user(db, user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.post("/{user_id}/approve", response_model=ActionResponse)
async def approve_consultant(
    user_id: str,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """mark a consultant application as verified"""
    try:
        await user_actions.approve_consultant(db, user_id)
    except UserNotFound:
        raise _not_found(user_id)
    return ActionResponse(userId=user_id, message="The consultant application has been approved")


@router.post("/{user_id}/reject", response_model=ActionResponse)
async def reject_consultant(
    user_id: str,
    payload: Optional[RejectRequest] = None,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """reject a consultant application, keeping the reason on the user"""
    reason = payload.reason if payload else None
    try:
        await user_actions.reject_consultant(db, user_id, reason)
    except UserNotFound:
        raise _not_found(user_id)
    return ActionResponse(userId=user_id, message="The consultant application has been rejected")


@router.patch("/{user_id}/active", response_model=ActionResponse)
async def set_user_active(
    user_id: str,
    payload: ActiveUpdate,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """activate or deactivate a user"""
    try:
        await user_actions.toggle_user_active(db, user_id, payload.active)
    except UserNotFound:
        raise _not_found(user_id)
    state = "activated" if payload.active else "deactivated"
    return ActionResponse(userId=user_id, message=f"User has been {state}")


@router.delete("/{user_id}", response_model=ActionResponse)
async def delete_user(
    user_id: str,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """permanently delete a user (the dashboard asks for confirmation first)"""
    try:
        await user_actions.delete_user(db, user_id)
    except UserNotFound:
        raise _not_found(user_id)
    return ActionResponse(userId=user_id, message="User has been permanently deleted")
