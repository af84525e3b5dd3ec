# user actions — single-document writes on the users collection
# approve / reject consultants, toggle active, delete. no cascading to other collections.

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from admin_api.services.db import Database
from admin_api.services.records import id_filter

logger = logging.getLogger(__name__)

DEFAULT_REJECT_REASON = "Application rejected"


class MutationError(Exception):
    """a write against the record store failed"""


class UserNotFound(Exception):
    """the targeted user document does not exist"""


async def _update_user(db: Database, user_id: str, fields: dict, action: str) -> None:
    try:
        result = await db.users.update_one(id_filter(user_id), {"$set": fields})
    except PyMongoError as e:
        logger.error(f"Failed to {action} for user {user_id}: {e}")
        raise MutationError(f"Failed to {action}") from e

    if result.matched_count == 0:
        raise UserNotFound(user_id)
    logger.info(f"User {user_id}: {action} -> {fields}")


async def approve_consultant(db: Database, user_id: str) -> None:
    await _update_user(db, user_id, {"verified": True}, "approve consultant")


async def reject_consultant(db: Database, user_id: str, reason: Optional[str] = None) -> None:
    await _update_user(
        db,
        user_id,
        {
            "rejected": True,
            "rejectReason": reason or DEFAULT_REJECT_REASON,
            "verified": False,
        },
        "reject consultant",
    )


async def toggle_user_active(db: Database, user_id: str, active: bool) -> None:
    await _update_user(db, user_id, {"active": active}, "update user status")


async def delete_user(db: Database, user_id: str) -> None:
    """remove the user document outright, there is no undo"""
    try:
        result = await db.users.delete_one(id_filter(user_id))
    except PyMongoError as e:
        logger.error(f"Failed to delete user {user_id}: {e}")
        raise MutationError("Failed to delete user") from e

    if result.deleted_count == 0:
        raise UserNotFound(user_id)
    logger.warning(f"User {user_id} permanently deleted")
