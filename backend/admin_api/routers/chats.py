# chats router — conversation metadata for monitoring
# messages are end-to-end encrypted and never fetched, only chat documents

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from admin_api.models.chat import ChatListResponse, ChatRow
from admin_api.services.aggregation import chat_stats, is_chat_active
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_chats, fetch_users, user_name_map
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/chats", tags=["chats"])

USER_LOOKUP_SIZE = 1000


@router.get("", response_model=ChatListResponse)
async def list_chats(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """chats newest first with consultant names and active flags"""
    chats = await fetch_chats(db)
    users = await fetch_users(db, page_size=USER_LOOKUP_SIZE)
    names = user_name_map(users)
    now = datetime.now(timezone.utc)

    rows = [
        ChatRow(
            **chat.model_dump(),
            consultantName=names.get(chat.consultant_id, "Unknown Consultant"),
            isActive=is_chat_active(chat, now),
        )
        for chat in chats
    ]
    return ChatListResponse(chats=rows, stats=chat_stats(chats, now))
