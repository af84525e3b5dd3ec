# chat models — conversation metadata only
# message text (including the lastMessage preview) is never read from the store

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from admin_api.models.analytics import ChatStats


class ChatMeta(BaseModel):
    id: str
    consultant_id: str = Field("", alias="consultantId")
    participants: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    last_message_time: Optional[datetime] = Field(None, alias="lastMessageTime")
    last_sender_id: Optional[str] = Field(None, alias="lastSenderId")
    last_message_seen_by: list[str] = Field(default_factory=list, alias="lastMessageSeenBy")
    consultant_seen: Optional[datetime] = Field(None, alias="consultantSeen")

    model_config = {"populate_by_name": True}


class ChatRow(ChatMeta):
    """chat metadata decorated for the chats table"""
    consultant_name: str = Field("Unknown Consultant", alias="consultantName")
    is_active: bool = Field(False, alias="isActive")

    model_config = {"populate_by_name": True}


class ChatListResponse(BaseModel):
    chats: list[ChatRow]
    stats: ChatStats
