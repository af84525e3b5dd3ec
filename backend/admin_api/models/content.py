# content models — sos emergency contacts and motivation reels

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from admin_api.models.analytics import MotivationStats


class EmergencyContact(BaseModel):
    id: str
    user_id: str = Field("", alias="userId")
    name: str = ""
    phone_number: str = Field("", alias="phoneNumber")
    relationship: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class MotivationReel(BaseModel):
    id: str
    title: str = ""
    author: str = ""
    source: str = ""
    video_url: Optional[str] = Field(None, alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailUrl")
    active: bool = True
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


class MotivationListResponse(BaseModel):
    reels: list[MotivationReel]
    stats: MotivationStats
