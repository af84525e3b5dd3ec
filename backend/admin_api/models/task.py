# task models — scheduled tasks users complete for points

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, Field

from admin_api.models.analytics import TaskStats

TimeWindow = Literal["24h", "7d", "30d"]


class Task(BaseModel):
    id: str
    user_id: str = Field("", alias="userId")
    title: str = ""
    date: Optional[datetime] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")
    status: str = "pending"
    time_hour: int = Field(0, alias="timeHour")
    time_minute: int = Field(0, alias="timeMinute")
    requires_verification: bool = Field(False, alias="requiresVerification")
    verification_photo_url: Optional[str] = Field(None, alias="verificationPhotoUrl")
    points_awarded: int = Field(0, alias="pointsAwarded")

    model_config = {"populate_by_name": True}


class TaskListResponse(BaseModel):
    window: Optional[TimeWindow] = None
    tasks: list[Task]
    stats: TaskStats
    user_names: dict[str, str] = Field(default_factory=dict, alias="userNames")

    model_config = {"populate_by_name": True}
