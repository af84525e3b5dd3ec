# points models — leaderboard standings and points history

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserPoints(BaseModel):
    id: str
    user_id: str = Field("", alias="userId")
    user_name: str = Field("", alias="userName")
    photo_url: Optional[str] = Field(None, alias="photoUrl")
    total_points: int = Field(0, alias="totalPoints")
    rank: int = 0
    last_updated: Optional[datetime] = Field(None, alias="lastUpdated")

    model_config = {"populate_by_name": True}


class PointsTransaction(BaseModel):
    id: str
    user_id: str = Field("", alias="userId")
    task_id: Optional[str] = Field(None, alias="taskId")
    points: int = 0
    type: str = "earned"
    reason: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


class LeaderboardStats(BaseModel):
    total_users: int = Field(0, alias="totalUsers")
    total_points: int = Field(0, alias="totalPoints")
    average_points: int = Field(0, alias="averagePoints")
    top_three: list[UserPoints] = Field(default_factory=list, alias="topThree")

    model_config = {"populate_by_name": True}


class LeaderboardResponse(BaseModel):
    entries: list[UserPoints]
    stats: LeaderboardStats


class PointsHistorySummary(BaseModel):
    total_earned: int = Field(0, alias="totalEarned")
    total_adjusted: int = Field(0, alias="totalAdjusted")

    model_config = {"populate_by_name": True}


class PointsHistoryResponse(BaseModel):
    user_id: str = Field(..., alias="userId")
    transactions: list[PointsTransaction]
    summary: PointsHistorySummary

    model_config = {"populate_by_name": True}
