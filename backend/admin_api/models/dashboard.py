# dashboard models — overview page, consultants page and global search view models

from typing import Optional
from pydantic import BaseModel, Field

from admin_api.models.analytics import (
    ConsultantOverview,
    SentimentPoint,
    TaskStatusBreakdown,
)
from admin_api.models.task import Task
from admin_api.models.user import UserRecord


class DashboardOverview(BaseModel):
    """stat cards, charts and recent-activity lists for the admin home page"""
    total_users: int = Field(0, alias="totalUsers")
    total_consultants: int = Field(0, alias="totalConsultants")
    pending_requests: int = Field(0, alias="pendingRequests")
    total_tasks: int = Field(0, alias="totalTasks")
    sos_contacts: int = Field(0, alias="sosContacts")
    task_status: TaskStatusBreakdown = Field(default_factory=TaskStatusBreakdown, alias="taskStatus")
    sentiment_trend: list[SentimentPoint] = Field(default_factory=list, alias="sentimentTrend")
    recent_tasks: list[Task] = Field(default_factory=list, alias="recentTasks")
    pending_consultants: list[UserRecord] = Field(default_factory=list, alias="pendingConsultants")

    model_config = {"populate_by_name": True}


class ConsultantRow(UserRecord):
    """verified consultant with case-load counts for the consultants table"""
    cases_handled: int = Field(0, alias="casesHandled")
    unique_users: int = Field(0, alias="uniqueUsers")

    model_config = {"populate_by_name": True}


class ConsultantListResponse(BaseModel):
    consultants: list[ConsultantRow]
    overview: ConsultantOverview


class SearchResult(BaseModel):
    type: str
    id: str
    title: str
    subtitle: Optional[str] = None
    badge: Optional[str] = None
    href: str


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResult] = Field(default_factory=list)
