# analytics models — outputs of the pure aggregation functions
# consumed by the charts and stat cards of the dashboard

from pydantic import BaseModel, Field


class SentimentPoint(BaseModel):
    """average joy/anger/fear for one calendar day"""
    date: str
    joy: float
    anger: float
    fear: float


class EmotionSlice(BaseModel):
    """one slice of the dominant-emotion pie chart"""
    label: str
    count: int
    color: str


class EmotionDistribution(BaseModel):
    counts: dict[str, int] = Field(default_factory=dict)
    slices: list[EmotionSlice] = Field(default_factory=list)


class ConsultantAnalytics(BaseModel):
    """case-load and client sentiment for one consultant"""
    consultant_id: str = Field(..., alias="consultantId")
    cases_handled: int = Field(0, alias="casesHandled")
    unique_users: int = Field(0, alias="uniqueUsers")
    user_ids: list[str] = Field(default_factory=list, alias="userIds")
    sentiment_trend: list[SentimentPoint] = Field(default_factory=list, alias="sentimentTrend")

    model_config = {"populate_by_name": True}


class ConsultantOverview(BaseModel):
    total_consultants: int = Field(0, alias="totalConsultants")
    total_chats: int = Field(0, alias="totalChats")
    avg_cases_per_consultant: int = Field(0, alias="avgCasesPerConsultant")

    model_config = {"populate_by_name": True}


class TaskStats(BaseModel):
    total: int = 0
    completed: int = 0
    verified: int = 0
    completion_rate: int = Field(0, alias="completionRate")
    total_points: int = Field(0, alias="totalPoints")

    model_config = {"populate_by_name": True}


class TaskStatusBreakdown(BaseModel):
    pending: int = 0
    completed: int = 0
    verified: int = 0


class ChatStats(BaseModel):
    total_chats: int = Field(0, alias="totalChats")
    active_chats: int = Field(0, alias="activeChats")
    total_participants: int = Field(0, alias="totalParticipants")

    model_config = {"populate_by_name": True}


class MotivationStats(BaseModel):
    total: int = 0
    active: int = 0
