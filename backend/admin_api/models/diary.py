# diary models — sentiment summaries of diary entries
# the entry body never leaves the store, only structured fields are modelled

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from admin_api.models.analytics import EmotionSlice, SentimentPoint


class SentimentScores(BaseModel):
    joy: float = 0.0
    anger: float = 0.0
    fear: float = 0.0


class DiaryEntry(BaseModel):
    """sentiment analysis attached to one diary entry"""
    id: str
    user_id: str = Field("", alias="userId")
    date: Optional[datetime] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    sentiment_analysis: SentimentScores = Field(default_factory=SentimentScores, alias="sentimentAnalysis")
    dominant_emotion: str = Field("unknown", alias="dominantEmotion")
    confidence_score: float = Field(0.0, alias="confidenceScore")

    model_config = {"populate_by_name": True}


class DiaryInsightsResponse(BaseModel):
    """everything the diary insights page renders"""
    start: datetime
    end: datetime
    total_entries: int = Field(0, alias="totalEntries")
    emotion_counts: dict[str, int] = Field(default_factory=dict, alias="emotionCounts")
    emotion_slices: list[EmotionSlice] = Field(default_factory=list, alias="emotionSlices")
    sentiment_trend: list[SentimentPoint] = Field(default_factory=list, alias="sentimentTrend")
    entries: list[DiaryEntry] = Field(default_factory=list)
    user_names: dict[str, str] = Field(default_factory=dict, alias="userNames")

    model_config = {"populate_by_name": True}
