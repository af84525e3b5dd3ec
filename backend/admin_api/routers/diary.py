# diary insights router — emotion distribution and daily sentiment trend
# only sentiment summaries are served, never diary text

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from admin_api.config import settings
from admin_api.models.diary import DiaryInsightsResponse
from admin_api.services.aggregation import daily_sentiment_trend, emotion_distribution, filter_by_emotion
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_diary_entries, fetch_users, user_name_map
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/diary-insights", tags=["diary"])

DEFAULT_RANGE_DAYS = 30
USER_LOOKUP_SIZE = 1000


@router.get("", response_model=DiaryInsightsResponse)
async def get_diary_insights(
    start: Optional[datetime] = Query(None, description="range start, defaults to 30 days ago"),
    end: Optional[datetime] = Query(None, description="range end, defaults to now"),
    emotion: str = Query("all", description="dominant emotion filter for the entries table"),
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """charts use every entry in range; the entries table honours the emotion filter"""
    end = end or datetime.now(timezone.utc)
    start = start or end - timedelta(days=DEFAULT_RANGE_DAYS)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="start must not be after end",
        )

    entries = await fetch_diary_entries(db, start=start, end=end)
    users = await fetch_users(db, page_size=USER_LOOKUP_SIZE)

    distribution = emotion_distribution(entries)
    table_entries = filter_by_emotion(entries, emotion)

    return DiaryInsightsResponse(
        start=start,
        end=end,
        totalEntries=len(entries),
        emotionCounts=distribution.counts,
        emotionSlices=distribution.slices,
        sentimentTrend=daily_sentiment_trend(entries, settings.report_tz),
        entries=table_entries,
        userNames=user_name_map(users),
    )
