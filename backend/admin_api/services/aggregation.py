# aggregation service — pure functions over already-fetched record lists
# sentiment trends, emotion distribution, consultant case-load, leaderboard and task stats.
# nothing here touches the database; routers fetch first and pass the lists in.

import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterable, Optional, Sequence

from admin_api.models.analytics import (
    ChatStats,
    ConsultantAnalytics,
    ConsultantOverview,
    EmotionDistribution,
    EmotionSlice,
    MotivationStats,
    SentimentPoint,
    TaskStats,
    TaskStatusBreakdown,
)
from admin_api.models.chat import ChatMeta
from admin_api.models.content import EmergencyContact, MotivationReel
from admin_api.models.dashboard import DashboardOverview
from admin_api.models.diary import DiaryEntry
from admin_api.models.points import (
    LeaderboardStats,
    PointsHistorySummary,
    PointsTransaction,
    UserPoints,
)
from admin_api.models.task import Task
from admin_api.models.user import UserRecord

EMOTION_COLORS = {
    "joy": "#10b981",
    "happiness": "#10b981",
    "sadness": "#3b82f6",
    "anger": "#ef4444",
    "fear": "#f59e0b",
    "surprise": "#8b5cf6",
    "disgust": "#84cc16",
    "neutral": "#6b7280",
}
DEFAULT_EMOTION_COLOR = "#6b7280"

COMPLETED_STATUSES = ("completed", "verified")
ACTIVE_CHAT_WINDOW = timedelta(hours=24)
PODIUM_SIZE = 3
RECENT_ITEMS = 5


def round_half_up(value: float) -> int:
    """round .5 away from zero for the non-negative ratios shown on stat cards.
    python's round() would send 2.5 to 2."""
    return int(math.floor(value + 0.5))


def as_utc(value: datetime) -> datetime:
    """treat naive datetimes from the store as utc"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# sentiment


def daily_sentiment_trend(
    entries: Iterable[DiaryEntry],
    tz: tzinfo = timezone.utc,
) -> list[SentimentPoint]:
    """average joy/anger/fear per calendar day, oldest day first.

    the day of an entry is the date of its createdAt in ``tz``. days without
    entries produce no point. entries missing createdAt can't be placed on a
    day and are skipped. the output does not depend on input order.
    """
    # date -> [joy_sum, anger_sum, fear_sum, count]
    buckets: dict[str, list[float]] = {}
    for entry in entries:
        if entry.created_at is None:
            continue
        day = as_utc(entry.created_at).astimezone(tz).date().isoformat()
        totals = buckets.setdefault(day, [0.0, 0.0, 0.0, 0])
        scores = entry.sentiment_analysis
        totals[0] += scores.joy
        totals[1] += scores.anger
        totals[2] += scores.fear
        totals[3] += 1

    trend = []
    for day in sorted(buckets):
        joy, anger, fear, count = buckets[day]
        trend.append(SentimentPoint(
            date=day,
            joy=joy / count,
            anger=anger / count,
            fear=fear / count,
        ))
    return trend


def emotion_color(label: str) -> str:
    """chart colour for an emotion label, grey for anything unknown"""
    return EMOTION_COLORS.get(label.lower(), DEFAULT_EMOTION_COLOR)


def emotion_distribution(entries: Iterable[DiaryEntry]) -> EmotionDistribution:
    """count entries per dominant emotion (labels compared as stored)"""
    counts: dict[str, int] = {}
    for entry in entries:
        counts[entry.dominant_emotion] = counts.get(entry.dominant_emotion, 0) + 1

    slices = [
        EmotionSlice(label=label, count=count, color=emotion_color(label))
        for label, count in counts.items()
    ]
    return EmotionDistribution(counts=counts, slices=slices)


def filter_by_emotion(entries: Sequence[DiaryEntry], emotion: Optional[str]) -> list[DiaryEntry]:
    if not emotion or emotion == "all":
        return list(entries)
    return [e for e in entries if e.dominant_emotion == emotion]


# consultants


def consultant_analytics(
    chats: Iterable[ChatMeta],
    entries: Iterable[DiaryEntry],
    consultant_id: str,
    tz: tzinfo = timezone.utc,
) -> ConsultantAnalytics:
    """cases handled, distinct clients and client sentiment trend for one consultant.

    a case is a chat whose consultantId matches. clients are every other
    participant of those chats. diary entries count only when written by one
    of those clients; entries carry no consultant field of their own.
    """
    cases_handled = 0
    user_ids: set[str] = set()
    for chat in chats:
        if chat.consultant_id != consultant_id:
            continue
        cases_handled += 1
        for participant in chat.participants:
            if participant != consultant_id:
                user_ids.add(participant)

    client_entries = [e for e in entries if e.user_id in user_ids]

    return ConsultantAnalytics(
        consultantId=consultant_id,
        casesHandled=cases_handled,
        uniqueUsers=len(user_ids),
        userIds=sorted(user_ids),
        sentimentTrend=daily_sentiment_trend(client_entries, tz),
    )


def consultant_overview(consultants: Sequence[UserRecord], chats: Sequence[ChatMeta]) -> ConsultantOverview:
    total = len(consultants)
    avg = round_half_up(len(chats) / total) if total > 0 else 0
    return ConsultantOverview(
        totalConsultants=total,
        totalChats=len(chats),
        avgCasesPerConsultant=avg,
    )


# leaderboard


def rank_leaderboard(points: Sequence[UserPoints]) -> list[UserPoints]:
    """assign ranks 1..n in the order the store returned the standings.
    the list is not re-sorted here, ties keep the store's order."""
    return [p.model_copy(update={"rank": position}) for position, p in enumerate(points, start=1)]


def leaderboard_stats(points: Sequence[UserPoints]) -> LeaderboardStats:
    total_users = len(points)
    total_points = sum(p.total_points for p in points)
    average = round_half_up(total_points / total_users) if total_users > 0 else 0
    return LeaderboardStats(
        totalUsers=total_users,
        totalPoints=total_points,
        averagePoints=average,
        topThree=list(points[:PODIUM_SIZE]),
    )


def points_history_summary(transactions: Iterable[PointsTransaction]) -> PointsHistorySummary:
    earned = 0
    adjusted = 0
    for tx in transactions:
        if tx.type == "earned":
            earned += tx.points
        elif tx.type == "adjusted":
            adjusted += tx.points
    return PointsHistorySummary(totalEarned=earned, totalAdjusted=adjusted)


# tasks


def filter_tasks(
    tasks: Iterable[Task],
    status: Optional[str] = None,
    verification: Optional[str] = None,
) -> list[Task]:
    """status is 'all' or an exact status; verification is 'all', 'required' or 'not-required'"""
    filtered = []
    for task in tasks:
        if status and status != "all" and task.status != status:
            continue
        if verification == "required" and not task.requires_verification:
            continue
        if verification == "not-required" and task.requires_verification:
            continue
        filtered.append(task)
    return filtered


def task_stats(tasks: Sequence[Task]) -> TaskStats:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.status in COMPLETED_STATUSES)
    verified = sum(1 for t in tasks if t.status == "verified")
    rate = round_half_up(completed / total * 100) if total > 0 else 0
    return TaskStats(
        total=total,
        completed=completed,
        verified=verified,
        completionRate=rate,
        totalPoints=sum(t.points_awarded or 0 for t in tasks),
    )


def task_status_breakdown(tasks: Iterable[Task]) -> TaskStatusBreakdown:
    breakdown = TaskStatusBreakdown()
    for task in tasks:
        if task.status == "pending":
            breakdown.pending += 1
        elif task.status == "completed":
            breakdown.completed += 1
        elif task.status == "verified":
            breakdown.verified += 1
    return breakdown


# chats


def is_chat_active(chat: ChatMeta, now: datetime) -> bool:
    """a chat is active when its last message is less than 24h old"""
    if chat.last_message_time is None:
        return False
    return as_utc(now) - as_utc(chat.last_message_time) < ACTIVE_CHAT_WINDOW


def chat_stats(chats: Sequence[ChatMeta], now: datetime) -> ChatStats:
    return ChatStats(
        totalChats=len(chats),
        activeChats=sum(1 for c in chats if is_chat_active(c, now)),
        totalParticipants=sum(len(c.participants) for c in chats),
    )


# content


def motivation_stats(reels: Sequence[MotivationReel]) -> MotivationStats:
    return MotivationStats(total=len(reels), active=sum(1 for r in reels if r.active))


# overview


def dashboard_overview(
    users: Sequence[UserRecord],
    tasks: Sequence[Task],
    entries: Sequence[DiaryEntry],
    contacts: Sequence[EmergencyContact],
    tz: tzinfo = timezone.utc,
) -> DashboardOverview:
    """admin home page. tasks and users are expected newest first."""
    pending = [u for u in users if u.role == "consultant" and not u.verified]
    return DashboardOverview(
        totalUsers=sum(1 for u in users if u.role == "user"),
        totalConsultants=sum(1 for u in users if u.role == "consultant" and u.verified),
        pendingRequests=len(pending),
        totalTasks=len(tasks),
        sosContacts=len(contacts),
        taskStatus=task_status_breakdown(tasks),
        sentimentTrend=daily_sentiment_trend(entries, tz),
        recentTasks=list(tasks[:RECENT_ITEMS]),
        pendingConsultants=pending[:RECENT_ITEMS],
    )
