# record adapters — one fetch function per collection
# each translates filter params into a store query and shapes documents into typed records.
# documents are schemaless: missing or mistyped fields fall back to defaults instead of failing.

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from admin_api.config import settings
from admin_api.models.chat import ChatMeta
from admin_api.models.content import EmergencyContact, MotivationReel
from admin_api.models.diary import DiaryEntry, SentimentScores
from admin_api.models.points import PointsTransaction, UserPoints
from admin_api.models.task import Task
from admin_api.models.user import UserRecord
from admin_api.services.db import Database

logger = logging.getLogger(__name__)

WINDOW_DELTAS = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}

# only structured fields are pulled, diary text and chat messages stay in the store
DIARY_FIELDS = {
    "userId": 1,
    "date": 1,
    "createdAt": 1,
    "sentimentAnalysis": 1,
    "dominantEmotion": 1,
    "confidenceScore": 1,
}
CHAT_FIELDS = {
    "consultantId": 1,
    "participants": 1,
    "createdAt": 1,
    "lastMessageTime": 1,
    "lastSenderId": 1,
    "lastMessageSeenBy": 1,
    "consultantSeen": 1,
}


class FetchError(Exception):
    """a read against the record store failed"""


# field coercion


def _to_datetime(value: Any) -> Optional[datetime]:
    """store timestamps come back naive (utc) or occasionally as iso strings"""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _to_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _opt_str(value: Any) -> Optional[str]:
    return str(value) if value else None


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value if v is not None]


def id_filter(record_id: str) -> dict:
    """match a document id stored either as an objectid or as a plain string"""
    if ObjectId.is_valid(record_id):
        return {"_id": ObjectId(record_id)}
    return {"_id": record_id}


def window_start(window: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """start instant of a 24h/7d/30d lookback window, none for no window"""
    if not window:
        return None
    now = now or datetime.now(timezone.utc)
    return now - WINDOW_DELTAS[window]


# document shaping


def doc_to_user(doc: dict) -> UserRecord:
    active = doc.get("active")
    return UserRecord(
        id=str(doc.get("_id", "")),
        displayName=_to_str(doc.get("displayName")),
        email=_to_str(doc.get("email")),
        role=_to_str(doc.get("role"), "user") or "user",
        verified=bool(doc.get("verified", False)),
        active=active is not False,
        rejected=bool(doc.get("rejected", False)),
        rejectReason=_opt_str(doc.get("rejectReason")),
        createdAt=_to_datetime(doc.get("createdAt")),
        cvUrl=_opt_str(doc.get("cvUrl")),
        linkedinUrl=_opt_str(doc.get("linkedinUrl")),
    )


def doc_to_diary_entry(doc: dict) -> DiaryEntry:
    raw = doc.get("sentimentAnalysis")
    if not isinstance(raw, dict):
        raw = {}
    return DiaryEntry(
        id=str(doc.get("_id", "")),
        userId=_to_str(doc.get("userId")),
        date=_to_datetime(doc.get("date")),
        createdAt=_to_datetime(doc.get("createdAt")),
        sentimentAnalysis=SentimentScores(
            joy=_to_float(raw.get("joy")),
            anger=_to_float(raw.get("anger")),
            fear=_to_float(raw.get("fear")),
        ),
        dominantEmotion=_to_str(doc.get("dominantEmotion"), "unknown") or "unknown",
        confidenceScore=_to_float(doc.get("confidenceScore")),
    )


def doc_to_chat(doc: dict) -> ChatMeta:
    return ChatMeta(
        id=str(doc.get("_id", "")),
        consultantId=_to_str(doc.get("consultantId")),
        participants=_str_list(doc.get("participants")),
        createdAt=_to_datetime(doc.get("createdAt")),
        lastMessageTime=_to_datetime(doc.get("lastMessageTime")),
        lastSenderId=_opt_str(doc.get("lastSenderId")),
        lastMessageSeenBy=_str_list(doc.get("lastMessageSeenBy")),
        consultantSeen=_to_datetime(doc.get("consultantSeen")),
    )


def doc_to_task(doc: dict) -> Task:
    return Task(
        id=str(doc.get("_id", "")),
        userId=_to_str(doc.get("userId")),
        title=_to_str(doc.get("title")),
        date=_to_datetime(doc.get("date")),
        createdAt=_to_datetime(doc.get("createdAt")),
        completedAt=_to_datetime(doc.get("completedAt")),
        status=_to_str(doc.get("status"), "pending") or "pending",
        timeHour=_to_int(doc.get("timeHour")),
        timeMinute=_to_int(doc.get("timeMinute")),
        requiresVerification=bool(doc.get("requiresVerification", False)),
        verificationPhotoUrl=_opt_str(doc.get("verificationPhotoUrl")),
        pointsAwarded=_to_int(doc.get("pointsAwarded")),
    )


def doc_to_user_points(doc: dict) -> UserPoints:
    return UserPoints(
        id=str(doc.get("_id", "")),
        userId=_to_str(doc.get("userId")),
        userName=_to_str(doc.get("userName")),
        photoUrl=_opt_str(doc.get("photoUrl")),
        totalPoints=_to_int(doc.get("totalPoints")),
        rank=_to_int(doc.get("rank")),
        lastUpdated=_to_datetime(doc.get("lastUpdated")),
    )


def doc_to_transaction(doc: dict) -> PointsTransaction:
    return PointsTransaction(
        id=str(doc.get("_id", "")),
        userId=_to_str(doc.get("userId")),
        taskId=_opt_str(doc.get("taskId")),
        points=_to_int(doc.get("points")),
        type=_to_str(doc.get("type"), "earned") or "earned",
        reason=_to_str(doc.get("reason")),
        createdAt=_to_datetime(doc.get("createdAt")),
    )


def doc_to_contact(doc: dict) -> EmergencyContact:
    return EmergencyContact(
        id=str(doc.get("_id", "")),
        userId=_to_str(doc.get("userId")),
        name=_to_str(doc.get("name")),
        phoneNumber=_to_str(doc.get("phoneNumber")),
        relationship=_to_str(doc.get("relationship")),
        createdAt=_to_datetime(doc.get("createdAt")),
        updatedAt=_to_datetime(doc.get("updatedAt")),
    )


def doc_to_reel(doc: dict) -> MotivationReel:
    return MotivationReel(
        id=str(doc.get("_id", "")),
        title=_to_str(doc.get("title")),
        author=_to_str(doc.get("author")),
        source=_to_str(doc.get("source")),
        videoUrl=_opt_str(doc.get("videoUrl")),
        thumbnailUrl=_opt_str(doc.get("thumbnailUrl")),
        active=doc.get("active") is not False,
        createdAt=_to_datetime(doc.get("createdAt")),
    )


# fetchers


async def fetch_users(
    db: Database,
    role: Optional[str] = None,
    verified: Optional[bool] = None,
    search_term: Optional[str] = None,
    page_size: Optional[int] = None,
) -> list[UserRecord]:
    """users newest first, filtered by role/verified in the store and by search text in memory"""
    query: dict = {}
    if role:
        query["role"] = role
    if verified is not None:
        query["verified"] = verified

    try:
        cursor = db.users.find(query).sort("createdAt", -1)
        if page_size:
            cursor = cursor.limit(page_size)
        users = [doc_to_user(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch users: {e}")
        raise FetchError("Failed to fetch users") from e

    if search_term:
        needle = search_term.lower()
        users = [
            u for u in users
            if needle in u.display_name.lower() or needle in u.email.lower()
        ]
    return users


async def fetch_user(db: Database, user_id: str) -> Optional[UserRecord]:
    try:
        doc = await db.users.find_one(id_filter(user_id))
    except PyMongoError as e:
        logger.error(f"Failed to fetch user {user_id}: {e}")
        raise FetchError("Failed to fetch user") from e
    return doc_to_user(doc) if doc else None


async def fetch_diary_entries(
    db: Database,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> list[DiaryEntry]:
    """newest diary sentiment summaries, optionally inside [start, end]"""
    query: dict = {}
    if start or end:
        created: dict = {}
        if start:
            created["$gte"] = start
        if end:
            created["$lte"] = end
        query["createdAt"] = created

    try:
        cursor = (
            db.diary_entries.find(query, DIARY_FIELDS)
            .sort("createdAt", -1)
            .limit(limit or settings.DIARY_FETCH_LIMIT)
        )
        return [doc_to_diary_entry(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch diary insights: {e}")
        raise FetchError("Failed to fetch diary insights") from e


async def fetch_chats(db: Database) -> list[ChatMeta]:
    """chat metadata newest first, never the messages sub-collection"""
    try:
        cursor = db.chats.find({}, CHAT_FIELDS).sort("createdAt", -1)
        return [doc_to_chat(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch chats: {e}")
        raise FetchError("Failed to fetch chats") from e


async def fetch_tasks(
    db: Database,
    window: Optional[str] = None,
    now: Optional[datetime] = None,
) -> list[Task]:
    query: dict = {}
    start = window_start(window, now)
    if start is not None:
        query["createdAt"] = {"$gte": start}

    try:
        cursor = db.tasks.find(query).sort("createdAt", -1)
        return [doc_to_task(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch tasks: {e}")
        raise FetchError("Failed to fetch tasks") from e


async def fetch_user_points(db: Database) -> list[UserPoints]:
    """standings sorted by the store: most points first, userId breaks ties"""
    try:
        cursor = db.user_points.find({}).sort([("totalPoints", -1), ("userId", 1)])
        return [doc_to_user_points(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch user points: {e}")
        raise FetchError("Failed to fetch user points") from e


async def fetch_points_transactions(db: Database, user_id: Optional[str] = None) -> list[PointsTransaction]:
    query: dict = {}
    if user_id:
        query["userId"] = user_id

    try:
        cursor = db.points_transactions.find(query).sort("createdAt", -1)
        return [doc_to_transaction(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch points transactions: {e}")
        raise FetchError("Failed to fetch points transactions") from e


async def fetch_emergency_contacts(db: Database) -> list[EmergencyContact]:
    try:
        cursor = db.emergency_contacts.find({}).sort("createdAt", -1)
        return [doc_to_contact(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch emergency contacts: {e}")
        raise FetchError("Failed to fetch emergency contacts") from e


async def fetch_motivation_reels(db: Database) -> list[MotivationReel]:
    try:
        cursor = db.motivation_reels.find({}).sort("createdAt", -1)
        return [doc_to_reel(doc) async for doc in cursor]
    except PyMongoError as e:
        logger.error(f"Failed to fetch motivation reels: {e}")
        raise FetchError("Failed to fetch motivation reels") from e


def user_name_map(users: list[UserRecord]) -> dict[str, str]:
    """user id -> display name (or email) for table lookups"""
    return {u.id: u.label for u in users}
