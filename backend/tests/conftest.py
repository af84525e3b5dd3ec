# shared fixtures for admin backend tests
# provides mock db, fixture documents, session cookies and httpx test clients

import re
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from pymongo.errors import ServerSelectionTimeoutError

from admin_api.config import settings
from admin_api.main import app
from admin_api.services.db import get_db
from admin_api.services.auth_service import create_session_token
from admin_api.services.rate_limiter import rate_limiter


# fixed ids: the store uses opaque string ids

ALEX_ID = "user_alex"
JORDAN_ID = "user_jordan"
RILEY_ID = "user_riley"
MAYA_ID = "cons_maya"
SAM_ID = "cons_sam"
LEO_ID = "cons_leo"

NOW = datetime.now(timezone.utc)
TWO_DAYS_AGO = (NOW - timedelta(days=2)).replace(hour=9, minute=0, second=0, microsecond=0)
FIVE_DAYS_AGO = (NOW - timedelta(days=5)).replace(hour=12, minute=0, second=0, microsecond=0)


# user documents (as they'd appear from the store)

USER_DOCS = [
    {
        "_id": ALEX_ID,
        "displayName": "Alex Rivera",
        "email": "alex.rivera@email.com",
        "role": "user",
        "verified": False,
        "createdAt": NOW - timedelta(days=40),
    },
    {
        "_id": JORDAN_ID,
        "displayName": "Jordan Kim",
        "email": "jordan.kim@email.com",
        "role": "user",
        "verified": False,
        "active": False,
        "createdAt": NOW - timedelta(days=30),
    },
    {
        "_id": RILEY_ID,
        "displayName": "",
        "email": "riley@email.com",
        "role": "user",
        "createdAt": NOW - timedelta(days=20),
    },
    {
        "_id": MAYA_ID,
        "displayName": "Dr. Maya Patel",
        "email": "maya.patel@clinic.com",
        "role": "consultant",
        "verified": True,
        "createdAt": NOW - timedelta(days=90),
        "cvUrl": "https://files.example.com/cv/maya.pdf",
    },
    {
        "_id": SAM_ID,
        "displayName": "Sam Ortiz",
        "email": "sam.ortiz@clinic.com",
        "role": "consultant",
        "verified": True,
        "createdAt": NOW - timedelta(days=60),
    },
    {
        "_id": LEO_ID,
        "displayName": "Leo Brooks",
        "email": "leo.brooks@email.com",
        "role": "consultant",
        "verified": False,
        "createdAt": NOW - timedelta(days=1),
        "cvUrl": "https://files.example.com/cv/leo.pdf",
        "linkedinUrl": "https://linkedin.com/in/leobrooks",
    },
]

CHAT_DOCS = [
    {
        "_id": "chat_1",
        "consultantId": MAYA_ID,
        "participants": [MAYA_ID, ALEX_ID],
        "createdAt": NOW - timedelta(days=10),
        "lastMessage": "this text must never leave the store",
        "lastMessageTime": NOW - timedelta(hours=1),
        "lastSenderId": ALEX_ID,
        "lastMessageSeenBy": [ALEX_ID],
    },
    {
        "_id": "chat_2",
        "consultantId": MAYA_ID,
        "participants": [MAYA_ID, JORDAN_ID],
        "createdAt": NOW - timedelta(days=8),
        "lastMessage": "another private message",
        "lastMessageTime": NOW - timedelta(days=3),
        "lastSenderId": MAYA_ID,
    },
    {
        "_id": "chat_3",
        "consultantId": MAYA_ID,
        "participants": [MAYA_ID, ALEX_ID],
        "createdAt": NOW - timedelta(days=4),
    },
]

DIARY_DOCS = [
    {
        "_id": "diary_1",
        "userId": ALEX_ID,
        "content": "private diary body",
        "date": TWO_DAYS_AGO,
        "createdAt": TWO_DAYS_AGO,
        "sentimentAnalysis": {"joy": 0.8, "anger": 0.1, "fear": 0.1},
        "dominantEmotion": "joy",
        "confidenceScore": 0.9,
    },
    {
        "_id": "diary_2",
        "userId": ALEX_ID,
        "content": "another private diary body",
        "date": TWO_DAYS_AGO + timedelta(hours=6),
        "createdAt": TWO_DAYS_AGO + timedelta(hours=6),
        "sentimentAnalysis": {"joy": 0.4, "anger": 0.3, "fear": 0.3},
        "dominantEmotion": "joy",
        "confidenceScore": 0.6,
    },
    {
        "_id": "diary_3",
        "userId": JORDAN_ID,
        "date": FIVE_DAYS_AGO,
        "createdAt": FIVE_DAYS_AGO,
        "sentimentAnalysis": {"joy": 0.1, "anger": 0.2, "fear": 0.7},
        "dominantEmotion": "fear",
        "confidenceScore": 0.8,
    },
    {
        "_id": "diary_4",
        "userId": RILEY_ID,
        "date": TWO_DAYS_AGO,
        "createdAt": TWO_DAYS_AGO,
        "sentimentAnalysis": {"joy": 0.2, "anger": 0.6, "fear": 0.2},
        "dominantEmotion": "anger",
        "confidenceScore": 0.7,
    },
]

TASK_DOCS = [
    {
        "_id": "task_1",
        "userId": ALEX_ID,
        "title": "Morning walk",
        "date": NOW,
        "createdAt": NOW - timedelta(hours=2),
        "status": "pending",
        "timeHour": 7,
        "timeMinute": 30,
        "requiresVerification": False,
        "pointsAwarded": 0,
    },
    {
        "_id": "task_2",
        "userId": ALEX_ID,
        "title": "Read for 20 minutes",
        "date": NOW - timedelta(days=3),
        "createdAt": NOW - timedelta(days=3),
        "completedAt": NOW - timedelta(days=3) + timedelta(hours=5),
        "status": "completed",
        "timeHour": 21,
        "timeMinute": 0,
        "requiresVerification": False,
        "pointsAwarded": 10,
    },
    {
        "_id": "task_3",
        "userId": JORDAN_ID,
        "title": "Meditation session",
        "date": NOW - timedelta(days=3),
        "createdAt": NOW - timedelta(days=3, hours=1),
        "completedAt": NOW - timedelta(days=3),
        "status": "verified",
        "timeHour": 8,
        "timeMinute": 0,
        "requiresVerification": True,
        "verificationPhotoUrl": "https://files.example.com/proof/3.jpg",
        "pointsAwarded": 20,
    },
    {
        "_id": "task_4",
        "userId": JORDAN_ID,
        "title": "Journal gratitude list",
        "date": NOW - timedelta(days=20),
        "createdAt": NOW - timedelta(days=20),
        "status": "verified",
        "requiresVerification": True,
    },
    {
        "_id": "task_5",
        "userId": ALEX_ID,
        "title": "Old stretching routine",
        "date": NOW - timedelta(days=60),
        "createdAt": NOW - timedelta(days=60),
        "status": "completed",
        "pointsAwarded": 5,
    },
]

USER_POINTS_DOCS = [
    {"_id": "pts_3", "userId": SAM_ID, "userName": "Sam Ortiz", "totalPoints": 80, "lastUpdated": NOW},
    {"_id": "pts_2", "userId": JORDAN_ID, "userName": "Jordan Kim", "totalPoints": 120, "lastUpdated": NOW},
    {"_id": "pts_4", "userId": RILEY_ID, "userName": "Riley", "totalPoints": 10, "lastUpdated": NOW},
    {"_id": "pts_1", "userId": ALEX_ID, "userName": "Alex Rivera", "totalPoints": 120, "lastUpdated": NOW},
]

TRANSACTION_DOCS = [
    {
        "_id": "tx_1", "userId": ALEX_ID, "taskId": "task_2", "points": 10,
        "type": "earned", "reason": "Task completed", "createdAt": NOW - timedelta(days=3),
    },
    {
        "_id": "tx_2", "userId": ALEX_ID, "taskId": "task_9", "points": 20,
        "type": "earned", "reason": "Task verified", "createdAt": NOW - timedelta(days=2),
    },
    {
        "_id": "tx_3", "userId": ALEX_ID, "points": -5,
        "type": "adjusted", "reason": "Duplicate submission", "createdAt": NOW - timedelta(days=1),
    },
    {
        "_id": "tx_4", "userId": JORDAN_ID, "taskId": "task_3", "points": 20,
        "type": "earned", "reason": "Task verified", "createdAt": NOW - timedelta(days=3),
    },
]

CONTACT_DOCS = [
    {
        "_id": "sos_1", "userId": ALEX_ID, "name": "Maria Rivera", "phoneNumber": "+1 555 0101",
        "relationship": "Mother", "createdAt": NOW - timedelta(days=30), "updatedAt": NOW - timedelta(days=2),
    },
    {
        "_id": "sos_2", "userId": JORDAN_ID, "name": "Chris Kim", "phoneNumber": "+1 555 0199",
        "relationship": "Partner", "createdAt": NOW - timedelta(days=10), "updatedAt": NOW - timedelta(days=10),
    },
]

REEL_DOCS = [
    {
        "_id": "reel_1", "title": "Small steps", "author": "Coach Dee", "source": "YouTube",
        "videoUrl": "https://videos.example.com/1", "thumbnailUrl": "https://img.example.com/1.jpg",
        "active": True, "createdAt": NOW - timedelta(days=5),
    },
    {
        "_id": "reel_2", "title": "Breathing basics", "author": "Dr. Lane", "source": "Instagram",
        "videoUrl": "https://videos.example.com/2", "active": False, "createdAt": NOW - timedelta(days=9),
    },
]


# async cursor mock

def _sort_key(value):
    # none sorts first, like mongodb
    return (value is not None, value)


class AsyncCursorMock:
    """mock for motor's async cursor — supports async for and chained methods"""

    def __init__(self, data=None, error=None):
        self._data = list(data or [])
        self._index = 0
        self._error = error

    def sort(self, key_or_list, direction=None):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction or 1)]
        # stable sorts applied from the last key to the first
        for key, order in reversed(keys):
            self._data.sort(key=lambda d: _sort_key(d.get(key)), reverse=order == -1)
        return self

    def skip(self, n):
        self._data = self._data[n:]
        return self

    def limit(self, n):
        self._data = self._data[:n]
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._error is not None:
            raise self._error
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item

    async def to_list(self, length=None):
        if self._error is not None:
            raise self._error
        if length is not None:
            return self._data[:length]
        return self._data


class MockCollection:
    """mock for a motor collection with async methods"""

    def __init__(self, data=None):
        self._data = [dict(d) for d in (data or [])]
        self.queries = []

    def find(self, query=None, projection=None):
        self.queries.append(query or {})
        results = self._data
        if query:
            results = [d for d in results if self._matches(d, query)]
        if projection:
            keep = {k for k, v in projection.items() if v}
            results = [{k: v for k, v in d.items() if k == "_id" or k in keep} for d in results]
        return AsyncCursorMock(results)

    async def find_one(self, query=None, projection=None):
        if not query:
            return self._data[0] if self._data else None
        for doc in self._data:
            if self._matches(doc, query):
                return doc
        return None

    async def count_documents(self, query=None):
        if not query:
            return len(self._data)
        return len([d for d in self._data if self._matches(d, query)])

    async def update_one(self, query, update, upsert=False):
        result = MagicMock()
        result.matched_count = 0
        result.modified_count = 0
        for doc in self._data:
            if self._matches(doc, query):
                if "$set" in update:
                    doc.update(update["$set"])
                result.matched_count = 1
                result.modified_count = 1
                break
        return result

    async def delete_one(self, query):
        result = MagicMock()
        result.deleted_count = 0
        for i, doc in enumerate(self._data):
            if self._matches(doc, query):
                del self._data[i]
                result.deleted_count = 1
                break
        return result

    def _matches(self, doc, query):
        """basic mongodb query matching for tests"""
        for key, value in query.items():
            doc_val = doc.get(key)
            if isinstance(value, dict):
                for op, operand in value.items():
                    if op == "$in" and doc_val not in operand:
                        return False
                    if op == "$ne" and doc_val == operand:
                        return False
                    if op in ("$gte", "$gt", "$lte", "$lt") and doc_val is None:
                        return False
                    if op == "$gte" and doc_val < operand:
                        return False
                    if op == "$gt" and doc_val <= operand:
                        return False
                    if op == "$lte" and doc_val > operand:
                        return False
                    if op == "$lt" and doc_val >= operand:
                        return False
                    if op == "$regex":
                        flags = re.IGNORECASE if value.get("$options") == "i" else 0
                        if doc_val is None or not re.search(operand, str(doc_val), flags):
                            return False
            elif doc_val != value:
                return False
        return True


class FailingCollection(MockCollection):
    """collection whose reads and writes fail like an unreachable server"""

    def find(self, query=None, projection=None):
        return AsyncCursorMock(error=ServerSelectionTimeoutError("no servers available"))

    async def find_one(self, query=None, projection=None):
        raise ServerSelectionTimeoutError("no servers available")

    async def update_one(self, query, update, upsert=False):
        raise ServerSelectionTimeoutError("no servers available")

    async def delete_one(self, query):
        raise ServerSelectionTimeoutError("no servers available")


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self):
        self.users = MockCollection(USER_DOCS)
        self.chats = MockCollection(CHAT_DOCS)
        self.diary_entries = MockCollection(DIARY_DOCS)
        self.tasks = MockCollection(TASK_DOCS)
        self.user_points = MockCollection(USER_POINTS_DOCS)
        self.points_transactions = MockCollection(TRANSACTION_DOCS)
        self.emergency_contacts = MockCollection(CONTACT_DOCS)
        self.motivation_reels = MockCollection(REEL_DOCS)

    async def connect(self):
        pass

    async def close(self):
        pass


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """the limiter is process-wide, start every test with a clean slate"""
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def mock_db():
    """create a fresh mock database for each test"""
    return MockDatabase()


@pytest.fixture
def session_token():
    """valid admin session token"""
    return create_session_token(settings.ADMIN_EMAIL)


@pytest.fixture
def expired_token():
    """admin session token that expired a minute ago"""
    return create_session_token(settings.ADMIN_EMAIL, expires_delta=timedelta(minutes=-1))


@pytest_asyncio.fixture
async def client(mock_db):
    """httpx async test client without a session cookie"""

    async def override_get_db():
        return mock_db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_client(mock_db, session_token):
    """client carrying a valid admin session cookie"""

    async def override_get_db():
        return mock_db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        cookies={settings.SESSION_COOKIE_NAME: session_token},
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
