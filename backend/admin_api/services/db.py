# record store access for the admin backend
# one motor client shared by every request; collections are the mobile app's own

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from admin_api.config import settings

logger = logging.getLogger(__name__)

# attribute name -> collection name as the mobile app writes it
COLLECTIONS = {
    "users": "users",
    "chats": "chats",
    "diary_entries": "diary_entries",
    "tasks": "tasks",
    "user_points": "userPoints",
    "points_transactions": "pointsTransactions",
    "emergency_contacts": "emergency_contacts",
    "motivation_reels": "motivation_reels",
}


class Database:
    """read/write handle on the app's record store.

    the admin backend owns no collections: it reads what the mobile app
    writes and only ever updates or deletes single user documents.
    """

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        if self.client is not None:
            return

        logger.info(f"Connecting to record store: {settings.MONGODB_DATABASE}")
        self.client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
        self.db = self.client[settings.MONGODB_DATABASE]

        # fail startup rather than the first dashboard request
        await self.client.admin.command("ping")
        logger.info("Record store reachable")

    async def close(self):
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Record store connection closed")

    def collection(self, attr: str) -> AsyncIOMotorCollection:
        return self.db[COLLECTIONS[attr]]

    @property
    def users(self):
        return self.collection("users")

    @property
    def chats(self):
        return self.collection("chats")

    @property
    def diary_entries(self):
        return self.collection("diary_entries")

    @property
    def tasks(self):
        return self.collection("tasks")

    @property
    def user_points(self):
        return self.collection("user_points")

    @property
    def points_transactions(self):
        return self.collection("points_transactions")

    @property
    def emergency_contacts(self):
        return self.collection("emergency_contacts")

    @property
    def motivation_reels(self):
        return self.collection("motivation_reels")


db = Database()


async def get_db() -> Database:
    """request dependency; tests override it with an in-memory store"""
    return db
