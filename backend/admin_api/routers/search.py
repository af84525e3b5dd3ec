# search router — global search across users, consultants and tasks

import logging

from fastapi import APIRouter, Depends, Query

from admin_api.models.dashboard import SearchResponse
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_tasks, fetch_users
from admin_api.services.search import global_search
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/search", tags=["search"])

USER_SEARCH_SIZE = 100


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query("", max_length=200, description="search text"),
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """up to ten matches, users first, then consultants, then tasks"""
    if not q.strip():
        return SearchResponse(query=q, results=[])

    users = await fetch_users(db, page_size=USER_SEARCH_SIZE)
    tasks = await fetch_tasks(db)
    return SearchResponse(query=q, results=global_search(q, users, tasks))
