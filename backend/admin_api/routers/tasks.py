# tasks router — task activity over a 24h / 7d / 30d window with completion stats

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query

from admin_api.models.task import TaskListResponse, TimeWindow
from admin_api.services.aggregation import filter_tasks, task_stats
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_tasks, fetch_users, user_name_map
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])

USER_LOOKUP_SIZE = 1000


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    window: TimeWindow = Query("7d"),
    status: Literal["all", "pending", "completed", "verified"] = Query("all"),
    verification: Literal["all", "required", "not-required"] = Query("all"),
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """tasks created inside the window, filtered, with stats over the filtered set"""
    tasks = await fetch_tasks(db, window=window)
    users = await fetch_users(db, page_size=USER_LOOKUP_SIZE)

    filtered = filter_tasks(tasks, status=status, verification=verification)
    return TaskListResponse(
        window=window,
        tasks=filtered,
        stats=task_stats(filtered),
        userNames=user_name_map(users),
    )
