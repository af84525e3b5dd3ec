# export router — csv downloads for the dashboard tables

import logging
from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from admin_api.models.task import TimeWindow
from admin_api.services.aggregation import filter_tasks, rank_leaderboard
from admin_api.services.csv_export import (
    CONSULTANT_REQUEST_COLUMNS,
    LEADERBOARD_COLUMNS,
    SOS_COLUMNS,
    TASK_COLUMNS,
    USER_COLUMNS,
    export_filename,
    to_csv,
)
from admin_api.services.db import Database, get_db
from admin_api.services.records import (
    fetch_emergency_contacts,
    fetch_tasks,
    fetch_user_points,
    fetch_users,
)
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/export", tags=["export"])

Dataset = Literal["users", "consultant-requests", "tasks", "leaderboard", "sos"]


@router.get("/{dataset}")
async def export_dataset(
    dataset: Dataset,
    window: TimeWindow = Query("7d", description="lookback window for the tasks export"),
    status: Literal["all", "pending", "completed", "verified"] = Query("all"),
    verification: Literal["all", "required", "not-required"] = Query("all"),
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """download a table as <dataset>-<YYYY-MM-DD>.csv.
    the tasks table exports what the page shows: its window and filters,
    with the window in the name (tasks-7d-<YYYY-MM-DD>.csv)."""
    name = dataset
    if dataset == "users":
        content = to_csv(await fetch_users(db, page_size=100), USER_COLUMNS)
    elif dataset == "consultant-requests":
        requests = await fetch_users(db, role="consultant", verified=False, page_size=100)
        content = to_csv(requests, CONSULTANT_REQUEST_COLUMNS)
    elif dataset == "tasks":
        tasks = filter_tasks(await fetch_tasks(db, window=window), status=status, verification=verification)
        content = to_csv(tasks, TASK_COLUMNS)
        name = f"tasks-{window}"
    elif dataset == "leaderboard":
        content = to_csv(rank_leaderboard(await fetch_user_points(db)), LEADERBOARD_COLUMNS)
    else:
        content = to_csv(await fetch_emergency_contacts(db), SOS_COLUMNS)

    filename = export_filename(name, datetime.now(timezone.utc).date())
    logger.info(f"Exported {dataset} as {filename}")
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
