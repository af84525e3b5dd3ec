# dashboard router — admin home page overview
# four independent reads, aggregated once all of them have arrived

import logging

from fastapi import APIRouter, Depends

from admin_api.config import settings
from admin_api.models.dashboard import DashboardOverview
from admin_api.services.aggregation import dashboard_overview
from admin_api.services.db import Database, get_db
from admin_api.services.records import (
    fetch_diary_entries,
    fetch_emergency_contacts,
    fetch_tasks,
    fetch_users,
)
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

USER_LOOKUP_SIZE = 1000
TASK_WINDOW = "30d"


@router.get("", response_model=DashboardOverview)
async def get_dashboard(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """user/consultant counts, 30-day task breakdown, sentiment trend and recent activity"""
    users = await fetch_users(db, page_size=USER_LOOKUP_SIZE)
    tasks = await fetch_tasks(db, window=TASK_WINDOW)
    entries = await fetch_diary_entries(db)
    contacts = await fetch_emergency_contacts(db)

    return dashboard_overview(users, tasks, entries, contacts, settings.report_tz)
