# consultants router — verified consultants with case-load analytics, and pending requests
# analytics are recomputed from chats + diary entries on every request

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from admin_api.config import settings
from admin_api.models.analytics import ConsultantAnalytics
from admin_api.models.dashboard import ConsultantListResponse, ConsultantRow
from admin_api.models.user import UserRecord
from admin_api.services.aggregation import consultant_analytics, consultant_overview
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_chats, fetch_diary_entries, fetch_user, fetch_users
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/consultants", tags=["consultants"])

CONSULTANT_PAGE_SIZE = 1000
REQUESTS_PAGE_SIZE = 100


@router.get("", response_model=ConsultantListResponse)
async def list_consultants(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """verified consultants with cases handled and unique users per row"""
    users = await fetch_users(db, page_size=CONSULTANT_PAGE_SIZE)
    chats = await fetch_chats(db)

    consultants = [u for u in users if u.role == "consultant" and u.verified]
    rows = []
    for consultant in consultants:
        analytics = consultant_analytics(chats, [], consultant.id)
        rows.append(ConsultantRow(
            **consultant.model_dump(),
            casesHandled=analytics.cases_handled,
            uniqueUsers=analytics.unique_users,
        ))

    return ConsultantListResponse(
        consultants=rows,
        overview=consultant_overview(consultants, chats),
    )


@router.get("/requests", response_model=list[UserRecord])
async def list_consultant_requests(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """consultant applications still awaiting approval"""
    return await fetch_users(db, role="consultant", verified=False, page_size=REQUESTS_PAGE_SIZE)


@router.get("/{consultant_id}/analytics", response_model=ConsultantAnalytics)
async def get_consultant_analytics(
    consultant_id: str,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """cases handled, unique users and the sentiment trend of those users"""
    consultant = await fetch_user(db, consultant_id)
    if consultant is None or consultant.role != "consultant":
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Consultant not found",
        )

    chats = await fetch_chats(db)
    entries = await fetch_diary_entries(db)
    return consultant_analytics(chats, entries, consultant_id, settings.report_tz)
