# content router — sos emergency contacts and motivation reels (read-only)

import logging

from fastapi import APIRouter, Depends

from admin_api.models.content import EmergencyContact, MotivationListResponse
from admin_api.services.aggregation import motivation_stats
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_emergency_contacts, fetch_motivation_reels
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["content"])


@router.get("/sos", response_model=list[EmergencyContact])
async def list_emergency_contacts(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """emergency contacts users registered, newest first"""
    return await fetch_emergency_contacts(db)


@router.get("/motivation", response_model=MotivationListResponse)
async def list_motivation_reels(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """motivation reels for monitoring, newest first"""
    reels = await fetch_motivation_reels(db)
    return MotivationListResponse(reels=reels, stats=motivation_stats(reels))
