# leaderboard router — points standings and per-user points history

import logging

from fastapi import APIRouter, Depends

from admin_api.models.points import LeaderboardResponse, PointsHistoryResponse
from admin_api.services.aggregation import leaderboard_stats, points_history_summary, rank_leaderboard
from admin_api.services.db import Database, get_db
from admin_api.services.records import fetch_points_transactions, fetch_user_points
from admin_api.dependencies import get_admin_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """standings in store order with positional ranks, plus podium stats"""
    ranked = rank_leaderboard(await fetch_user_points(db))
    return LeaderboardResponse(entries=ranked, stats=leaderboard_stats(ranked))


@router.get("/{user_id}/history", response_model=PointsHistoryResponse)
async def get_points_history(
    user_id: str,
    session: dict = Depends(get_admin_session),
    db: Database = Depends(get_db),
):
    """a user's points transactions, newest first"""
    transactions = await fetch_points_transactions(db, user_id=user_id)
    return PointsHistoryResponse(
        userId=user_id,
        transactions=transactions,
        summary=points_history_summary(transactions),
    )
