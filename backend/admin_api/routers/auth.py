# auth router — admin login, logout and session info
# the admin account is configured via env vars; the session lives in an http-only cookie

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from admin_api.config import settings
from admin_api.dependencies import get_admin_session
from admin_api.models.auth import AdminLogin, SessionInfo
from admin_api.services.auth_service import create_session_token, verify_admin_credentials

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
async def login(payload: AdminLogin):
    """check admin credentials and set the session cookie"""
    if not verify_admin_credentials(payload.email, payload.password):
        logger.warning(f"Failed admin login attempt for {payload.email}")
        return JSONResponse(
            {"error": "Invalid credentials"},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    token = create_session_token(payload.email)
    response = JSONResponse({"success": True})
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_EXPIRE_HOURS * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    logger.info(f"Admin logged in: {payload.email}")
    return response


@router.post("/logout")
async def logout():
    """drop the session cookie"""
    response = JSONResponse({"success": True})
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return response


@router.get("/session", response_model=SessionInfo)
async def get_session(session: dict = Depends(get_admin_session)):
    """who is logged in and until when"""
    return SessionInfo(
        email=session.get("email", ""),
        role=session.get("role", ""),
        issuedAt=datetime.fromtimestamp(session.get("iat", 0), tz=timezone.utc),
        expiresAt=datetime.fromtimestamp(session.get("exp", 0), tz=timezone.utc),
    )
