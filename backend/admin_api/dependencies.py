# fastapi dependency injection
# re-validates the admin session cookie for api routes and page renders

import logging
from typing import Optional
from fastapi import HTTPException, Request, status

from admin_api.config import settings
from admin_api.services.auth_service import decode_token

logger = logging.getLogger(__name__)


def read_session(request: Request) -> Optional[dict]:
    """decoded session payload from the cookie, none when absent or invalid"""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_token(token)


async def get_admin_session(request: Request) -> dict:
    """session for api routes, 401 when missing or expired"""
    payload = read_session(request)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return payload


async def require_admin_page(request: Request) -> dict:
    """session for page renders, bounces to the login page instead of 401"""
    payload = read_session(request)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            detail="Login required",
            headers={"Location": settings.LOGIN_PATH},
        )
    return payload
