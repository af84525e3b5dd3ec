# pages router — shell routes the dashboard frontend renders around
# /admin routes re-check the session at render time and bounce to /login

from fastapi import APIRouter, Depends

from admin_api.config import settings
from admin_api.dependencies import require_admin_page

router = APIRouter(tags=["pages"])

ADMIN_SECTIONS = [
    {"title": "Dashboard", "href": "/admin"},
    {"title": "Users", "href": "/admin/users"},
    {"title": "Consultants", "href": "/admin/consultants"},
    {"title": "Consultant Requests", "href": "/admin/consultants/requests"},
    {"title": "Chats", "href": "/admin/chats"},
    {"title": "Diary Insights", "href": "/admin/diary-insights"},
    {"title": "Tasks", "href": "/admin/tasks"},
    {"title": "Leaderboard", "href": "/admin/leaderboard"},
    {"title": "SOS Contacts", "href": "/admin/sos"},
    {"title": "Motivation", "href": "/admin/motivation"},
    {"title": "Settings", "href": "/admin/settings"},
]

PRIVACY_POLICY = [
    "Admin cannot view or access the actual text content of user diary entries",
    "Admin cannot view chat messages between users and consultants (end-to-end encrypted)",
    "Admin can view aggregated sentiment analysis and emotional trends",
    "Admin can view SOS emergency contacts for safety purposes",
    "Admin can manage user accounts and consultant approvals (metadata only)",
]


@router.get("/login")
async def login_page():
    """where unauthenticated admin requests land"""
    return {
        "message": "Admin login required",
        "loginEndpoint": f"{settings.API_PREFIX}/auth/login",
    }


@router.get("/admin")
async def admin_home(session: dict = Depends(require_admin_page)):
    """navigation for the admin shell"""
    return {"admin": session.get("email"), "sections": ADMIN_SECTIONS}


@router.get("/admin/settings")
async def admin_settings(session: dict = Depends(require_admin_page)):
    """admin account, session lifetime and the data-access policy"""
    return {
        "adminEmail": settings.ADMIN_EMAIL,
        "sessionHours": settings.SESSION_EXPIRE_HOURS,
        "environment": settings.ENVIRONMENT,
        "reportTimezone": settings.REPORT_TIMEZONE,
        "rateLimit": {
            "maxRequests": settings.RATE_LIMIT_MAX_REQUESTS,
            "windowSeconds": settings.RATE_LIMIT_WINDOW_SECONDS,
        },
        "privacyPolicy": PRIVACY_POLICY,
    }
