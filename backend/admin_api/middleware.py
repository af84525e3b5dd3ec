# request middleware — security headers, api rate limiting and the admin session gate
# /admin/* without a valid session redirects to the login page,
# /api/* without one gets a 401 json error (login/logout excepted)

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from admin_api.config import settings
from admin_api.dependencies import read_session
from admin_api.services.rate_limiter import rate_limiter

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
}

PUBLIC_API_PATHS = {
    f"{settings.API_PREFIX}/auth/login",
    f"{settings.API_PREFIX}/auth/logout",
}


def _under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def client_address(request: Request) -> str:
    """socket peer, or the address our own proxies recorded in x-forwarded-for.

    each trusted proxy appends the peer it saw, so the client is the hop
    TRUSTED_PROXY_HOPS places from the right. anything further left was
    written by the client and is ignored.
    """
    hops = settings.TRUSTED_PROXY_HOPS
    forwarded = request.headers.get("x-forwarded-for")
    if hops > 0 and forwarded:
        chain = [part.strip() for part in forwarded.split(",") if part.strip()]
        if len(chain) >= hops:
            return chain[-hops]
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


async def admin_gate(request: Request, call_next):
    path = request.url.path
    response = None

    if _under(path, settings.API_PREFIX):
        if not rate_limiter.hit(client_address(request)):
            response = PlainTextResponse("Too Many Requests", status_code=429)
        elif path not in PUBLIC_API_PATHS and read_session(request) is None:
            response = JSONResponse({"error": "Unauthorized"}, status_code=401)

    elif _under(path, settings.ADMIN_PREFIX):
        if read_session(request) is None:
            logger.info(f"Redirecting unauthenticated request for {path} to login")
            response = RedirectResponse(settings.LOGIN_PATH, status_code=307)

    if response is None:
        response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response
