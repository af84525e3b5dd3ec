# auth service — admin credential check and session token management
# the admin account is configured through env vars, sessions are signed jwts

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from admin_api.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_ROLE = "admin"


def hash_password(password: str) -> str:
    """hash a plaintext password using bcrypt (for ADMIN_PASSWORD_HASH)"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """verify a plaintext password against a bcrypt hash"""
    return pwd_context.verify(plain_password, hashed_password)


def verify_admin_credentials(email: str, password: str) -> bool:
    """check a login attempt against the configured admin account"""
    if not secrets.compare_digest(email.encode(), settings.ADMIN_EMAIL.encode()):
        return False
    if settings.ADMIN_PASSWORD_HASH:
        return verify_password(password, settings.ADMIN_PASSWORD_HASH)
    return secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())


def create_session_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    """create the signed admin session token stored in the session cookie"""
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(hours=settings.SESSION_EXPIRE_HOURS))
    to_encode = {
        "email": email,
        "role": ADMIN_ROLE,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """decode and validate a session token, returns payload or none.
    expired, tampered and malformed tokens all come back as none."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"Session token decode failed: {e}")
        return None
    if payload.get("role") != ADMIN_ROLE:
        return None
    return payload
