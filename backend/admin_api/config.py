# admin backend configuration
# loads env vars for mongodb, admin credentials, session cookie and rate limits

import os
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # mongodb
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "moodtrack")
    MONGODB_TIMEOUT_MS: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # session jwt
    JWT_SECRET: str = os.getenv("JWT_SECRET", "your-secret-key-change-in-production")
    JWT_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_HOURS: int = 24
    SESSION_COOKIE_NAME: str = "admin-token"

    # admin credentials — a bcrypt hash takes precedence over the plain password
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@yourdomain.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "ChangeMe!")
    ADMIN_PASSWORD_HASH: str = os.getenv("ADMIN_PASSWORD_HASH", "")

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # route prefixes guarded by the session gate
    ADMIN_PREFIX: str = "/admin"
    API_PREFIX: str = "/api"
    LOGIN_PATH: str = "/login"

    # per-client rate limit on api routes
    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 15 * 60

    # reverse proxies in front of the app that append to x-forwarded-for.
    # 0 means the header is ignored and the socket peer is the client
    TRUSTED_PROXY_HOPS: int = int(os.getenv("TRUSTED_PROXY_HOPS", "0"))

    # calendar zone for daily sentiment buckets
    REPORT_TIMEZONE: str = os.getenv("REPORT_TIMEZONE", "UTC")

    # newest diary entries pulled per insights request
    DIARY_FETCH_LIMIT: int = 100

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def report_tz(self) -> tzinfo:
        """zone whose calendar days bucket the sentiment trends"""
        if self.REPORT_TIMEZONE.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.REPORT_TIMEZONE)


settings = Settings()
