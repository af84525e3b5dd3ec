# moodtrack admin backend api
# fastapi app with async mongodb, cookie jwt sessions and sentiment analytics

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from admin_api.config import settings
from admin_api.middleware import admin_gate
from admin_api.services.db import db
from admin_api.services.records import FetchError
from admin_api.services.user_actions import MutationError
from admin_api.routers import (
    auth,
    pages,
    dashboard,
    users,
    consultants,
    diary,
    chats,
    tasks,
    leaderboard,
    content,
    search,
    export,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: connect to mongodb. shutdown: close connection."""
    logger.info("Starting MoodTrack admin backend...")
    await db.connect()
    logger.info("MoodTrack admin backend ready")
    yield
    logger.info("Shutting down MoodTrack admin backend...")
    await db.close()


app = FastAPI(
    title="MoodTrack Admin API",
    description="Admin dashboard backend — user management, consultant analytics, diary sentiment insights",
    version="0.1.0",
    lifespan=lifespan,
)

# session gate + rate limit + security headers
app.middleware("http")(admin_gate)

# cors — allow the dashboard frontend, added last so it wraps the gate
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    """store reads fail terminally, no partial data and no retry"""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


@app.exception_handler(MutationError)
async def mutation_error_handler(request: Request, exc: MutationError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


# register routers
app.include_router(auth.router)
app.include_router(pages.router)
app.include_router(dashboard.router)
app.include_router(users.router)
app.include_router(consultants.router)
app.include_router(diary.router)
app.include_router(chats.router)
app.include_router(tasks.router)
app.include_router(leaderboard.router)
app.include_router(content.router)
app.include_router(search.router)
app.include_router(export.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "moodtrack-admin-api"}
