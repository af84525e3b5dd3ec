# auth models — admin login payload and session view

from datetime import datetime
from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    email: str
    password: str


class SessionInfo(BaseModel):
    """decoded admin session, as returned to the dashboard"""
    email: str
    role: str
    issued_at: datetime = Field(..., alias="issuedAt")
    expires_at: datetime = Field(..., alias="expiresAt")

    model_config = {"populate_by_name": True}
