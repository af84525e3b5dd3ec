# user models — app users and consultants as stored in the users collection
# plus the payloads for the admin's user-management actions

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """an app user or consultant (metadata only)"""
    id: str
    display_name: str = Field("", alias="displayName")
    email: str = ""
    role: str = "user"
    verified: bool = False
    active: bool = True
    rejected: bool = False
    reject_reason: Optional[str] = Field(None, alias="rejectReason")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    cv_url: Optional[str] = Field(None, alias="cvUrl")
    linkedin_url: Optional[str] = Field(None, alias="linkedinUrl")

    model_config = {"populate_by_name": True}

    @property
    def label(self) -> str:
        """name shown in lookups: display name, falling back to email"""
        return self.display_name or self.email


class RejectRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=500)


class ActiveUpdate(BaseModel):
    active: bool


class ActionResponse(BaseModel):
    """result of a single-document user mutation"""
    success: bool = True
    user_id: str = Field(..., alias="userId")
    message: str

    model_config = {"populate_by_name": True}
