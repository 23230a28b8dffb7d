"""
User domain models and schemas.

Request/response schemas for profile and role operations.

Dependencies: pydantic
System role: User API contracts
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class UserProfileUpdate(BaseModel):
    """
    Request schema for updating the acting user's profile.

    Only fields explicitly supplied are written. profile_picture set to
    None or an empty string keeps the stored picture.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    birth_date: date | None = None
    preferred_language: str | None = None
    preferred_currency: str | None = None
    residence_address: str | None = None
    gender: str | None = None
    department: str | None = None
    line_manager_id: int | None = Field(
        default=None,
        description="Id of a user holding the manager role",
    )
    phone_number: str | None = None
    remember: bool | None = None
    profile_picture: str | None = Field(
        default=None,
        description="New avatar URL; None or empty string leaves it unchanged",
    )


class SetUserRoleRequest(BaseModel):
    """Request schema for assigning a role by email."""

    email: str
    role: str


class UserSummary(BaseModel):
    """Minimal user reference embedded in document responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str | None = None
    last_name: str | None = None


class LineManagerResponse(BaseModel):
    """Line manager details nested in a profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None
    department: str | None = None
    role: str


class UserResponse(BaseModel):
    """Response schema for the profile view."""

    model_config = ConfigDict(from_attributes=True)

    first_name: str | None = None
    last_name: str | None = None
    email: str
    is_verified: bool
    birth_date: date | None = None
    residence_address: str | None = None
    preferred_language: str | None = None
    preferred_currency: str | None = None
    department: str | None = None
    line_manager_id: int | None = None
    gender: str | None = None
    last_login: datetime | None = None
    role: str
    phone_number: str | None = None
    remember: bool
    profile_picture: str | None = None
    line_manager: LineManagerResponse | None = None
