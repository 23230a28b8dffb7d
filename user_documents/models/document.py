"""
Document domain models and schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from user_documents.models.user import UserSummary


class DocumentCreate(BaseModel):
    """Request schema for recording an uploaded document."""

    name: str = Field(description="Display name of the document")
    url: str = Field(description="Storage URL of the uploaded file")
    user_id: int = Field(description="Owner user id")


class DocumentResponse(BaseModel):
    """Response schema for a single document with its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url: str
    user_id: int
    verified: bool
    travel_admin_id: int | None = None
    created_at: datetime
    document_owner: UserSummary | None = None


class DocumentListItemResponse(DocumentResponse):
    """Document listing entry, adding the verifying admin."""

    admin: UserSummary | None = None
