"""Request and response schemas."""

from .document import DocumentCreate, DocumentListItemResponse, DocumentResponse
from .user import (
    LineManagerResponse,
    SetUserRoleRequest,
    UserProfileUpdate,
    UserResponse,
    UserSummary,
)

__all__ = [
    "DocumentCreate",
    "DocumentListItemResponse",
    "DocumentResponse",
    "LineManagerResponse",
    "SetUserRoleRequest",
    "UserProfileUpdate",
    "UserResponse",
    "UserSummary",
]
