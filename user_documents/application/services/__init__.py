"""Service orchestrators."""

from .user_document_service import UserDocumentService

__all__ = [
    "UserDocumentService",
]
