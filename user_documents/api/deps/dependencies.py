"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, user_documents.configs, user_documents.application, user_documents.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_documents.configs import Settings, get_settings
from user_documents.boundary.db import get_async_db
from user_documents.application.services import UserDocumentService


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_user_document_service(
    db: AsyncSession = Depends(get_async_db),
) -> UserDocumentService:
    """
    Get user and document service bound to the request's session.

    Args:
        db: Request-scoped async database session

    Returns:
        UserDocumentService: Service instance
    """
    return UserDocumentService(db=db)
