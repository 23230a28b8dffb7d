"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(),
    dispose_async_engine(): Async connection lifecycle
  - UserModel, UserRole, DocumentModel: Domain entities
  - user_crud, document_crud: CRUD operation singletons

Dependencies: sqlalchemy, user_documents.configs
System role: Database adapter providing persistent storage for users
and their uploaded documents.
"""

from user_documents.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from user_documents.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from user_documents.boundary.db.models.user_model import UserModel, UserRole
from user_documents.boundary.db.models.document_model import DocumentModel
from user_documents.boundary.db.CRUD import (
    BaseCRUD,
    UserCRUD,
    DocumentCRUD,
    user_crud,
    document_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "UserRole",
    "DocumentModel",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "DocumentCRUD",
    # CRUD singletons
    "user_crud",
    "document_crud",
]
