"""
Document CRUD operations.

Provides Create, Read, Update, Delete operations for DocumentModel
with owner filtering and verification writes.

Dependencies: sqlalchemy, user_documents.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from user_documents.boundary.db.models.document_model import DocumentModel
from user_documents.boundary.db.models.user_model import UserModel
from user_documents.boundary.db.CRUD.base_crud import BaseCRUD


def _user_summary(relationship):
    """Eager-load a user relationship limited to id and names."""
    return joinedload(relationship).load_only(
        UserModel.id, UserModel.first_name, UserModel.last_name
    )


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with owner-scoped listing and admin verification.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_with_owner(
        self,
        session: AsyncSession,
        id: int,
    ) -> DocumentModel | None:
        """
        Retrieve one document with its owner summary.

        Args:
            session: Async database session
            id: Document primary key

        Returns:
            DocumentModel if found, None otherwise
        """
        return await self.get_by_id(
            session, id, _user_summary(DocumentModel.document_owner)
        )

    async def list_documents(
        self,
        session: AsyncSession,
        owner_id: int | None = None,
    ) -> Sequence[DocumentModel]:
        """
        List documents newest first with admin and owner summaries.

        Args:
            session: Async database session
            owner_id: Restrict to documents owned by this user when truthy

        Returns:
            Sequence of DocumentModels ordered by id descending
        """
        stmt = (
            select(DocumentModel)
            .options(
                _user_summary(DocumentModel.admin),
                _user_summary(DocumentModel.document_owner),
            )
            .order_by(DocumentModel.id.desc())
            .execution_options(populate_existing=True)
        )
        if owner_id:
            stmt = stmt.where(DocumentModel.user_id == owner_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_verified(
        self,
        session: AsyncSession,
        id: int,
        admin_id: int,
    ) -> int:
        """
        Mark a document verified by an admin.

        Args:
            session: Async database session
            id: Document primary key
            admin_id: Id of the verifying travel admin

        Returns:
            Number of rows updated (0 when the id is unknown)
        """
        return await self.update_by_id(
            session, id, verified=True, travel_admin_id=admin_id
        )


document_crud = DocumentCRUD()
