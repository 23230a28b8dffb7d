"""
User CRUD operations.

Provides user-specific queries keyed by email, the profile projection,
and update-and-return writes.

Dependencies: sqlalchemy, user_documents.boundary.db.models
System role: User persistence operations
"""

from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload

from user_documents.boundary.db.models.user_model import UserModel
from user_documents.boundary.db.CRUD.base_crud import BaseCRUD

# Columns exposed by the profile view; password and timestamps stay out
PROFILE_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "email",
    "is_verified",
    "birth_date",
    "residence_address",
    "preferred_language",
    "preferred_currency",
    "department",
    "line_manager_id",
    "gender",
    "last_login",
    "role",
    "phone_number",
    "remember",
    "profile_picture",
)


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Extends BaseCRUD with lookups and writes addressed by email, which is
    how authenticated route handlers identify the acting user.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Retrieve a user by exact email match.

        Args:
            session: Async database session
            email: Email address

        Returns:
            UserModel if found, None otherwise
        """
        stmt = (
            select(UserModel)
            .where(UserModel.email == email)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_id_by_email(self, session: AsyncSession, email: str) -> int | None:
        """
        Resolve a user's primary key from their email.

        Args:
            session: Async database session
            email: Email address

        Returns:
            User id if found, None otherwise
        """
        stmt = select(UserModel.id).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_profile(self, session: AsyncSession, id: int) -> UserModel | None:
        """
        Load a user restricted to PROFILE_FIELDS, with the line manager.

        Args:
            session: Async database session
            id: User primary key

        Returns:
            Partially loaded UserModel if found, None otherwise
        """
        return await self.get_by_id(
            session,
            id,
            load_only(*(getattr(UserModel, field) for field in PROFILE_FIELDS)),
            selectinload(UserModel.line_manager),
        )

    async def update_by_email(
        self,
        session: AsyncSession,
        current_email: str,
        values: dict[str, Any],
    ) -> UserModel | None:
        """
        Update the user matching current_email and return the stored row.

        values may itself carry a new email.

        Args:
            session: Async database session
            current_email: Email of the user to update (matched before the write)
            values: Fields to update with new values

        Returns:
            Updated UserModel if a row matched, None otherwise
        """
        stmt = (
            update(UserModel)
            .where(UserModel.email == current_email)
            .values(**values)
            .returning(UserModel)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def touch_last_login(
        self,
        session: AsyncSession,
        email: str,
        at: datetime,
    ) -> int:
        """
        Record a login time without refreshing instances held by the session.

        A UserModel loaded before this call keeps its previous last_login.

        Args:
            session: Async database session
            email: Email of the user who logged in
            at: Login timestamp (UTC)

        Returns:
            Number of rows updated
        """
        stmt = (
            update(UserModel)
            .where(UserModel.email == email)
            .values(last_login=at)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount


user_crud = UserCRUD()
