"""
User and document service orchestrator.

Coordinates profile lookups, profile and role updates, and the upload,
listing, deletion and verification of travel documents.

Dependencies: user_documents.boundary.db.CRUD, user_documents.core
System role: User and document use case orchestration
"""

import logging
from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from user_documents.boundary.db.CRUD.document_crud import document_crud
from user_documents.boundary.db.CRUD.user_crud import PROFILE_FIELDS, user_crud
from user_documents.boundary.db.models.document_model import DocumentModel
from user_documents.boundary.db.models.user_model import UserModel, UserRole
from user_documents.core.exceptions import UserNotFoundError
from user_documents.core.results import (
    ManagerRejection,
    ProfileRejected,
    ProfileUpdated,
    ProfileUpdateResult,
)
from user_documents.models.document import DocumentCreate
from user_documents.models.user import SetUserRoleRequest, UserProfileUpdate
from user_documents.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

# Scalar profile columns written verbatim when supplied
UPDATABLE_PROFILE_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "birth_date",
    "preferred_language",
    "preferred_currency",
    "gender",
    "email",
    "residence_address",
    "line_manager_id",
    "department",
    "phone_number",
    "remember",
)


class UserDocumentService:
    """
    User and document service orchestrator.

    Stateless apart from the injected session. Storage errors propagate
    unchanged; transaction boundaries belong to whoever owns the session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def find_user_by_email(self, email: str) -> UserModel | None:
        """
        Look up a user at sign-in and stamp their last login.

        The returned record is the one read before the write, so its
        last_login still holds the previous value. Read and write are
        separate statements; a concurrent reader between them sees the
        old timestamp.

        Args:
            email: Exact email address

        Returns:
            UserModel as stored before the call, or None if no user matches
        """
        user = await user_crud.get_by_email(self.db, email)
        if user is None:
            return None

        await user_crud.touch_last_login(self.db, email, datetime.now(timezone.utc))
        logger.debug("Recorded login for user %s", user.id)
        return user

    async def get_user_by_id(self, id: int) -> dict[str, Any] | None:
        """
        Get a user's profile view.

        Args:
            id: User primary key

        Returns:
            dict: PROFILE_FIELDS plus ``line_manager`` (manager columns
            without password, or None); None if the user doesn't exist
        """
        user = await user_crud.get_profile(self.db, id)
        if user is None:
            return None

        profile = {field: getattr(user, field) for field in PROFILE_FIELDS}
        manager = user.line_manager
        profile["line_manager"] = (
            manager.to_dict(exclude={"password"}) if manager is not None else None
        )
        return profile

    async def update_user_info_by_email(
        self,
        attributes: UserProfileUpdate,
        email: str,
    ) -> ProfileUpdateResult:
        """
        Validate the requested line manager and update the acting user's profile.

        Checks run in order and the first failure wins:
        manager must exist, must not be the user themself, must hold the
        manager role. Only fields set on ``attributes`` are written;
        profile_picture is written only when it is a non-empty string.

        Args:
            attributes: Profile fields to write
            email: Email of the acting user (matched before the write)

        Returns:
            ProfileUpdated with the stored columns minus password, or
            ProfileRejected naming the failed manager check

        Raises:
            UserNotFoundError: If no user has ``email``
        """
        own_id = await user_crud.get_id_by_email(self.db, email)
        if own_id is None:
            raise UserNotFoundError(email)

        line_manager_id = attributes.line_manager_id
        manager = (
            await user_crud.get_by_id(self.db, line_manager_id)
            if line_manager_id is not None
            else None
        )

        if manager is None:
            rejection = ManagerRejection.MANAGER_DOESNT_EXIST
        elif line_manager_id == own_id:
            rejection = ManagerRejection.OWN_MANAGE
        elif manager.role != UserRole.MANAGER.value:
            rejection = ManagerRejection.INVALID_MANAGER
        else:
            rejection = None

        if rejection is not None:
            log_with_context(
                logger,
                logging.INFO,
                "Profile update for user %s rejected: %s",
                own_id,
                rejection.value,
                user_id=own_id,
                line_manager_id=line_manager_id,
                reason=rejection.value,
            )
            return ProfileRejected(rejection)

        supplied = attributes.model_dump(
            include=set(UPDATABLE_PROFILE_FIELDS),
            exclude_unset=True,
        )
        if attributes.profile_picture:
            supplied["profile_picture"] = attributes.profile_picture

        updated = await user_crud.update_by_email(self.db, email, supplied)
        log_with_context(
            logger,
            logging.INFO,
            "Profile of user %s updated: %s",
            own_id,
            ", ".join(sorted(supplied)),
            user_id=own_id,
            fields=sorted(supplied),
        )
        return ProfileUpdated(user=updated.to_dict(exclude={"password"}))

    async def set_user_role(self, body: SetUserRoleRequest) -> UserModel | None:
        """
        Assign a role to the user matching an email.

        The role value is stored as given.

        Args:
            body: Target email and role

        Returns:
            Updated UserModel, or None if no user matches
        """
        user = await user_crud.update_by_email(
            self.db, body.email, {"role": body.role}
        )
        if user is not None:
            logger.info("Role of user %s set to %s", user.id, body.role)
        return user

    async def add_document(self, document: DocumentCreate) -> DocumentModel:
        """
        Record an uploaded document.

        Args:
            document: Name, URL and owner id

        Returns:
            DocumentModel: Created document
        """
        created = await document_crud.create(
            self.db,
            user_id=document.user_id,
            name=document.name,
            url=document.url,
        )
        logger.info("Document %s added for user %s", created.id, created.user_id)
        return created

    async def delete_document(self, id: int) -> int:
        """
        Delete a document.

        Args:
            id: Document primary key

        Returns:
            int: Rows removed (0 if the document didn't exist)
        """
        deleted = await document_crud.delete_by_id(self.db, id)
        logger.info("Deleted %d document(s) with id %s", deleted, id)
        return deleted

    async def retrieve_documents(
        self,
        requester_id: int | None = None,
    ) -> Sequence[DocumentModel]:
        """
        List documents, most recent first.

        Args:
            requester_id: Restrict to this owner; omitted or falsy lists all

        Returns:
            Sequence of DocumentModels with ``admin`` and ``document_owner`` loaded
        """
        return await document_crud.list_documents(self.db, owner_id=requester_id)

    async def get_document(self, id: int) -> DocumentModel | None:
        """
        Get a document with its owner.

        Args:
            id: Document primary key

        Returns:
            DocumentModel if found, None otherwise
        """
        return await document_crud.get_with_owner(self.db, id)

    async def verify_document(self, id: int, user_id: int) -> int:
        """
        Mark a document verified by a travel admin.

        Args:
            id: Document primary key
            user_id: Verifying admin's id

        Returns:
            int: Rows updated (0 if the document didn't exist)
        """
        updated = await document_crud.mark_verified(self.db, id, user_id)
        logger.info("Document %s verified by user %s (%d row(s))", id, user_id, updated)
        return updated
