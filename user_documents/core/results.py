"""
Profile update outcomes.

Validation of a profile update is reported as a value rather than an
exception so route handlers can map each outcome to a response.

Dependencies: dataclasses, enum
System role: Tagged result type for UserDocumentService.update_user_info_by_email
"""

import enum
from dataclasses import dataclass
from typing import Any


class ManagerRejection(str, enum.Enum):
    """
    Reasons a line-manager assignment is refused.

    Values are the wire sentinels route handlers already translate into
    client-facing messages.

    MANAGER_DOESNT_EXIST: line_manager_id matches no user
    OWN_MANAGE: user tried to become their own line manager
    INVALID_MANAGER: referenced user does not hold the manager role
    """

    MANAGER_DOESNT_EXIST = "manager_doesnt_exist"
    OWN_MANAGE = "own_manage"
    INVALID_MANAGER = "invalid_manager"


@dataclass(frozen=True)
class ProfileUpdated:
    """Profile was written; ``user`` holds the stored columns minus password."""

    user: dict[str, Any]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ProfileRejected:
    """Profile update refused before any write."""

    reason: ManagerRejection

    @property
    def ok(self) -> bool:
        return False


ProfileUpdateResult = ProfileUpdated | ProfileRejected
