"""
Admins component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from feedback_ledger.domain.entities import Principal
from feedback_ledger.domain.errors import ErrorDetail
from feedback_ledger.domain.notifications import AdminAdded, AdminRemoved

# --- Input Models ---


@dataclass(frozen=True)
class AddAdminInput:
    """Input for granting admin rights."""

    caller: Principal
    target: Principal


@dataclass(frozen=True)
class RemoveAdminInput:
    """Input for revoking admin rights."""

    caller: Principal
    target: Principal


@dataclass(frozen=True)
class CheckAdminInput:
    """Input for an admin membership lookup."""

    principal: Principal


@dataclass(frozen=True)
class ListAdminsInput:
    """Input for listing the admin set."""

    caller: Principal


# --- Output Models ---


@dataclass(frozen=True)
class AdminOperationOutput:
    """Output from an admin mutation."""

    notification: AdminAdded | AdminRemoved | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AdminCheckOutput:
    """Output from a membership lookup."""

    principal: Principal
    is_admin: bool


@dataclass(frozen=True)
class AdminListOutput:
    """Output from listing admins."""

    admins: tuple[Principal, ...]
    total: int
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True
