"""
Admins component - Admin membership management.

Shell Layer - converts ledger errors into operation outputs.

Invariants:
- I1: Only admins add or remove admins
- I2: An admin can never remove itself
- I3: The null principal is never a valid target
"""

from __future__ import annotations

from feedback_ledger.domain.errors import ErrorDetail, LedgerError

from .models import (
    AddAdminInput,
    AdminCheckOutput,
    AdminListOutput,
    AdminOperationOutput,
    CheckAdminInput,
    ListAdminsInput,
    RemoveAdminInput,
)
from .ports import AdminLedgerPort

# --- Component Entry Points ---


def run_add(inp: AddAdminInput, *, ledger: AdminLedgerPort) -> AdminOperationOutput:
    """Grant admin rights to a principal."""
    try:
        event = ledger.add_admin(inp.caller, inp.target)
    except LedgerError as e:
        return AdminOperationOutput(
            notification=None,
            errors=[ErrorDetail.from_error(e)],
            success=False,
        )
    return AdminOperationOutput(notification=event)


def run_remove(inp: RemoveAdminInput, *, ledger: AdminLedgerPort) -> AdminOperationOutput:
    """Revoke admin rights from a principal."""
    try:
        event = ledger.remove_admin(inp.caller, inp.target)
    except LedgerError as e:
        return AdminOperationOutput(
            notification=None,
            errors=[ErrorDetail.from_error(e)],
            success=False,
        )
    return AdminOperationOutput(notification=event)


def run_check(inp: CheckAdminInput, *, ledger: AdminLedgerPort) -> AdminCheckOutput:
    """Check admin membership. Never fails."""
    return AdminCheckOutput(principal=inp.principal, is_admin=ledger.is_admin(inp.principal))


def run_list(inp: ListAdminsInput, *, ledger: AdminLedgerPort) -> AdminListOutput:
    """List the admin set (admin only)."""
    try:
        admins = ledger.list_admins(inp.caller)
    except LedgerError as e:
        return AdminListOutput(
            admins=(),
            total=0,
            errors=[ErrorDetail.from_error(e)],
            success=False,
        )
    return AdminListOutput(admins=tuple(admins), total=len(admins))
