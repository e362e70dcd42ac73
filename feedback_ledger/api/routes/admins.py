"""Routes for admin membership."""

from fastapi import APIRouter

from feedback_ledger.api.deps import AuthenticatedCallerDep, LedgerDep
from feedback_ledger.api.errors import raise_for_errors
from feedback_ledger.api.schemas import AdminAddRequest, AdminCheckResponse, AdminListResponse
from feedback_ledger.components.admins import (
    AddAdminInput,
    CheckAdminInput,
    ListAdminsInput,
    RemoveAdminInput,
    run_add,
    run_check,
    run_list,
    run_remove,
)

router = APIRouter()


@router.get("", response_model=AdminListResponse)
def list_admins(caller: AuthenticatedCallerDep, ledger: LedgerDep) -> AdminListResponse:
    """List admins (admin only)."""
    result = run_list(ListAdminsInput(caller=caller), ledger=ledger)
    raise_for_errors(result.errors)
    return AdminListResponse(items=list(result.admins), total=result.total)


@router.post("", response_model=AdminCheckResponse, status_code=201)
def add_admin(
    data: AdminAddRequest,
    caller: AuthenticatedCallerDep,
    ledger: LedgerDep,
) -> AdminCheckResponse:
    """Grant admin rights."""
    result = run_add(AddAdminInput(caller=caller, target=data.target), ledger=ledger)
    raise_for_errors(result.errors)
    return AdminCheckResponse(principal=data.target, is_admin=True)


@router.delete("/{target}", status_code=204)
def remove_admin(target: str, caller: AuthenticatedCallerDep, ledger: LedgerDep) -> None:
    """Revoke admin rights."""
    result = run_remove(RemoveAdminInput(caller=caller, target=target), ledger=ledger)
    raise_for_errors(result.errors)


@router.get("/{principal}", response_model=AdminCheckResponse)
def check_admin(principal: str, ledger: LedgerDep) -> AdminCheckResponse:
    result = run_check(CheckAdminInput(principal=principal), ledger=ledger)
    return AdminCheckResponse(principal=result.principal, is_admin=result.is_admin)
