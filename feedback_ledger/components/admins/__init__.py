"""
Admins component - Privileged principal registry.
"""

from ._impl import AdminRegistry
from .component import run_add, run_check, run_list, run_remove
from .models import (
    AddAdminInput,
    AdminCheckOutput,
    AdminListOutput,
    AdminOperationOutput,
    CheckAdminInput,
    ListAdminsInput,
    RemoveAdminInput,
)
from .ports import AdminLedgerPort, AdminStatePort

__all__ = [
    # Entry points
    "run_add",
    "run_remove",
    "run_check",
    "run_list",
    # Input models
    "AddAdminInput",
    "RemoveAdminInput",
    "CheckAdminInput",
    "ListAdminsInput",
    # Output models
    "AdminOperationOutput",
    "AdminCheckOutput",
    "AdminListOutput",
    # Ports
    "AdminStatePort",
    "AdminLedgerPort",
    # Core
    "AdminRegistry",
]
