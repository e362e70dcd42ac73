"""
Admins component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from feedback_ledger.domain.entities import Principal
from feedback_ledger.domain.notifications import AdminAdded, AdminRemoved, Notification


class AdminStatePort(Protocol):
    """Transactional view of the admin set."""

    def is_admin(self, principal: Principal) -> bool: ...

    def list_admins(self) -> list[Principal]: ...

    def add_admin(self, principal: Principal) -> None: ...

    def remove_admin(self, principal: Principal) -> None: ...

    def emit(self, notification: Notification) -> None: ...


class AdminLedgerPort(Protocol):
    """Ledger operations used by the admins shell."""

    def is_admin(self, principal: Principal) -> bool: ...

    def list_admins(self, caller: Principal) -> list[Principal]: ...

    def add_admin(self, caller: Principal, target: Principal) -> AdminAdded: ...

    def remove_admin(self, caller: Principal, target: Principal) -> AdminRemoved: ...
