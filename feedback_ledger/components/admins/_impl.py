"""
AdminRegistry - the set of privileged principals.

Functional Core - pure business logic over a transactional state port.
"""

from __future__ import annotations

from feedback_ledger.domain.entities import Principal, is_null_principal
from feedback_ledger.domain.errors import (
    AlreadyAdminError,
    InvalidTargetError,
    NotAdminError,
    SelfRemovalError,
    UnauthorizedError,
)
from feedback_ledger.domain.notifications import AdminAdded, AdminRemoved

from .ports import AdminStatePort


class AdminRegistry:
    """
    Admin registry.

    Only admins mutate the set, and no admin can remove itself, so the set is
    never emptied through self-service.
    """

    def __init__(self, state: AdminStatePort) -> None:
        self._state = state

    def is_admin(self, principal: Principal) -> bool:
        return self._state.is_admin(principal)

    def require_admin(self, caller: Principal) -> None:
        if not self._state.is_admin(caller):
            raise UnauthorizedError()

    def list_admins(self, caller: Principal) -> list[Principal]:
        self.require_admin(caller)
        return self._state.list_admins()

    def add_admin(self, caller: Principal, target: Principal) -> AdminAdded:
        self.require_admin(caller)
        if is_null_principal(target):
            raise InvalidTargetError()
        if self._state.is_admin(target):
            raise AlreadyAdminError()

        self._state.add_admin(target)
        event = AdminAdded(target=target)
        self._state.emit(event)
        return event

    def remove_admin(self, caller: Principal, target: Principal) -> AdminRemoved:
        self.require_admin(caller)
        if is_null_principal(target):
            raise InvalidTargetError()
        if not self._state.is_admin(target):
            raise NotAdminError()
        if target == caller:
            raise SelfRemovalError()

        self._state.remove_admin(target)
        event = AdminRemoved(target=target)
        self._state.emit(event)
        return event
