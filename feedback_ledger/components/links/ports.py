"""
Links component - Port interfaces.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from feedback_ledger.domain.entities import Link, Principal
from feedback_ledger.domain.notifications import (
    LinkCreated,
    LinkDeleted,
    LinkPrivacyChanged,
    LinkStatusChanged,
    Notification,
)

from .models import LinkInfo, LinkTopic


class LinkReadPort(Protocol):
    """Read access to link records."""

    def get_link(self, link_id: str) -> Link | None: ...


class LinkStatePort(LinkReadPort, Protocol):
    """Transactional access to link records."""

    now: datetime

    def is_admin(self, principal: Principal) -> bool: ...

    def insert_link(self, link: Link) -> None: ...

    def put_link(self, link: Link) -> None: ...

    def emit(self, notification: Notification) -> None: ...


class LinkLedgerPort(Protocol):
    """Ledger operations used by the links shell."""

    def create_link(
        self,
        caller: Principal,
        name: bytes,
        topic: bytes,
        description: bytes = b"",
        is_private: bool = False,
    ) -> LinkCreated: ...

    def set_active(self, caller: Principal, link_id: str, is_active: bool) -> LinkStatusChanged: ...

    def set_private(
        self, caller: Principal, link_id: str, is_private: bool
    ) -> LinkPrivacyChanged: ...

    def delete_link(self, caller: Principal, link_id: str) -> LinkDeleted: ...

    def get_topic(self, link_id: str) -> LinkTopic: ...

    def get_full_info(self, link_id: str) -> LinkInfo: ...
