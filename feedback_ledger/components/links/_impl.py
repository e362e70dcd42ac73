"""
LinkStore - Link records and their lifecycle.

Functional Core - pure business logic over a transactional state port.

Lifecycle: active <-> inactive (admin toggle), either -> deleted (terminal).
Privacy is an orthogonal flag, admin-mutable until deletion.
"""

from __future__ import annotations

from feedback_ledger.domain.entities import Link, LinkState, Principal
from feedback_ledger.domain.errors import (
    DuplicateLinkError,
    EmptyTopicError,
    LinkDeletedError,
    LinkNotFoundError,
    UnauthorizedError,
)
from feedback_ledger.domain.identifiers import derive_link_id
from feedback_ledger.domain.notifications import (
    LinkCreated,
    LinkDeleted,
    LinkPrivacyChanged,
    LinkStatusChanged,
)
from feedback_ledger.domain.state import set_privacy, transition

from .models import LinkInfo, LinkTopic
from .ports import LinkReadPort, LinkStatePort


def to_link_info(link: Link) -> LinkInfo:
    return LinkInfo(
        creator=link.creator,
        topic=link.topic,
        description=link.description,
        is_active=link.is_active,
        is_private=link.is_private,
        is_deleted=link.is_deleted,
        feedback_count=link.feedback_count,
    )


class LinkReader:
    """Read-only link lookups."""

    def __init__(self, state: LinkReadPort) -> None:
        self._state = state

    def _require(self, link_id: str) -> Link:
        link = self._state.get_link(link_id)
        if link is None:
            raise LinkNotFoundError()
        return link

    def exists(self, link_id: str) -> bool:
        return self._state.get_link(link_id) is not None

    def get_topic(self, link_id: str) -> LinkTopic:
        link = self._require(link_id)
        if link.is_deleted:
            raise LinkDeletedError()
        return LinkTopic(topic=link.topic, description=link.description)

    def get_full_info(self, link_id: str) -> LinkInfo:
        """Metadata of any existing link; deleted links stay inspectable."""
        return to_link_info(self._require(link_id))


class LinkStore(LinkReader):
    """
    Link store.

    Anyone creates links; only admins change activity, privacy or deletion.
    """

    def __init__(self, state: LinkStatePort) -> None:
        super().__init__(state)
        self._tx = state

    def _require_admin(self, caller: Principal) -> None:
        if not self._tx.is_admin(caller):
            raise UnauthorizedError()

    def create_link(
        self,
        caller: Principal,
        name: bytes,
        topic: bytes,
        description: bytes = b"",
        is_private: bool = False,
    ) -> LinkCreated:
        if not topic:
            raise EmptyTopicError()

        link_id = derive_link_id(name, caller, self._tx.now)
        if self.exists(link_id):
            raise DuplicateLinkError()

        link = Link(
            id=link_id,
            creator=caller,
            topic=topic,
            description=description,
            state=LinkState.ACTIVE,
            is_private=is_private,
            created_at=self._tx.now,
        )
        self._tx.insert_link(link)

        event = LinkCreated(link_id=link_id, creator=caller, is_private=is_private)
        self._tx.emit(event)
        return event

    def set_active(self, caller: Principal, link_id: str, is_active: bool) -> LinkStatusChanged:
        self._require_admin(caller)
        link = self._require(link_id)

        new_state = LinkState.ACTIVE if is_active else LinkState.INACTIVE
        self._tx.put_link(transition(link, new_state))

        event = LinkStatusChanged(link_id=link_id, is_active=is_active)
        self._tx.emit(event)
        return event

    def set_private(
        self, caller: Principal, link_id: str, is_private: bool
    ) -> LinkPrivacyChanged:
        self._require_admin(caller)
        link = self._require(link_id)

        self._tx.put_link(set_privacy(link, is_private))

        event = LinkPrivacyChanged(link_id=link_id, is_private=is_private)
        self._tx.emit(event)
        return event

    def delete_link(self, caller: Principal, link_id: str) -> LinkDeleted:
        self._require_admin(caller)
        link = self._require(link_id)

        self._tx.put_link(transition(link, LinkState.DELETED))

        event = LinkDeleted(link_id=link_id)
        self._tx.emit(event)
        return event
