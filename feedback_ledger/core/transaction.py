"""
Transaction - staged writes against a LedgerState.

Reads fall through the staged overlay to the base snapshot; writes only touch
the overlay. commit() folds the overlay into a new LedgerState, abort() drops
it, and the base snapshot is never modified either way.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from types import MappingProxyType

from feedback_ledger.core.state import LedgerState
from feedback_ledger.domain.entities import Feedback, Link, Principal
from feedback_ledger.domain.notifications import Notification


class TransactionClosedError(RuntimeError):
    pass


class Transaction:
    def __init__(self, base: LedgerState, now: datetime) -> None:
        self._base = base
        # One timestamp per transaction, shared by every record it writes
        self.now = now
        self._admins: set[Principal] | None = None
        self._links: dict[str, Link] = {}
        self._new_link_ids: list[str] = []
        self._new_feedback: list[Feedback] = []
        self._new_feedback_links: dict[int, str] = {}
        self._notifications: list[Notification] = []
        self._closed = False

    @property
    def base(self) -> LedgerState:
        return self._base

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def has_writes(self) -> bool:
        return bool(
            self._admins is not None
            or self._links
            or self._new_feedback
            or self._notifications
        )

    def _check_open(self) -> None:
        if self._closed:
            raise TransactionClosedError("Transaction is closed")

    # --- Reads ---

    def is_admin(self, principal: Principal) -> bool:
        if self._admins is not None:
            return principal in self._admins
        return self._base.is_admin(principal)

    def list_admins(self) -> list[Principal]:
        admins = self._admins if self._admins is not None else self._base.admins
        return sorted(admins)

    def get_link(self, link_id: str) -> Link | None:
        staged = self._links.get(link_id)
        if staged is not None:
            return staged
        return self._base.get_link(link_id)

    def iter_links(self) -> Iterator[Link]:
        for link_id in (*self._base.link_index, *self._new_link_ids):
            link = self.get_link(link_id)
            if link is None:
                raise KeyError(f"link {link_id} is indexed but missing")
            yield link

    def get_feedback(self, feedback_id: int) -> Feedback | None:
        base_count = len(self._base.feedback)
        if feedback_id >= base_count and feedback_id - base_count < len(self._new_feedback):
            return self._new_feedback[feedback_id - base_count]
        return self._base.get_feedback(feedback_id)

    def owning_link(self, feedback_id: int) -> Link | None:
        link_id = self._new_feedback_links.get(feedback_id) or self._base.feedback_links.get(
            feedback_id
        )
        if link_id is None:
            return None
        return self.get_link(link_id)

    @property
    def next_feedback_id(self) -> int:
        return self._base.next_feedback_id + len(self._new_feedback)

    # --- Writes ---

    def add_admin(self, principal: Principal) -> None:
        self._check_open()
        if self._admins is None:
            self._admins = set(self._base.admins)
        self._admins.add(principal)

    def remove_admin(self, principal: Principal) -> None:
        self._check_open()
        if self._admins is None:
            self._admins = set(self._base.admins)
        self._admins.discard(principal)

    def put_link(self, link: Link) -> None:
        """Stage a new version of an existing link."""
        self._check_open()
        if self.get_link(link.id) is None:
            raise KeyError(link.id)
        self._links[link.id] = link

    def insert_link(self, link: Link) -> None:
        """Stage a new link and append it to the creation index."""
        self._check_open()
        if self.get_link(link.id) is not None:
            raise KeyError(f"link {link.id} already staged")
        self._links[link.id] = link
        self._new_link_ids.append(link.id)

    def append_feedback(self, link_id: str, feedback: Feedback) -> None:
        self._check_open()
        if feedback.id != self.next_feedback_id:
            raise ValueError(f"Feedback id {feedback.id} is not the next arena slot")
        self._new_feedback.append(feedback)
        self._new_feedback_links[feedback.id] = link_id

    def emit(self, notification: Notification) -> None:
        self._check_open()
        self._notifications.append(notification)

    # --- Boundary ---

    def commit(self) -> LedgerState:
        """
        Fold staged writes into a new LedgerState.

        Returns the base snapshot unchanged if nothing was written.
        """
        self._check_open()
        self._closed = True
        if not self.has_writes:
            return self._base

        base = self._base
        links = dict(base.links)
        links.update(self._links)
        feedback_links = dict(base.feedback_links)
        feedback_links.update(self._new_feedback_links)
        return LedgerState(
            admins=frozenset(self._admins) if self._admins is not None else base.admins,
            links=MappingProxyType(links),
            link_index=(*base.link_index, *self._new_link_ids),
            feedback=(*base.feedback, *self._new_feedback),
            feedback_links=MappingProxyType(feedback_links),
            version=base.version + 1,
        )

    def abort(self) -> None:
        self._closed = True
        self._admins = None
        self._links.clear()
        self._new_link_ids.clear()
        self._new_feedback.clear()
        self._new_feedback_links.clear()
        self._notifications.clear()
