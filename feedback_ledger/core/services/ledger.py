"""
FeedbackLedger - the combined store behind one transaction boundary.

Writers are serialized by one exclusive lock and run in their own
Transaction; the committed LedgerState is replaced atomically, so readers use
the current snapshot without locking and never observe a partial write.

Key behaviors:
- Every mutation commits fully or not at all
- Exactly one notification per committed mutation, none on failure
- Journal append is inside the commit boundary
- Observers run after the swap; their failures do not undo the commit
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from feedback_ledger.adapters.clock import SystemClock
from feedback_ledger.adapters.memory_journal import InMemoryJournal
from feedback_ledger.components.admins import AdminRegistry
from feedback_ledger.components.feedback import FeedbackReader, FeedbackStore
from feedback_ledger.components.links import LinkInfo, LinkReader, LinkStore, LinkTopic
from feedback_ledger.components.notifications import create_journal
from feedback_ledger.components.queries import QueryEngine
from feedback_ledger.core.state import LedgerState
from feedback_ledger.core.transaction import Transaction
from feedback_ledger.domain.entities import Feedback, Principal, is_null_principal
from feedback_ledger.domain.errors import InvalidTargetError, LedgerError
from feedback_ledger.domain.notifications import (
    AdminAdded,
    AdminRemoved,
    FeedbackSubmitted,
    JournalQuery,
    JournalRecord,
    LinkCreated,
    LinkDeleted,
    LinkPrivacyChanged,
    LinkStatusChanged,
)
from feedback_ledger.domain.policy import VisibilityPolicy
from feedback_ledger.ports.clock import ClockPort
from feedback_ledger.ports.journal import NotificationJournalPort
from feedback_ledger.rules.models import Rules

logger = logging.getLogger(__name__)

Observer = Callable[[JournalRecord], None]


class FeedbackLedger:
    def __init__(
        self,
        bootstrap_admin: Principal,
        *,
        clock: ClockPort | None = None,
        journal: NotificationJournalPort | None = None,
        policy: VisibilityPolicy | None = None,
    ) -> None:
        if is_null_principal(bootstrap_admin):
            raise InvalidTargetError("Bootstrap admin cannot be the null principal")

        self._lock = threading.RLock()
        self._clock = clock or SystemClock()
        self._journal = journal or InMemoryJournal()
        self._policy = policy or VisibilityPolicy()
        if self._journal.count(JournalQuery()) > 0:
            # State is never rebuilt from the journal; versions would restart at 0
            raise ValueError(
                "Notification journal already holds records from an earlier ledger; "
                "start with an empty journal"
            )
        self._observers: list[Observer] = []
        self._state = LedgerState(admins=frozenset({bootstrap_admin}))
        logger.info("Ledger initialized with bootstrap admin %s", bootstrap_admin)

    @classmethod
    def from_rules(
        cls,
        rules: Rules,
        data_dir: Path,
        *,
        clock: ClockPort | None = None,
    ) -> FeedbackLedger:
        bootstrap_admin = os.environ.get(rules.bootstrap.admin_env) or rules.bootstrap.admin
        if not bootstrap_admin:
            raise ValueError(
                f"No bootstrap admin: set bootstrap.admin or {rules.bootstrap.admin_env}"
            )
        policy = VisibilityPolicy(
            redacted_content=rules.privacy.redacted_content.encode("utf-8"),
            gate_list_feedbacks=rules.privacy.gate_list_feedbacks,
        )
        return cls(
            bootstrap_admin,
            clock=clock,
            journal=create_journal(rules.journal, data_dir),
            policy=policy,
        )

    # --- Snapshot & boundary ---

    @property
    def journal(self) -> NotificationJournalPort:
        return self._journal

    @property
    def policy(self) -> VisibilityPolicy:
        return self._policy

    def snapshot(self) -> LedgerState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer of committed records; returns an unsubscriber."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """
        Run one atomic unit of work.

        Any exception raised inside the block aborts it: state and journal
        stay untouched and the exception propagates.
        """
        with self._lock:
            tx = Transaction(self._state, self._clock.now_utc())
            try:
                yield tx
            except Exception as e:
                tx.abort()
                if isinstance(e, LedgerError):
                    logger.debug("Transaction aborted: %s", e.code)
                else:
                    logger.debug("Transaction aborted by %s", type(e).__name__)
                raise

            notifications = tx.notifications
            new_state = tx.commit()
            if new_state is self._state:
                return

            records = self._journal.append(
                notifications,
                ledger_version=new_state.version,
                recorded_at=tx.now,
            )
            self._state = new_state
            for record in records:
                logger.info(
                    "Committed %s at ledger version %d",
                    record.notification.kind,
                    record.ledger_version,
                )
                self._notify(record)

    def _notify(self, record: JournalRecord) -> None:
        for observer in list(self._observers):
            try:
                observer(record)
            except Exception:
                logger.exception("Notification observer failed for record %d", record.sequence)

    # --- AdminRegistry ---

    def is_admin(self, principal: Principal) -> bool:
        return self._state.is_admin(principal)

    def list_admins(self, caller: Principal) -> list[Principal]:
        with self.transaction() as tx:
            return AdminRegistry(tx).list_admins(caller)

    def add_admin(self, caller: Principal, target: Principal) -> AdminAdded:
        with self.transaction() as tx:
            return AdminRegistry(tx).add_admin(caller, target)

    def remove_admin(self, caller: Principal, target: Principal) -> AdminRemoved:
        with self.transaction() as tx:
            return AdminRegistry(tx).remove_admin(caller, target)

    # --- LinkStore ---

    def create_link(
        self,
        caller: Principal,
        name: bytes,
        topic: bytes,
        description: bytes = b"",
        is_private: bool = False,
    ) -> LinkCreated:
        with self.transaction() as tx:
            return LinkStore(tx).create_link(
                caller, name, topic, description=description, is_private=is_private
            )

    def set_active(self, caller: Principal, link_id: str, is_active: bool) -> LinkStatusChanged:
        with self.transaction() as tx:
            return LinkStore(tx).set_active(caller, link_id, is_active)

    def set_private(
        self, caller: Principal, link_id: str, is_private: bool
    ) -> LinkPrivacyChanged:
        with self.transaction() as tx:
            return LinkStore(tx).set_private(caller, link_id, is_private)

    def delete_link(self, caller: Principal, link_id: str) -> LinkDeleted:
        with self.transaction() as tx:
            return LinkStore(tx).delete_link(caller, link_id)

    def exists(self, link_id: str) -> bool:
        return LinkReader(self._state).exists(link_id)

    def get_topic(self, link_id: str) -> LinkTopic:
        return LinkReader(self._state).get_topic(link_id)

    def get_full_info(self, link_id: str) -> LinkInfo:
        return LinkReader(self._state).get_full_info(link_id)

    # --- FeedbackStore ---

    def submit_feedback(
        self, caller: Principal, link_id: str, content: bytes
    ) -> FeedbackSubmitted:
        with self.transaction() as tx:
            return FeedbackStore(tx, self._policy).submit_feedback(caller, link_id, content)

    def get_feedback_record(self, feedback_id: int) -> Feedback:
        return FeedbackReader(self._state).get(feedback_id)

    # --- QueryEngine ---

    def queries(self) -> QueryEngine:
        """Query engine bound to the current snapshot."""
        return QueryEngine(self._state, self._policy)
