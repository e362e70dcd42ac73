"""
QueryEngine - read-only projections over links and feedback.

Functional Core - every method is side-effect free and reads one snapshot.

Visibility rule: a caller who is not an admin never sees content of a
private link, except their own submissions via list_feedback_by_submitter.
Visibility denials yield empty or redacted results rather than errors, so
"does not exist" stays distinguishable from "exists but hidden".
"""

from __future__ import annotations

from feedback_ledger.domain.entities import Link, Principal
from feedback_ledger.domain.errors import (
    FeedbackNotFoundError,
    LinkDeletedError,
    LinkNotFoundError,
    UnauthorizedError,
)
from feedback_ledger.domain.policy import VisibilityPolicy

from .models import FeedbackEntry, FeedbackView, LinkSummary, Submission
from .ports import LedgerReadPort


class QueryEngine:
    def __init__(self, state: LedgerReadPort, policy: VisibilityPolicy) -> None:
        self._state = state
        self._policy = policy

    def _require_link(self, link_id: str) -> Link:
        link = self._state.get_link(link_id)
        if link is None:
            raise LinkNotFoundError()
        return link

    # --- Feedback of a link ---

    def list_feedback_ids(self, caller: Principal, link_id: str) -> list[int]:
        """
        Feedback ids of a link.

        Raises LinkNotFoundError for unknown ids; returns [] when the link is
        deleted, inactive, or private and the caller is not an admin.
        """
        link = self._require_link(link_id)
        if not self._policy.can_list_feedback_ids(link, self._state.is_admin(caller)):
            return []
        return list(link.feedback_ids)

    def get_feedback(self, caller: Principal, feedback_id: int) -> FeedbackView:
        """
        A single feedback. Content of a private link is replaced by the
        redaction placeholder for non-admins; timestamp and author are not.
        """
        feedback = self._state.get_feedback(feedback_id)
        link = self._state.owning_link(feedback_id)
        if feedback is None or link is None:
            raise FeedbackNotFoundError()

        content = self._policy.redact(link, feedback.content, self._state.is_admin(caller))
        return FeedbackView(content=content, timestamp=feedback.timestamp, author=feedback.author)

    def list_feedback_by_submitter(
        self, caller: Principal, link_id: str, submitter: Principal
    ) -> list[Submission]:
        link = self._require_link(link_id)
        if not self._policy.can_list_submissions(
            link, caller, submitter, self._state.is_admin(caller)
        ):
            return []

        submissions = []
        for feedback_id in link.feedback_ids:
            feedback = self._state.get_feedback(feedback_id)
            if feedback is not None and feedback.author == submitter:
                submissions.append(
                    Submission(
                        content=feedback.content,
                        timestamp=feedback.timestamp,
                        feedback_id=feedback_id,
                    )
                )
        return submissions

    def list_feedbacks(self, link_id: str, caller: Principal | None = None) -> list[FeedbackEntry]:
        """
        All feedback of a live link.

        Not privacy gated unless the policy hardens it; deleted links are a
        hard error here, unlike list_feedback_ids.
        """
        link = self._require_link(link_id)
        if link.is_deleted:
            raise LinkDeletedError()
        caller_is_admin = caller is not None and self._state.is_admin(caller)
        if not self._policy.can_list_feedbacks(link, caller_is_admin):
            raise UnauthorizedError()

        entries = []
        for feedback_id in link.feedback_ids:
            feedback = self._state.get_feedback(feedback_id)
            if feedback is None:
                raise KeyError(f"feedback {feedback_id} is listed but missing from the arena")
            entries.append(
                FeedbackEntry(
                    content=feedback.content,
                    author=feedback.author,
                    timestamp=feedback.timestamp,
                    feedback_id=feedback_id,
                )
            )
        return entries

    # --- Link flags ---

    def is_active(self, link_id: str) -> bool:
        """False for unknown ids."""
        link = self._state.get_link(link_id)
        return link is not None and link.is_active

    def is_private(self, link_id: str) -> bool:
        return self._require_link(link_id).is_private

    # --- Link listings ---

    def list_active_public_links(self) -> list[str]:
        return [
            link.id
            for link in self._state.iter_links()
            if link.is_active and not link.is_private
        ]

    def list_all_active_links(self, caller: Principal) -> list[str]:
        if not self._state.is_admin(caller):
            raise UnauthorizedError()
        return [link.id for link in self._state.iter_links() if link.is_active]

    def list_by_creator(self, creator: Principal) -> list[LinkSummary]:
        """Every link of a creator, deleted ones included."""
        return [
            LinkSummary(
                link_id=link.id,
                topic=link.topic,
                description=link.description,
                is_active=link.is_active,
                is_private=link.is_private,
                is_deleted=link.is_deleted,
                feedback_count=link.feedback_count,
            )
            for link in self._state.iter_links()
            if link.creator == creator
        ]
