"""
Notifications emitted by successful mutations.

Exactly one notification is emitted per committed mutation and none on
failure. External observers follow ledger changes through these records.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from feedback_ledger.domain.entities import Principal

NotificationKind = Literal[
    "admin_added",
    "admin_removed",
    "link_created",
    "link_status_changed",
    "link_privacy_changed",
    "link_deleted",
    "feedback_submitted",
]


class _Notification(BaseModel):
    model_config = ConfigDict(frozen=True)


class AdminAdded(_Notification):
    kind: Literal["admin_added"] = "admin_added"
    target: Principal


class AdminRemoved(_Notification):
    kind: Literal["admin_removed"] = "admin_removed"
    target: Principal


class LinkCreated(_Notification):
    kind: Literal["link_created"] = "link_created"
    link_id: str
    creator: Principal
    is_private: bool


class LinkStatusChanged(_Notification):
    kind: Literal["link_status_changed"] = "link_status_changed"
    link_id: str
    is_active: bool


class LinkPrivacyChanged(_Notification):
    kind: Literal["link_privacy_changed"] = "link_privacy_changed"
    link_id: str
    is_private: bool


class LinkDeleted(_Notification):
    kind: Literal["link_deleted"] = "link_deleted"
    link_id: str


class FeedbackSubmitted(_Notification):
    kind: Literal["feedback_submitted"] = "feedback_submitted"
    feedback_id: int
    link_id: str
    author: Principal
    timestamp: datetime
    is_active: bool
    is_private: bool


Notification = Annotated[
    AdminAdded
    | AdminRemoved
    | LinkCreated
    | LinkStatusChanged
    | LinkPrivacyChanged
    | LinkDeleted
    | FeedbackSubmitted,
    Field(discriminator="kind"),
]

notification_adapter: TypeAdapter[Notification] = TypeAdapter(Notification)


# --- Journal records ---


class JournalRecord(BaseModel):
    """A committed notification as stored by a journal."""

    model_config = ConfigDict(frozen=True)

    sequence: int
    ledger_version: int
    recorded_at: datetime
    notification: Notification


class JournalQuery(BaseModel):
    """Query parameters for the notification journal."""

    kind: NotificationKind | None = None
    since: int | None = None  # exclusive lower bound on sequence
    limit: int = 100
