"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from feedback_ledger.domain.entities import Principal
from feedback_ledger.domain.errors import ErrorDetail
from feedback_ledger.domain.notifications import (
    LinkCreated,
    LinkDeleted,
    LinkPrivacyChanged,
    LinkStatusChanged,
)

# --- Projections ---


@dataclass(frozen=True)
class LinkInfo:
    """Full metadata of a link, deleted links included."""

    creator: Principal
    topic: bytes
    description: bytes
    is_active: bool
    is_private: bool
    is_deleted: bool
    feedback_count: int


@dataclass(frozen=True)
class LinkTopic:
    topic: bytes
    description: bytes


# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    caller: Principal
    name: bytes
    topic: bytes
    description: bytes = b""
    is_private: bool = False


@dataclass(frozen=True)
class SetActiveInput:
    """Input for toggling link activity."""

    caller: Principal
    link_id: str
    is_active: bool


@dataclass(frozen=True)
class SetPrivateInput:
    """Input for toggling link privacy."""

    caller: Principal
    link_id: str
    is_private: bool


@dataclass(frozen=True)
class DeleteLinkInput:
    """Input for deleting a link."""

    caller: Principal
    link_id: str


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    link_id: str


# --- Output Models ---


LinkNotification = LinkCreated | LinkStatusChanged | LinkPrivacyChanged | LinkDeleted


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link mutation."""

    link_id: str | None
    notification: LinkNotification | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LinkInfoOutput:
    """Output from full-info lookup."""

    info: LinkInfo | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LinkTopicOutput:
    """Output from topic lookup."""

    topic: LinkTopic | None
    errors: list[ErrorDetail] = field(default_factory=list)
    success: bool = True
