"""
Ledger error taxonomy.

Every failing operation raises one of these before any state is written, so a
rejected operation never leaves a partial mutation behind.

Categories:
- AuthorizationError: caller lacks the required privilege
- LedgerValidationError: malformed input
- StateError: operation incompatible with the current entity state
"""

from __future__ import annotations

from dataclasses import dataclass


class LedgerError(Exception):
    """Base class for rejected ledger operations."""

    code: str = "ledger_error"
    default_message: str = "Operation rejected"
    field: str | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Authorization ---


class AuthorizationError(LedgerError):
    code = "unauthorized"
    default_message = "Only admin can perform this action"


class UnauthorizedError(AuthorizationError):
    pass


# --- Validation ---


class LedgerValidationError(LedgerError):
    code = "invalid_input"
    default_message = "Invalid input"


class EmptyTopicError(LedgerValidationError):
    code = "empty_topic"
    default_message = "Topic cannot be empty"
    field = "topic"


class EmptyContentError(LedgerValidationError):
    code = "empty_content"
    default_message = "Feedback content cannot be empty"
    field = "content"


class InvalidTargetError(LedgerValidationError):
    code = "invalid_target"
    default_message = "Invalid address"
    field = "target"


# --- State ---


class StateError(LedgerError):
    code = "invalid_state"
    default_message = "Operation not allowed in current state"


class LinkNotFoundError(StateError):
    code = "link_not_found"
    default_message = "Link does not exist"
    field = "link_id"


class FeedbackNotFoundError(StateError):
    code = "feedback_not_found"
    default_message = "Invalid feedback ID"
    field = "feedback_id"


class LinkDeletedError(StateError):
    code = "link_deleted"
    default_message = "Link has been deleted"


class LinkInactiveError(StateError):
    code = "link_inactive"
    default_message = "Link is not active"


class AlreadyDeletedError(StateError):
    code = "already_deleted"
    default_message = "Link already deleted"


class AlreadyAdminError(StateError):
    code = "already_admin"
    default_message = "Address is already an admin"
    field = "target"


class NotAdminError(StateError):
    code = "not_admin"
    default_message = "Address is not an admin"
    field = "target"


class DuplicateLinkError(StateError):
    code = "duplicate_link"
    default_message = "Link already exists"


class SelfRemovalError(StateError):
    code = "self_removal"
    default_message = "Cannot remove yourself"
    field = "target"


# --- Output record ---


@dataclass(frozen=True)
class ErrorDetail:
    """Serializable error record carried by component outputs."""

    code: str
    message: str
    field: str | None = None

    @classmethod
    def from_error(cls, error: LedgerError) -> ErrorDetail:
        return cls(code=error.code, message=error.message, field=error.field)
