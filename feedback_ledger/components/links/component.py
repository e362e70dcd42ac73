"""
Links component - Feedback link management.

Handles link creation, lifecycle and lookups.

Shell Layer - converts ledger errors into operation outputs.

Invariants:
- I1: Topic is non-empty at creation
- I2: Link ids are unique
- I3: Deleted is terminal; a deleted link is never active
- I4: Only admins change activity, privacy or deletion
"""

from __future__ import annotations

from feedback_ledger.domain.errors import ErrorDetail, LedgerError

from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkInfoOutput,
    LinkOperationOutput,
    LinkTopicOutput,
    SetActiveInput,
    SetPrivateInput,
)
from .ports import LinkLedgerPort


def _failed(error: LedgerError, link_id: str | None = None) -> LinkOperationOutput:
    return LinkOperationOutput(
        link_id=link_id,
        notification=None,
        errors=[ErrorDetail.from_error(error)],
        success=False,
    )


# --- Shell Layer Functions ---


def run_create(inp: CreateLinkInput, *, ledger: LinkLedgerPort) -> LinkOperationOutput:
    """Create a new link."""
    try:
        event = ledger.create_link(
            inp.caller,
            inp.name,
            inp.topic,
            description=inp.description,
            is_private=inp.is_private,
        )
    except LedgerError as e:
        return _failed(e)
    return LinkOperationOutput(link_id=event.link_id, notification=event)


def run_set_active(inp: SetActiveInput, *, ledger: LinkLedgerPort) -> LinkOperationOutput:
    """Activate or deactivate a link."""
    try:
        event = ledger.set_active(inp.caller, inp.link_id, inp.is_active)
    except LedgerError as e:
        return _failed(e, inp.link_id)
    return LinkOperationOutput(link_id=inp.link_id, notification=event)


def run_set_private(inp: SetPrivateInput, *, ledger: LinkLedgerPort) -> LinkOperationOutput:
    """Change link privacy."""
    try:
        event = ledger.set_private(inp.caller, inp.link_id, inp.is_private)
    except LedgerError as e:
        return _failed(e, inp.link_id)
    return LinkOperationOutput(link_id=inp.link_id, notification=event)


def run_delete(inp: DeleteLinkInput, *, ledger: LinkLedgerPort) -> LinkOperationOutput:
    """Delete a link (irreversible)."""
    try:
        event = ledger.delete_link(inp.caller, inp.link_id)
    except LedgerError as e:
        return _failed(e, inp.link_id)
    return LinkOperationOutput(link_id=inp.link_id, notification=event)


def run_get(inp: GetLinkInput, *, ledger: LinkLedgerPort) -> LinkInfoOutput:
    """Get full link metadata."""
    try:
        info = ledger.get_full_info(inp.link_id)
    except LedgerError as e:
        return LinkInfoOutput(info=None, errors=[ErrorDetail.from_error(e)], success=False)
    return LinkInfoOutput(info=info)


def run_get_topic(inp: GetLinkInput, *, ledger: LinkLedgerPort) -> LinkTopicOutput:
    """Get topic and description of a live link."""
    try:
        topic = ledger.get_topic(inp.link_id)
    except LedgerError as e:
        return LinkTopicOutput(topic=None, errors=[ErrorDetail.from_error(e)], success=False)
    return LinkTopicOutput(topic=topic)
