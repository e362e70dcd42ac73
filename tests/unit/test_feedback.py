"""
Unit tests for FeedbackStore and the feedback component shell.
"""

import pytest
from pydantic import ValidationError

from feedback_ledger.adapters.clock import FixedClock
from feedback_ledger.adapters.memory_journal import InMemoryJournal
from feedback_ledger.components.feedback import (
    PRIVATE_LINK_MESSAGE,
    GetFeedbackRecordInput,
    SubmitFeedbackInput,
    run_get_record,
    run_submit,
)
from feedback_ledger.core.services import FeedbackLedger
from feedback_ledger.domain.errors import (
    EmptyContentError,
    FeedbackNotFoundError,
    LinkDeletedError,
    LinkInactiveError,
    LinkNotFoundError,
    UnauthorizedError,
)
from feedback_ledger.domain.notifications import FeedbackSubmitted, JournalQuery
from tests.conftest import ADMIN, OTHER_USER, USER


def test_submit_to_public_link(ledger: FeedbackLedger, public_link: str, clock: FixedClock) -> None:
    event = ledger.submit_feedback(OTHER_USER, public_link, b"Great work!")

    assert event == FeedbackSubmitted(
        feedback_id=0,
        link_id=public_link,
        author=OTHER_USER,
        timestamp=clock.now_utc(),
        is_active=True,
        is_private=False,
    )
    assert ledger.get_full_info(public_link).feedback_count == 1


def test_feedback_record_is_stored(ledger: FeedbackLedger, public_link: str, clock: FixedClock) -> None:
    ledger.submit_feedback(OTHER_USER, public_link, b"Great work!")

    record = ledger.get_feedback_record(0)
    assert record.author == OTHER_USER
    assert record.content == b"Great work!"
    assert record.timestamp == clock.now_utc()


def test_ids_are_global_and_sequential(ledger: FeedbackLedger, public_link: str) -> None:
    other = ledger.create_link(USER, b"second", b"Topic").link_id

    ids = [
        ledger.submit_feedback(OTHER_USER, public_link, b"one").feedback_id,
        ledger.submit_feedback(OTHER_USER, other, b"two").feedback_id,
        ledger.submit_feedback(USER, public_link, b"three").feedback_id,
    ]

    assert ids == [0, 1, 2]
    assert ledger.snapshot().get_link(public_link).feedback_ids == (0, 2)
    assert ledger.snapshot().get_link(other).feedback_ids == (1,)


def test_empty_content_rejected(
    ledger: FeedbackLedger, public_link: str, journal: InMemoryJournal
) -> None:
    with pytest.raises(EmptyContentError) as exc:
        ledger.submit_feedback(OTHER_USER, public_link, b"")

    assert exc.value.message == "Feedback content cannot be empty"
    assert ledger.get_full_info(public_link).feedback_count == 0
    assert journal.count(JournalQuery(kind="feedback_submitted")) == 0


def test_unknown_link(ledger: FeedbackLedger) -> None:
    with pytest.raises(LinkNotFoundError):
        ledger.submit_feedback(OTHER_USER, "0x" + "00" * 32, b"hello")


def test_inactive_link(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.set_active(ADMIN, public_link, False)
    with pytest.raises(LinkInactiveError):
        ledger.submit_feedback(OTHER_USER, public_link, b"hello")


def test_deleted_link(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.delete_link(ADMIN, public_link)
    with pytest.raises(LinkDeletedError):
        ledger.submit_feedback(OTHER_USER, public_link, b"hello")


def test_deleted_checked_before_empty_content(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.delete_link(ADMIN, public_link)
    with pytest.raises(LinkDeletedError):
        ledger.submit_feedback(OTHER_USER, public_link, b"")


def test_private_link_rejects_non_admin(ledger: FeedbackLedger, private_link: str) -> None:
    with pytest.raises(UnauthorizedError) as exc:
        ledger.submit_feedback(USER, private_link, b"User feedback")
    assert exc.value.message == PRIVATE_LINK_MESSAGE


def test_private_link_rejects_its_creator(ledger: FeedbackLedger) -> None:
    link_id = ledger.create_link(USER, b"own-private", b"Topic", is_private=True).link_id
    with pytest.raises(UnauthorizedError):
        ledger.submit_feedback(USER, link_id, b"my own link")


def test_private_link_accepts_admin(ledger: FeedbackLedger, private_link: str) -> None:
    event = ledger.submit_feedback(ADMIN, private_link, b"Admin feedback")
    assert event.is_private is True


def test_feedback_survives_link_deletion(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.submit_feedback(OTHER_USER, public_link, b"kept")
    ledger.delete_link(ADMIN, public_link)

    assert ledger.get_feedback_record(0).content == b"kept"
    assert ledger.get_full_info(public_link).feedback_count == 1


def test_unknown_feedback_record(ledger: FeedbackLedger) -> None:
    with pytest.raises(FeedbackNotFoundError):
        ledger.get_feedback_record(0)
    with pytest.raises(FeedbackNotFoundError):
        ledger.get_feedback_record(-1)


def test_records_are_immutable(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.submit_feedback(OTHER_USER, public_link, b"fixed")
    record = ledger.get_feedback_record(0)

    with pytest.raises(ValidationError):
        record.content = b"changed"  # type: ignore[misc]
    assert ledger.get_feedback_record(0).content == b"fixed"


# --- Component Shell ---


def test_run_submit(ledger: FeedbackLedger, public_link: str) -> None:
    result = run_submit(
        SubmitFeedbackInput(caller=OTHER_USER, link_id=public_link, content=b"hi"),
        ledger=ledger,
    )
    assert result.success is True
    assert result.feedback_id == 0


def test_run_submit_errors(ledger: FeedbackLedger, private_link: str) -> None:
    result = run_submit(
        SubmitFeedbackInput(caller=USER, link_id=private_link, content=b"hi"),
        ledger=ledger,
    )
    assert result.success is False
    assert result.feedback_id is None
    assert result.errors[0].code == "unauthorized"


def test_run_get_record(ledger: FeedbackLedger, public_link: str) -> None:
    ledger.submit_feedback(OTHER_USER, public_link, b"hi")

    assert run_get_record(GetFeedbackRecordInput(feedback_id=0), ledger=ledger).success
    missing = run_get_record(GetFeedbackRecordInput(feedback_id=5), ledger=ledger)
    assert missing.success is False
    assert missing.errors[0].code == "feedback_not_found"
