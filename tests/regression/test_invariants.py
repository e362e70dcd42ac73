"""
Regression invariants for the ledger, one test per behavioral property.
"""

import pytest

from feedback_ledger.adapters.sqlite_journal import SQLiteJournal
from feedback_ledger.core.services import FeedbackLedger
from feedback_ledger.domain.errors import (
    EmptyContentError,
    EmptyTopicError,
    LinkDeletedError,
    SelfRemovalError,
    UnauthorizedError,
)
from feedback_ledger.domain.notifications import JournalQuery, LinkStatusChanged
from tests.conftest import ADMIN, OTHER_USER, SECOND_ADMIN, USER


# --- R1: Creation round-trip ---
@pytest.mark.parametrize("is_private", [False, True])
@pytest.mark.parametrize("description", [b"", b"Share your thoughts"])
def test_R1_create_then_inspect(ledger: FeedbackLedger, is_private: bool, description: bytes):
    """R1: A fresh link reports exactly what it was created with."""
    link_id = ledger.create_link(USER, b"r1", b"Topic", description, is_private).link_id

    info = ledger.get_full_info(link_id)
    assert (info.topic, info.description, info.is_private) == (b"Topic", description, is_private)
    assert info.is_active is True
    assert info.is_deleted is False
    assert info.feedback_count == 0


# --- R2: Submission is listed ---
def test_R2_submission_listed(ledger: FeedbackLedger, public_link: str, clock):
    """R2: Accepted feedback appears in listFeedbacks and bumps the count by one."""
    event = ledger.submit_feedback(OTHER_USER, public_link, b"hello")

    [entry] = ledger.queries().list_feedbacks(public_link)
    assert (entry.content, entry.author, entry.timestamp) == (b"hello", OTHER_USER, event.timestamp)
    assert entry.timestamp == clock.now_utc()
    assert ledger.get_full_info(public_link).feedback_count == 1


# --- R3: Empty content ---
def test_R3_empty_content_leaves_count(ledger: FeedbackLedger, public_link: str):
    """R3: Empty content is rejected without touching the link."""
    with pytest.raises(EmptyContentError):
        ledger.submit_feedback(OTHER_USER, public_link, b"")
    assert ledger.get_full_info(public_link).feedback_count == 0


# --- R4: Empty topic ---
def test_R4_empty_topic_leaves_index(ledger: FeedbackLedger, public_link: str):
    """R4: Empty topic is rejected and no link is indexed."""
    before = len(ledger.snapshot().link_index)
    with pytest.raises(EmptyTopicError):
        ledger.create_link(USER, b"r4", b"")
    assert len(ledger.snapshot().link_index) == before


# --- R5: Private submission ---
def test_R5_private_link_admin_only(ledger: FeedbackLedger, private_link: str):
    """R5: Private links accept submissions from admins only."""
    with pytest.raises(UnauthorizedError):
        ledger.submit_feedback(USER, private_link, b"hi")
    assert ledger.submit_feedback(ADMIN, private_link, b"hi").feedback_id == 0


# --- R6: Deletion is terminal ---
def test_R6_deleted_link_is_frozen(ledger: FeedbackLedger, public_link: str):
    """R6: Deleted links refuse every further mutation."""
    ledger.delete_link(ADMIN, public_link)

    info = ledger.get_full_info(public_link)
    assert info.is_active is False
    assert info.is_deleted is True
    with pytest.raises(LinkDeletedError):
        ledger.submit_feedback(OTHER_USER, public_link, b"late")
    with pytest.raises(LinkDeletedError):
        ledger.set_active(ADMIN, public_link, True)
    with pytest.raises(LinkDeletedError):
        ledger.set_private(ADMIN, public_link, True)


# --- R7: Self removal ---
@pytest.mark.parametrize("extra_admins", [0, 1, 3])
def test_R7_self_removal_always_fails(ledger: FeedbackLedger, extra_admins: int):
    """R7: An admin can never remove itself, however many admins exist."""
    for i in range(extra_admins):
        ledger.add_admin(ADMIN, f"0x{0xc0 + i:040x}")
    with pytest.raises(SelfRemovalError):
        ledger.remove_admin(ADMIN, ADMIN)
    assert ledger.is_admin(ADMIN)


# --- R8: Active listings ---
def test_R8_public_listing_subset(ledger: FeedbackLedger):
    """R8: Public listing holds only live public links; admin listing is a superset."""
    ids = {
        name: ledger.create_link(USER, name, b"T", is_private=name.startswith(b"priv")).link_id
        for name in (b"pub-a", b"pub-b", b"priv-a", b"priv-b")
    }
    ledger.set_active(ADMIN, ids[b"pub-b"], False)
    ledger.delete_link(ADMIN, ids[b"priv-b"])

    queries = ledger.queries()
    public = queries.list_active_public_links()
    every_active = queries.list_all_active_links(ADMIN)

    for link_id in public:
        info = ledger.get_full_info(link_id)
        assert info.is_active and not info.is_private and not info.is_deleted
    assert set(public) <= set(every_active)
    assert ids[b"priv-a"] in every_active
    assert public == [ids[b"pub-a"]]


# --- R9: Repeated setActive ---
def test_R9_set_active_twice(ledger: FeedbackLedger, journal, public_link: str):
    """R9: Repeating setActive changes nothing observable but still notifies twice."""
    ledger.set_active(ADMIN, public_link, True)
    once = ledger.get_full_info(public_link)
    ledger.set_active(ADMIN, public_link, True)

    assert ledger.get_full_info(public_link) == once
    records = journal.query(JournalQuery(kind="link_status_changed"))
    assert [r.notification for r in records] == [
        LinkStatusChanged(link_id=public_link, is_active=True),
        LinkStatusChanged(link_id=public_link, is_active=True),
    ]


# --- R10: End-to-end private link scenario ---
def test_R10_private_bug_reports(ledger: FeedbackLedger):
    """R10: Admin-only private link, with user reads filtered to nothing."""
    link_id = ledger.create_link(ADMIN, b"L", b"bug-reports", is_private=True).link_id

    with pytest.raises(UnauthorizedError):
        ledger.submit_feedback(USER, link_id, b"hi")
    assert ledger.submit_feedback(ADMIN, link_id, b"noted").feedback_id == 0

    queries = ledger.queries()
    assert queries.list_feedback_ids(USER, link_id) == []
    assert queries.list_feedback_ids(ADMIN, link_id) == [0]


# --- R11: Feedback ids are global and stable ---
def test_R11_feedback_ids_global(ledger: FeedbackLedger, public_link: str):
    """R11: Feedback ids are sequential across links and never reused."""
    other = ledger.create_link(OTHER_USER, b"other", b"T").link_id
    ledger.submit_feedback(USER, public_link, b"a")
    ledger.submit_feedback(USER, other, b"b")
    ledger.submit_feedback(USER, public_link, b"c")
    ledger.delete_link(ADMIN, other)
    ledger.add_admin(ADMIN, SECOND_ADMIN)
    ledger.submit_feedback(USER, public_link, b"d")

    assert ledger.get_full_info(public_link).feedback_count == 3
    assert ledger.queries().list_feedback_ids(USER, public_link) == [0, 2, 3]
    assert ledger.get_feedback_record(1).content == b"b"


# --- R12: Journal is never shared across ledger lifetimes ---
def test_R12_restart_on_filled_journal_refused(tmp_path, clock):
    """R12: A new ledger refuses a journal holding an earlier ledger's history."""
    journal = SQLiteJournal(tmp_path / "journal.db")
    first = FeedbackLedger(ADMIN, clock=clock, journal=journal)
    first.create_link(USER, b"before-restart", b"T")

    with pytest.raises(ValueError, match="earlier ledger"):
        FeedbackLedger(ADMIN, clock=clock, journal=SQLiteJournal(tmp_path / "journal.db"))

    # The surviving history still carries strictly increasing versions
    versions = [r.ledger_version for r in journal.query(JournalQuery())]
    assert versions == [1]
