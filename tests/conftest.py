import pytest

from feedback_ledger.adapters.clock import FixedClock
from feedback_ledger.adapters.memory_journal import InMemoryJournal
from feedback_ledger.core.services import FeedbackLedger

ADMIN = "0x00000000000000000000000000000000000000a1"
SECOND_ADMIN = "0x00000000000000000000000000000000000000a2"
USER = "0x00000000000000000000000000000000000000b1"
OTHER_USER = "0x00000000000000000000000000000000000000b2"


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def journal() -> InMemoryJournal:
    return InMemoryJournal()


@pytest.fixture
def ledger(clock: FixedClock, journal: InMemoryJournal) -> FeedbackLedger:
    """Ledger initialized by ADMIN with a fixed clock and in-memory journal."""
    return FeedbackLedger(ADMIN, clock=clock, journal=journal)


@pytest.fixture
def public_link(ledger: FeedbackLedger) -> str:
    return ledger.create_link(USER, b"public", b"Product Feedback", b"Share your thoughts").link_id


@pytest.fixture
def private_link(ledger: FeedbackLedger) -> str:
    return ledger.create_link(
        ADMIN, b"private", b"Secret Feedback", b"Confidential", is_private=True
    ).link_id
