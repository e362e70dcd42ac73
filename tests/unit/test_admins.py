"""
Tests for the AdminRegistry and the admins component shell.
"""

from __future__ import annotations

import pytest

from feedback_ledger.adapters.memory_journal import InMemoryJournal
from feedback_ledger.components.admins import (
    AddAdminInput,
    CheckAdminInput,
    ListAdminsInput,
    RemoveAdminInput,
    run_add,
    run_check,
    run_list,
    run_remove,
)
from feedback_ledger.core.services import FeedbackLedger
from feedback_ledger.domain.entities import NULL_PRINCIPAL
from feedback_ledger.domain.errors import (
    AlreadyAdminError,
    InvalidTargetError,
    NotAdminError,
    SelfRemovalError,
    UnauthorizedError,
)
from feedback_ledger.domain.notifications import AdminAdded, AdminRemoved, JournalQuery
from tests.conftest import ADMIN, SECOND_ADMIN, USER


class TestBootstrap:
    def test_initializer_is_admin(self, ledger: FeedbackLedger) -> None:
        assert ledger.is_admin(ADMIN) is True
        assert ledger.is_admin(USER) is False

    @pytest.mark.parametrize("principal", ["", NULL_PRINCIPAL])
    def test_null_bootstrap_admin_rejected(self, principal: str) -> None:
        with pytest.raises(InvalidTargetError):
            FeedbackLedger(principal)

    def test_bootstrap_emits_nothing(self, ledger: FeedbackLedger, journal: InMemoryJournal) -> None:
        assert journal.count(JournalQuery()) == 0
        assert ledger.snapshot().version == 0


class TestAddAdmin:
    def test_add_admin(self, ledger: FeedbackLedger, journal: InMemoryJournal) -> None:
        event = ledger.add_admin(ADMIN, SECOND_ADMIN)

        assert event == AdminAdded(target=SECOND_ADMIN)
        assert ledger.is_admin(SECOND_ADMIN)
        records = journal.query(JournalQuery())
        assert [r.notification for r in records] == [event]

    def test_non_admin_cannot_add(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(UnauthorizedError) as exc:
            ledger.add_admin(USER, SECOND_ADMIN)
        assert exc.value.message == "Only admin can perform this action"
        assert not ledger.is_admin(SECOND_ADMIN)

    @pytest.mark.parametrize("target", ["", NULL_PRINCIPAL])
    def test_null_target_rejected(self, ledger: FeedbackLedger, target: str) -> None:
        with pytest.raises(InvalidTargetError):
            ledger.add_admin(ADMIN, target)

    def test_already_admin(self, ledger: FeedbackLedger, journal: InMemoryJournal) -> None:
        ledger.add_admin(ADMIN, SECOND_ADMIN)

        with pytest.raises(AlreadyAdminError):
            ledger.add_admin(ADMIN, SECOND_ADMIN)
        assert journal.count(JournalQuery()) == 1

    def test_new_admin_can_add_others(self, ledger: FeedbackLedger) -> None:
        ledger.add_admin(ADMIN, SECOND_ADMIN)
        ledger.add_admin(SECOND_ADMIN, USER)
        assert ledger.is_admin(USER)


class TestRemoveAdmin:
    def test_remove_admin(self, ledger: FeedbackLedger) -> None:
        ledger.add_admin(ADMIN, SECOND_ADMIN)

        event = ledger.remove_admin(ADMIN, SECOND_ADMIN)

        assert event == AdminRemoved(target=SECOND_ADMIN)
        assert not ledger.is_admin(SECOND_ADMIN)

    def test_self_removal_single_admin(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(SelfRemovalError):
            ledger.remove_admin(ADMIN, ADMIN)
        assert ledger.is_admin(ADMIN)

    def test_self_removal_with_many_admins(self, ledger: FeedbackLedger) -> None:
        ledger.add_admin(ADMIN, SECOND_ADMIN)
        ledger.add_admin(ADMIN, USER)

        with pytest.raises(SelfRemovalError):
            ledger.remove_admin(SECOND_ADMIN, SECOND_ADMIN)
        assert ledger.is_admin(SECOND_ADMIN)

    def test_not_admin(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(NotAdminError):
            ledger.remove_admin(ADMIN, USER)

    def test_null_target(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(InvalidTargetError):
            ledger.remove_admin(ADMIN, NULL_PRINCIPAL)

    def test_non_admin_cannot_remove(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(UnauthorizedError):
            ledger.remove_admin(USER, ADMIN)
        assert ledger.is_admin(ADMIN)

    def test_mutual_removal_is_allowed(self, ledger: FeedbackLedger) -> None:
        ledger.add_admin(ADMIN, SECOND_ADMIN)

        ledger.remove_admin(SECOND_ADMIN, ADMIN)

        assert not ledger.is_admin(ADMIN)
        assert ledger.is_admin(SECOND_ADMIN)


class TestListAdmins:
    def test_admin_lists_sorted(self, ledger: FeedbackLedger) -> None:
        ledger.add_admin(ADMIN, USER)
        ledger.add_admin(ADMIN, SECOND_ADMIN)
        assert ledger.list_admins(ADMIN) == sorted([ADMIN, SECOND_ADMIN, USER])

    def test_non_admin_cannot_list(self, ledger: FeedbackLedger) -> None:
        with pytest.raises(UnauthorizedError):
            ledger.list_admins(USER)


class TestComponentShell:
    def test_run_add_success(self, ledger: FeedbackLedger) -> None:
        result = run_add(AddAdminInput(caller=ADMIN, target=SECOND_ADMIN), ledger=ledger)

        assert result.success is True
        assert result.errors == []
        assert result.notification == AdminAdded(target=SECOND_ADMIN)

    def test_run_add_unauthorized(self, ledger: FeedbackLedger) -> None:
        result = run_add(AddAdminInput(caller=USER, target=SECOND_ADMIN), ledger=ledger)

        assert result.success is False
        assert result.notification is None
        assert result.errors[0].code == "unauthorized"

    def test_run_remove_self(self, ledger: FeedbackLedger) -> None:
        result = run_remove(RemoveAdminInput(caller=ADMIN, target=ADMIN), ledger=ledger)

        assert result.success is False
        assert result.errors[0].code == "self_removal"
        assert result.errors[0].field == "target"

    def test_run_check(self, ledger: FeedbackLedger) -> None:
        assert run_check(CheckAdminInput(principal=ADMIN), ledger=ledger).is_admin is True
        assert run_check(CheckAdminInput(principal=USER), ledger=ledger).is_admin is False

    def test_run_list(self, ledger: FeedbackLedger) -> None:
        result = run_list(ListAdminsInput(caller=ADMIN), ledger=ledger)
        assert result.admins == (ADMIN,)
        assert result.total == 1

        denied = run_list(ListAdminsInput(caller=USER), ledger=ledger)
        assert denied.success is False
        assert denied.total == 0
