"""
Domain tests: lifecycle transitions, link id derivation and visibility policy.
"""

from datetime import UTC, datetime, timedelta

import pytest

from feedback_ledger.domain.entities import NULL_PRINCIPAL, Link, LinkState, is_null_principal
from feedback_ledger.domain.errors import AlreadyDeletedError, ErrorDetail, LinkDeletedError
from feedback_ledger.domain.identifiers import derive_link_id
from feedback_ledger.domain.policy import DEFAULT_REDACTED_CONTENT, VisibilityPolicy
from feedback_ledger.domain.state import append_feedback, can_transition, set_privacy, transition
from tests.conftest import ADMIN, OTHER_USER, USER

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def make_link(**overrides) -> Link:
    defaults = {
        "id": "0x" + "11" * 32,
        "creator": USER,
        "topic": b"Topic",
        "created_at": NOW,
    }
    defaults.update(overrides)
    return Link(**defaults)


class TestPrincipals:
    @pytest.mark.parametrize("value", [None, "", NULL_PRINCIPAL])
    def test_null_principals(self, value) -> None:
        assert is_null_principal(value)

    def test_regular_principal(self) -> None:
        assert not is_null_principal(USER)


class TestTransitions:
    @pytest.mark.parametrize(
        "current,new",
        [
            (LinkState.ACTIVE, LinkState.INACTIVE),
            (LinkState.INACTIVE, LinkState.ACTIVE),
            (LinkState.ACTIVE, LinkState.ACTIVE),
            (LinkState.INACTIVE, LinkState.INACTIVE),
            (LinkState.ACTIVE, LinkState.DELETED),
            (LinkState.INACTIVE, LinkState.DELETED),
        ],
    )
    def test_allowed(self, current: LinkState, new: LinkState) -> None:
        assert can_transition(current, new)

    @pytest.mark.parametrize("new", list(LinkState))
    def test_deleted_is_terminal(self, new: LinkState) -> None:
        assert not can_transition(LinkState.DELETED, new)

    def test_transition_returns_new_link(self) -> None:
        link = make_link()
        updated = transition(link, LinkState.INACTIVE)

        assert updated.state is LinkState.INACTIVE
        assert link.state is LinkState.ACTIVE

    def test_delete_twice(self) -> None:
        deleted = transition(make_link(), LinkState.DELETED)
        with pytest.raises(AlreadyDeletedError):
            transition(deleted, LinkState.DELETED)

    def test_reactivate_deleted(self) -> None:
        deleted = make_link(state=LinkState.DELETED)
        with pytest.raises(LinkDeletedError):
            transition(deleted, LinkState.ACTIVE)

    def test_privacy_on_deleted(self) -> None:
        with pytest.raises(LinkDeletedError):
            set_privacy(make_link(state=LinkState.DELETED), True)

    def test_append_feedback_keeps_order(self) -> None:
        link = append_feedback(append_feedback(make_link(), 3), 7)
        assert link.feedback_ids == (3, 7)
        assert link.feedback_count == 2

    def test_append_feedback_on_deleted(self) -> None:
        with pytest.raises(LinkDeletedError):
            append_feedback(make_link(state=LinkState.DELETED), 0)


class TestLinkIds:
    def test_shape(self) -> None:
        link_id = derive_link_id(b"name", USER, NOW)
        assert link_id.startswith("0x")
        assert len(link_id) == 66

    def test_deterministic(self) -> None:
        assert derive_link_id(b"name", USER, NOW) == derive_link_id(b"name", USER, NOW)

    def test_second_resolution(self) -> None:
        later_same_second = NOW + timedelta(milliseconds=900)
        assert derive_link_id(b"name", USER, NOW) == derive_link_id(b"name", USER, later_same_second)

    @pytest.mark.parametrize(
        "name,creator,created_at",
        [
            (b"other", USER, NOW),
            (b"name", OTHER_USER, NOW),
            (b"name", USER, NOW + timedelta(seconds=1)),
        ],
    )
    def test_inputs_change_id(self, name: bytes, creator: str, created_at: datetime) -> None:
        assert derive_link_id(name, creator, created_at) != derive_link_id(b"name", USER, NOW)

    def test_field_boundaries_are_unambiguous(self) -> None:
        # Shifting bytes between name and creator must not collide
        assert derive_link_id(b"a", "0xb1", NOW) != derive_link_id(b"a0", "xb1", NOW)
        assert derive_link_id(b"", USER, NOW) != derive_link_id(USER.encode(), "", NOW)


class TestVisibilityPolicy:
    def test_public_link_readable(self) -> None:
        policy = VisibilityPolicy()
        link = make_link()

        assert policy.can_submit(link, caller_is_admin=False)
        assert policy.redact(link, b"hello", caller_is_admin=False) == b"hello"

    def test_private_link_redacted_for_non_admin(self) -> None:
        policy = VisibilityPolicy()
        link = make_link(is_private=True)

        assert not policy.can_submit(link, caller_is_admin=False)
        assert policy.can_submit(link, caller_is_admin=True)
        assert policy.redact(link, b"hello", caller_is_admin=False) == DEFAULT_REDACTED_CONTENT
        assert policy.redact(link, b"hello", caller_is_admin=True) == b"hello"

    def test_inactive_hides_feedback_ids(self) -> None:
        policy = VisibilityPolicy()
        assert not policy.can_list_feedback_ids(make_link(state=LinkState.INACTIVE), True)

    def test_submissions_on_private_link(self) -> None:
        policy = VisibilityPolicy()
        link = make_link(is_private=True)

        assert policy.can_list_submissions(link, USER, USER, caller_is_admin=False)
        assert policy.can_list_submissions(link, ADMIN, USER, caller_is_admin=True)
        assert not policy.can_list_submissions(link, OTHER_USER, USER, caller_is_admin=False)

    def test_submissions_on_deleted_link(self) -> None:
        link = make_link(state=LinkState.DELETED)
        assert not VisibilityPolicy().can_list_submissions(link, ADMIN, USER, caller_is_admin=True)

    def test_list_feedbacks_gate(self) -> None:
        link = make_link(is_private=True)

        assert VisibilityPolicy().can_list_feedbacks(link, caller_is_admin=False)
        hardened = VisibilityPolicy(gate_list_feedbacks=True)
        assert not hardened.can_list_feedbacks(link, caller_is_admin=False)
        assert hardened.can_list_feedbacks(link, caller_is_admin=True)


def test_error_detail_from_error() -> None:
    detail = ErrorDetail.from_error(AlreadyDeletedError())
    assert detail.code == "already_deleted"
    assert detail.message
