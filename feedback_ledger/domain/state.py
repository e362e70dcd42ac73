from feedback_ledger.domain.entities import Link, LinkState
from feedback_ledger.domain.errors import AlreadyDeletedError, LinkDeletedError

_ALLOWED: dict[LinkState, frozenset[LinkState]] = {
    LinkState.ACTIVE: frozenset({LinkState.ACTIVE, LinkState.INACTIVE, LinkState.DELETED}),
    LinkState.INACTIVE: frozenset({LinkState.ACTIVE, LinkState.INACTIVE, LinkState.DELETED}),
    LinkState.DELETED: frozenset(),
}


def can_transition(current: LinkState, new: LinkState) -> bool:
    """
    Determine if a lifecycle transition is allowed.

    Active and inactive toggle freely (re-setting the same state included);
    deletion is reachable from both and nothing leaves it.
    """
    return new in _ALLOWED[current]


def transition(link: Link, new_state: LinkState) -> Link:
    """
    Return a NEW Link in the requested lifecycle state.
    Raises AlreadyDeletedError / LinkDeletedError if the link is deleted.
    """
    if not can_transition(link.state, new_state):
        if new_state is LinkState.DELETED:
            raise AlreadyDeletedError()
        raise LinkDeletedError()
    return link.model_copy(update={"state": new_state})


def set_privacy(link: Link, is_private: bool) -> Link:
    if link.is_deleted:
        raise LinkDeletedError()
    return link.model_copy(update={"is_private": is_private})


def append_feedback(link: Link, feedback_id: int) -> Link:
    if link.is_deleted:
        raise LinkDeletedError()
    return link.model_copy(update={"feedback_ids": (*link.feedback_ids, feedback_id)})
