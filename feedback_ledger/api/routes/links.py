"""Routes for feedback links."""

from fastapi import APIRouter

from feedback_ledger.api.deps import AuthenticatedCallerDep, LedgerDep
from feedback_ledger.api.errors import raise_for_errors
from feedback_ledger.api.schemas import (
    LinkActiveRequest,
    LinkCreatedResponse,
    LinkCreateRequest,
    LinkFlagResponse,
    LinkIdListResponse,
    LinkInfoResponse,
    LinkPrivateRequest,
    LinkSummaryListResponse,
    LinkSummaryResponse,
    LinkTopicResponse,
)
from feedback_ledger.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    SetActiveInput,
    SetPrivateInput,
    run_create,
    run_delete,
    run_get,
    run_get_topic,
    run_set_active,
    run_set_private,
)
from feedback_ledger.components.queries import (
    LinkFlagInput,
    ListAllActiveLinksInput,
    ListByCreatorInput,
    run_is_active,
    run_is_private,
    run_list_active_public_links,
    run_list_all_active_links,
    run_list_by_creator,
)

router = APIRouter()


# --- Listings (declared before /{link_id}) ---


@router.get("/public", response_model=LinkIdListResponse)
def list_active_public_links(ledger: LedgerDep) -> LinkIdListResponse:
    result = run_list_active_public_links(ledger=ledger)
    return LinkIdListResponse(items=list(result.link_ids), total=result.total)


@router.get("/active", response_model=LinkIdListResponse)
def list_all_active_links(caller: AuthenticatedCallerDep, ledger: LedgerDep) -> LinkIdListResponse:
    """Active links including private ones (admin only)."""
    result = run_list_all_active_links(ListAllActiveLinksInput(caller=caller), ledger=ledger)
    raise_for_errors(result.errors)
    return LinkIdListResponse(items=list(result.link_ids), total=result.total)


@router.get("/by-creator/{creator}", response_model=LinkSummaryListResponse)
def list_by_creator(creator: str, ledger: LedgerDep) -> LinkSummaryListResponse:
    result = run_list_by_creator(ListByCreatorInput(creator=creator), ledger=ledger)
    return LinkSummaryListResponse(
        items=[
            LinkSummaryResponse(
                link_id=link.link_id,
                topic=link.topic,
                description=link.description,
                is_active=link.is_active,
                is_private=link.is_private,
                is_deleted=link.is_deleted,
                feedback_count=link.feedback_count,
            )
            for link in result.links
        ],
        total=result.total,
    )


# --- Single link ---


@router.post("", response_model=LinkCreatedResponse, status_code=201)
def create_link(
    data: LinkCreateRequest,
    caller: AuthenticatedCallerDep,
    ledger: LedgerDep,
) -> LinkCreatedResponse:
    """Create a new link. Open to any caller."""
    result = run_create(
        CreateLinkInput(
            caller=caller,
            name=data.name,
            topic=data.topic,
            description=data.description,
            is_private=data.is_private,
        ),
        ledger=ledger,
    )
    raise_for_errors(result.errors)

    event = result.notification
    assert event is not None  # Success guarantees a notification
    return LinkCreatedResponse(
        link_id=event.link_id,
        creator=event.creator,
        is_private=event.is_private,
    )


@router.get("/{link_id}", response_model=LinkInfoResponse)
def get_link(link_id: str, ledger: LedgerDep) -> LinkInfoResponse:
    """Full metadata; deleted links stay inspectable."""
    result = run_get(GetLinkInput(link_id=link_id), ledger=ledger)
    raise_for_errors(result.errors)

    info = result.info
    assert info is not None
    return LinkInfoResponse(
        link_id=link_id,
        creator=info.creator,
        topic=info.topic,
        description=info.description,
        is_active=info.is_active,
        is_private=info.is_private,
        is_deleted=info.is_deleted,
        feedback_count=info.feedback_count,
    )


@router.get("/{link_id}/topic", response_model=LinkTopicResponse)
def get_topic(link_id: str, ledger: LedgerDep) -> LinkTopicResponse:
    result = run_get_topic(GetLinkInput(link_id=link_id), ledger=ledger)
    raise_for_errors(result.errors)

    topic = result.topic
    assert topic is not None
    return LinkTopicResponse(link_id=link_id, topic=topic.topic, description=topic.description)


@router.get("/{link_id}/active", response_model=LinkFlagResponse)
def is_active(link_id: str, ledger: LedgerDep) -> LinkFlagResponse:
    result = run_is_active(LinkFlagInput(link_id=link_id), ledger=ledger)
    return LinkFlagResponse(link_id=link_id, value=bool(result.value))


@router.put("/{link_id}/active", response_model=LinkFlagResponse)
def set_active(
    link_id: str,
    data: LinkActiveRequest,
    caller: AuthenticatedCallerDep,
    ledger: LedgerDep,
) -> LinkFlagResponse:
    result = run_set_active(
        SetActiveInput(caller=caller, link_id=link_id, is_active=data.is_active),
        ledger=ledger,
    )
    raise_for_errors(result.errors)
    return LinkFlagResponse(link_id=link_id, value=data.is_active)


@router.get("/{link_id}/private", response_model=LinkFlagResponse)
def is_private(link_id: str, ledger: LedgerDep) -> LinkFlagResponse:
    result = run_is_private(LinkFlagInput(link_id=link_id), ledger=ledger)
    raise_for_errors(result.errors)
    return LinkFlagResponse(link_id=link_id, value=bool(result.value))


@router.put("/{link_id}/private", response_model=LinkFlagResponse)
def set_private(
    link_id: str,
    data: LinkPrivateRequest,
    caller: AuthenticatedCallerDep,
    ledger: LedgerDep,
) -> LinkFlagResponse:
    result = run_set_private(
        SetPrivateInput(caller=caller, link_id=link_id, is_private=data.is_private),
        ledger=ledger,
    )
    raise_for_errors(result.errors)
    return LinkFlagResponse(link_id=link_id, value=data.is_private)


@router.delete("/{link_id}", status_code=204)
def delete_link(link_id: str, caller: AuthenticatedCallerDep, ledger: LedgerDep) -> None:
    result = run_delete(DeleteLinkInput(caller=caller, link_id=link_id), ledger=ledger)
    raise_for_errors(result.errors)
