"""Mapping of component error records onto HTTP errors."""

from collections.abc import Sequence

from fastapi import HTTPException, status

from feedback_ledger.domain.errors import ErrorDetail

_STATUS_BY_CODE = {
    "unauthorized": status.HTTP_403_FORBIDDEN,
    "link_not_found": status.HTTP_404_NOT_FOUND,
    "feedback_not_found": status.HTTP_404_NOT_FOUND,
    "empty_topic": status.HTTP_400_BAD_REQUEST,
    "empty_content": status.HTTP_400_BAD_REQUEST,
    "invalid_target": status.HTTP_400_BAD_REQUEST,
    "invalid_limit": status.HTTP_400_BAD_REQUEST,
    "invalid_query": status.HTTP_400_BAD_REQUEST,
}


def status_for(code: str) -> int:
    # Remaining state errors conflict with the current entity state
    return _STATUS_BY_CODE.get(code, status.HTTP_409_CONFLICT)


def raise_for_errors(errors: Sequence[ErrorDetail]) -> None:
    if not errors:
        return
    raise HTTPException(
        status_code=status_for(errors[0].code),
        detail=[{"code": err.code, "message": err.message, "field": err.field} for err in errors],
    )
