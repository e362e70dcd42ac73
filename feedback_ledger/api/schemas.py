"""Request/response models; opaque payloads travel as 0x-prefixed hex."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, PlainSerializer


def decode_hex(value: object) -> bytes:
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        raise ValueError("payload must be a hex string")
    text = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise ValueError("payload must be valid hex") from e


def encode_hex(value: bytes) -> str:
    return "0x" + value.hex()


HexBytes = Annotated[
    bytes,
    BeforeValidator(decode_hex),
    PlainSerializer(encode_hex, return_type=str),
]


# --- Admins ---


class AdminAddRequest(BaseModel):
    target: str


class AdminCheckResponse(BaseModel):
    principal: str
    is_admin: bool


class AdminListResponse(BaseModel):
    items: list[str]
    total: int


# --- Links ---


class LinkCreateRequest(BaseModel):
    name: HexBytes
    topic: HexBytes
    description: HexBytes = b""
    is_private: bool = False


class LinkCreatedResponse(BaseModel):
    link_id: str
    creator: str
    is_private: bool


class LinkActiveRequest(BaseModel):
    is_active: bool


class LinkPrivateRequest(BaseModel):
    is_private: bool


class LinkInfoResponse(BaseModel):
    link_id: str
    creator: str
    topic: HexBytes
    description: HexBytes
    is_active: bool
    is_private: bool
    is_deleted: bool
    feedback_count: int


class LinkTopicResponse(BaseModel):
    link_id: str
    topic: HexBytes
    description: HexBytes


class LinkFlagResponse(BaseModel):
    link_id: str
    value: bool


class LinkIdListResponse(BaseModel):
    items: list[str]
    total: int


class LinkSummaryResponse(BaseModel):
    link_id: str
    topic: HexBytes
    description: HexBytes
    is_active: bool
    is_private: bool
    is_deleted: bool
    feedback_count: int


class LinkSummaryListResponse(BaseModel):
    items: list[LinkSummaryResponse]
    total: int


# --- Feedback ---


class FeedbackSubmitRequest(BaseModel):
    content: HexBytes


class FeedbackSubmittedResponse(BaseModel):
    feedback_id: int
    link_id: str
    author: str
    timestamp: datetime
    is_active: bool
    is_private: bool


class FeedbackResponse(BaseModel):
    feedback_id: int
    content: HexBytes
    timestamp: datetime
    author: str


class FeedbackIdListResponse(BaseModel):
    items: list[int]
    total: int


class SubmissionResponse(BaseModel):
    feedback_id: int
    content: HexBytes
    timestamp: datetime


class SubmissionListResponse(BaseModel):
    items: list[SubmissionResponse]
    total: int


class FeedbackEntryResponse(BaseModel):
    feedback_id: int
    content: HexBytes
    author: str
    timestamp: datetime


class FeedbackEntryListResponse(BaseModel):
    items: list[FeedbackEntryResponse]
    total: int


# --- Journal ---


class JournalRecordResponse(BaseModel):
    sequence: int
    ledger_version: int
    recorded_at: datetime
    kind: str
    payload: dict


class JournalListResponse(BaseModel):
    items: list[JournalRecordResponse]
    total: int
