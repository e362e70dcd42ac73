from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

# --- Principals ---

Principal = str

NULL_PRINCIPAL: Principal = "0x" + "0" * 40


def is_null_principal(principal: Principal | None) -> bool:
    return not principal or principal.lower() == NULL_PRINCIPAL


# --- Links ---

class LinkState(str, Enum):
    """Lifecycle tag of a link. DELETED is terminal."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    creator: Principal
    topic: bytes
    description: bytes = b""
    state: LinkState = LinkState.ACTIVE
    is_private: bool = False
    # Append-only; ids point into the global feedback arena
    feedback_ids: tuple[int, ...] = ()
    created_at: datetime

    @property
    def is_active(self) -> bool:
        return self.state is LinkState.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self.state is LinkState.DELETED

    @property
    def feedback_count(self) -> int:
        return len(self.feedback_ids)


# --- Feedback ---

class Feedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    author: Principal
    content: bytes
    timestamp: datetime
