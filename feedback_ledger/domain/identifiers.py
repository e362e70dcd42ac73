import hashlib
from datetime import datetime

from feedback_ledger.domain.entities import Principal


def _field(value: bytes) -> bytes:
    # Length prefix keeps variable-width fields from running into each other
    return len(value).to_bytes(8, "big") + value


def derive_link_id(name: bytes, creator: Principal, created_at: datetime) -> str:
    """
    Derive a link id from (name, creator, creation time).

    Time is taken at whole-second resolution, so the same creator reusing a
    name within one second yields the same id.
    """
    digest = hashlib.sha3_256()
    digest.update(_field(name))
    digest.update(_field(creator.encode("utf-8")))
    digest.update(int(created_at.timestamp()).to_bytes(32, "big"))
    return "0x" + digest.hexdigest()
