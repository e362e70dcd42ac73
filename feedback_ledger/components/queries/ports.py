"""
Queries component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from feedback_ledger.domain.entities import Feedback, Link, Principal

if TYPE_CHECKING:
    from ._impl import QueryEngine


class LedgerReadPort(Protocol):
    """Consistent read-only view of the whole ledger."""

    def is_admin(self, principal: Principal) -> bool: ...

    def get_link(self, link_id: str) -> Link | None: ...

    def iter_links(self) -> Iterator[Link]: ...

    def get_feedback(self, feedback_id: int) -> Feedback | None: ...

    def owning_link(self, feedback_id: int) -> Link | None: ...


class QueryLedgerPort(Protocol):
    """Source of snapshot-bound query engines."""

    def queries(self) -> QueryEngine: ...
