"""
LedgerState - committed, immutable snapshot of the whole ledger.

A new LedgerState is built on every commit and swapped in atomically, so a
reader holding a snapshot always sees a consistent view.

Invariants:
- feedback ids are positions in the feedback arena; the arena never moves
- every feedback id appears in exactly one link's feedback_ids
- link_index holds link ids in creation order
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from feedback_ledger.domain.entities import Feedback, Link, Principal


def _frozen_map() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class LedgerState:
    admins: frozenset[Principal] = frozenset()
    links: Mapping[str, Link] = field(default_factory=_frozen_map)
    link_index: tuple[str, ...] = ()
    feedback: tuple[Feedback, ...] = ()
    # feedback id -> owning link id
    feedback_links: Mapping[int, str] = field(default_factory=_frozen_map)
    version: int = 0

    def is_admin(self, principal: Principal) -> bool:
        return principal in self.admins

    def get_link(self, link_id: str) -> Link | None:
        return self.links.get(link_id)

    def iter_links(self) -> Iterator[Link]:
        """Links in creation order."""
        for link_id in self.link_index:
            yield self.links[link_id]

    def get_feedback(self, feedback_id: int) -> Feedback | None:
        if 0 <= feedback_id < len(self.feedback):
            return self.feedback[feedback_id]
        return None

    def owning_link(self, feedback_id: int) -> Link | None:
        link_id = self.feedback_links.get(feedback_id)
        if link_id is None:
            return None
        return self.links[link_id]

    @property
    def next_feedback_id(self) -> int:
        return len(self.feedback)
