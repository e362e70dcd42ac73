"""
Links component - Feedback link records and lifecycle.
"""

from ._impl import LinkReader, LinkStore, to_link_info
from .component import (
    run_create,
    run_delete,
    run_get,
    run_get_topic,
    run_set_active,
    run_set_private,
)
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkInfo,
    LinkInfoOutput,
    LinkOperationOutput,
    LinkTopic,
    LinkTopicOutput,
    SetActiveInput,
    SetPrivateInput,
)
from .ports import LinkLedgerPort, LinkReadPort, LinkStatePort

__all__ = [
    # Entry points
    "run_create",
    "run_set_active",
    "run_set_private",
    "run_delete",
    "run_get",
    "run_get_topic",
    # Input models
    "CreateLinkInput",
    "SetActiveInput",
    "SetPrivateInput",
    "DeleteLinkInput",
    "GetLinkInput",
    # Output models
    "LinkInfo",
    "LinkTopic",
    "LinkOperationOutput",
    "LinkInfoOutput",
    "LinkTopicOutput",
    # Ports
    "LinkReadPort",
    "LinkStatePort",
    "LinkLedgerPort",
    # Core
    "LinkReader",
    "LinkStore",
    "to_link_info",
]
