"""
Notifications component - Committed notification journal.
"""

from ._impl import MAX_LIMIT, NotificationService, create_journal
from .component import run_list
from .models import ListNotificationsInput, NotificationListOutput
from .ports import NotificationJournalPort

__all__ = [
    "run_list",
    "ListNotificationsInput",
    "NotificationListOutput",
    "NotificationJournalPort",
    "NotificationService",
    "create_journal",
    "MAX_LIMIT",
]
