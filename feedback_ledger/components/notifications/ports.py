"""
Notifications component port definitions.
"""

from feedback_ledger.ports.journal import NotificationJournalPort

__all__ = ["NotificationJournalPort"]
