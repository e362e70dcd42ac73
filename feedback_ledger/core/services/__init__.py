from .ledger import FeedbackLedger, Observer

__all__ = ["FeedbackLedger", "Observer"]
