"""Feedback ledger: links, immutable feedback and admin-gated lifecycle."""

__version__ = "0.1.0"
