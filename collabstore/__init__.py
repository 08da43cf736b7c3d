"""Cache-aside data-access layer for the collaboration service."""

__version__ = "1.0.0"
