from __future__ import annotations


class DashboardError(Exception):
    pass


class ValidationError(DashboardError):
    """Raised when campaign input breaks a business rule; the store is untouched."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class PersistenceReadError(DashboardError):
    pass


class PersistenceWriteError(DashboardError):
    pass
