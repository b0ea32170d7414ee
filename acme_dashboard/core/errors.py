"""Error types for the dashboard data layer.

Query failures are reported with a fixed, user-facing message; the original
database exception stays reachable through ``__cause__`` and the logs.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base error for all dashboard exceptions."""


class DashboardDataError(DashboardError, RuntimeError):
    """Raised when a dashboard query fails for any reason."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
