"""Summary services."""

from app.services.summary.service import SummaryService

__all__ = [
    "SummaryService",
]
