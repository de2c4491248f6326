"""Services package - service class exports."""

from app.services.summary import SummaryService

__all__ = [
    "SummaryService",
]
