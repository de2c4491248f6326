"""Summary API."""

from web.api.summary.views import (
    get_bill_summaries,
    get_health,
    get_legislator_summaries,
)

__all__ = [
    "get_legislator_summaries",
    "get_bill_summaries",
    "get_health",
]
