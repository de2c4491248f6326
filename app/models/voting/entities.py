"""Voting domain entities - computed summary rows."""

from dataclasses import dataclass

from app.models.common import BaseEntity

UNKNOWN_SPONSOR = "Unknown"


@dataclass(frozen=True)
class LegislatorSummary(BaseEntity):
    """Bills a legislator supported and opposed."""

    id: int
    legislator: str
    supported_bills: int
    opposed_bills: int


@dataclass(frozen=True)
class BillSummary(BaseEntity):
    """Ballot totals and primary sponsor for a bill."""

    id: int
    bill: str
    supporters: int
    opposers: int
    primary_sponsor: str
