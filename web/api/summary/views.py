"""Summary API views - thin layer over services."""

from app.services import SummaryService
from web.api.errors import ensure_ready

from .schemas import BillSummaryItem, HealthResponse, LegislatorSummaryItem


def get_legislator_summaries(service: SummaryService) -> list[LegislatorSummaryItem]:
    """Supported and opposed bill counts per legislator."""
    ensure_ready(service)
    data = service.legislator_summaries()

    return [
        LegislatorSummaryItem(
            id=s.id,
            legislator=s.legislator,
            supported_bills=s.supported_bills,
            opposed_bills=s.opposed_bills,
        )
        for s in data
    ]


def get_bill_summaries(service: SummaryService) -> list[BillSummaryItem]:
    """Supporters, opposers and primary sponsor per voted bill."""
    ensure_ready(service)
    data = service.bill_summaries()

    return [
        BillSummaryItem(
            id=s.id,
            bill=s.bill,
            supporters=s.supporters,
            opposers=s.opposers,
            primary_sponsor=s.primary_sponsor,
        )
        for s in data
    ]


def get_health(service: SummaryService) -> HealthResponse:
    """Dataset sizes of the loaded snapshot."""
    ensure_ready(service)
    counts = service.counts()

    return HealthResponse(
        status="ok",
        legislators=counts["legislators"],
        bills=counts["bills"],
        votes=counts["votes"],
        vote_results=counts["vote_results"],
    )
