"""Summary API response schemas."""

from pydantic import BaseModel, Field


class LegislatorSummaryItem(BaseModel):
    """Legislator voting activity."""

    id: int
    legislator: str
    supported_bills: int = Field(alias="supportedBills", ge=0)
    opposed_bills: int = Field(alias="opposedBills", ge=0)

    class Config:
        populate_by_name = True


class BillSummaryItem(BaseModel):
    """Bill voting outcome."""

    id: int
    bill: str
    supporters: int = Field(ge=0)
    opposers: int = Field(ge=0)
    primary_sponsor: str = Field(alias="primarySponsor")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Loaded dataset sizes."""

    status: str
    legislators: int
    bills: int
    votes: int
    vote_results: int = Field(alias="voteResults")

    class Config:
        populate_by_name = True
