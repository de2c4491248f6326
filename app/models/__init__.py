"""Models package - schemas and entities for all domains."""

from dataclasses import dataclass

from app.models.common import BaseEntity
from app.models.core import LEGISLATOR_SCHEMA, Legislator
from app.models.legislation import BILL_SCHEMA, Bill
from app.models.voting import (
    UNKNOWN_SPONSOR,
    VOTE_RESULT_SCHEMA,
    VOTE_SCHEMA,
    BillSummary,
    LegislatorSummary,
    Vote,
    VoteResult,
    VoteType,
)


@dataclass(frozen=True)
class Dataset:
    """Source table definition: file name, required columns, entity type."""

    name: str
    filename: str
    schema: dict
    entity: type[BaseEntity]


DATASETS = [
    Dataset("legislators", "legislators.csv", LEGISLATOR_SCHEMA, Legislator),
    Dataset("bills", "bills.csv", BILL_SCHEMA, Bill),
    Dataset("votes", "votes.csv", VOTE_SCHEMA, Vote),
    Dataset("vote_results", "vote_results.csv", VOTE_RESULT_SCHEMA, VoteResult),
]

__all__ = [
    # Common
    "BaseEntity",
    # Core
    "LEGISLATOR_SCHEMA",
    "Legislator",
    # Legislation
    "BILL_SCHEMA",
    "Bill",
    # Voting
    "VOTE_SCHEMA",
    "VOTE_RESULT_SCHEMA",
    "Vote",
    "VoteResult",
    "VoteType",
    "LegislatorSummary",
    "BillSummary",
    "UNKNOWN_SPONSOR",
    # Datasets
    "Dataset",
    "DATASETS",
]
