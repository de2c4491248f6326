"""Voting domain models - votes, ballots, and summary entities."""

from app.models.voting.entities import UNKNOWN_SPONSOR, BillSummary, LegislatorSummary
from app.models.voting.vote import VOTE_SCHEMA, Vote
from app.models.voting.vote_result import VOTE_RESULT_SCHEMA, VoteResult, VoteType

__all__ = [
    "VOTE_SCHEMA",
    "VOTE_RESULT_SCHEMA",
    "Vote",
    "VoteResult",
    "VoteType",
    "LegislatorSummary",
    "BillSummary",
    "UNKNOWN_SPONSOR",
]
