"""Vote result (individual legislator ballot) model."""

from dataclasses import dataclass
from enum import IntEnum

import polars as pl

from app.models.common import BaseEntity

VOTE_RESULT_SCHEMA = {
    "id": pl.Int64,
    "legislator_id": pl.Int64,
    "vote_id": pl.Int64,
    "vote_type": pl.Int64,
}


class VoteType(IntEnum):
    """Ballot values. Anything else is counted nowhere."""

    YEA = 1
    NAY = 2


@dataclass(frozen=True)
class VoteResult(BaseEntity):
    """One legislator's ballot on one vote."""

    id: int
    legislator_id: int
    vote_id: int
    vote_type: int

    @property
    def supports(self) -> bool:
        return self.vote_type == VoteType.YEA

    @property
    def opposes(self) -> bool:
        return self.vote_type == VoteType.NAY
