"""Vote (voting event on a bill) model."""

from dataclasses import dataclass

import polars as pl

from app.models.common import BaseEntity

VOTE_SCHEMA = {
    "id": pl.Int64,
    "bill_id": pl.Int64,
}


@dataclass(frozen=True)
class Vote(BaseEntity):
    """Scheduled voting event on a single bill."""

    id: int
    bill_id: int
