"""Legislator model."""

from dataclasses import dataclass

import polars as pl

from app.models.common import BaseEntity

LEGISLATOR_SCHEMA = {
    "id": pl.Int64,
    "name": pl.Utf8,
}


@dataclass(frozen=True)
class Legislator(BaseEntity):
    """Voting member."""

    id: int
    name: str
