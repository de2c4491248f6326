"""Bill model."""

from dataclasses import dataclass

import polars as pl

from app.models.common import BaseEntity

BILL_SCHEMA = {
    "id": pl.Int64,
    "title": pl.Utf8,
    "sponsor_id": pl.Int64,
}


@dataclass(frozen=True)
class Bill(BaseEntity):
    """Proposed legislation. The sponsor may be missing from the legislator set."""

    id: int
    title: str
    sponsor_id: int
