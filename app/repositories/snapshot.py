"""Immutable snapshot of the four source collections."""

from dataclasses import dataclass, field
from functools import cached_property

import polars as pl

from app.models import DATASETS, Bill, Legislator, Vote, VoteResult


def _index(rows) -> dict:
    """id -> first record with that id."""
    result = {}
    for r in rows:
        result.setdefault(r.id, r)
    return result


@dataclass(frozen=True)
class RecordSnapshot:
    """One load of legislators, bills, votes and vote results.

    Collections keep source order. Id indexes are built lazily once per snapshot
    and shared by every query against it.
    """

    legislators: tuple[Legislator, ...] = field(default_factory=tuple)
    bills: tuple[Bill, ...] = field(default_factory=tuple)
    votes: tuple[Vote, ...] = field(default_factory=tuple)
    vote_results: tuple[VoteResult, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, legislators=(), bills=(), votes=(), vote_results=()) -> "RecordSnapshot":
        """Snapshot from any iterables of entities."""
        return cls(
            legislators=tuple(legislators),
            bills=tuple(bills),
            votes=tuple(votes),
            vote_results=tuple(vote_results),
        )

    @cached_property
    def legislators_by_id(self) -> dict[int, Legislator]:
        return _index(self.legislators)

    @cached_property
    def bills_by_id(self) -> dict[int, Bill]:
        return _index(self.bills)

    @cached_property
    def votes_by_id(self) -> dict[int, Vote]:
        return _index(self.votes)

    def counts(self) -> dict[str, int]:
        """Row count per dataset."""
        return {d.name: len(getattr(self, d.name)) for d in DATASETS}

    def to_frame(self, name: str) -> pl.DataFrame:
        """Collection as a typed polars frame."""
        dataset = next((d for d in DATASETS if d.name == name), None)
        if dataset is None:
            raise KeyError(f"Unknown dataset: {name}")
        return pl.DataFrame([r.to_dict() for r in getattr(self, name)], schema=dataset.schema)
