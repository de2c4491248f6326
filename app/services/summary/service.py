"""Summary service - legislator and bill vote summaries."""

from collections.abc import Callable

from loguru import logger

from app.models import BillSummary, LegislatorSummary
from app.repositories import RecordRepository, RecordSnapshot
from helpers import aggregation


class SummaryService:
    """Vote summaries over the current record snapshot, memoized per snapshot."""

    def __init__(self, records: RecordRepository):
        self._records = records
        # (snapshot, results computed from it), swapped as one object
        self._entry: tuple[RecordSnapshot | None, dict[str, list]] = (None, {})
        logger.debug("SummaryService initialized")

    def _get_cached_or_compute(self, key: str, compute_fn: Callable[[RecordSnapshot], list]) -> list:
        """Reuse results while the snapshot is unchanged, recompute after a reload."""
        snapshot = self._records.snapshot
        entry = self._entry
        if entry[0] is not snapshot:
            entry = (snapshot, {})
            self._entry = entry

        cache = entry[1]
        if key not in cache:
            cache[key] = compute_fn(snapshot)
            logger.info("Computed {}: {} rows", key, len(cache[key]))
        return list(cache[key])

    def legislator_summaries(self) -> list[LegislatorSummary]:
        """Supported/opposed counts for every legislator."""
        return self._get_cached_or_compute("legislator_summaries", aggregation.legislator_summaries)

    def bill_summaries(self) -> list[BillSummary]:
        """Supporter/opposer counts and sponsor for every bill that was voted on."""
        return self._get_cached_or_compute("bill_summaries", aggregation.bill_summaries)

    @property
    def ready(self) -> bool:
        """True once the record store has loaded."""
        return self._records.loaded

    def counts(self) -> dict[str, int]:
        """Row count per loaded dataset."""
        return self._records.snapshot.counts()
