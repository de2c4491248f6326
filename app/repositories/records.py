"""Record repository - the loaded legislators, bills, votes and vote results."""

from pathlib import Path

from loguru import logger

from app.models import DATASETS, Bill, Legislator, Vote, VoteResult
from app.repositories.errors import StoreNotLoadedError
from app.repositories.loader import read_entities
from app.repositories.snapshot import RecordSnapshot
from settings import DATA_DIR


class RecordRepository:
    """Loads the four CSV datasets once and serves them read-only."""

    def __init__(self, data_dir: Path | str = DATA_DIR):
        self._data_dir = Path(data_dir)
        self._snapshot: RecordSnapshot | None = None
        logger.debug("{} initialized ({})", self.__class__.__name__, self._data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> RecordSnapshot:
        """Current snapshot. Raises if load() has not succeeded."""
        if self._snapshot is None:
            raise StoreNotLoadedError(f"Record store not loaded from {self._data_dir}")
        return self._snapshot

    def load(self) -> RecordSnapshot:
        """Read all datasets. Any DatasetError aborts and keeps the previous state."""
        logger.info("Loading datasets from {}", self._data_dir)
        collections = {d.name: read_entities(self._data_dir / d.filename, d) for d in DATASETS}

        self._snapshot = RecordSnapshot(**collections)
        logger.info("Record store loaded: {}", self._snapshot.counts())
        return self._snapshot

    def legislators(self) -> tuple[Legislator, ...]:
        return self.snapshot.legislators

    def bills(self) -> tuple[Bill, ...]:
        return self.snapshot.bills

    def votes(self) -> tuple[Vote, ...]:
        return self.snapshot.votes

    def vote_results(self) -> tuple[VoteResult, ...]:
        return self.snapshot.vote_results
