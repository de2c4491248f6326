"""Dependency Injection container - initialized at app startup."""

from pathlib import Path

from loguru import logger

from app.repositories import RecordRepository
from app.services import SummaryService
from settings import DATA_DIR


class Container:
    """Application DI container - holds the record repository and services."""

    def __init__(self, data_dir: Path | str = DATA_DIR):
        self.records = RecordRepository(data_dir)
        self.summary = SummaryService(records=self.records)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self) -> None:
        """Load all datasets. Call once at app startup; load errors propagate."""
        if self._initialized:
            return

        self.records.load()
        self._initialized = True
        logger.info("Container initialized from {}", self.records.data_dir)

    def reload(self) -> None:
        """Re-read the datasets; summaries recompute on next access."""
        self.records.load()
        self._initialized = True


# Global container instance
container = Container()
