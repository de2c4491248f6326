"""Repositories package - data access layer for the source datasets."""

from app.repositories.errors import (
    DatasetError,
    LoadError,
    MalformedValueError,
    MissingColumnError,
    MissingDatasetError,
    StoreNotLoadedError,
)
from app.repositories.loader import read_dataset, read_entities
from app.repositories.records import RecordRepository
from app.repositories.snapshot import RecordSnapshot

__all__ = [
    # Errors
    "LoadError",
    "DatasetError",
    "MissingDatasetError",
    "MissingColumnError",
    "MalformedValueError",
    "StoreNotLoadedError",
    # Loading
    "read_dataset",
    "read_entities",
    # Records
    "RecordRepository",
    "RecordSnapshot",
]
