"""Record store errors."""

from pathlib import Path


class LoadError(Exception):
    """Fatal problem while loading source datasets."""

    def __init__(self, message: str = "Failed to load data"):
        self.message = message
        super().__init__(self.message)


class DatasetError(LoadError):
    """A single dataset could not be loaded."""

    def __init__(self, dataset: str, path: Path, message: str):
        self.dataset = dataset
        self.path = path
        super().__init__(f"{dataset} ({path}): {message}")


class MissingDatasetError(DatasetError):
    """Source file missing or unreadable."""


class MissingColumnError(DatasetError):
    """Required column absent from header."""


class MalformedValueError(DatasetError):
    """Cell value cannot be parsed into the column type."""


class StoreNotLoadedError(Exception):
    """Record store accessed before a successful load."""

    def __init__(self, message: str = "Record store is not loaded"):
        self.message = message
        super().__init__(self.message)
