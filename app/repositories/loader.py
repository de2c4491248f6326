"""CSV dataset loading with polars."""

from pathlib import Path

import polars as pl
from loguru import logger

from app.models import Dataset
from app.models.common import BaseEntity
from app.repositories.errors import (
    DatasetError,
    MalformedValueError,
    MissingColumnError,
    MissingDatasetError,
)

# Header is line 1, first data row is line 2
_FIRST_DATA_LINE = 2


def _read_raw(path: Path, dataset: Dataset) -> pl.DataFrame:
    """Read every column as text so type errors can be reported per cell."""
    if not path.is_file():
        raise MissingDatasetError(dataset.name, path, "file not found")

    try:
        df = pl.read_csv(path, infer_schema_length=0)
    except pl.exceptions.NoDataError as e:
        raise MissingDatasetError(dataset.name, path, "file is empty, header row required") from e
    except (OSError, pl.exceptions.ComputeError) as e:
        raise DatasetError(dataset.name, path, f"cannot read file: {e}") from e

    renamed = {c: c.strip().lower() for c in df.columns}
    if len(set(renamed.values())) != len(renamed):
        raise MissingColumnError(dataset.name, path, f"duplicate columns in header: {df.columns}")
    return df.rename(renamed)


def _cast_column(df: pl.DataFrame, column: str, dtype, dataset: Dataset, path: Path) -> pl.Series:
    raw = df[column]
    if dtype == pl.Utf8:
        return raw.fill_null("")

    values = raw.str.strip_chars().cast(dtype, strict=False)
    bad = values.is_null()
    if bad.any():
        idx = bad.arg_true()[0]
        raise MalformedValueError(
            dataset.name,
            path,
            f"column '{column}' line {idx + _FIRST_DATA_LINE}: {raw[idx]!r} is not a valid {dtype}",
        )
    return values


def read_dataset(path: Path, dataset: Dataset) -> pl.DataFrame:
    """Read a CSV file into a frame holding exactly the dataset's typed columns.

    Headers match case-insensitively, unknown columns are dropped and row order
    is preserved. Missing files, missing columns and unparseable values raise
    a DatasetError subclass.
    """
    df = _read_raw(path, dataset)

    missing = [c for c in dataset.schema if c not in df.columns]
    if missing:
        raise MissingColumnError(dataset.name, path, f"missing required columns: {', '.join(missing)}")

    extra = [c for c in df.columns if c not in dataset.schema]
    if extra:
        logger.debug("{}: ignoring columns {}", dataset.name, extra)

    return pl.DataFrame([_cast_column(df, c, dtype, dataset, path) for c, dtype in dataset.schema.items()])


def read_entities(path: Path, dataset: Dataset) -> tuple[BaseEntity, ...]:
    """Read a CSV file into a tuple of entities."""
    df = read_dataset(path, dataset)
    rows = tuple(dataset.entity.from_row(r) for r in df.iter_rows(named=True))
    logger.info("{}: {} rows from {}", dataset.name, len(rows), path)
    return rows
