"""ETL package - integrity checks and summary export."""

from etl.export import export_summaries
from etl.validation import validate_snapshot

__all__ = [
    "export_summaries",
    "validate_snapshot",
]
