"""Write summaries to CSV files."""

from pathlib import Path

import polars as pl
from loguru import logger

from app.models import BillSummary, LegislatorSummary

LEGISLATORS_FILE = "legislators-support-oppose-count.csv"
BILLS_FILE = "bills.csv"


def legislators_frame(rows: list[LegislatorSummary]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "id": [r.id for r in rows],
            "name": [r.legislator for r in rows],
            "num_supported_bills": [r.supported_bills for r in rows],
            "num_opposed_bills": [r.opposed_bills for r in rows],
        },
        schema={"id": pl.Int64, "name": pl.Utf8, "num_supported_bills": pl.Int64, "num_opposed_bills": pl.Int64},
    )


def bills_frame(rows: list[BillSummary]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "id": [r.id for r in rows],
            "title": [r.bill for r in rows],
            "supporter_count": [r.supporters for r in rows],
            "opposer_count": [r.opposers for r in rows],
            "primary_sponsor": [r.primary_sponsor for r in rows],
        },
        schema={
            "id": pl.Int64,
            "title": pl.Utf8,
            "supporter_count": pl.Int64,
            "opposer_count": pl.Int64,
            "primary_sponsor": pl.Utf8,
        },
    )


def export_summaries(
    legislators: list[LegislatorSummary],
    bills: list[BillSummary],
    out_dir: Path | str,
) -> list[Path]:
    """Write both summaries into out_dir, return the written paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = [out_dir / LEGISLATORS_FILE, out_dir / BILLS_FILE]
    legislators_frame(legislators).write_csv(paths[0])
    bills_frame(bills).write_csv(paths[1])

    logger.info("Exported {} legislators and {} bills to {}", len(legislators), len(bills), out_dir)
    return paths
