"""Data integrity checks over a record snapshot."""

import duckdb
from loguru import logger

from app.models import DATASETS, VoteType
from app.repositories import RecordSnapshot

# (stat key, issue text, query) - each query returns a single count
_GAP_CHECKS = [
    (
        "bills_unknown_sponsor",
        "{} bills have a sponsor missing from legislators",
        """
        SELECT COUNT(*) FROM bills b
        LEFT JOIN legislators l ON l.id = b.sponsor_id
        WHERE l.id IS NULL
        """,
    ),
    (
        "votes_unknown_bill",
        "{} votes reference an unknown bill",
        """
        SELECT COUNT(*) FROM votes v
        LEFT JOIN bills b ON b.id = v.bill_id
        WHERE b.id IS NULL
        """,
    ),
    (
        "vote_results_unknown_legislator",
        "{} vote results reference an unknown legislator",
        """
        SELECT COUNT(*) FROM vote_results vr
        LEFT JOIN legislators l ON l.id = vr.legislator_id
        WHERE l.id IS NULL
        """,
    ),
    (
        "vote_results_unknown_vote",
        "{} vote results reference an unknown vote",
        """
        SELECT COUNT(*) FROM vote_results vr
        LEFT JOIN votes v ON v.id = vr.vote_id
        WHERE v.id IS NULL
        """,
    ),
    (
        "vote_results_invalid_type",
        "{} vote results have a vote_type other than yea/nay",
        f"""
        SELECT COUNT(*) FROM vote_results
        WHERE vote_type NOT IN ({VoteType.YEA.value}, {VoteType.NAY.value})
        """,
    ),
]


def validate_snapshot(snapshot: RecordSnapshot) -> dict:
    """Report sizes, dangling references and duplicate ids.

    Informational only: summaries already drop dangling references, so an
    invalid report never blocks serving.
    """
    issues = []
    stats = dict(snapshot.counts())

    conn = duckdb.connect()
    try:
        for d in DATASETS:
            conn.register(d.name, snapshot.to_frame(d.name))

        for d in DATASETS:
            dupes = conn.execute(
                f"SELECT COUNT(*) FROM (SELECT id FROM {d.name} GROUP BY id HAVING COUNT(*) > 1)"
            ).fetchone()[0]
            stats[f"{d.name}_duplicate_ids"] = dupes
            if dupes:
                issues.append(f"{dupes} duplicate ids in {d.name}")

        for key, text, query in _GAP_CHECKS:
            count = conn.execute(query).fetchone()[0]
            stats[key] = count
            if count:
                issues.append(text.format(count))
    finally:
        conn.close()

    if stats["legislators"] == 0:
        issues.append("No legislators loaded")

    logger.info("Validation: {} issues", len(issues))
    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
