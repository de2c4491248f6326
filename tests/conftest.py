"""Shared fixtures: a small dataset with deliberate resolution gaps."""

from pathlib import Path

import pytest

from app.container import Container
from app.models import Bill, Legislator, Vote, VoteResult
from app.repositories import RecordSnapshot

LEGISLATORS = [
    (1, "Rep. Ada Lane (D-CA-1)"),
    (2, "Rep. Ben Ortiz (R-TX-2)"),
    (3, "Rep. Cal Moss (D-NY-3)"),
    # never votes
    (4, "Rep. Dee Park (R-OH-4)"),
]

BILLS = [
    (10, "H.R. 10: Clean Water Act", 1),
    # sponsor 99 is not a legislator
    (20, "H.R. 20: Rural Roads Act", 99),
    # never voted on
    (30, "H.R. 30: Library Funding Act", 2),
]

VOTES = [
    (100, 10),
    (200, 20),
    (201, 20),
]

VOTE_RESULTS = [
    (1000, 1, 100, 1),
    (1001, 2, 100, 2),
    (1002, 3, 100, 1),
    (1003, 1, 200, 2),
    (1004, 2, 200, 1),
    (1005, 3, 201, 1),
    # unknown legislator
    (1006, 77, 200, 1),
    # unknown vote
    (1007, 2, 999, 1),
    # not a yea/nay ballot
    (1008, 3, 100, 3),
]


def write_csv(path: Path, header: list[str], rows: list[tuple]) -> Path:
    lines = [",".join(header)] + [",".join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_csv(tmp_path / "legislators.csv", ["id", "name"], [(i, f'"{n}"') for i, n in LEGISLATORS])
    write_csv(tmp_path / "bills.csv", ["id", "title", "sponsor_id"], [(i, f'"{t}"', s) for i, t, s in BILLS])
    write_csv(tmp_path / "votes.csv", ["id", "bill_id"], VOTES)
    write_csv(tmp_path / "vote_results.csv", ["id", "legislator_id", "vote_id", "vote_type"], VOTE_RESULTS)
    return tmp_path


@pytest.fixture
def snapshot() -> RecordSnapshot:
    return RecordSnapshot.build(
        legislators=[Legislator(*r) for r in LEGISLATORS],
        bills=[Bill(*r) for r in BILLS],
        votes=[Vote(*r) for r in VOTES],
        vote_results=[VoteResult(*r) for r in VOTE_RESULTS],
    )


@pytest.fixture
def container(data_dir: Path) -> Container:
    c = Container(data_dir)
    c.init()
    return c
