"""Vote aggregation over a record snapshot.

Pure functions: no I/O, no mutation of the snapshot. Dangling foreign keys are
resolution gaps, not errors, and are dropped from the counts.
"""

from collections import Counter

from loguru import logger

from app.models import UNKNOWN_SPONSOR, BillSummary, LegislatorSummary
from app.repositories.snapshot import RecordSnapshot


def legislator_summaries(snapshot: RecordSnapshot) -> list[LegislatorSummary]:
    """One row per legislator, in legislator order (outer join on vote results).

    Legislators without ballots get zero counts. Ballots whose legislator_id
    matches no legislator are not counted anywhere.
    """
    supported: Counter[int] = Counter()
    opposed: Counter[int] = Counter()
    for vr in snapshot.vote_results:
        if vr.supports:
            supported[vr.legislator_id] += 1
        elif vr.opposes:
            opposed[vr.legislator_id] += 1

    orphans = (set(supported) | set(opposed)) - set(snapshot.legislators_by_id)
    if orphans:
        logger.debug("{} vote result legislator ids match no legislator", len(orphans))

    return [
        LegislatorSummary(
            id=leg.id,
            legislator=leg.name,
            supported_bills=supported[leg.id],
            opposed_bills=opposed[leg.id],
        )
        for leg in snapshot.legislators
    ]


def bill_summaries(snapshot: RecordSnapshot) -> list[BillSummary]:
    """One row per bill with at least one ballot (inner join through votes).

    Rows follow the order in which bills first appear in the vote results.
    A sponsor missing from the legislators is reported as "Unknown".
    """
    votes = snapshot.votes_by_id
    bills = snapshot.bills_by_id
    legislators = snapshot.legislators_by_id

    # dict keeps first-appearance order of bill ids
    tallies: dict[int, list[int]] = {}
    skipped = 0
    for vr in snapshot.vote_results:
        vote = votes.get(vr.vote_id)
        if vote is None or vote.bill_id not in bills:
            skipped += 1
            continue

        tally = tallies.setdefault(vote.bill_id, [0, 0])
        if vr.supports:
            tally[0] += 1
        elif vr.opposes:
            tally[1] += 1

    if skipped:
        logger.debug("{} vote results do not resolve to a bill", skipped)

    result = []
    for bill_id, (supporters, opposers) in tallies.items():
        bill = bills[bill_id]
        sponsor = legislators.get(bill.sponsor_id)
        result.append(
            BillSummary(
                id=bill.id,
                bill=bill.title,
                supporters=supporters,
                opposers=opposers,
                primary_sponsor=sponsor.name if sponsor is not None else UNKNOWN_SPONSOR,
            )
        )
    return result
