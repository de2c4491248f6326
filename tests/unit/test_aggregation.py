"""Tests for aggregation module."""

from app.models import Bill, Legislator, Vote, VoteResult
from app.repositories import RecordSnapshot
from helpers import aggregation


def by_id(rows):
    return {r.id: r for r in rows}


class TestLegislatorSummaries:
    def test_one_row_per_legislator_in_input_order(self, snapshot):
        result = aggregation.legislator_summaries(snapshot)
        assert [r.id for r in result] == [1, 2, 3, 4]

    def test_counts(self, snapshot):
        result = by_id(aggregation.legislator_summaries(snapshot))
        assert (result[1].supported_bills, result[1].opposed_bills) == (1, 1)
        assert (result[2].supported_bills, result[2].opposed_bills) == (2, 1)

    def test_legislator_without_votes_has_zero_counts(self, snapshot):
        park = by_id(aggregation.legislator_summaries(snapshot))[4]
        assert park.legislator == "Rep. Dee Park (R-OH-4)"
        assert (park.supported_bills, park.opposed_bills) == (0, 0)

    def test_invalid_vote_type_counts_nowhere(self, snapshot):
        moss = by_id(aggregation.legislator_summaries(snapshot))[3]
        assert (moss.supported_bills, moss.opposed_bills) == (2, 0)

    def test_unknown_legislator_ballots_dropped(self, snapshot):
        result = aggregation.legislator_summaries(snapshot)
        assert 77 not in {r.id for r in result}
        # 9 ballots - 1 unknown legislator - 1 invalid type
        assert sum(r.supported_bills + r.opposed_bills for r in result) == 7

    def test_no_legislators(self):
        snap = RecordSnapshot.build(vote_results=[VoteResult(1, 1, 1, 1)])
        assert aggregation.legislator_summaries(snap) == []

    def test_duplicate_legislator_rows_each_reported(self):
        snap = RecordSnapshot.build(
            legislators=[Legislator(1, "A"), Legislator(1, "A again")],
            vote_results=[VoteResult(1, 1, 5, 1)],
        )
        result = aggregation.legislator_summaries(snap)
        assert len(result) == 2
        assert all(r.supported_bills == 1 for r in result)


class TestBillSummaries:
    def test_only_voted_bills_in_first_appearance_order(self, snapshot):
        result = aggregation.bill_summaries(snapshot)
        assert [r.id for r in result] == [10, 20]

    def test_counts_across_multiple_votes(self, snapshot):
        roads = by_id(aggregation.bill_summaries(snapshot))[20]
        assert roads.bill == "H.R. 20: Rural Roads Act"
        # includes the ballot from the unknown legislator
        assert (roads.supporters, roads.opposers) == (3, 1)

    def test_invalid_vote_type_counts_nowhere(self, snapshot):
        water = by_id(aggregation.bill_summaries(snapshot))[10]
        assert (water.supporters, water.opposers) == (2, 1)

    def test_known_sponsor(self, snapshot):
        assert by_id(aggregation.bill_summaries(snapshot))[10].primary_sponsor == "Rep. Ada Lane (D-CA-1)"

    def test_unknown_sponsor(self, snapshot):
        assert by_id(aggregation.bill_summaries(snapshot))[20].primary_sponsor == "Unknown"

    def test_unresolved_vote_excluded(self, snapshot):
        result = aggregation.bill_summaries(snapshot)
        assert sum(r.supporters + r.opposers for r in result) == 7

    def test_vote_for_unknown_bill_excluded(self):
        snap = RecordSnapshot.build(
            votes=[Vote(1, 404)],
            vote_results=[VoteResult(1, 1, 1, 1)],
        )
        assert aggregation.bill_summaries(snap) == []

    def test_bill_with_only_invalid_ballots_still_listed(self):
        snap = RecordSnapshot.build(
            bills=[Bill(1, "B", 5)],
            votes=[Vote(2, 1)],
            vote_results=[VoteResult(3, 5, 2, 0)],
        )
        [row] = aggregation.bill_summaries(snap)
        assert (row.supporters, row.opposers, row.primary_sponsor) == (0, 0, "Unknown")

    def test_empty_snapshot(self):
        assert aggregation.bill_summaries(RecordSnapshot()) == []


class TestWorkedExample:
    def test_single_legislator_split_ballots(self):
        snap = RecordSnapshot.build(
            legislators=[Legislator(1, "A")],
            bills=[Bill(10, "X", 1)],
            votes=[Vote(100, 10)],
            vote_results=[VoteResult(1000, 1, 100, 1), VoteResult(1001, 1, 100, 2)],
        )

        [leg] = aggregation.legislator_summaries(snap)
        assert (leg.id, leg.supported_bills, leg.opposed_bills) == (1, 1, 1)

        [bill] = aggregation.bill_summaries(snap)
        assert (bill.id, bill.supporters, bill.opposers, bill.primary_sponsor) == (10, 1, 1, "A")


class TestInvariants:
    def test_legislator_totals_match_valid_ballots(self, snapshot):
        for row in aggregation.legislator_summaries(snapshot):
            expected = sum(1 for vr in snapshot.vote_results if vr.legislator_id == row.id and vr.vote_type in (1, 2))
            assert row.supported_bills + row.opposed_bills == expected
            assert row.supported_bills >= 0 and row.opposed_bills >= 0

    def test_bill_count_matches_reachable_bills(self, snapshot):
        reachable = {
            snapshot.votes_by_id[vr.vote_id].bill_id
            for vr in snapshot.vote_results
            if vr.vote_id in snapshot.votes_by_id
        }
        assert len(aggregation.bill_summaries(snapshot)) == len(reachable & snapshot.bills_by_id.keys())

    def test_snapshot_untouched(self, snapshot):
        before = snapshot.vote_results
        aggregation.legislator_summaries(snapshot)
        aggregation.bill_summaries(snapshot)
        assert snapshot.vote_results is before


class TestBallotDirection:
    def test_yea_and_nay(self):
        assert VoteResult(1, 1, 1, 1).supports and not VoteResult(1, 1, 1, 1).opposes
        assert VoteResult(1, 1, 1, 2).opposes and not VoteResult(1, 1, 1, 2).supports

    def test_other_values_neither(self):
        vr = VoteResult(1, 1, 1, 0)
        assert not vr.supports and not vr.opposes
