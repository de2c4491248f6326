"""Tests for CSV dataset loading."""

import pytest

from app.models import DATASETS, Bill, Legislator
from app.repositories import (
    DatasetError,
    MalformedValueError,
    MissingColumnError,
    MissingDatasetError,
    read_dataset,
    read_entities,
)

DS = {d.name: d for d in DATASETS}


class TestHeaders:
    def test_case_insensitive_and_extra_columns(self, tmp_path):
        path = tmp_path / "legislators.csv"
        path.write_text(" ID ,Name,Party\n1,Rep. A,D\n2,Rep. B,R\n")

        result = read_entities(path, DS["legislators"])
        assert result == (Legislator(1, "Rep. A"), Legislator(2, "Rep. B"))

    def test_frame_has_only_required_columns(self, tmp_path):
        path = tmp_path / "bills.csv"
        path.write_text("title,extra,sponsor_id,id\nX,foo,7,3\n")

        df = read_dataset(path, DS["bills"])
        assert df.columns == ["id", "title", "sponsor_id"]
        assert df.row(0) == (3, "X", 7)

    def test_missing_column(self, tmp_path):
        path = tmp_path / "votes.csv"
        path.write_text("id,bill\n1,2\n")

        with pytest.raises(MissingColumnError, match="bill_id"):
            read_dataset(path, DS["votes"])

    def test_header_only_is_empty(self, tmp_path):
        path = tmp_path / "vote_results.csv"
        path.write_text("id,legislator_id,vote_id,vote_type\n")

        assert read_entities(path, DS["vote_results"]) == ()


class TestValues:
    def test_quoted_title_with_comma(self, tmp_path):
        path = tmp_path / "bills.csv"
        path.write_text('id,title,sponsor_id\n5,"H.R. 5: Taxes, Fees and Duties",9\n')

        assert read_entities(path, DS["bills"]) == (Bill(5, "H.R. 5: Taxes, Fees and Duties", 9),)

    def test_padded_integers(self, tmp_path):
        path = tmp_path / "votes.csv"
        path.write_text("id,bill_id\n 1 , 2\n")

        assert read_dataset(path, DS["votes"]).row(0) == (1, 2)

    def test_non_integer_id(self, tmp_path):
        path = tmp_path / "legislators.csv"
        path.write_text("id,name\n1,A\nabc,B\n")

        with pytest.raises(MalformedValueError, match="line 3") as exc:
            read_dataset(path, DS["legislators"])
        assert exc.value.dataset == "legislators"
        assert exc.value.path == path

    def test_empty_integer_cell(self, tmp_path):
        path = tmp_path / "vote_results.csv"
        path.write_text("id,legislator_id,vote_id,vote_type\n1,2,3,\n")

        with pytest.raises(MalformedValueError, match="vote_type"):
            read_dataset(path, DS["vote_results"])

    def test_empty_name_becomes_empty_string(self, tmp_path):
        path = tmp_path / "legislators.csv"
        path.write_text("id,name\n1,\n")

        assert read_entities(path, DS["legislators"]) == (Legislator(1, ""),)

    def test_order_preserved(self, tmp_path):
        path = tmp_path / "votes.csv"
        path.write_text("id,bill_id\n30,1\n10,1\n20,1\n")

        assert [v.id for v in read_entities(path, DS["votes"])] == [30, 10, 20]


class TestFiles:
    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingDatasetError, match="not found"):
            read_dataset(tmp_path / "nope.csv", DS["bills"])

    def test_empty_file(self, tmp_path):
        path = tmp_path / "bills.csv"
        path.write_text("")

        with pytest.raises(DatasetError):
            read_dataset(path, DS["bills"])

    def test_errors_share_base(self):
        assert issubclass(MissingColumnError, DatasetError)
        assert issubclass(MalformedValueError, DatasetError)
