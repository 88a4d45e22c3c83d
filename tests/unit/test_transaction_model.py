"""
Unit tests for the Transaction model and sale date parsing.

Tests cover:
- Mapping raw dataset records
- Dropping unknown fields
- Reading the sold flag from booleans and strings
- Rejecting unreadable values
- Timezone normalisation of dateOfSale
- ISO rendering of stored timestamps
"""

from datetime import datetime

import pytest

from txn_report.core.timezone import format_utc, parse_sale_datetime
from txn_report.domain.models import Transaction, parse_sold

from tests.conftest import make_record


class TestFromRecord:
    """Tests for Transaction.from_record."""

    def test_maps_all_fields(self):
        """
        GIVEN a full dataset record
        WHEN I build a Transaction from it
        THEN every field is mapped and no id is assigned
        """
        txn = Transaction.from_record(make_record(
            "Bag", 150, "2022-03-05", "Clothing", True, description="Leather bag",
        ))

        assert txn.title == "Bag"
        assert txn.description == "Leather bag"
        assert txn.price == 150.0
        assert txn.date_of_sale == datetime(2022, 3, 5)
        assert txn.category == "Clothing"
        assert txn.sold is True
        assert txn.id is None

    def test_source_id_and_unknown_fields_are_dropped(self):
        txn = Transaction.from_record(make_record(id=42, image="https://example.com/x.jpg", rating={"rate": 3.9}))

        assert txn.id is None
        assert not hasattr(txn, "image")

    def test_missing_fields_stay_none(self):
        txn = Transaction.from_record({})

        assert txn == Transaction()

    def test_price_string_is_converted(self):
        assert Transaction.from_record({"price": "329.85"}).price == 329.85

    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_sold_is_kept(self, value):
        assert Transaction.from_record(make_record(sold=value)).sold is value

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("TRUE", True), (" True ", True), ("false", False), ("False", False)],
    )
    def test_sold_strings_are_read(self, value, expected):
        """
        GIVEN a record whose sold flag is a string
        WHEN I build a Transaction from it
        THEN "false" reads as False, not as a truthy string
        """
        assert Transaction.from_record(make_record(sold=value)).sold is expected

    @pytest.mark.parametrize("value", ["0", "1", "yes", "", 1, 0, [True]])
    def test_unreadable_sold_raises(self, value):
        with pytest.raises(ValueError):
            parse_sold(value)

    def test_unparseable_date_raises(self):
        with pytest.raises(ValueError):
            Transaction.from_record(make_record(date_of_sale="not-a-date"))

    def test_non_numeric_price_raises(self):
        with pytest.raises(ValueError):
            Transaction.from_record(make_record(price="free"))


class TestSaleDatetime:
    """Tests for dateOfSale parsing and rendering."""

    def test_offset_is_normalised_to_utc(self):
        assert parse_sale_datetime("2021-11-27T20:29:54+05:30") == datetime(2021, 11, 27, 14, 59, 54)

    def test_naive_value_is_taken_as_utc(self):
        assert parse_sale_datetime("2022-03-05T10:00:00") == datetime(2022, 3, 5, 10, 0, 0)

    def test_blank_and_missing_values(self):
        assert parse_sale_datetime(None) is None
        assert parse_sale_datetime("  ") is None

    def test_format_utc(self):
        assert format_utc(datetime(2021, 11, 27, 14, 59, 54)) == "2021-11-27T14:59:54.000Z"
        assert format_utc(None) is None
