"""Tests for field extraction into EventRecord and ErrorRecord."""

import pytest

from loglens.errors import MissingTokenError
from loglens.extractor import build_error_record, build_event_record
from loglens.models import ErrorRecord, EventRecord


class TestBuildEventRecord:
    """Test cases for mapping JSON objects to EventRecord."""

    def test_maps_all_fields(self, purchase_event):
        record = build_event_record(purchase_event)
        assert record == EventRecord(
            timestamp="2024-01-01T10:05:00.000",
            user="alice",
            event="purchase",
            item_id="A-100",
            quantity=2,
            price=19.99,
            ip="10.0.0.1",
        )

    def test_missing_details(self):
        record = build_event_record({"timestamp": "t", "user": "u", "event": "view"})
        assert record.item_id is None
        assert record.quantity is None
        assert record.price is None
        assert record.ip is None

    def test_partial_details(self):
        record = build_event_record({"event": "cart", "details": {"quantity": 3}})
        assert record.quantity == 3
        assert record.item_id is None

    def test_camel_case_item_id(self):
        record = build_event_record({"details": {"itemId": "B-7"}})
        assert record.item_id == "B-7"

    def test_details_not_an_object(self):
        record = build_event_record({"event": "x", "details": "free text"})
        assert record.event == "x"
        assert record.price is None

    def test_empty_object(self):
        assert build_event_record({}) == EventRecord()


class TestBuildErrorRecord:
    """Test cases for freeform error lines."""

    def test_exception_line(self):
        line = "2024-01-01T10:00:00.000 NullPointerException at Foo.bar"
        assert build_error_record(line) == ErrorRecord(
            timestamp="2024-01-01T10:00:00.000",
            type="NullPointerException",
            details="at Foo.bar",
        )

    def test_error_line(self):
        record = build_error_record("2024-03-05T08:30:00.250 Error while saving order")
        assert record.type == "Error"
        assert record.details == "while saving order"

    def test_missing_timestamp(self):
        with pytest.raises(MissingTokenError):
            build_error_record("NullPointerException at Foo.bar")

    def test_missing_type(self):
        with pytest.raises(MissingTokenError):
            build_error_record("2024-01-01T10:00:00.000 ValueError: bad value")

    def test_first_occurrence_of_type_is_removed(self):
        # "Error" inside "ErrorHandler" is matched before the standalone word.
        line = "ErrorHandler 2024-01-01T10:00:00.000 Error saving"
        record = build_error_record(line)
        assert record.type == "Error"
        assert record.details == "Handler  Error saving"
