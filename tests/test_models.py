"""Tests for the bilty record schema."""

from __future__ import annotations

from decimal import Decimal

from roadledger.models import FIELD_NAMES, NUMERIC_FIELDS, BiltyRecord, User, to_decimal


def test_field_names_are_the_fifteen_editable_fields():
    assert len(FIELD_NAMES) == 15
    assert FIELD_NAMES[0] == "bilty_sl_no"
    assert FIELD_NAMES[-1] == "margin"
    assert "id" not in FIELD_NAMES and "date_added" not in FIELD_NAMES
    assert NUMERIC_FIELDS <= set(FIELD_NAMES)


def test_record_parses_backend_payload(bilty_payload):
    record = BiltyRecord.model_validate(bilty_payload(7))

    assert record.id == 7
    assert record.bilty_sl_no == "A7"
    assert record.weight == Decimal("2.500")
    assert record.freight == Decimal("100.00")


def test_malformed_numbers_become_none():
    record = BiltyRecord.model_validate(
        {"id": 1, "weight": "", "freight": "abc", "diesel": None, "margin": "NaN"}
    )

    assert record.weight is None
    assert record.freight is None
    assert record.diesel is None
    assert record.margin is None


def test_non_string_text_is_coerced():
    record = BiltyRecord.model_validate({"id": "3", "bilty_sl_no": 42, "lr_no": None})

    assert record.id == 3
    assert record.bilty_sl_no == "42"
    assert record.lr_no is None


def test_unknown_keys_are_ignored():
    record = BiltyRecord.model_validate({"id": 1, "created_by": "admin"})
    assert not hasattr(record, "created_by")


def test_to_decimal_edge_cases():
    assert to_decimal(True) is None
    assert to_decimal(2.5) == Decimal("2.5")
    assert to_decimal("1,250.75") == Decimal("1250.75")
    assert to_decimal("Infinity") is None


def test_user_defaults():
    user = User.model_validate({"username": "ravi", "id": 4, "role": "clerk"})
    assert user.username == "ravi"
    assert user.id == 4
