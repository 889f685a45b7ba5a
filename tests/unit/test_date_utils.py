"""Unit tests for receipt date and time parsing"""

from datetime import date, time

from receipt_points.utils.date_utils import parse_purchase_date, parse_purchase_time


def test_parse_purchase_date():
    assert parse_purchase_date("2022-01-01") == date(2022, 1, 1)
    assert parse_purchase_date("2024-02-29") == date(2024, 2, 29)


def test_parse_purchase_date_rejects_malformed():
    assert parse_purchase_date("2023-02-29") is None
    assert parse_purchase_date("2022-1-01") is None
    assert parse_purchase_date("20220101") is None
    assert parse_purchase_date("2022-01-01T10:00") is None


def test_parse_purchase_time():
    assert parse_purchase_time("14:33") == time(14, 33)
    assert parse_purchase_time("9:05") == time(9, 5)
    assert parse_purchase_time("00:00") == time(0, 0)


def test_parse_purchase_time_rejects_malformed():
    assert parse_purchase_time("24:00") is None
    assert parse_purchase_time("2:5") is None
    assert parse_purchase_time("2:30 PM") is None
