"""Tests for the value parser and value models."""

from datetime import datetime, timedelta, timezone

import pytest

from gapscan.values.models import Format, ParsedValue, Relation, ValueKind
from gapscan.values.parser import EPOCH, ValueFormatError, parse_rfc3339, parse_value


class TestNumericFormats:
    def test_uint(self):
        value = parse_value("1936", Format.UINT)
        assert value == ParsedValue(ValueKind.UNSIGNED, 1936)

    def test_uint_max(self):
        assert parse_value("18446744073709551615", Format.UINT).value == 2**64 - 1

    def test_uint_overflow(self):
        with pytest.raises(ValueFormatError):
            parse_value("18446744073709551616", Format.UINT)

    def test_uint_rejects_sign(self):
        with pytest.raises(ValueFormatError):
            parse_value("-5", Format.UINT)

    def test_uint_rejects_text(self):
        with pytest.raises(ValueFormatError):
            parse_value("Cancelled", Format.UINT)

    def test_int_signs(self):
        assert parse_value("-42", Format.INT).value == -42
        assert parse_value("+7", Format.INT).value == 7

    def test_int_bounds(self):
        assert parse_value("-9223372036854775808", Format.INT).value == -(2**63)
        with pytest.raises(ValueFormatError):
            parse_value("9223372036854775808", Format.INT)
        with pytest.raises(ValueFormatError):
            parse_value("-9223372036854775809", Format.INT)

    def test_int_rejects_decimal(self):
        with pytest.raises(ValueFormatError):
            parse_value("1.5", Format.INT)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(ValueFormatError):
            parse_value("١٢", Format.INT)

    def test_whitespace_and_quotes_trimmed(self):
        assert parse_value(' "1936" ', Format.UINT).value == 1936

    def test_blank_after_trim(self):
        with pytest.raises(ValueFormatError):
            parse_value('  ""  ', Format.INT)


class TestUnixFormats:
    def test_unix_seconds(self):
        value = parse_value("86400", Format.UNIX)
        assert value.kind == ValueKind.INSTANT
        assert value.value == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_unix_negative(self):
        assert parse_value("-1", Format.UNIX).value == EPOCH - timedelta(seconds=1)

    def test_unix_ms(self):
        assert parse_value("1500", Format.UNIX_MS).value == EPOCH + timedelta(milliseconds=1500)

    def test_unix_out_of_range(self):
        with pytest.raises(ValueFormatError, match="invalid timestamp"):
            parse_value("9223372036854775807", Format.UNIX)

    def test_unix_and_rfc3339_share_representation(self):
        a = parse_value("1709251200", Format.UNIX)
        b = parse_value("2024-03-01T00:00:00Z", Format.RFC3339)
        assert a == b


class TestRfc3339:
    def test_zulu(self):
        assert parse_rfc3339("2024-03-01T12:30:45Z") == datetime(
            2024, 3, 1, 12, 30, 45, tzinfo=timezone.utc
        )

    def test_offset_normalised_to_utc(self):
        stamp = parse_rfc3339("2024-03-01T02:00:00+02:00")
        assert stamp == datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)
        assert stamp.utcoffset() == timedelta(0)

    def test_negative_offset(self):
        assert parse_rfc3339("2024-02-29T19:00:00-05:00") == datetime(
            2024, 3, 1, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("sep", ["T", "t", " ", "_"])
    def test_separators(self, sep):
        assert parse_rfc3339(f"2024-03-01{sep}00:00:00Z").day == 1

    def test_leap_second(self):
        stamp = parse_value("2016-12-31T23:59:60Z", Format.RFC3339).value
        assert stamp == datetime(2017, 1, 1, tzinfo=timezone.utc)
        assert stamp - parse_rfc3339("2016-12-31T23:59:59Z") == timedelta(seconds=1)

    def test_fraction(self):
        assert parse_rfc3339("2024-03-01T00:00:00.5Z").microsecond == 500000

    @pytest.mark.parametrize(
        "text",
        [
            "2024-03-01T00:00:00",  # no offset
            "2024-03-01",
            "2024-02-30T00:00:00Z",  # no such day
            "2024-03-01T24:00:00Z",
            "2024-03-01T00:00:00+25:00",
            "2024/03/01T00:00:00Z",
            "yesterday",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(ValueFormatError):
            parse_value(text, Format.RFC3339)


class TestParsedValueArithmetic:
    def test_numeric_delta(self):
        a = ParsedValue(ValueKind.SIGNED, 20)
        b = ParsedValue(ValueKind.SIGNED, 10)
        assert b - a == -10

    def test_instant_delta(self):
        a = parse_value("2024-03-01T00:00:00Z", Format.RFC3339)
        b = parse_value("2024-03-01T12:00:00Z", Format.RFC3339)
        assert b - a == timedelta(hours=12)

    def test_mixed_kinds_rejected(self):
        with pytest.raises(TypeError):
            ParsedValue(ValueKind.SIGNED, 1) - parse_value("0", Format.UNIX)


class TestRelation:
    def test_holds(self):
        assert Relation.GT.holds(5, 4) is True
        assert Relation.GT.holds(4, 4) is False
        assert Relation.GE.holds(4, 4) is True
        assert Relation.LT.holds(-10, 4) is True
        assert Relation.LE.holds(4, 4) is True
        assert Relation.LE.holds(5, 4) is False

    def test_symbol(self):
        assert Relation.GE.symbol == ">="
