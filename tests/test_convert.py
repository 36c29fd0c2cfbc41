"""Tests for Unix to EventBridge conversion."""

import pytest

from ebcron.convert import (
    EventBridgeCronExpression,
    convert,
    convert_schedule,
    remap_day_of_week,
    resolve_day_fields,
    to_eventbridge,
)
from ebcron.cron_parse import FieldCountError, InvalidFieldError, UnsupportedSyntaxError, parse_cron
from ebcron.gallery import EXAMPLES


# ── Day-of-week remap ─────────────────────────────────────────────

class TestRemapDayOfWeek:
    @pytest.mark.parametrize("unix, eventbridge", [
        ("0", "1"), ("1", "2"), ("2", "3"), ("3", "4"),
        ("4", "5"), ("5", "6"), ("6", "7"), ("7", "1"),
    ])
    def test_single_values(self, unix, eventbridge):
        assert remap_day_of_week(unix) == eventbridge

    @pytest.mark.parametrize("field, expected", [
        ("*", "*"),
        ("1-5", "2-6"),
        ("0-6", "1-7"),
        ("1,3,5", "2,4,6"),
        ("0,6", "1,7"),
        ("*/2", "*/2"),
        ("1/2", "2/2"),
        ("1-5/2", "2-6/2"),
        ("0/3", "1/3"),
    ])
    def test_forms(self, field, expected):
        assert remap_day_of_week(field) == expected

    @pytest.mark.parametrize("field, expected", [
        ("SUN", "1"),
        ("MON-FRI", "2-6"),
        ("mon,Wed,FRI", "2,4,6"),
        ("SAT", "7"),
        ("SUN/2", "1/2"),
        ("MON-5", "2-6"),
    ])
    def test_named_days(self, field, expected):
        assert remap_day_of_week(field) == expected

    @pytest.mark.parametrize("field, expected", [
        ("0-7", "1-7"),
        ("SUN-7", "1-7"),
        ("1-7", "2-7,1"),
        ("MON-7", "2-7,1"),
        ("5-7", "6-7,1"),
        ("7-7", "1"),
        ("1-7/2", "1,2,4,6"),
        ("0-7/2", "1,3,5,7"),
        ("5-6", "6-7"),
    ])
    def test_ranges_ending_on_sunday(self, field, expected):
        assert remap_day_of_week(field) == expected


# ── Day field exclusivity ─────────────────────────────────────────

class TestResolveDayFields:
    @pytest.mark.parametrize("dom, dow, expected", [
        ("15", "2", ("15", "?")),
        ("*", "*", ("*", "?")),
        ("*", "2-6", ("?", "2-6")),
        ("1", "*", ("1", "?")),
        ("1-15", "*/2", ("1-15", "?")),
    ])
    def test_table(self, dom, dow, expected):
        assert resolve_day_fields(dom, dow) == expected


# ── convert() ─────────────────────────────────────────────────────

class TestConvert:
    @pytest.mark.parametrize("unix, eventbridge", [
        ("0 9 * * 1", "0 9 ? * 2 *"),
        ("0 18 * * 1-5", "0 18 ? * 2-6 *"),
        ("0 8 1 * *", "0 8 1 * ? *"),
        ("30 14 * * 0", "30 14 ? * 1 *"),
        ("15 12 * * *", "15 12 * * ? *"),
        ("0 0 15 * 1", "0 0 15 * ? *"),
        ("*/5 * * * *", "*/5 * * * ? *"),
        ("0 9 * JAN-MAR MON-FRI", "0 9 ? JAN-MAR 2-6 *"),
        ("0 9 * * 7", "0 9 ? * 1 *"),
        ("0 9 * * */2", "0 9 ? * */2 *"),
        ("0 9 * * 0-7", "0 9 ? * 1-7 *"),
        ("0 9 * * 1-7", "0 9 ? * 2-7,1 *"),
        ("0 9 * * MON-7", "0 9 ? * 2-7,1 *"),
    ])
    def test_convert(self, unix, eventbridge):
        assert convert(unix) == eventbridge

    def test_surrounding_whitespace(self):
        assert convert("  0   9 * *  1  ") == "0 9 ? * 2 *"

    @pytest.mark.parametrize("expression, error", [
        ("0 9 * *", FieldCountError),
        ("60 9 * * 1", InvalidFieldError),
        ("0 9 L * *", UnsupportedSyntaxError),
        ("0 9 * * 1#2", UnsupportedSyntaxError),
    ])
    def test_invalid_raises(self, expression, error):
        with pytest.raises(error):
            convert(expression)

    @pytest.mark.parametrize("expression", [
        "* * * * *", "0 9 * * 1", "0 8 1 * *", "0 8 1 * 1",
        "*/10 8-17 1-15 * 1-5", "0 0 * * SUN", "5 4 31 DEC *",
    ])
    def test_output_shape(self, expression):
        fields = convert(expression).split(" ")
        assert len(fields) == 6
        assert fields[5] == "*"
        dom, dow = fields[2], fields[4]
        assert dom == "?" or dow == "?"
        assert not (dom == "?" and dow == "?")

    def test_schedule_expression(self):
        assert convert_schedule("0 9 * * 1") == "cron(0 9 ? * 2 *)"


class TestToEventBridge:
    def test_returns_expression(self):
        result = to_eventbridge(parse_cron("30 14 * * 0"))
        assert result == EventBridgeCronExpression("30", "14", "?", "*", "1")
        assert result.year == "*"
        assert result.fields == ("30", "14", "?", "*", "1", "*")
        assert str(result) == "30 14 ? * 1 *"
        assert result.schedule_expression == "cron(30 14 ? * 1 *)"


# ── Example gallery ───────────────────────────────────────────────

class TestGallery:
    @pytest.mark.parametrize("example", EXAMPLES, ids=lambda e: e.unix)
    def test_example_converts(self, example):
        assert convert(example.unix) == example.eventbridge
