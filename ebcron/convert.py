"""Unix cron to AWS EventBridge cron conversion."""

import logging
from dataclasses import dataclass

from ebcron.cron_parse import UnixCronExpression, parse_cron
from ebcron.fields import DAY_NAMES, EVENTBRIDGE_DAYS, YEAR_WILDCARD

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventBridgeCronExpression:
    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str
    year: str = YEAR_WILDCARD

    @property
    def fields(self) -> tuple[str, ...]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week, self.year)

    @property
    def schedule_expression(self) -> str:
        """The form an EventBridge rule expects, e.g. ``cron(0 9 ? * 2 *)``."""
        return f"cron({self})"

    def __str__(self) -> str:
        return " ".join(self.fields)


def _remap_day(num: int) -> int:
    # Unix 0..6 (and 7 for Sunday) -> EventBridge 1..7
    return num % 7 + 1


def _remap_atom(atom: str) -> str:
    name = atom.upper()
    if name in EVENTBRIDGE_DAYS:
        return str(EVENTBRIDGE_DAYS[name])
    if atom.isdigit():
        return str(_remap_day(int(atom)))
    return atom


def _unix_day(atom: str) -> int:
    name = atom.upper()
    if name in DAY_NAMES:
        return DAY_NAMES[name]
    return int(atom)


def _remap_range(item: str, step: str) -> str:
    start, end = (_unix_day(a) for a in item.split("-"))
    if end != 7:
        return f"{_remap_day(start)}-{_remap_day(end)}" + (f"/{step}" if step else "")

    # Unix 7 is Sunday again, which EventBridge numbers 1
    if step:
        days = sorted({_remap_day(d) for d in range(start, end + 1, int(step))})
        return ",".join(str(d) for d in days)
    if start == 0:
        return "1-7"
    if start == 7:
        return "1"
    return f"{_remap_day(start)}-7,1"


def remap_day_of_week(field: str) -> str:
    """Rewrite a day-of-week field from Unix to EventBridge numbering.

    Values, range endpoints, list items and step bases are remapped;
    step values are left alone. A range ending at 7 (Sunday) is split so
    that Sunday lands on 1, e.g. ``1-7`` becomes ``2-7,1``; with a step
    it is written out as a list.
    """
    if field == "*":
        return field

    base, sep, step = field.partition("/")
    if "-" in base:
        return _remap_range(base, step)
    return ",".join(_remap_atom(a) for a in base.split(",")) + sep + step


def resolve_day_fields(day_of_month: str, day_of_week: str) -> tuple[str, str]:
    """EventBridge requires '?' in exactly one of the two day fields.

    Day-of-week gives way unless it is the only one with a specific value.
    """
    if day_of_month == "*" and day_of_week != "*":
        return "?", day_of_week
    return day_of_month, "?"


def to_eventbridge(expr: UnixCronExpression) -> EventBridgeCronExpression:
    day_of_week = remap_day_of_week(expr.day_of_week)
    day_of_month, day_of_week = resolve_day_fields(expr.day_of_month, day_of_week)
    result = EventBridgeCronExpression(
        minute=expr.minute,
        hour=expr.hour,
        day_of_month=day_of_month,
        month=expr.month,
        day_of_week=day_of_week,
    )
    logger.debug("Converted %r -> %r", str(expr), str(result))
    return result


def convert(expression: str) -> str:
    """Convert a 5-field Unix cron expression to a 6-field EventBridge one.

    Raises CronParseError (or a subclass) if the expression is invalid.
    """
    return str(to_eventbridge(parse_cron(expression)))


def convert_schedule(expression: str) -> str:
    return to_eventbridge(parse_cron(expression)).schedule_expression
