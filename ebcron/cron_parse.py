"""Unix cron expression validator.

Accepted forms per field:
- "*"            wildcard
- "5"            single value
- "1,3,5"        list of values
- "1-5"          range (start <= end)
- "*/15", "0/15", "8-17/2"   step expressions
- "MON-FRI", "jan,jul"       named days / months (day-of-week and month only),
                             in the same forms as numbers; a field starting with a
                             name may mix in numbers ("MON-5")

EventBridge-only syntax ("L", "W" in day-of-month, "#", "L" in day-of-week)
is rejected since it has no Unix cron meaning.
"""

import logging
import re
from dataclasses import dataclass

from ebcron.fields import FIELD_ORDER, CronField

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"^[0-9]+$")
_NAMED = re.compile(r"^[A-Za-z]+(?:[-,/][A-Za-z0-9]+)*$")


class CronParseError(Exception):
    pass


class FieldCountError(CronParseError):
    def __init__(self, count: int) -> None:
        super().__init__(
            "Unix cron must have exactly 5 fields: "
            f"minute hour day-of-month month day-of-week (got {count})"
        )
        self.count = count


class InvalidFieldError(CronParseError):
    def __init__(self, field: CronField, value: str, reason: str) -> None:
        super().__init__(f"Invalid {field.label} '{value}': {reason}")
        self.field = field
        self.value = value
        self.reason = reason


class UnsupportedSyntaxError(InvalidFieldError):
    pass


@dataclass(frozen=True)
class UnixCronExpression:
    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str

    @property
    def fields(self) -> tuple[str, ...]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)

    def __str__(self) -> str:
        return " ".join(self.fields)


def _to_int(part: str, field: CronField, value: str) -> int:
    if not _NUMBER.match(part):
        raise InvalidFieldError(field, value, f"'{part}' is not a number")
    return int(part)


def _check_value(part: str, field: CronField, value: str) -> int:
    num = _to_int(part, field, value)
    if num < field.min_val or num > field.max_val:
        raise InvalidFieldError(
            field, value, f"{num} is out of range {field.min_val}-{field.max_val}"
        )
    return num


def _check_range(part: str, field: CronField, value: str) -> None:
    bounds = part.split("-")
    if len(bounds) != 2:
        raise InvalidFieldError(field, value, f"malformed range '{part}'")
    start = _check_value(bounds[0], field, value)
    end = _check_value(bounds[1], field, value)
    if start > end:
        raise InvalidFieldError(field, value, f"range start {start} is after end {end}")


def _check_step(value: str, field: CronField) -> None:
    parts = value.split("/")
    if len(parts) != 2:
        raise InvalidFieldError(field, value, "malformed step expression")
    base, step_str = parts
    if _to_int(step_str, field, value) <= 0:
        raise InvalidFieldError(field, value, "step must be positive")

    if base == "*":
        return
    if "-" in base:
        _check_range(base, field, value)
        return
    _check_value(base, field, value)


def _resolve_atom(atom: str, field: CronField, value: str) -> int:
    name = atom.upper()
    if name in field.names:
        return field.names[name]
    if _NUMBER.match(atom):
        return _check_value(atom, field, value)
    raise InvalidFieldError(field, value, f"unknown {field.label} name '{atom}'")


def _check_named(value: str, field: CronField) -> None:
    """Names follow the numeric forms: a value, a list, a range, or a
    value/range with a step. Lists hold plain values only."""
    if not field.names:
        raise InvalidFieldError(field, value, "names are only allowed in month and day-of-week")
    if not _NAMED.match(value):
        raise InvalidFieldError(field, value, "malformed named expression")

    base, sep, step_str = value.partition("/")
    if sep:
        if "/" in step_str:
            raise InvalidFieldError(field, value, "malformed step expression")
        if _to_int(step_str, field, value) <= 0:
            raise InvalidFieldError(field, value, "step must be positive")

    if "," in base:
        if sep:
            raise InvalidFieldError(field, value, "a step cannot follow a list")
        if "-" in base:
            raise InvalidFieldError(field, value, "a list cannot contain ranges")
        for atom in base.split(","):
            _resolve_atom(atom, field, value)
        return

    atoms = base.split("-")
    if len(atoms) > 2:
        raise InvalidFieldError(field, value, f"malformed range '{base}'")
    nums = [_resolve_atom(a, field, value) for a in atoms]
    if nums[0] > nums[-1]:
        raise InvalidFieldError(field, value, f"range '{base}' runs backwards")


def _check_field(value: str, field: CronField) -> None:
    for char in field.unsupported:
        if char in value.upper():
            raise UnsupportedSyntaxError(
                field, value, f"'{char}' is EventBridge-only syntax, not valid in Unix cron"
            )

    if value == "*":
        return

    if value[0].isalpha():
        _check_named(value, field)
        return

    if "/" in value:
        _check_step(value, field)
        return

    if "-" in value:
        _check_range(value, field, value)
        return

    if "," in value:
        for part in value.split(","):
            _check_value(part.strip(), field, value)
        return

    _check_value(value, field, value)


def parse_cron(expression: str) -> UnixCronExpression:
    parts = expression.split()
    if len(parts) != 5:
        raise FieldCountError(len(parts))

    for field, value in zip(FIELD_ORDER, parts):
        _check_field(value, field)

    logger.debug("Validated Unix cron %r", parts)
    return UnixCronExpression(*parts)


def validate(expression: str) -> bool:
    """Return True if `expression` is a valid 5-field Unix cron expression."""
    try:
        parse_cron(expression)
    except CronParseError as e:
        logger.debug("Rejected %r: %s", expression, e)
        return False
    return True
