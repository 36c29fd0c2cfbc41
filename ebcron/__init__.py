"""Convert Unix cron expressions to AWS EventBridge cron expressions."""

from ebcron.convert import (
    EventBridgeCronExpression,
    convert,
    convert_schedule,
    remap_day_of_week,
    resolve_day_fields,
    to_eventbridge,
)
from ebcron.cron_parse import (
    CronParseError,
    FieldCountError,
    InvalidFieldError,
    UnixCronExpression,
    UnsupportedSyntaxError,
    parse_cron,
    validate,
)
from ebcron.fields import CronField

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("ebcron")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"

__all__ = [
    "CronField",
    "CronParseError",
    "EventBridgeCronExpression",
    "FieldCountError",
    "InvalidFieldError",
    "UnixCronExpression",
    "UnsupportedSyntaxError",
    "convert",
    "convert_schedule",
    "parse_cron",
    "remap_day_of_week",
    "resolve_day_fields",
    "to_eventbridge",
    "validate",
]
