"""Sample Unix cron expressions and their EventBridge equivalents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Example:
    unix: str
    description: str
    eventbridge: str


EXAMPLES = (
    Example("15 12 * * *", "Run at 12:15 PM every day", "15 12 * * ? *"),
    Example("0 18 * * 1-5", "Run at 6:00 PM Monday through Friday", "0 18 ? * 2-6 *"),
    Example("0 8 1 * *", "Run at 8:00 AM on 1st day of month", "0 8 1 * ? *"),
    Example("0/15 * * * *", "Run every 15 minutes", "0/15 * * * ? *"),
    Example("0/10 * * * 1-5", "Run every 10 minutes Monday through Friday", "0/10 * ? * 2-6 *"),
    Example("0/5 8-17 * * 1-5", "Run every 5 minutes, 8 AM to 5:55 PM, Monday-Friday", "0/5 8-17 ? * 2-6 *"),
    Example("0 9 * * 1", "Every Monday at 9:00 AM", "0 9 ? * 2 *"),
    Example("30 14 * * 0", "Every Sunday at 2:30 PM", "30 14 ? * 1 *"),
    Example("0 8 * * 1,3,5", "Monday, Wednesday, Friday at 8:00 AM", "0 8 ? * 2,4,6 *"),
    Example("0 7 * JAN-MAR MON-FRI", "Weekdays at 7:00 AM in the first quarter", "0 7 ? JAN-MAR 2-6 *"),
)
