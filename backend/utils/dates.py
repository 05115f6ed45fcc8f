import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from utils.exceptions import BadRequestError

DateLike = Union[date, str]


def parse_date(value: Optional[DateLike], field: str = "date") -> date:
    """Accept a `date` or a "YYYY-MM-DD" string. Missing or malformed input is a caller error."""
    if value is None or value == "":
        raise BadRequestError(f"{field} is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise BadRequestError(f"{field} must be YYYY-MM-DD")


def month_key(target: date) -> str:
    """Payroll month key, e.g. "2025-08"."""
    return target.strftime("%Y-%m")


def month_start(target: date) -> date:
    return target.replace(day=1)


def days_in_month(target: date) -> int:
    return calendar.monthrange(target.year, target.month)[1]


def month_bounds(target: date) -> Tuple[date, date]:
    """First and last day of the month containing `target`, both inclusive."""
    first = month_start(target)
    return first, first.replace(day=days_in_month(target))


def add_months(start: date, months: int) -> date:
    """
    Calendar month arithmetic. A day past the end of the resulting month rolls
    over into the next one (Jan 31 + 1 -> Mar 3 in 2025), it is not clamped.
    """
    return month_start(start) + relativedelta(months=months) + timedelta(days=start.day - 1)


def working_days_in_month(target: date) -> int:
    """Days in the month excluding Sundays."""
    first, last = month_bounds(target)
    current = first
    working_days = 0
    while current <= last:
        if current.weekday() != calendar.SUNDAY:
            working_days += 1
        current += timedelta(days=1)
    return working_days
