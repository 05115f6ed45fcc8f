from .numeric import to_float, safe_divide
from .dates import parse_date, month_key, month_start, days_in_month, month_bounds, add_months, working_days_in_month

__all__ = ['add_months', 'days_in_month', 'month_bounds', 'month_key', 'month_start', 'parse_date', 'safe_divide', 'to_float', 'working_days_in_month']
