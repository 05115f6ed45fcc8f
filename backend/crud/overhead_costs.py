"""
Labor and fixed cost amortization.

Monthly payroll and operating costs are spread evenly over the days of the
month and divided by the month's average daily production rather than the
day's own egg count, so a rest day with a handful of eggs does not carry the
whole day's share of the overhead.
"""
from datetime import date

from sqlalchemy.orm import Session

from crud import payroll as crud_payroll
from crud import operating_cost as crud_operating_cost
from utils.dates import month_key, month_start, days_in_month
from utils.numeric import safe_divide


def get_monthly_labor_cost(db: Session, target: date, tenant_id: str) -> float:
    return crud_payroll.get_monthly_payroll_total(db, month_key(target), tenant_id)


def get_monthly_fixed_cost(db: Session, target: date, tenant_id: str) -> float:
    operating_cost = crud_operating_cost.get_operating_cost_for_month(db, month_start(target), tenant_id)
    if operating_cost is None:
        return 0.0
    return operating_cost.fixed_cost_total


def amortize_per_egg(monthly_cost: float, month_days: int, avg_daily_production: float) -> float:
    """monthly cost / days in month / average eggs per day, or 0 without production."""
    if avg_daily_production <= 0:
        return 0.0
    return safe_divide(safe_divide(monthly_cost, month_days), avg_daily_production)


def calculate_labor_cost_per_egg(db: Session, target: date, avg_daily_production: float, tenant_id: str) -> float:
    monthly_labor_cost = get_monthly_labor_cost(db, target, tenant_id)
    return amortize_per_egg(monthly_labor_cost, days_in_month(target), avg_daily_production)


def calculate_fixed_cost_per_egg(db: Session, target: date, avg_daily_production: float, tenant_id: str) -> float:
    monthly_fixed_cost = get_monthly_fixed_cost(db, target, tenant_id)
    return amortize_per_egg(monthly_fixed_cost, days_in_month(target), avg_daily_production)
