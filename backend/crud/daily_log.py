"""
Production aggregation over the daily logs.

Two different egg totals come out of here and they must not be mixed up:
the literal egg count of a single day (denominator for feed and health
costs) and the monthly total / daily average (smoothed denominator for labor
and fixed costs).
"""
import logging
from datetime import date
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.daily_log import DailyLog
from crud import feed_batch as crud_feed_batch
from schemas.costs import CostSummary, AverageMonthlyProduction
from utils.dates import DateLike, parse_date, month_bounds, days_in_month, working_days_in_month
from utils.exceptions import BadRequestError
from utils.numeric import to_float, safe_divide

logger = logging.getLogger(__name__)


def get_logs_for_date(db: Session, log_date: date, tenant_id: str) -> List[DailyLog]:
    return db.query(DailyLog).filter(
        DailyLog.log_date == log_date,
        DailyLog.tenant_id == tenant_id
    ).all()


def get_logs_for_range(db: Session, start_date: date, end_date: date, tenant_id: str) -> List[DailyLog]:
    return db.query(DailyLog).filter(
        DailyLog.log_date >= start_date,
        DailyLog.log_date <= end_date,
        DailyLog.tenant_id == tenant_id
    ).all()


def sum_eggs(logs: List[DailyLog]) -> int:
    return int(sum(to_float(log.eggs_collected) for log in logs))


def sum_feed_bags(logs: List[DailyLog]) -> float:
    return sum(to_float(log.feed_bags_used) for log in logs)


def get_total_eggs(db: Session, target_date: DateLike, tenant_id: str) -> int:
    """Eggs collected on one day across every house."""
    target = parse_date(target_date)
    total = db.query(func.sum(DailyLog.eggs_collected)).filter(
        DailyLog.log_date == target,
        DailyLog.tenant_id == tenant_id
    ).scalar()
    return int(to_float(total))


def get_average_monthly_production(db: Session, target_date: DateLike, tenant_id: str) -> int:
    """
    Total eggs collected in the calendar month of `target_date`.

    Despite the name this is the month's total, not a mean; divide by the
    days in the month (see `get_average_daily_production`) for the daily rate.
    Returns 0 when the month has no logs.
    """
    target = parse_date(target_date)
    first_day, last_day = month_bounds(target)
    monthly_logs = get_logs_for_range(db, first_day, last_day, tenant_id)
    if not monthly_logs:
        return 0
    return sum_eggs(monthly_logs)


def get_average_daily_production(db: Session, target_date: DateLike, tenant_id: str) -> float:
    target = parse_date(target_date)
    monthly_total = get_average_monthly_production(db, target, tenant_id)
    return safe_divide(monthly_total, days_in_month(target))


def get_average_monthly_production_report(db: Session, target_date: DateLike, tenant_id: str) -> AverageMonthlyProduction:
    """Month production total for the avg-production report, with the month's working days (Sundays off)."""
    target = parse_date(target_date)
    return AverageMonthlyProduction(
        date=target,
        avg_monthly_production=get_average_monthly_production(db, target, tenant_id),
        working_days=working_days_in_month(target),
    )


def get_summary(db: Session, start: DateLike, end: DateLike, tenant_id: str) -> CostSummary:
    """
    Egg and feed totals for an inclusive date range.

    Bags are converted to kilograms with the bag size of the most recent feed
    batch, falling back to the standard 50 kg bag.
    """
    if not start or not end:
        raise BadRequestError("start and end are required")
    start_date = parse_date(start, "start")
    end_date = parse_date(end, "end")
    if start_date > end_date:
        raise BadRequestError("Start date must be before end date")

    logs = get_logs_for_range(db, start_date, end_date, tenant_id)
    total_eggs = sum_eggs(logs)
    total_feed_bags = sum_feed_bags(logs)

    latest_batch = crud_feed_batch.get_latest_feed_batch(db, tenant_id)
    bag_size_kg = crud_feed_batch.resolve_bag_size_kg(latest_batch)

    logger.debug(f"Summary {start_date}..{end_date} for tenant '{tenant_id}': {len(logs)} logs, {total_eggs} eggs")
    return CostSummary(
        start=start_date,
        end=end_date,
        total_eggs=total_eggs,
        total_feed_kg=total_feed_bags * bag_size_kg,
        total_feed_bags=total_feed_bags,
    )
