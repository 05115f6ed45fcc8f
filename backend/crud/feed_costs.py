import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from models.daily_log import DailyLog
from models.feed_batch import FeedBatch
from crud import daily_log as crud_daily_log
from crud import feed_batch as crud_feed_batch
from schemas.costs import DailyCosts
from utils.dates import DateLike, parse_date
from utils.numeric import to_float, safe_divide

logger = logging.getLogger(__name__)


def calculate_total_feed_kg(logs: List[DailyLog], bag_size_kg: float) -> float:
    """
    Kilograms of feed across the given logs.

    A log with a legacy kilogram figure uses it as-is; every other log is
    converted from bags.
    """
    total_feed_kg = 0.0
    for log in logs:
        legacy_feed_kg = to_float(log.feed_given_kg)
        if legacy_feed_kg > 0:
            total_feed_kg += legacy_feed_kg
        else:
            total_feed_kg += to_float(log.feed_bags_used) * bag_size_kg
    return total_feed_kg


def calculate_line_item_feed_cost(logs: List[DailyLog], latest_batch: Optional[FeedBatch]) -> Tuple[float, float]:
    """Returns (total_feed_kg, feed_cost) priced at the latest batch's cost per kg."""
    bag_size_kg = crud_feed_batch.resolve_bag_size_kg(latest_batch)
    cost_per_kg = crud_feed_batch.resolve_cost_per_kg(latest_batch)

    total_feed_kg = calculate_total_feed_kg(logs, bag_size_kg)
    feed_cost = total_feed_kg * cost_per_kg if total_feed_kg > 0 else 0.0
    return total_feed_kg, feed_cost


def calculate_feed_cost_per_egg(db: Session, logs: List[DailyLog], total_eggs: int, tenant_id: str) -> float:
    latest_batch = crud_feed_batch.get_latest_feed_batch(db, tenant_id)
    total_feed_kg, feed_cost = calculate_line_item_feed_cost(logs, latest_batch)
    logger.debug(f"Line-item feed: {total_feed_kg:.2f} kg costing {feed_cost:.2f} for {total_eggs} eggs")
    return safe_divide(feed_cost, total_eggs)


def get_daily_costs(db: Session, target_date: DateLike, tenant_id: str) -> DailyCosts:
    """
    Day-level feed cost: the day's bags priced per bag at the latest batch.

    This is the coarser path used by the price estimate; it ignores legacy
    kilogram entries.
    """
    target = parse_date(target_date)
    logs = crud_daily_log.get_logs_for_date(db, target, tenant_id)

    total_eggs = crud_daily_log.sum_eggs(logs)
    total_feed_bags = crud_daily_log.sum_feed_bags(logs)

    feed_cost = 0.0
    total_feed_kg = 0.0
    if total_feed_bags > 0:
        latest_batch = crud_feed_batch.get_latest_feed_batch(db, tenant_id)
        feed_cost = total_feed_bags * crud_feed_batch.resolve_cost_per_bag(latest_batch)
        total_feed_kg = total_feed_bags * crud_feed_batch.resolve_bag_size_kg(latest_batch)

    return DailyCosts(
        date=target,
        total_eggs=total_eggs,
        total_feed_kg=total_feed_kg,
        feed_cost=feed_cost,
        feed_cost_per_egg=safe_divide(feed_cost, total_eggs),
    )
