"""
Livestock health cost: each flock's purchase and vaccination cost, spread
over its expected laying period.

The window boundary uses real calendar months, while the per-day share uses a
flat 30 days per month. The two are not reconciled: switching the divisor
to the true window length would shift every amortized value.
"""
import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from models.bird_cost import BirdCost
from crud import daily_log as crud_daily_log
from crud.bird_cost import LivestockSource, LivestockSourceUnavailable, get_livestock_source
from utils.dates import DateLike, parse_date, add_months
from utils.numeric import to_float, safe_divide

logger = logging.getLogger(__name__)

DAYS_PER_LAYING_MONTH = 30


def laying_window_end(batch: BirdCost) -> date:
    """Exclusive end of the laying window."""
    return add_months(batch.batch_date, int(to_float(batch.expected_laying_months)))


def is_laying_on(batch: BirdCost, target: date) -> bool:
    months = int(to_float(batch.expected_laying_months))
    if months <= 0 or batch.batch_date is None:
        return False
    return batch.batch_date <= target < laying_window_end(batch)


def batch_daily_cost(batch: BirdCost) -> float:
    months = int(to_float(batch.expected_laying_months))
    birds = to_float(batch.birds_purchased)
    total_cost = birds * (to_float(batch.cost_per_bird) + to_float(batch.vaccination_cost_per_bird))
    return safe_divide(total_cost, months * DAYS_PER_LAYING_MONTH)


def calculate_daily_bird_cost(batches: Iterable[BirdCost], target: date) -> float:
    """Sum of the per-day share of every batch laying on `target`."""
    return sum(batch_daily_cost(batch) for batch in batches if is_laying_on(batch, target))


def calculate_health_cost_per_egg(
    db: Session,
    target_date: DateLike,
    tenant_id: str,
    total_eggs: Optional[int] = None,
    livestock_source: Optional[LivestockSource] = None,
) -> float:
    """
    Bird acquisition cost per egg for one day.

    Farms that do not track flocks have no livestock store at all; that is
    reported as 0 rather than an error. Pass `total_eggs` when the caller has
    already counted the day's eggs.
    """
    if target_date is None:
        return 0.0
    target = parse_date(target_date)

    source = livestock_source or get_livestock_source(db, tenant_id)
    try:
        batches = source.all_batches()
    except LivestockSourceUnavailable as e:
        logger.warning(f"Livestock costs unavailable for tenant '{tenant_id}', health cost set to 0: {e}")
        return 0.0
    if not batches:
        return 0.0

    if total_eggs is None:
        total_eggs = crud_daily_log.get_total_eggs(db, target, tenant_id)
    if total_eggs <= 0:
        return 0.0

    daily_bird_cost = calculate_daily_bird_cost(batches, target)
    return safe_divide(daily_bird_cost, total_eggs)
