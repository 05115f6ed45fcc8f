"""
Per-egg cost and suggested sale price for a single day.

Feed, labor, fixed and health costs are computed independently and summed.
Two entry points exist and keep separate feed paths:

- `calculate_daily_cost` prices feed from the individual log lines (legacy
  kilogram entries included) at the latest batch's cost per kg.
- `get_egg_price_estimate` takes feed from the day-level `get_daily_costs`
  totals and additionally reports the production averages it used.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from crud import daily_log as crud_daily_log
from crud import feed_costs as crud_feed_costs
from crud import overhead_costs as crud_overhead_costs
from crud import health_costs as crud_health_costs
from crud.bird_cost import LivestockSource
from schemas.costs import CostBreakdown, EggPriceEstimate
from utils.dates import DateLike, parse_date, days_in_month
from utils.numeric import safe_divide

logger = logging.getLogger(__name__)

SUGGESTED_PRICE_MARKUP = 1.20


def compose_costs(feed_cost_per_egg: float, labor_cost_per_egg: float, fixed_cost_per_egg: float, health_cost_per_egg: float) -> dict:
    total_cost_per_egg = feed_cost_per_egg + labor_cost_per_egg + fixed_cost_per_egg + health_cost_per_egg
    return {
        "feed_cost_per_egg": feed_cost_per_egg,
        "labor_cost_per_egg": labor_cost_per_egg,
        "fixed_cost_per_egg": fixed_cost_per_egg,
        "health_cost_per_egg": health_cost_per_egg,
        "total_cost_per_egg": total_cost_per_egg,
        "suggested_price": total_cost_per_egg * SUGGESTED_PRICE_MARKUP,
    }


def calculate_daily_cost(
    db: Session,
    target_date: DateLike,
    tenant_id: str,
    livestock_source: Optional[LivestockSource] = None,
) -> CostBreakdown:
    """
    Full cost breakdown for one day, feed priced from the log lines.

    A day without eggs returns an all-zero breakdown.
    """
    target = parse_date(target_date)

    daily_logs = crud_daily_log.get_logs_for_date(db, target, tenant_id)
    total_eggs = crud_daily_log.sum_eggs(daily_logs)

    if total_eggs == 0:
        logger.info(f"No eggs recorded on {target} for tenant '{tenant_id}'; returning zero cost breakdown")
        return CostBreakdown(date=target, total_eggs=0)

    feed_cost_per_egg = crud_feed_costs.calculate_feed_cost_per_egg(db, daily_logs, total_eggs, tenant_id)

    avg_daily_production = crud_daily_log.get_average_daily_production(db, target, tenant_id)
    labor_cost_per_egg = crud_overhead_costs.calculate_labor_cost_per_egg(db, target, avg_daily_production, tenant_id)
    fixed_cost_per_egg = crud_overhead_costs.calculate_fixed_cost_per_egg(db, target, avg_daily_production, tenant_id)

    health_cost_per_egg = crud_health_costs.calculate_health_cost_per_egg(
        db, target, tenant_id, total_eggs=total_eggs, livestock_source=livestock_source
    )

    costs = compose_costs(feed_cost_per_egg, labor_cost_per_egg, fixed_cost_per_egg, health_cost_per_egg)
    logger.info(f"Daily cost for {target} (tenant '{tenant_id}'): {costs['total_cost_per_egg']:.4f} per egg over {total_eggs} eggs")
    return CostBreakdown(date=target, total_eggs=total_eggs, **costs)


def get_egg_price_estimate(
    db: Session,
    target_date: DateLike,
    tenant_id: str,
    livestock_source: Optional[LivestockSource] = None,
) -> EggPriceEstimate:
    """Cost breakdown and suggested price, feed taken from the day-level totals."""
    target = parse_date(target_date)

    daily = crud_feed_costs.get_daily_costs(db, target, tenant_id)

    avg_monthly_production = crud_daily_log.get_average_monthly_production(db, target, tenant_id)
    avg_daily_production = safe_divide(avg_monthly_production, days_in_month(target))

    labor_cost_per_egg = crud_overhead_costs.calculate_labor_cost_per_egg(db, target, avg_daily_production, tenant_id)
    fixed_cost_per_egg = crud_overhead_costs.calculate_fixed_cost_per_egg(db, target, avg_daily_production, tenant_id)

    health_cost_per_egg = crud_health_costs.calculate_health_cost_per_egg(
        db, target, tenant_id, total_eggs=daily.total_eggs, livestock_source=livestock_source
    )

    costs = compose_costs(daily.feed_cost_per_egg, labor_cost_per_egg, fixed_cost_per_egg, health_cost_per_egg)
    logger.info(f"Egg price estimate for {target} (tenant '{tenant_id}'): suggested {costs['suggested_price']:.4f}")
    return EggPriceEstimate(
        date=target,
        total_eggs=daily.total_eggs,
        avg_monthly_production=avg_monthly_production,
        avg_daily_production=avg_daily_production,
        **costs,
    )
