from pydantic import BaseModel, Field
from datetime import date


class DailyCosts(BaseModel):
    date: date
    total_eggs: int
    total_feed_kg: float
    feed_cost: float
    feed_cost_per_egg: float


class CostSummary(BaseModel):
    start: date
    end: date
    total_eggs: int
    total_feed_kg: float
    total_feed_bags: float


class CostBreakdown(BaseModel):
    date: date
    total_eggs: int
    feed_cost_per_egg: float = 0.0
    labor_cost_per_egg: float = 0.0
    fixed_cost_per_egg: float = 0.0
    health_cost_per_egg: float = 0.0
    total_cost_per_egg: float = 0.0
    suggested_price: float = Field(0.0, description="Total cost per egg with the standard markup applied")


class EggPriceEstimate(CostBreakdown):
    avg_monthly_production: int
    avg_daily_production: float


class AverageMonthlyProduction(BaseModel):
    date: date
    avg_monthly_production: int
    working_days: int
