from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from database import get_db
from utils.tenancy import get_tenant_id
from utils.exceptions import BadRequestError
from crud import daily_log as crud_daily_log
from crud import feed_costs as crud_feed_costs
from crud import egg_costs as crud_egg_costs
from crud import operating_cost as crud_operating_cost
from schemas.costs import DailyCosts, CostSummary, CostBreakdown, EggPriceEstimate, AverageMonthlyProduction
from schemas.operating_cost import OperatingCost, OperatingCostCreate

router = APIRouter(
    prefix="/costs",
    tags=["Costs"],
)
logger = logging.getLogger(__name__)


def _bad_request(e: BadRequestError):
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/daily/{target_date}", response_model=DailyCosts)
def get_daily_costs(target_date: date, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    try:
        return crud_feed_costs.get_daily_costs(db=db, target_date=target_date, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)


@router.get("/summary", response_model=CostSummary)
def get_summary(start: date, end: date, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    try:
        return crud_daily_log.get_summary(db=db, start=start, end=end, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)


@router.get("/egg-price/{target_date}", response_model=EggPriceEstimate)
def get_egg_price(target_date: date, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    """
    Suggested sale price per egg for a day, with the feed, labor, fixed and
    health cost components it was built from.
    """
    try:
        return crud_egg_costs.get_egg_price_estimate(db=db, target_date=target_date, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception(f"Error estimating egg price for {target_date} (tenant '{tenant_id}'): {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not calculate egg price")


@router.get("/daily-calculation/{target_date}", response_model=CostBreakdown)
def get_daily_calculation(target_date: date, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    """Per-egg cost breakdown for a day. Days without production come back zeroed."""
    try:
        return crud_egg_costs.calculate_daily_cost(db=db, target_date=target_date, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception(f"Error calculating daily cost for {target_date} (tenant '{tenant_id}'): {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not calculate daily cost")


@router.get("/avg-production/{target_date}", response_model=AverageMonthlyProduction)
def get_average_monthly_production(target_date: date, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    try:
        return crud_daily_log.get_average_monthly_production_report(db=db, target_date=target_date, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)


@router.post("/operating", response_model=OperatingCost, status_code=status.HTTP_201_CREATED)
def create_operating_cost(data: OperatingCostCreate, db: Session = Depends(get_db), tenant_id: str = Depends(get_tenant_id)):
    try:
        db_operating_cost = crud_operating_cost.create_operating_cost(db=db, data=data, tenant_id=tenant_id)
    except BadRequestError as e:
        raise _bad_request(e)
    return db_operating_cost
