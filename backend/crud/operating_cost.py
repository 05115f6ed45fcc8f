import logging
from datetime import date
from typing import Optional
from sqlalchemy.orm import Session
from models.operating_cost import OperatingCost
from schemas.operating_cost import OperatingCostCreate
from crud import payroll as crud_payroll
from utils.dates import month_key, month_start
from utils.exceptions import BadRequestError
from utils.numeric import to_float

logger = logging.getLogger(__name__)


def get_operating_cost_for_month(db: Session, first_of_month: date, tenant_id: str) -> Optional[OperatingCost]:
    return db.query(OperatingCost).filter(
        OperatingCost.month_year == first_of_month,
        OperatingCost.tenant_id == tenant_id
    ).first()


def create_operating_cost(db: Session, data: OperatingCostCreate, tenant_id: str, user_id: Optional[str] = None) -> OperatingCost:
    """
    Record the fixed costs for a month.

    Only one live row may exist per tenant and month. When the laborer
    salary total is not supplied it is taken from that month's payroll.
    """
    if data.month_year is None:
        raise BadRequestError("month_year is required")
    first_of_month = month_start(data.month_year)

    existing = get_operating_cost_for_month(db, first_of_month, tenant_id)
    if existing:
        raise BadRequestError("Operating costs for this month already exist")

    labor_salaries = to_float(data.total_laborer_salaries)
    if not labor_salaries:
        labor_salaries = crud_payroll.get_monthly_payroll_total(db, month_key(first_of_month), tenant_id)

    total_monthly_cost = (
        to_float(data.supervisor_salary)
        + labor_salaries
        + to_float(data.electricity_cost)
        + to_float(data.water_cost)
        + to_float(data.maintenance_cost)
        + to_float(data.other_costs)
    )

    db_operating_cost = OperatingCost(
        **data.model_dump(exclude={"month_year", "total_laborer_salaries"}),
        month_year=first_of_month,
        total_laborer_salaries=labor_salaries,
        total_monthly_cost=total_monthly_cost,
        tenant_id=tenant_id,
        created_by=user_id,
    )
    db.add(db_operating_cost)
    db.commit()
    db.refresh(db_operating_cost)
    logger.info(f"Operating costs for {first_of_month:%Y-%m} recorded for tenant '{tenant_id}': total {total_monthly_cost:.2f}")
    return db_operating_cost
