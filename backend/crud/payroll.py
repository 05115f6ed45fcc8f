from sqlalchemy import func
from sqlalchemy.orm import Session
from models.payroll import Payroll
from utils.numeric import to_float


def get_monthly_payroll_total(db: Session, month_key: str, tenant_id: str) -> float:
    """Sum of every laborer's final salary for a "YYYY-MM" month."""
    total = db.query(func.sum(Payroll.final_salary)).filter(
        Payroll.month_year == month_key,
        Payroll.tenant_id == tenant_id
    ).scalar()
    return to_float(total)
