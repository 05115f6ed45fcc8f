from sqlalchemy import Column, Integer, String, Date, Numeric, Text, Enum
from database import Base
from models.audit_mixin import TimestampMixin


class Payroll(Base, TimestampMixin):
    __tablename__ = "payroll"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(String, index=True)
    month_year = Column(String(7), nullable=False, index=True)  # e.g., "2025-08"
    laborer_id = Column(Integer, nullable=False)
    base_salary = Column(Numeric(10, 2), nullable=False, default=0)
    days_worked = Column(Integer, nullable=False, default=0)
    days_absent = Column(Integer, nullable=False, default=0)
    salary_deductions = Column(Numeric(8, 2), default=0)
    bonus_amount = Column(Numeric(8, 2), default=0)
    final_salary = Column(Numeric(10, 2), nullable=False, default=0)
    payment_date = Column(Date, nullable=True)
    payment_status = Column(Enum("pending", "paid", name="payroll_payment_status"), default="pending")
    notes = Column(Text, nullable=True)
