from sqlalchemy import Column, Integer, String, Date, Float, func
from sqlalchemy.ext.hybrid import hybrid_property
from database import Base
from models.audit_mixin import AuditMixin
from utils.numeric import to_float


class OperatingCost(Base, AuditMixin):
    """Monthly fixed costs. `month_year` is always the first day of the month."""
    __tablename__ = "operating_costs"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(String, index=True)
    month_year = Column(Date, nullable=False, index=True)
    supervisor_salary = Column(Float, default=0)
    total_laborer_salaries = Column(Float, default=0)
    electricity_cost = Column(Float, default=0)
    water_cost = Column(Float, default=0)
    maintenance_cost = Column(Float, default=0)
    other_costs = Column(Float, default=0)
    total_monthly_cost = Column(Float, default=0)

    # Labor is sourced from payroll, so total_laborer_salaries is left out here.
    @hybrid_property
    def fixed_cost_total(self):
        return (
            to_float(self.supervisor_salary)
            + to_float(self.electricity_cost)
            + to_float(self.water_cost)
            + to_float(self.maintenance_cost)
            + to_float(self.other_costs)
        )

    @fixed_cost_total.expression
    def fixed_cost_total(cls):
        return (
            func.coalesce(cls.supervisor_salary, 0)
            + func.coalesce(cls.electricity_cost, 0)
            + func.coalesce(cls.water_cost, 0)
            + func.coalesce(cls.maintenance_cost, 0)
            + func.coalesce(cls.other_costs, 0)
        )
