from pydantic import BaseModel, Field, computed_field
from datetime import date
from typing import Optional

class OperatingCostBase(BaseModel):
    month_year: date = Field(..., description="Any day of the month; stored as the first of the month")
    supervisor_salary: float = 0
    electricity_cost: float = 0
    water_cost: float = 0
    maintenance_cost: float = 0
    other_costs: float = 0

class OperatingCostCreate(OperatingCostBase):
    # Filled from the month's payroll when omitted or zero.
    total_laborer_salaries: Optional[float] = None

class OperatingCost(OperatingCostBase):
    id: int
    tenant_id: str
    total_laborer_salaries: float
    total_monthly_cost: float
    created_by: Optional[str] = None

    @computed_field
    def fixed_cost_total(self) -> float:
        return (
            self.supervisor_salary
            + self.electricity_cost
            + self.water_cost
            + self.maintenance_cost
            + self.other_costs
        )

    class Config:
        from_attributes = True
