from datetime import date

import pytest

from crud import operating_cost as crud_operating_cost
from crud import overhead_costs as crud_overhead_costs
from schemas.operating_cost import OperatingCostCreate
from utils.exceptions import BadRequestError
from conftest import TENANT, OTHER_TENANT


def test_laborer_salaries_default_to_payroll(seed, db):
    seed.payroll("2025-08", 45000, laborer_id=1)
    seed.payroll("2025-08", 35000, laborer_id=2)
    data = OperatingCostCreate(
        month_year=date(2025, 8, 17),
        supervisor_salary=20000,
        electricity_cost=4000,
        water_cost=1000,
    )

    created = crud_operating_cost.create_operating_cost(db, data, TENANT, user_id="owner")

    assert created.month_year == date(2025, 8, 1)
    assert created.total_laborer_salaries == pytest.approx(80000)
    assert created.total_monthly_cost == pytest.approx(105000)
    assert created.created_by == "owner"


def test_explicit_laborer_salaries_are_kept(seed, db):
    seed.payroll("2025-08", 45000)
    data = OperatingCostCreate(month_year=date(2025, 8, 1), total_laborer_salaries=30000, other_costs=500)

    created = crud_operating_cost.create_operating_cost(db, data, TENANT)

    assert created.total_laborer_salaries == pytest.approx(30000)
    assert created.total_monthly_cost == pytest.approx(30500)


def test_stored_laborer_salaries_never_reach_fixed_cost(seed, db):
    seed.payroll("2025-08", 45000)
    data = OperatingCostCreate(month_year=date(2025, 8, 1), supervisor_salary=31000)
    crud_operating_cost.create_operating_cost(db, data, TENANT)

    assert crud_overhead_costs.get_monthly_fixed_cost(db, date(2025, 8, 20), TENANT) == pytest.approx(31000)


def test_one_row_per_month(db):
    crud_operating_cost.create_operating_cost(db, OperatingCostCreate(month_year=date(2025, 8, 1)), TENANT)

    with pytest.raises(BadRequestError, match="already exist"):
        crud_operating_cost.create_operating_cost(db, OperatingCostCreate(month_year=date(2025, 8, 31)), TENANT)

    other = crud_operating_cost.create_operating_cost(db, OperatingCostCreate(month_year=date(2025, 8, 1)), OTHER_TENANT)
    assert other.tenant_id == OTHER_TENANT
