from datetime import date, datetime

import pytest

from crud import overhead_costs as crud_overhead_costs
from conftest import TENANT, OTHER_TENANT


def test_labor_cost_uses_monthly_average_production(seed, db):
    seed.payroll("2025-06", 120000)

    labor = crud_overhead_costs.calculate_labor_cost_per_egg(db, date(2025, 6, 10), 100, TENANT)

    assert labor == pytest.approx(40)


def test_labor_cost_sums_every_laborer_in_the_month(seed, db):
    seed.payroll("2025-06", 50000, laborer_id=1)
    seed.payroll("2025-06", 70000, laborer_id=2)
    seed.payroll("2025-05", 90000, laborer_id=1)
    seed.payroll("2025-06", 90000, laborer_id=1, tenant_id=OTHER_TENANT)

    assert crud_overhead_costs.get_monthly_labor_cost(db, date(2025, 6, 10), TENANT) == pytest.approx(120000)


def test_fixed_cost_leaves_out_laborer_salaries(seed, db):
    seed.operating_cost(
        date(2025, 6, 1),
        supervisor_salary=30000,
        total_laborer_salaries=120000,
        electricity_cost=15000,
        water_cost=5000,
        maintenance_cost=5000,
        other_costs=5000,
    )

    assert crud_overhead_costs.get_monthly_fixed_cost(db, date(2025, 6, 18), TENANT) == pytest.approx(60000)
    assert crud_overhead_costs.calculate_fixed_cost_per_egg(db, date(2025, 6, 18), 100, TENANT) == pytest.approx(20)


def test_missing_sources_degrade_to_zero(db):
    assert crud_overhead_costs.get_monthly_labor_cost(db, date(2025, 6, 10), TENANT) == 0
    assert crud_overhead_costs.get_monthly_fixed_cost(db, date(2025, 6, 10), TENANT) == 0


def test_no_production_means_no_overhead_per_egg(seed, db):
    seed.payroll("2025-06", 120000)

    assert crud_overhead_costs.calculate_labor_cost_per_egg(db, date(2025, 6, 10), 0, TENANT) == 0


def test_soft_deleted_operating_cost_is_ignored(seed, db):
    operating_cost = seed.operating_cost(date(2025, 6, 1), supervisor_salary=30000)
    operating_cost.deleted_at = datetime(2025, 6, 20, 9, 0)
    db.commit()

    assert crud_overhead_costs.get_monthly_fixed_cost(db, date(2025, 6, 10), TENANT) == 0


def test_amortize_per_egg():
    assert crud_overhead_costs.amortize_per_egg(120000, 30, 100) == pytest.approx(40)
    assert crud_overhead_costs.amortize_per_egg(120000, 30, -1) == 0
