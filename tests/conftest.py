"""
Shared fixtures: an in-memory SQLite database rebuilt for every test, a
`seed` helper for the record stores and a TestClient wired to the test session.
"""
import os
import tempfile
from datetime import date

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "poultry-cost-engine-logs"))

from database import Base, engine, SessionLocal, get_db  # noqa: E402
import models  # noqa: E402,F401
from models import DailyLog, FeedBatch, Payroll, OperatingCost, BirdCost  # noqa: E402

TENANT = "farm-1"
OTHER_TENANT = "farm-2"


class Seeder:
    def __init__(self, db):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def log(self, log_date, eggs, bags=0, feed_kg=None, house_id=1, tenant_id=TENANT):
        return self._save(DailyLog(
            tenant_id=tenant_id,
            log_date=log_date,
            house_id=house_id,
            eggs_collected=eggs,
            feed_bags_used=bags,
            feed_given_kg=feed_kg,
        ))

    def feed_batch(self, batch_date, bag_size_kg=50, cost_per_kg=0, cost_per_bag=0, name="Layer mash", tenant_id=TENANT):
        return self._save(FeedBatch(
            tenant_id=tenant_id,
            batch_date=batch_date,
            batch_name=name,
            bag_size_kg=bag_size_kg,
            cost_per_kg=cost_per_kg,
            cost_per_bag=cost_per_bag,
        ))

    def payroll(self, month_year, final_salary, laborer_id=1, tenant_id=TENANT):
        return self._save(Payroll(
            tenant_id=tenant_id,
            month_year=month_year,
            laborer_id=laborer_id,
            base_salary=final_salary,
            final_salary=final_salary,
        ))

    def operating_cost(self, month_year, tenant_id=TENANT, **costs):
        return self._save(OperatingCost(tenant_id=tenant_id, month_year=month_year, **costs))

    def bird_batch(self, batch_date, birds=100, cost_per_bird=5, vaccination=1, months=12, tenant_id=TENANT):
        return self._save(BirdCost(
            tenant_id=tenant_id,
            batch_date=batch_date,
            birds_purchased=birds,
            cost_per_bird=cost_per_bird,
            vaccination_cost_per_bird=vaccination,
            expected_laying_months=months,
        ))


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seed(db):
    return Seeder(db)


@pytest.fixture
def june_farm(seed):
    """
    A June 2025 farm (30 days) whose numbers divide cleanly:

    - June 10: two houses, 100 eggs and 2 bags in total
    - month total 3000 eggs, so 100 eggs per day on average
    - feed at 2 per kg, 50 kg bags priced at 100
    - payroll 120000, fixed costs 60000
    - one flock of 100 birds at 5 + 1 vaccination over 12 months
    """
    seed.log(date(2025, 6, 1), eggs=2900)
    seed.log(date(2025, 6, 10), eggs=60, bags=1, house_id=1)
    seed.log(date(2025, 6, 10), eggs=40, bags=1, house_id=2)
    seed.feed_batch(date(2025, 5, 20), bag_size_kg=50, cost_per_kg=2, cost_per_bag=100)
    seed.payroll("2025-06", 60000, laborer_id=1)
    seed.payroll("2025-06", 60000, laborer_id=2)
    seed.operating_cost(
        date(2025, 6, 1),
        supervisor_salary=30000,
        total_laborer_salaries=999999,
        electricity_cost=15000,
        water_cost=5000,
        maintenance_cost=5000,
        other_costs=5000,
    )
    seed.bird_batch(date(2025, 1, 1), birds=100, cost_per_bird=5, vaccination=1, months=12)
    return date(2025, 6, 10)


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient
    from main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
