from sqlalchemy import Column, Integer, String, Date, Numeric
from database import Base
from models.audit_mixin import TimestampMixin


class BirdCost(Base, TimestampMixin):
    """A purchased flock, amortized over its expected laying period."""
    __tablename__ = "bird_costs"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(String, index=True)
    batch_date = Column(Date, nullable=False)
    birds_purchased = Column(Integer, nullable=False, default=0)
    cost_per_bird = Column(Numeric(8, 2), nullable=False, default=0)
    vaccination_cost_per_bird = Column(Numeric(8, 2), default=0)
    expected_laying_months = Column(Integer, default=12)
