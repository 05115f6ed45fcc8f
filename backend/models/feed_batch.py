from sqlalchemy import Column, Integer, String, Date, Numeric
from database import Base
from models.audit_mixin import TimestampMixin


class FeedBatch(Base, TimestampMixin):
    __tablename__ = "feed_batches"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(String, index=True)
    batch_date = Column(Date, nullable=False, index=True)
    batch_name = Column(String(100), nullable=False)
    total_quantity_tons = Column(Numeric(8, 3), nullable=False, default=0)
    bag_size_kg = Column(Numeric(6, 2), nullable=False, default=50.0)
    total_bags = Column(Integer, nullable=False, default=0)
    total_cost = Column(Numeric(12, 2), nullable=False, default=0)
    cost_per_bag = Column(Numeric(10, 2), nullable=False, default=0)
    cost_per_kg = Column(Numeric(8, 2), nullable=False, default=0)
    # Labor, transport, milling, packaging and similar extras.
    miscellaneous_cost = Column(Numeric(12, 2), nullable=False, default=0)
