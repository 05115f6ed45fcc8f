from sqlalchemy import Column, Integer, String, Date, Numeric, Text
from database import Base
from models.audit_mixin import TimestampMixin


class DailyLog(Base, TimestampMixin):
    """One production log per house per day."""
    __tablename__ = "daily_logs"

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(String, index=True)
    log_date = Column(Date, nullable=False, index=True)
    house_id = Column(Integer, nullable=False)
    eggs_collected = Column(Integer, nullable=False, default=0)
    cracked_eggs = Column(Integer, default=0)
    feed_batch_id = Column(Integer, nullable=True)
    feed_bags_used = Column(Numeric(8, 2), nullable=True, default=0)
    # Older logs recorded feed directly in kilograms instead of bags.
    feed_given_kg = Column(Numeric(8, 2), nullable=True)
    mortality_count = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    supervisor_id = Column(Integer, nullable=True)
