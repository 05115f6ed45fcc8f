"""
Read access to the bird acquisition batches.

Not every farm provisions the `bird_costs` table, so the engine reaches it
through a `LivestockSource` that reports itself unavailable instead of
failing the whole price calculation.
"""
from typing import List

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from models.bird_cost import BirdCost


class LivestockSourceUnavailable(Exception):
    """The livestock store is not provisioned for this database."""


class LivestockSource:
    """Anything with an `all_batches()` method returning bird batches can stand in here."""

    def all_batches(self) -> List[BirdCost]:
        raise NotImplementedError


class DatabaseLivestockSource(LivestockSource):
    def __init__(self, db: Session, tenant_id: str):
        self.db = db
        self.tenant_id = tenant_id

    def is_provisioned(self) -> bool:
        return inspect(self.db.connection()).has_table(BirdCost.__tablename__)

    def all_batches(self) -> List[BirdCost]:
        if not self.is_provisioned():
            raise LivestockSourceUnavailable(f"table '{BirdCost.__tablename__}' does not exist")
        return self.db.query(BirdCost).filter(
            BirdCost.tenant_id == self.tenant_id
        ).order_by(BirdCost.batch_date).all()


def get_livestock_source(db: Session, tenant_id: str) -> LivestockSource:
    return DatabaseLivestockSource(db, tenant_id)
