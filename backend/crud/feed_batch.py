from typing import Optional
from sqlalchemy.orm import Session
from models.feed_batch import FeedBatch
from utils.numeric import to_float

DEFAULT_BAG_SIZE_KG = 50.0


def get_latest_feed_batch(db: Session, tenant_id: str) -> Optional[FeedBatch]:
    """
    The most recently dated feed batch, used as the current feed price.

    Always re-queried: batches can be added or corrected between requests.
    """
    return db.query(FeedBatch).filter(
        FeedBatch.tenant_id == tenant_id
    ).order_by(FeedBatch.batch_date.desc(), FeedBatch.id.desc()).first()


def resolve_bag_size_kg(batch: Optional[FeedBatch]) -> float:
    if batch is None:
        return DEFAULT_BAG_SIZE_KG
    return to_float(batch.bag_size_kg) or DEFAULT_BAG_SIZE_KG


def resolve_cost_per_kg(batch: Optional[FeedBatch]) -> float:
    if batch is None:
        return 0.0
    return to_float(batch.cost_per_kg)


def resolve_cost_per_bag(batch: Optional[FeedBatch]) -> float:
    # Batches entered without a bag price are priced from their per-kg cost.
    if batch is None:
        return 0.0
    cost_per_bag = to_float(batch.cost_per_bag)
    if cost_per_bag > 0:
        return cost_per_bag
    return resolve_cost_per_kg(batch) * resolve_bag_size_kg(batch)
