from models.daily_log import DailyLog
from models.feed_batch import FeedBatch
from models.payroll import Payroll
from models.operating_cost import OperatingCost
from models.bird_cost import BirdCost

__all__ = ['BirdCost', 'DailyLog', 'FeedBatch', 'OperatingCost', 'Payroll',]
