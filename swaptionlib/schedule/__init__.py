# Re-export schedule components
from swaptionlib.conventions.types import BusinessDayAdjustment, DateGeneration

from .adjustments import adjust_date
from .core import Schedule, SchedulePeriod
from .generator import make_schedule
