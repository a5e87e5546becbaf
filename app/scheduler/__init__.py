from .client import SchedulerClient, SchedulerError
from .cron import cron_to_human

__all__ = ["SchedulerClient", "SchedulerError", "cron_to_human"]
