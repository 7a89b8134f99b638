"""Price simulation"""

from .engine import PriceSimulator, tick
from .scheduler import TickScheduler

__all__ = ["PriceSimulator", "tick", "TickScheduler"]
