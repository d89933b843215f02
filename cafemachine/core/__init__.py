"""Low-level helpers shared by the machine."""
from cafemachine.core.clock import AsyncioClock, Clock, InstantClock

__all__ = ["AsyncioClock", "Clock", "InstantClock"]
