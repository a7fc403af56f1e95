"""Kernel time – Clock port + implementations."""
from recruit_export.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
