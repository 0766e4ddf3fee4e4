from datetime import datetime, timezone

from domain.interfaces import Clock


class SystemClock(Clock):
    """Wall clock in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
