"""Clock implementations."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SystemClock:
    def now(self) -> datetime:
        return _utcnow()

    def now_after_seconds(self, seconds: int) -> datetime:
        return _utcnow() + timedelta(seconds=seconds)


@dataclass
class FixedClock:
    """Clock pinned to one instant. ``advance`` moves it forward."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant

    def now_after_seconds(self, seconds: int) -> datetime:
        return self.instant + timedelta(seconds=seconds)

    def advance(self, seconds: int) -> None:
        self.instant += timedelta(seconds=seconds)
