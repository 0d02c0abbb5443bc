"""Clock port so entities never read the wall clock directly."""
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Current instant, timezone-aware UTC."""
        ...

    def now_after_seconds(self, seconds: int) -> datetime:
        """Current instant plus ``seconds``."""
        ...
