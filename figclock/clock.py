"""Elapsed-time clock."""

import time
from dataclasses import dataclass, field
from typing import Callable, List

# Same unit lengths as humantime
_YEAR = 31_557_600
_MONTH = 2_630_016
_DAY = 86_400


def format_duration(seconds: int) -> str:
    """Format whole seconds as e.g. '1day 2h 3m 4s'. Zero is '0s'."""
    years, rest = divmod(seconds, _YEAR)
    months, rest = divmod(rest, _MONTH)
    days, rest = divmod(rest, _DAY)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts: List[str] = []
    for value, unit in ((years, "year"), (months, "month"), (days, "day")):
        if value:
            parts.append(f"{value}{unit}{'s' if value > 1 else ''}")
    for value, unit in ((hours, "h"), (minutes, "m"), (secs, "s")):
        if value:
            parts.append(f"{value}{unit}")
    return " ".join(parts) or "0s"


@dataclass(frozen=True)
class Clock:
    start: float
    now: Callable[[], float] = field(default=time.monotonic, compare=False, repr=False)

    @classmethod
    def started(cls, now: Callable[[], float] = time.monotonic) -> "Clock":
        return cls(start=now(), now=now)

    def elapsed(self) -> int:
        """Whole seconds since start."""
        return int(self.now() - self.start)

    def display(self) -> str:
        return format_duration(self.elapsed())
