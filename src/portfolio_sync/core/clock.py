"""Wall-clock helpers for snapshot timestamps."""

import time
from typing import Callable

Clock = Callable[[], float]


def now_epoch() -> float:
    """Return current time as seconds since the epoch."""
    return time.time()
