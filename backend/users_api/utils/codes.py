"""Human-readable user codes derived from the current time."""
from __future__ import annotations

import time
from datetime import datetime
from typing import Optional


def generate_code(now: Optional[datetime] = None, nanos: Optional[int] = None) -> str:
    """Return ``YYYYMMDD`` followed by six digits of sub-second clock time.

    Both parts come from a single clock read unless ``now`` is given.
    Two calls within the same microsecond-scale window can collide; callers
    get no uniqueness guarantee.
    """
    if nanos is None:
        nanos = time.time_ns()
    if now is None:
        now = datetime.fromtimestamp(nanos // 1_000_000_000)
    return now.strftime("%Y%m%d") + f"{nanos % 1_000_000:06d}"
