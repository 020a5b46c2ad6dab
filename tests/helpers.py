from __future__ import annotations

from datetime import datetime, timedelta

BASE_DAY = datetime(2024, 3, 4)


def at(day: int, hour: int, minute: int = 0) -> datetime:
    """Naive datetime `day` days after the base Monday."""
    return BASE_DAY + timedelta(days=day, hours=hour, minutes=minute)
