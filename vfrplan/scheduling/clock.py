"""
Wall-clock helpers. Local civil time only, one day at a time.
"""
from datetime import date, datetime
from typing import Optional


def now_minutes_local(now: Optional[datetime] = None) -> float:
    """Minutes past local midnight, with seconds as a fraction."""
    now = now or datetime.now()
    return now.hour * 60 + now.minute + now.second / 60


def today() -> date:
    return date.today()


def is_today(d: date, today_: Optional[date] = None) -> bool:
    return d == (today_ or today())
