"""
Imminent IFR warning — "IFR starts in N min" for the next merged block.
"""
import math
from typing import Optional

from vfrplan.config import IFR_WARNING_LOOKAHEAD_MIN
from vfrplan.scheduling.entities import IFRWarning, Interval


def next_ifr_warning(merged: list[Interval], now_minutes: float,
                     lookahead_min: int = IFR_WARNING_LOOKAHEAD_MIN) -> Optional[IFRWarning]:
    """
    Warn only for the first interval that hasn't started yet, and only if it
    starts within `lookahead_min`. `merged` must be ascending.
    """
    for iv in merged:
        mins_to_start = iv.start - now_minutes
        if mins_to_start <= 0:
            continue
        # first upcoming interval decides, later ones are further out
        if mins_to_start <= lookahead_min:
            return IFRWarning(minutes_until_start=math.ceil(mins_to_start),
                              block_start=iv.start)
        return None
    return None
