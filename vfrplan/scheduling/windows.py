"""
Free (VFR) windows — the complement of merged IFR intervals inside the
active window, then labelled by length.
"""
import math
from typing import Optional

from vfrplan.config import VFR_RECOMMENDED_MIN, VFR_POSSIBLE_MIN
from vfrplan.scheduling.timecodec import clamp
from vfrplan.scheduling.entities import ActiveWindow, Interval, VFRClass, VFRWindow


def resolve_active_window(daylight_enabled: bool,
                          sunrise: Optional[float] = None,
                          sunset: Optional[float] = None) -> ActiveWindow:
    """
    Daylight-limited window when enabled and the sun times make sense,
    otherwise the whole day (0–1440).
    """
    if not daylight_enabled or sunrise is None or sunset is None:
        return ActiveWindow.full_day()
    if not (math.isfinite(sunrise) and math.isfinite(sunset)):
        return ActiveWindow.full_day()

    window = ActiveWindow(int(sunrise), int(sunset))
    if not window.is_valid():
        return ActiveWindow.full_day()
    return window


def compute_free_windows(merged: list[Interval],
                         window: ActiveWindow = ActiveWindow()) -> list[Interval]:
    """Gaps between merged IFR intervals, clipped to the active window."""
    day_start, day_end = window.start, window.end
    free = []

    cursor = day_start
    for iv in merged:
        s = clamp(iv.start, day_start, day_end)
        e = clamp(iv.end, day_start, day_end)
        if e <= day_start or s >= day_end:
            continue
        if s > cursor:
            free.append(Interval(cursor, s))
        cursor = max(cursor, e)

    if cursor < day_end:
        free.append(Interval(cursor, day_end))
    return [w for w in free if w.end > w.start]


def classify_length(length: int,
                    recommended_min: int = VFR_RECOMMENDED_MIN,
                    possible_min: int = VFR_POSSIBLE_MIN) -> VFRClass:
    if length >= recommended_min:
        return VFRClass.RECOMMENDED
    if length >= possible_min:
        return VFRClass.POSSIBLE
    return VFRClass.NONE


def classify_vfr(free: list[Interval],
                 recommended_min: int = VFR_RECOMMENDED_MIN,
                 possible_min: int = VFR_POSSIBLE_MIN) -> list[VFRWindow]:
    """
    Label every free window. NONE windows are kept here; hiding them
    is the display's job.
    """
    return [
        VFRWindow(
            start=w.start, end=w.end, length=w.length,
            classification=classify_length(w.length, recommended_min, possible_min),
        )
        for w in free
    ]