"""
Timeline pipeline — one pure pass from plan inputs to classified windows.

  flights + buffers → IFR blocks → merged → free windows (active window) → VFR classes

No caching, no hidden state: call it again whenever an input changes.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from vfrplan.config import (
    VFR_RECOMMENDED_MIN, VFR_POSSIBLE_MIN, IFR_WARNING_LOOKAHEAD_MIN,
)
from vfrplan.scheduling.blocks import build_ifr_blocks, merge_blocks
from vfrplan.scheduling.clock import is_today, now_minutes_local
from vfrplan.scheduling.monitor import next_ifr_warning
from vfrplan.scheduling.entities import (
    ActiveWindow, Buffers, FlightEvent, IFRBlock, IFRWarning, Interval, VFRWindow,
)
from vfrplan.scheduling.windows import classify_vfr, compute_free_windows


@dataclass
class Timeline:
    window: ActiveWindow
    blocks: list[IFRBlock] = field(default_factory=list)
    merged: list[Interval] = field(default_factory=list)
    free: list[Interval] = field(default_factory=list)
    vfr: list[VFRWindow] = field(default_factory=list)


def compute_timeline(
    flights: list[FlightEvent],
    buffers: Buffers,
    window: ActiveWindow = ActiveWindow(),
    recommended_min: int = VFR_RECOMMENDED_MIN,
    possible_min: int = VFR_POSSIBLE_MIN,
) -> Timeline:
    blocks = build_ifr_blocks(flights, buffers)
    merged = merge_blocks(blocks)
    free = compute_free_windows(merged, window)
    vfr = classify_vfr(free, recommended_min, possible_min)
    return Timeline(window=window, blocks=blocks, merged=merged, free=free, vfr=vfr)


def ifr_warning_for_day(
    plan_date: date,
    merged: list[Interval],
    now_minutes: Optional[float] = None,
    today: Optional[date] = None,
    lookahead_min: int = IFR_WARNING_LOOKAHEAD_MIN,
) -> Optional[IFRWarning]:
    """Imminent-IFR check, but only when the plan is for today."""
    if not is_today(plan_date, today):
        return None
    if now_minutes is None:
        now_minutes = now_minutes_local()
    return next_ifr_warning(merged, now_minutes, lookahead_min)
