"""
IFR block builder + merger.

  flight (ARR/DEP at t) → [t - before, t + after] → clamp to [0, 1440]
  sorted blocks → sweep-merge (touching blocks fuse) → merged intervals
"""
from vfrplan.config import DAY_MINUTES
from vfrplan.scheduling.timecodec import clamp
from vfrplan.scheduling.entities import Buffers, FlightEvent, IFRBlock, Interval


def build_ifr_blocks(flights: list[FlightEvent], buffers: Buffers) -> list[IFRBlock]:
    """
    One buffered block per flight with a parseable time, sorted by clamped start.
    Flights with bad times are skipped; blocks that collapse after clamping
    are dropped.
    """
    blocks = []
    for f in flights:
        t = f.minutes
        if t is None:
            continue

        before, after = buffers.for_kind(f.kind)
        start = t - before
        end = t + after
        c_start = clamp(start, 0, DAY_MINUTES)
        c_end = clamp(end, 0, DAY_MINUTES)
        if c_end <= c_start:
            continue

        blocks.append(IFRBlock(
            id=f.id, kind=f.kind, anchor=t,
            start=start, end=end,
            clamped_start=c_start, clamped_end=c_end,
        ))

    # sorted() is stable, equal starts keep entry order
    return sorted(blocks, key=lambda b: b.clamped_start)


def merge_blocks(blocks: list[IFRBlock]) -> list[Interval]:
    """Sweep-merge blocks (already sorted by clamped_start) into disjoint intervals."""
    if not blocks:
        return []

    merged = []
    cur_start, cur_end = blocks[0].clamped_start, blocks[0].clamped_end
    for b in blocks[1:]:
        if b.clamped_start <= cur_end:      # touching counts as overlap
            cur_end = max(cur_end, b.clamped_end)
        else:
            merged.append(Interval(cur_start, cur_end))
            cur_start, cur_end = b.clamped_start, b.clamped_end
    merged.append(Interval(cur_start, cur_end))
    return merged


def merge_intervals(intervals: list[Interval]) -> list[Interval]:
    """Same sweep over plain intervals (re-merging an already merged list is a no-op)."""
    ordered = sorted(intervals, key=lambda i: i.start)
    if not ordered:
        return []

    merged = [ordered[0]]
    for iv in ordered[1:]:
        last = merged[-1]
        if iv.start <= last.end:
            merged[-1] = Interval(last.start, max(last.end, iv.end))
        else:
            merged.append(iv)
    return merged
