"""
Timeline summary numbers shown next to the chart.

Tracks:
- Total IFR minutes (merged, so overlaps count once)
- Total VFR-recommended / VFR-possible minutes
- Window count per class
"""
from vfrplan.scheduling.pipeline import Timeline
from vfrplan.scheduling.entities import VFRClass


def get_timeline_metrics(timeline: Timeline) -> dict:
    """
    Compute totals for a computed timeline.
    """
    total_ifr = sum(iv.end - iv.start for iv in timeline.merged)

    total_rec = sum(
        w.length for w in timeline.vfr
        if w.classification == VFRClass.RECOMMENDED
    )

    total_poss = sum(
        w.length for w in timeline.vfr
        if w.classification == VFRClass.POSSIBLE
    )

    window_counts = {c.value: 0 for c in VFRClass}
    for w in timeline.vfr:
        window_counts[w.classification.value] += 1

    return {
        "flights_on_timeline": len(timeline.blocks),
        "ifr_intervals": len(timeline.merged),
        "total_ifr_min": total_ifr,
        "total_vfr_recommended_min": total_rec,
        "total_vfr_possible_min": total_poss,
        "vfr_window_counts": window_counts,
        "active_window_min": timeline.window.end - timeline.window.start,
    }
