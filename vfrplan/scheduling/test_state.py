"""
Day plan edits: add / edit / remove / clear, daylight handling.

  python vfrplan/scheduling/test_state.py
"""
import sys
sys.path.insert(0, ".")

from datetime import date

from vfrplan.scheduling.pipeline import compute_timeline
from vfrplan.scheduling.state import DayPlan
from vfrplan.scheduling.entities import ActiveWindow, Buffers, FlightKind, VFRClass

DAY = date(2025, 7, 7)


def test_sample_plan():
    plan = DayPlan.sample(DAY)
    assert [(f.kind, f.raw_time) for f in plan.flights] == [
        (FlightKind.ARR, "10:00"), (FlightKind.DEP, "10:40"),
    ]
    assert plan.flights[0].id != plan.flights[1].id


def test_add_normalizes_and_derives_minutes():
    plan = DayPlan(plan_date=DAY)
    f = plan.add_flight("DEP", "0735")
    assert f.kind == FlightKind.DEP
    assert f.raw_time == "07:35"
    assert f.minutes == 455


def test_edit_flight():
    plan = DayPlan(plan_date=DAY)
    f = plan.add_flight(FlightKind.ARR, "10:00")
    plan.edit_flight(f.id, kind=FlightKind.DEP)
    plan.edit_flight(f.id, raw_time="1130")
    assert (f.kind, f.raw_time, f.minutes) == (FlightKind.DEP, "11:30", 690)

    plan.edit_flight(f.id, raw_time="11:3")
    assert f.minutes is None


def test_edit_unknown_flight_raises():
    plan = DayPlan(plan_date=DAY)
    try:
        plan.edit_flight("nope", raw_time="10:00")
    except KeyError:
        pass
    else:
        raise AssertionError("expected KeyError")


def test_remove_and_clear():
    plan = DayPlan.sample(DAY)
    plan.buffers = Buffers(arr_before=30)
    first = plan.flights[0].id
    assert plan.remove_flight(first) is True
    assert plan.remove_flight(first) is False
    assert len(plan.flights) == 1

    plan.clear()
    assert plan.flights == []
    assert plan.buffers == Buffers()


def test_invalid_flights_ignores_blank_rows():
    plan = DayPlan(plan_date=DAY)
    plan.add_flight(FlightKind.ARR, "")
    bad = plan.add_flight(FlightKind.DEP, "25:00")
    plan.add_flight(FlightKind.ARR, "09:00")
    assert [f.id for f in plan.invalid_flights()] == [bad.id]


def test_invalid_times_do_not_block_timeline():
    plan = DayPlan.sample(DAY)
    plan.add_flight(FlightKind.ARR, "ab")
    plan.daylight.enabled = False
    timeline = compute_timeline(plan.flights, plan.buffers, plan.active_window())
    assert len(timeline.blocks) == 2
    assert [w.classification for w in timeline.vfr] == [
        VFRClass.RECOMMENDED, VFRClass.POSSIBLE, VFRClass.RECOMMENDED,
    ]


def test_active_window_follows_daylight():
    plan = DayPlan(plan_date=DAY)
    assert plan.active_window() == ActiveWindow(480, 990)
    plan.daylight.enabled = False
    assert plan.active_window() == ActiveWindow(0, 1440)


def test_sun_times():
    plan = DayPlan(plan_date=DAY)
    plan.set_sun_times(356.4, 1262.9)
    assert (plan.daylight.sunrise, plan.daylight.sunset) == (356, 1262)
    assert plan.daylight.enabled is True

    plan.set_sun_times(1262, 356)
    assert plan.daylight.enabled is False
    assert plan.active_window() == ActiveWindow(0, 1440)


if __name__ == "__main__":
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"  ✅ {name}")
    print("\nAll day plan checks passed.")
