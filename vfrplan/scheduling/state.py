"""
Day plan — the editable source state for one calendar day.
Everything on the timeline is recomputed from this; nothing derived lives here.
"""
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from vfrplan.config import DEFAULT_SUNRISE_MIN, DEFAULT_SUNSET_MIN
from vfrplan.scheduling.timecodec import clamp, normalize_time_input, parse_hhmm
from vfrplan.scheduling.entities import ActiveWindow, Buffers, FlightEvent, FlightKind
from vfrplan.scheduling.windows import resolve_active_window


def make_id() -> str:
    return f"id_{uuid.uuid4().hex[:12]}"


@dataclass
class Daylight:
    enabled: bool = True
    sunrise: int = DEFAULT_SUNRISE_MIN
    sunset: int = DEFAULT_SUNSET_MIN


@dataclass
class DayPlan:
    plan_date: date
    flights: list[FlightEvent] = field(default_factory=list)
    buffers: Buffers = field(default_factory=Buffers)
    daylight: Daylight = field(default_factory=Daylight)
    auto_sun: bool = True
    show_now: bool = True

    @classmethod
    def sample(cls, plan_date: date) -> "DayPlan":
        """Starter plan: one arrival and one departure mid-morning."""
        plan = cls(plan_date=plan_date)
        plan.add_flight(FlightKind.ARR, "10:00")
        plan.add_flight(FlightKind.DEP, "10:40")
        return plan

    # ── Flight edits ─────────────────────────────────────────────────────────

    def add_flight(self, kind: FlightKind = FlightKind.ARR, raw_time: str = "") -> FlightEvent:
        flight = FlightEvent(id=make_id(), kind=FlightKind(kind),
                             raw_time=normalize_time_input(raw_time))
        self.flights.append(flight)
        return flight

    def get_flight(self, flight_id: str) -> Optional[FlightEvent]:
        return next((f for f in self.flights if f.id == flight_id), None)

    def edit_flight(self, flight_id: str, kind: Optional[FlightKind] = None,
                    raw_time: Optional[str] = None) -> FlightEvent:
        flight = self.get_flight(flight_id)
        if flight is None:
            raise KeyError(flight_id)
        if kind is not None:
            flight.kind = FlightKind(kind)
        if raw_time is not None:
            flight.raw_time = normalize_time_input(raw_time)
        return flight

    def remove_flight(self, flight_id: str) -> bool:
        before = len(self.flights)
        self.flights = [f for f in self.flights if f.id != flight_id]
        return len(self.flights) < before

    def clear(self):
        """Wipe the day's flights and put buffers back to defaults."""
        self.flights = []
        self.buffers = Buffers()

    # ── Views ────────────────────────────────────────────────────────────────

    def invalid_flights(self) -> list[FlightEvent]:
        """Entries with something typed in that doesn't parse as a time."""
        return [f for f in self.flights
                if f.raw_time and parse_hhmm(f.raw_time) is None]

    def active_window(self) -> ActiveWindow:
        return resolve_active_window(self.daylight.enabled,
                                     self.daylight.sunrise, self.daylight.sunset)

    def set_sun_times(self, sunrise: Optional[float], sunset: Optional[float]):
        """
        Apply sunrise/sunset from the sun service. Unusable values switch
        the daylight limit off instead of keeping a broken window.
        """
        if sunrise is None or sunset is None or not sunset > sunrise:
            self.daylight.enabled = False
            return
        self.daylight.sunrise = int(clamp(sunrise, 0, 1439))
        self.daylight.sunset = int(clamp(sunset, 0, 1440))
