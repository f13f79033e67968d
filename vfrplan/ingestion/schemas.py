from datetime import date
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

from vfrplan.config import (
    DEFAULT_ARR_BEFORE, DEFAULT_ARR_AFTER, DEFAULT_DEP_BEFORE, DEFAULT_DEP_AFTER,
    DEFAULT_SUNRISE_MIN, DEFAULT_SUNSET_MIN,
    VFR_RECOMMENDED_MIN, VFR_POSSIBLE_MIN, IFR_WARNING_LOOKAHEAD_MIN,
)
from vfrplan.scheduling.state import Daylight, DayPlan
from vfrplan.scheduling.timecodec import normalize_time_input
from vfrplan.scheduling.entities import Buffers, FlightEvent, FlightKind


class FlightSchema(BaseModel):
    id: Optional[str] = None
    kind: FlightKind
    time: str = ""                  # raw input, kept even when unparseable

    @field_validator("time", mode="before")
    @classmethod
    def normalize_time(cls, v):
        return normalize_time_input(v)


class BuffersSchema(BaseModel):
    arr_before: int = Field(DEFAULT_ARR_BEFORE, ge=0)
    arr_after: int = Field(DEFAULT_ARR_AFTER, ge=0)
    dep_before: int = Field(DEFAULT_DEP_BEFORE, ge=0)
    dep_after: int = Field(DEFAULT_DEP_AFTER, ge=0)

    def to_buffers(self) -> Buffers:
        return Buffers(**self.model_dump())


class DaylightSchema(BaseModel):
    enabled: bool = True
    sunrise: int = Field(DEFAULT_SUNRISE_MIN, ge=0, le=1440)    # minutes past midnight
    sunset: int = Field(DEFAULT_SUNSET_MIN, ge=0, le=1440)


class ThresholdsSchema(BaseModel):
    recommended_min: int = Field(VFR_RECOMMENDED_MIN, ge=0)
    possible_min: int = Field(VFR_POSSIBLE_MIN, ge=0)
    warning_lookahead_min: int = Field(IFR_WARNING_LOOKAHEAD_MIN, ge=0)

    @model_validator(mode="after")
    def possible_below_recommended(self):
        assert self.possible_min <= self.recommended_min, \
            f"possible_min ({self.possible_min}) > recommended_min ({self.recommended_min})"
        return self


class PlanSchema(BaseModel):
    flights: list[FlightSchema] = []
    buffers: BuffersSchema = BuffersSchema()
    daylight: DaylightSchema = DaylightSchema()
    auto_sun: bool = True
    show_now: bool = True

    def to_plan(self, plan_date: date) -> DayPlan:
        plan = DayPlan(
            plan_date=plan_date,
            buffers=self.buffers.to_buffers(),
            daylight=Daylight(**self.daylight.model_dump()),
            auto_sun=self.auto_sun,
            show_now=self.show_now,
        )
        for f in self.flights:
            if f.id:
                plan.flights.append(FlightEvent(id=f.id, kind=f.kind, raw_time=f.time))
            else:
                plan.add_flight(f.kind, f.time)
        return plan

    @classmethod
    def from_plan(cls, plan: DayPlan) -> "PlanSchema":
        return cls(
            flights=[FlightSchema(id=f.id, kind=f.kind, time=f.raw_time) for f in plan.flights],
            buffers=BuffersSchema(
                arr_before=plan.buffers.arr_before, arr_after=plan.buffers.arr_after,
                dep_before=plan.buffers.dep_before, dep_after=plan.buffers.dep_after,
            ),
            daylight=DaylightSchema(
                enabled=plan.daylight.enabled,
                sunrise=plan.daylight.sunrise, sunset=plan.daylight.sunset,
            ),
            auto_sun=plan.auto_sun,
            show_now=plan.show_now,
        )


class TimelineRequest(PlanSchema):
    plan_date: Optional[date] = None    # enables the imminent-IFR warning when it's today
    thresholds: ThresholdsSchema = ThresholdsSchema()


class TimeParseRequest(BaseModel):
    raw: str
