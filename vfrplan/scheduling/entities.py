"""
Shared types for the IFR/VFR timeline.

Everything below FlightEvent/Buffers is derived — recompute, never mutate.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from vfrplan.config import (
    DAY_MINUTES,
    DEFAULT_ARR_BEFORE, DEFAULT_ARR_AFTER,
    DEFAULT_DEP_BEFORE, DEFAULT_DEP_AFTER,
)
from vfrplan.scheduling.timecodec import parse_hhmm


# ── Enums ────────────────────────────────────────────────────────────────────

class FlightKind(str, enum.Enum):
    ARR = "ARR"
    DEP = "DEP"


class VFRClass(str, enum.Enum):
    RECOMMENDED = "RECOMMENDED"
    POSSIBLE = "POSSIBLE"
    NONE = "NONE"


# ── Inputs ───────────────────────────────────────────────────────────────────

@dataclass
class FlightEvent:
    id: str
    kind: FlightKind
    raw_time: str = ""

    @property
    def minutes(self) -> Optional[int]:
        """Minutes past midnight, or None if raw_time doesn't parse."""
        return parse_hhmm(self.raw_time)


@dataclass
class Buffers:
    arr_before: int = DEFAULT_ARR_BEFORE
    arr_after: int = DEFAULT_ARR_AFTER
    dep_before: int = DEFAULT_DEP_BEFORE
    dep_after: int = DEFAULT_DEP_AFTER

    def for_kind(self, kind: FlightKind) -> tuple[int, int]:
        """(before, after) for an ARR or DEP."""
        if kind == FlightKind.ARR:
            return self.arr_before, self.arr_after
        if kind == FlightKind.DEP:
            return self.dep_before, self.dep_after
        raise ValueError(f"Unknown flight kind: {kind!r}")


# ── Derived ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class IFRBlock:
    id: str
    kind: FlightKind
    anchor: int                 # flight time, minutes past midnight
    start: int                  # unclamped, may be < 0
    end: int                    # unclamped, may be > 1440
    clamped_start: int
    clamped_end: int


@dataclass(frozen=True)
class Interval:
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ActiveWindow:
    start: int = 0
    end: int = DAY_MINUTES

    @classmethod
    def full_day(cls) -> "ActiveWindow":
        return cls(0, DAY_MINUTES)

    def is_valid(self) -> bool:
        return 0 <= self.start < self.end <= DAY_MINUTES


@dataclass(frozen=True)
class VFRWindow:
    start: int
    end: int
    length: int
    classification: VFRClass


@dataclass(frozen=True)
class IFRWarning:
    minutes_until_start: int
    block_start: int
