from sqlalchemy import Column, Boolean, Date, DateTime, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


# ── Day plans ─────────────────────────────────────────────────────────────────

class DayPlanRecord(Base):
    __tablename__ = "day_plans"

    plan_date = Column(Date, primary_key=True)         # one plan per calendar day
    flights = Column(JSON, nullable=False, default=list)   # [{"id", "kind", "time"}]
    buffers = Column(JSON, nullable=False)             # {"arr_before": 15, ...}
    daylight = Column(JSON, nullable=False)            # {"enabled", "sunrise", "sunset"}
    auto_sun = Column(Boolean, default=True)
    show_now = Column(Boolean, default=True)
    saved_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
