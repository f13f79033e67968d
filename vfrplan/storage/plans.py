"""
Day-plan store — load / save / delete one plan per calendar date.

Stored rows are re-validated on load; a row that no longer fits the
schema is reported and treated as missing.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from vfrplan.ingestion.schemas import PlanSchema
from vfrplan.models import DayPlanRecord
from vfrplan.scheduling.state import DayPlan


def load_plan(db: Session, plan_date: date) -> Optional[DayPlan]:
    record = db.get(DayPlanRecord, plan_date)
    if record is None:
        return None

    try:
        schema = PlanSchema(
            flights=record.flights or [],
            buffers=record.buffers,
            daylight=record.daylight,
            auto_sun=record.auto_sun if record.auto_sun is not None else True,
            show_now=record.show_now if record.show_now is not None else True,
        )
    except ValidationError as e:
        print(f"[store] ignoring unreadable plan for {plan_date}: {e.error_count()} errors")
        return None
    return schema.to_plan(plan_date)


def save_plan(db: Session, plan: DayPlan) -> dict:
    """Upsert the plan for plan.plan_date."""
    data = PlanSchema.from_plan(plan).model_dump(mode="json")
    try:
        record = db.get(DayPlanRecord, plan.plan_date)
        if record:
            for k, v in data.items():
                setattr(record, k, v)
            record.saved_at = datetime.utcnow()
            status = "updated"
        else:
            db.add(DayPlanRecord(plan_date=plan.plan_date, saved_at=datetime.utcnow(), **data))
            status = "created"
        db.commit()
    except Exception:
        db.rollback()
        raise

    print(f"[store] {status} plan {plan.plan_date} ({len(plan.flights)} flights)")
    return {"date": plan.plan_date.isoformat(), "status": status,
            "flights": len(plan.flights)}


def delete_plan(db: Session, plan_date: date) -> bool:
    record = db.get(DayPlanRecord, plan_date)
    if record is None:
        return False
    db.delete(record)
    db.commit()
    print(f"[store] deleted plan {plan_date}")
    return True
