"""
FastAPI app — IFR/VFR day timeline:
  POST   /time/parse
  POST   /timeline/compute
  GET    /plans/{date}
  PUT    /plans/{date}
  DELETE /plans/{date}
  GET    /plans/{date}/timeline
"""
from fastapi import FastAPI, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from vfrplan.database import get_db, init_db
from vfrplan.ingestion.schemas import PlanSchema, TimelineRequest, TimeParseRequest, ThresholdsSchema
from vfrplan.observability.metrics import get_timeline_metrics
from vfrplan.scheduling.pipeline import Timeline, compute_timeline, ifr_warning_for_day
from vfrplan.scheduling.state import DayPlan
from vfrplan.scheduling.timecodec import fmt_hhmm, normalize_time_input, parse_hhmm
from vfrplan.scheduling.entities import ActiveWindow
from vfrplan.storage.plans import delete_plan, load_plan, save_plan

app = FastAPI(title="VFR Planner API", version="1.0.0")

# Initialize DB tables on startup
@app.on_event("startup")
def startup():
    init_db()
    print("[API] Database initialized")


# ── Time parsing ──────────────────────────────────────────────────────────────

@app.post("/time/parse")
def time_parse(req: TimeParseRequest):
    """
    Check a typed time the way the planner reads it.
    '0735' → normalized '07:35', minutes 455.
    """
    normalized = normalize_time_input(req.raw)
    minutes = parse_hhmm(normalized)
    return {
        "raw": req.raw,
        "normalized": normalized,
        "minutes": minutes,
        "formatted": fmt_hhmm(minutes) if minutes is not None else None,
        "valid": minutes is not None,
    }


# ── Stateless timeline ────────────────────────────────────────────────────────

@app.post("/timeline/compute")
def timeline_compute(req: TimelineRequest):
    """
    Build IFR blocks + VFR windows from the posted plan.
    The imminent-IFR warning is only filled in when plan_date is today.
    """
    try:
        plan = req.to_plan(req.plan_date or date.today())
        return _run_timeline(plan, req.thresholds,
                             with_warning=req.plan_date is not None)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Stored plans ──────────────────────────────────────────────────────────────

@app.get("/plans/{date_str}")
def plan_get(date_str: str, db: Session = Depends(get_db)):
    """Stored plan for the day, or a fresh default one."""
    plan_date = _parse_date(date_str)
    plan = load_plan(db, plan_date)
    stored = plan is not None
    if plan is None:
        plan = DayPlan(plan_date=plan_date)
    return {
        "date": plan_date.isoformat(),
        "stored": stored,
        "plan": PlanSchema.from_plan(plan).model_dump(mode="json"),
        "invalid_flight_ids": [f.id for f in plan.invalid_flights()],
    }


@app.put("/plans/{date_str}")
def plan_put(date_str: str, body: PlanSchema, db: Session = Depends(get_db)):
    plan_date = _parse_date(date_str)
    try:
        plan = body.to_plan(plan_date)
        result = save_plan(db, plan)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    result["invalid_flight_ids"] = [f.id for f in plan.invalid_flights()]
    return result


@app.delete("/plans/{date_str}")
def plan_delete(date_str: str, db: Session = Depends(get_db)):
    """Clear the day — flights gone, buffers back to defaults."""
    plan_date = _parse_date(date_str)
    deleted = delete_plan(db, plan_date)
    return {"date": plan_date.isoformat(), "deleted": deleted}


@app.get("/plans/{date_str}/timeline")
def plan_timeline(
    date_str: str,
    recommended_min: Optional[int] = None,
    possible_min: Optional[int] = None,
    db: Session = Depends(get_db),
):
    plan_date = _parse_date(date_str)
    plan = load_plan(db, plan_date)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"No plan stored for {plan_date}")

    overrides = {k: v for k, v in {"recommended_min": recommended_min,
                                    "possible_min": possible_min}.items() if v is not None}
    try:
        thresholds = ThresholdsSchema(**overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _run_timeline(plan, thresholds, with_warning=True)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _parse_date(date_str: str) -> date:
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Bad date: {date_str} (expected YYYY-MM-DD)")


def _run_timeline(plan: DayPlan, thresholds: ThresholdsSchema, with_warning: bool) -> dict:
    timeline = compute_timeline(
        plan.flights, plan.buffers, plan.active_window(),
        recommended_min=thresholds.recommended_min,
        possible_min=thresholds.possible_min,
    )
    warning = None
    if with_warning:
        warning = ifr_warning_for_day(plan.plan_date, timeline.merged,
                                      lookahead_min=thresholds.warning_lookahead_min)

    return {
        "date": plan.plan_date.isoformat(),
        "daylight_limited": timeline.window != ActiveWindow.full_day(),
        **_timeline_to_dict(timeline),
        "metrics": get_timeline_metrics(timeline),
        "ifr_warning": {
            "minutes_until_start": warning.minutes_until_start,
            "block_start": fmt_hhmm(warning.block_start),
        } if warning else None,
        "invalid_flight_ids": [f.id for f in plan.invalid_flights()],
    }


def _timeline_to_dict(timeline: Timeline) -> dict:
    return {
        "active_window": {
            "start": fmt_hhmm(timeline.window.start),
            "end": fmt_hhmm(timeline.window.end) if timeline.window.end < 1440 else "24:00",
            "start_min": timeline.window.start,
            "end_min": timeline.window.end,
        },
        "ifr_blocks": [
            {
                "id": b.id, "kind": b.kind.value, "time": fmt_hhmm(b.anchor),
                "start_min": b.start, "end_min": b.end,
                "clamped_start_min": b.clamped_start, "clamped_end_min": b.clamped_end,
                "label": f"{b.kind.value} {fmt_hhmm(b.anchor)} | IFR {fmt_hhmm(b.start)}–{fmt_hhmm(b.end)}",
            }
            for b in timeline.blocks
        ],
        "ifr_merged": [
            {"start_min": iv.start, "end_min": iv.end, "length_min": iv.length}
            for iv in timeline.merged
        ],
        "vfr_windows": [
            {
                "start_min": w.start, "end_min": w.end, "length_min": w.length,
                "start": fmt_hhmm(w.start),
                "end": fmt_hhmm(w.end) if w.end < 1440 else "24:00",
                "classification": w.classification.value,
            }
            for w in timeline.vfr
        ],
    }


# ── Health check ──────────────────────────────────────────────────────────────

@app.get("/")
def root():
    return {
        "service": "VFR Planner API",
        "version": "1.0.0",
        "endpoints": ["/time/parse", "/timeline/compute", "/plans/{date}",
                      "/plans/{date}/timeline"],
    }
