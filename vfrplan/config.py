"""
Runtime configuration — read once from the environment.
"""
import os


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./vfrplan.db")

# ── VFR classification / IFR warning ─────────────────────────────────────────
VFR_RECOMMENDED_MIN = int(os.getenv("VFR_RECOMMENDED_MIN", "30"))
VFR_POSSIBLE_MIN = int(os.getenv("VFR_POSSIBLE_MIN", "20"))
IFR_WARNING_LOOKAHEAD_MIN = int(os.getenv("IFR_WARNING_LOOKAHEAD_MIN", "10"))

# ── Buffer defaults (minutes) ────────────────────────────────────────────────
DEFAULT_ARR_BEFORE = int(os.getenv("DEFAULT_ARR_BEFORE", "15"))
DEFAULT_ARR_AFTER = int(os.getenv("DEFAULT_ARR_AFTER", "5"))
DEFAULT_DEP_BEFORE = int(os.getenv("DEFAULT_DEP_BEFORE", "10"))
DEFAULT_DEP_AFTER = int(os.getenv("DEFAULT_DEP_AFTER", "5"))

# ── Daylight defaults until the sun service fills real values ───────────────
DEFAULT_SUNRISE_MIN = int(os.getenv("DEFAULT_SUNRISE_MIN", str(8 * 60)))
DEFAULT_SUNSET_MIN = int(os.getenv("DEFAULT_SUNSET_MIN", str(16 * 60 + 30)))

DAY_MINUTES = 1440
