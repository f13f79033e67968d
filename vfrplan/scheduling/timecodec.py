"""
Time string helpers — tablet input → minutes past midnight and back.

Tablets often show a numeric keyboard without ':' so we accept
'HH:MM', 'H:MM', 'HH.MM', 'HH MM' and bare 'HHMM' ('0735').
"""
import math
import re
from typing import Optional

from vfrplan.config import DAY_MINUTES


_SEPARATED = re.compile(r"([01]?[0-9]|2[0-3])[:.\s]([0-5][0-9])")
_FOUR_DIGITS = re.compile(r"([01][0-9]|2[0-3])([0-5][0-9])")


def parse_hhmm(raw) -> Optional[int]:
    """'07:35' → 455, '0735' → 455, '2400' / 'ab' / '' → None"""
    if raw is None:
        return None
    s = str(raw).strip()
    if not s:
        return None

    m = _SEPARATED.fullmatch(s) or _FOUR_DIGITS.fullmatch(s)
    if m is None:
        return None
    return int(m.group(1)) * 60 + int(m.group(2))


def normalize_time_input(raw) -> str:
    """'0735' → '07:35'. Anything that isn't exactly 4 digits passes through."""
    s = str(raw if raw is not None else "").strip()
    if re.fullmatch(r"[0-9]{4}", s):
        return f"{s[:2]}:{s[2:]}"
    return s


def fmt_hhmm(mins) -> str:
    """455 → '07:35'. Wraps into the day, so -10 → '23:50' and 1440 → '00:00'."""
    m = math.floor(mins) % DAY_MINUTES
    return f"{m // 60:02d}:{m % 60:02d}"


def clamp(v, lo, hi):
    return max(lo, min(hi, v))
