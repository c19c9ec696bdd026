from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..models import Staff
from ..storage import Storage

logger = logging.getLogger(__name__)

# Only the time of day matters; the row's own date is ignored.
REFERENCE_DATE = date(2024, 1, 1)

_TIME_FORMATS = (
    "%I:%M:%S %p",  # 3:45:12 PM (en-US toLocaleTimeString)
    "%I:%M %p",
    "%H:%M:%S",  # 15:45:12 (24h locales)
    "%H:%M",
)

_MERIDIEM = re.compile(r"\s*([AP])\.?\s*M\.?$", re.IGNORECASE)


@dataclass(frozen=True)
class Stats:
    """
    Dashboard summary.

    - volunteers / guests: row counts (repeat check-ins count individually)
    - hours: total staff hours, rounded to an integer
    """
    volunteers: int
    guests: int
    hours: int


def parse_time_of_day(raw: Optional[str]) -> Optional[time]:
    """
    Parse locale-formatted time text ("3:45:12 PM", "15:45") into a time.

    Returns None when the text matches none of the known formats.
    """
    if raw is None:
        return None

    # browsers put U+202F (narrow no-break space) before AM/PM; str.split() handles it
    s = " ".join(str(raw).split())
    if not s:
        return None
    s = _MERIDIEM.sub(lambda m: f" {m.group(1).upper()}M", s)

    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    return None


def shift_hours(time_in: Optional[str], time_out: Optional[str]) -> float:
    """
    Hours between two times of day, clamped at zero.

    Overnight shifts (out earlier than in) count as 0, not as wrapping past
    midnight. Missing or unparsable values also count as 0.
    """
    if not time_in or not time_out:
        return 0.0

    start = parse_time_of_day(time_in)
    end = parse_time_of_day(time_out)
    if start is None or end is None:
        logger.debug("Skipping unparsable staff times in=%r out=%r", time_in, time_out)
        return 0.0

    delta = datetime.combine(REFERENCE_DATE, end) - datetime.combine(REFERENCE_DATE, start)
    return max(0.0, delta.total_seconds() / 3600.0)


def total_hours(rows: Iterable[Staff]) -> int:
    total = sum(shift_hours(r.time_in, r.time_out) for r in rows)
    # half-up, not banker's rounding
    return int(math.floor(total + 0.5))


def compute_stats(storage: Storage) -> Stats:
    return Stats(
        volunteers=len(storage.get_volunteers()),
        guests=len(storage.get_guests()),
        hours=total_hours(storage.get_staff()),
    )
