"""Fold activity records into daily, weekly and per-category CO₂e totals.

The resulting mappings are unordered. Chart consumers must sort the keys
(``ordered_series`` does this); ISO date strings sort chronologically.
"""

import datetime as dt
import math
import re
from typing import Iterable, Mapping

from ..schemas import ActivityRecord, AggregationResult


ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_day(value: str) -> dt.date | None:
    """Strict ``YYYY-MM-DD``; anything else is None."""
    if not isinstance(value, str) or not ISO_DAY.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        return None


def week_start(day: dt.date) -> dt.date:
    """Sunday on or before ``day``."""
    offset = (day.weekday() + 1) % 7
    return day - dt.timedelta(days=offset)


def _add(totals: dict[str, float], key: str, co2e: float) -> None:
    totals[key] = totals.get(key, 0.0) + co2e


def aggregate(records: Iterable[ActivityRecord]) -> AggregationResult:
    daily: dict[str, float] = {}
    weekly: dict[str, float] = {}
    by_category: dict[str, float] = {}
    total = 0.0

    for record in records:
        co2e = record.co2e
        if not math.isfinite(co2e) or co2e <= 0:
            continue

        total += co2e
        _add(by_category, record.category, co2e)

        day = parse_day(record.date)
        if day is None:
            continue
        _add(daily, record.date, co2e)
        _add(weekly, week_start(day).isoformat(), co2e)

    return AggregationResult(
        daily={k: v for k, v in daily.items() if v > 0},
        weekly={k: v for k, v in weekly.items() if v > 0},
        by_category={k: v for k, v in by_category.items() if v > 0},
        total=total,
    )


def ordered_series(totals: Mapping[str, float]) -> list[tuple[str, float]]:
    return sorted(totals.items())
