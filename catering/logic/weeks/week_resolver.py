"""Week resolver: picks which published menu week serves a requested date.

If a published week contains the date it is used directly. Otherwise the
menu is assumed to cycle: find the published week closest to today, move it
by the number of whole weeks between today and the requested date, and use
the published week closest to that target.

Candidates are scanned in ascending date order and the first closest one
wins, so the earliest week wins ties.
"""
from datetime import date, timedelta
from typing import Iterable, Optional


def _closest(candidates: list[date], target: date) -> date:
    return min(candidates, key=lambda week_start: abs((target - week_start).days))


def find_containing_week(week_starts: Iterable[date], requested: date) -> Optional[date]:
    for week_start in sorted(set(week_starts)):
        if week_start <= requested <= week_start + timedelta(days=6):
            return week_start
    return None


def choose_week(known_week_starts: Iterable[date], requested: date, today: date) -> Optional[date]:
    candidates = sorted(set(known_week_starts))
    if not candidates:
        return None

    exact = find_containing_week(candidates, requested)
    if exact is not None:
        return exact

    today_week = _closest(candidates, today)
    # Floor division: two days in the past is week -1, not week 0
    delta_weeks = (requested - today).days // 7
    inferred_target = today_week + timedelta(days=delta_weeks * 7)
    return _closest(candidates, inferred_target)
