# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Rotation/attendance logic — pure computation, no side effects.

Presence on a cycle is the half-open interval [sign_on, sign_off): the
sign-off day is the day the person leaves. Office-based trades are present
on weekdays only and have no rotation window. Missing or unparseable dates
never raise; they simply contribute no presence.
"""

import calendar
from datetime import date, datetime
from typing import Optional

from app.models.domain import ActiveRange, Cycle, DayStatus, PersonnelStatus, RosterEntry
from app.services.dates import days_between, parse_date_or_none, to_day

DEPARTURE_ALERT_DAYS = 3
LONG_STAY_DAYS = 14


def _cycle_bounds(cycle: Cycle) -> tuple[Optional[date], Optional[date]]:
    return parse_date_or_none(cycle.sign_on), parse_date_or_none(cycle.sign_off)


def _matching_cycle(
    entry: RosterEntry, day: date
) -> Optional[tuple[date, date]]:
    """
    Bounds of the cycle covering ``day``. When cycles overlap, the one with
    the latest sign-on wins; ties go to the lowest cycle number.
    """
    best: Optional[tuple[date, date]] = None
    for number in sorted(entry.cycles):
        start, end = _cycle_bounds(entry.cycles[number])
        if start is None or end is None:
            continue
        if start <= day < end and (best is None or start > best[0]):
            best = (start, end)
    return best


def is_on_board(entry: RosterEntry, query_date: date | datetime) -> bool:
    day = to_day(query_date)
    if entry.trade.is_office_based:
        return day.weekday() < 5
    return _matching_cycle(entry, day) is not None


def active_rotation_range(
    entry: RosterEntry, query_date: date | datetime
) -> ActiveRange:
    if entry.trade.is_office_based:
        return ActiveRange()
    match = _matching_cycle(entry, to_day(query_date))
    if match is None:
        return ActiveRange()
    return ActiveRange(start=match[0], end=match[1])


def days_on_board(entry: RosterEntry, query_date: date | datetime) -> int:
    """Sign-on day counts as day 1; 0 when there is no active rotation."""
    active = active_rotation_range(entry, query_date)
    if active.start is None:
        return 0
    return days_between(active.start, query_date) + 1


def is_departure_imminent(
    entry: RosterEntry,
    query_date: date | datetime,
    alert_days: int = DEPARTURE_ALERT_DAYS,
) -> bool:
    active = active_rotation_range(entry, query_date)
    if active.end is None:
        return False
    return 0 <= days_between(query_date, active.end) <= alert_days


def has_activity_in_month(entry: RosterEntry, year: int, month: int) -> bool:
    """True if any cycle overlaps the calendar month. Office staff always count."""
    if entry.trade.is_office_based:
        return True
    month_start = date(year, month, 1)
    month_end = date(year, month, calendar.monthrange(year, month)[1])
    for cycle in entry.cycles.values():
        start, end = _cycle_bounds(cycle)
        if start and end and start <= month_end and end >= month_start:
            return True
    return False


def day_status(entry: RosterEntry, day: date | datetime) -> DayStatus:
    """
    Calendar cell for one day. Unlike presence, the rotation test here is
    inclusive of the sign-off day so a cycle draws as one unbroken bar.
    """
    day = to_day(day)
    if entry.trade.is_office_based:
        return DayStatus.OHN_WEEKDAY if day.weekday() < 5 else DayStatus.OHN_WEEKEND
    for cycle in entry.cycles.values():
        start, end = _cycle_bounds(cycle)
        if start and end and start <= day <= end:
            if entry.roles_em == DayStatus.SECONDARY.value:
                return DayStatus.SECONDARY
            return DayStatus.PRIMARY
    return DayStatus.OFF


def month_day_statuses(entry: RosterEntry, year: int, month: int) -> list[DayStatus]:
    days = calendar.monthrange(year, month)[1]
    return [day_status(entry, date(year, month, d)) for d in range(1, days + 1)]


def personnel_status(
    entry: RosterEntry,
    query_date: date | datetime,
    alert_days: int = DEPARTURE_ALERT_DAYS,
    long_stay_days: int = LONG_STAY_DAYS,
) -> PersonnelStatus:
    """All presence figures for one entry on one day."""
    active = active_rotation_range(entry, query_date)
    days = days_on_board(entry, query_date)
    return PersonnelStatus(
        is_on_board=is_on_board(entry, query_date),
        days_on_board=days,
        rotation_start=active.start,
        rotation_end=active.end,
        departure_imminent=is_departure_imminent(entry, query_date, alert_days),
        long_stay=days >= long_stay_days,
    )
