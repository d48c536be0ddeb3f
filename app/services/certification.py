# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Certification expiry tiers — pure computation.
"""

from datetime import date, datetime
from typing import Any

from app.models.domain import CertStatus
from app.services.dates import days_between, parse_date_or_none

MAIN_COURSES: tuple[str, ...] = (
    "BLS", "ACLS", "ATLS", "AMRO", "BOSIET", "ACCPH2", "SMC", "MEDICAL",
)
EXPIRY_ONLY_COURSES: tuple[str, ...] = ("OSPCCC", "MLC")
ALL_COURSES: tuple[str, ...] = MAIN_COURSES + EXPIRY_ONLY_COURSES

EXPIRING_WINDOW_DAYS = 90


def cert_status(
    expiry: Any,
    today: date | datetime,
    expiring_days: int = EXPIRING_WINDOW_DAYS,
) -> CertStatus:
    expiry_date = parse_date_or_none(expiry)
    if expiry_date is None:
        return CertStatus.NO_DATA
    remaining = days_between(today, expiry_date)
    if remaining < 0:
        return CertStatus.EXPIRED
    if remaining <= expiring_days:
        return CertStatus.EXPIRING
    return CertStatus.VALID
