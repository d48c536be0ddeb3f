# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the pure rotation, date, trade and certification helpers.
No HTTP, no shared state.
"""

from datetime import date, datetime, timedelta

import pytest

from app.core import catalog
from app.models.domain import CertStatus, Cycle, DayStatus, RosterEntry, Trade
from app.services.certification import ALL_COURSES, cert_status
from app.services.dates import (
    format_date,
    format_date_long,
    parse_date_or_none,
    parse_display_date,
)
from app.services.rotation import (
    active_rotation_range,
    day_status,
    days_on_board,
    has_activity_in_month,
    is_departure_imminent,
    is_on_board,
    month_day_statuses,
    personnel_status,
)
from app.services.trade import (
    classify_post,
    full_trade_name,
    matches_trade_filter,
    short_post,
    trade_rank,
)


def make_entry(post="OFFSHORE MEDIC", cycles=None):
    return RosterEntry(
        crew_id="C001",
        crew_name="AHMAD FAIZAL",
        post=post,
        client="SKA",
        location="BARAM",
        cycles={
            n: Cycle(sign_on=on, sign_off=off)
            for n, (on, off) in (cycles or {}).items()
        },
    )


@pytest.fixture
def medic():
    return make_entry(cycles={1: ("2025-09-05", "2025-09-19")})


# ============================================
# Date parsing
# ============================================
class TestParseDate:
    def test_iso_format(self):
        assert parse_date_or_none("2025-09-05") == date(2025, 9, 5)

    def test_month_abbreviation_format(self):
        assert parse_date_or_none("2025-Sep-05") == date(2025, 9, 5)

    def test_month_abbreviation_case_insensitive(self):
        assert parse_date_or_none("2025-sEP-05") == date(2025, 9, 5)

    def test_surrounding_whitespace_ignored(self):
        assert parse_date_or_none("  2025-09-05 ") == date(2025, 9, 5)

    @pytest.mark.parametrize(
        "value",
        [None, "", "-", "N/A", "32/13/2025", "2025-Sept-05", "2025-Foo-05",
         "2025-02-30", "2025/09/05", "05-09-2025", "not a date", 20250905],
    )
    def test_unsupported_input_is_none(self, value):
        assert parse_date_or_none(value) is None

    def test_datetime_truncated_to_day(self):
        assert parse_date_or_none(datetime(2025, 9, 5, 23, 59)) == date(2025, 9, 5)


class TestFormatDate:
    def test_format_iso(self):
        assert format_date("2025-09-05") == "05/09/2025"

    def test_format_missing(self):
        assert format_date(None) == "--"
        assert format_date("N/A") == "--"
        assert format_date_long("-") == "N/A"

    @pytest.mark.parametrize("raw", ["2025-09-05", "2025-Sep-05"])
    def test_display_round_trip_keeps_day(self, raw):
        assert parse_display_date(format_date(raw)) == parse_date_or_none(raw)

    def test_parse_display_rejects_other_forms(self):
        assert parse_display_date("2025-09-05") is None
        assert parse_display_date("31/02/2025") is None


# ============================================
# Trade classification
# ============================================
class TestClassifyPost:
    def test_offshore_medic(self):
        assert classify_post("OFFSHORE MEDIC") is Trade.OFFSHORE_MEDIC

    def test_escort_medic(self):
        assert classify_post("escort medic") is Trade.ESCORT_MEDIC

    def test_im_practitioner_is_office_based(self):
        trade = classify_post("IM PRACTITIONER")
        assert trade is Trade.IMP_OHN
        assert trade.is_office_based

    def test_ohn(self):
        assert classify_post("OHN") is Trade.IMP_OHN

    def test_offshore_checked_before_im(self):
        assert classify_post("OFFSHORE MEDIC (IM)") is Trade.OFFSHORE_MEDIC

    def test_loose_vs_strict_matching(self):
        assert classify_post("OFFSHORE OHN", strict=False) is Trade.OFFSHORE_MEDIC
        assert classify_post("OFFSHORE OHN") is Trade.IMP_OHN

    def test_unclassified(self):
        assert classify_post("DRIVER") is Trade.UNCLASSIFIED
        assert classify_post(None) is Trade.UNCLASSIFIED

    def test_entry_classified_on_construction(self):
        assert make_entry(post="ohn").trade is Trade.IMP_OHN

    def test_display_helpers(self):
        assert short_post("OFFSHORE MEDIC") == "OM"
        assert short_post("ESCORT MEDIC") == "EM"
        assert short_post("IM") == "OHN"
        assert short_post("DRIVER") == "DRIVER"
        assert full_trade_name("IM PRACTITIONER") == "IMP / OHN"
        assert full_trade_name("DRIVER") == "DRIVER"

    def test_trade_rank_order(self):
        ranks = [trade_rank(t) for t in (
            Trade.OFFSHORE_MEDIC, Trade.ESCORT_MEDIC, Trade.IMP_OHN, Trade.UNCLASSIFIED,
        )]
        assert ranks == [1, 2, 3, 4]

    def test_trade_filter(self):
        assert matches_trade_filter(Trade.ESCORT_MEDIC, "ALL")
        assert matches_trade_filter(Trade.ESCORT_MEDIC, "EM")
        assert not matches_trade_filter(Trade.ESCORT_MEDIC, "OM")
        assert matches_trade_filter(Trade.IMP_OHN, "IMP/OHN")


# ============================================
# On board
# ============================================
class TestIsOnBoard:
    def test_sign_on_day_is_on_board(self, medic):
        assert is_on_board(medic, date(2025, 9, 5)) is True

    def test_every_day_inside_cycle(self, medic):
        day = date(2025, 9, 5)
        while day < date(2025, 9, 19):
            assert is_on_board(medic, day)
            day += timedelta(days=1)

    def test_sign_off_day_is_not_on_board(self, medic):
        assert is_on_board(medic, date(2025, 9, 19)) is False

    def test_before_sign_on(self, medic):
        assert is_on_board(medic, date(2025, 9, 4)) is False

    def test_time_of_day_ignored(self, medic):
        assert is_on_board(medic, datetime(2025, 9, 18, 23, 59)) is True
        assert is_on_board(medic, datetime(2025, 9, 19, 0, 1)) is False

    def test_no_cycles(self):
        assert is_on_board(make_entry(), date(2025, 9, 10)) is False

    def test_missing_sign_off_contributes_nothing(self):
        entry = make_entry(cycles={1: ("2025-09-05", None)})
        assert is_on_board(entry, date(2025, 9, 10)) is False

    def test_malformed_date_contributes_nothing(self):
        entry = make_entry(cycles={1: ("32/13/2025", "2025-09-19")})
        for offset in range(-30, 30):
            assert not is_on_board(entry, date(2025, 9, 10) + timedelta(days=offset))

    def test_month_abbreviation_cycle(self):
        entry = make_entry(cycles={1: ("2025-Sep-05", "2025-sep-19")})
        assert is_on_board(entry, date(2025, 9, 10)) is True

    def test_second_cycle_matches(self):
        entry = make_entry(cycles={
            1: ("2025-08-01", "2025-08-15"),
            2: ("2025-09-05", "2025-09-19"),
        })
        assert is_on_board(entry, date(2025, 9, 6)) is True
        assert is_on_board(entry, date(2025, 8, 20)) is False


class TestOfficeStaff:
    def test_saturday_not_on_board(self):
        entry = make_entry(post="IM PRACTITIONER")
        assert is_on_board(entry, date(2025, 9, 6)) is False

    def test_tuesday_on_board(self):
        entry = make_entry(post="IM PRACTITIONER")
        assert is_on_board(entry, date(2025, 9, 2)) is True

    def test_cycle_data_ignored(self):
        entry = make_entry(post="OHN", cycles={1: ("2025-09-05", "2025-09-19")})
        assert is_on_board(entry, date(2025, 9, 6)) is False  # Saturday inside cycle
        assert is_on_board(entry, date(2025, 9, 22)) is True  # Monday after cycle

    def test_no_rotation_range(self):
        entry = make_entry(post="OHN", cycles={1: ("2025-09-05", "2025-09-19")})
        active = active_rotation_range(entry, date(2025, 9, 10))
        assert active.start is None and active.end is None
        assert days_on_board(entry, date(2025, 9, 10)) == 0
        assert is_departure_imminent(entry, date(2025, 9, 17)) is False


# ============================================
# Rotation range / days / departure
# ============================================
class TestActiveRange:
    def test_range_of_matching_cycle(self, medic):
        active = active_rotation_range(medic, date(2025, 9, 10))
        assert active.start == date(2025, 9, 5)
        assert active.end == date(2025, 9, 19)
        assert active.is_active

    def test_no_range_outside_cycles(self, medic):
        active = active_rotation_range(medic, date(2025, 9, 19))
        assert active.start is None and active.end is None
        assert not active.is_active

    def test_overlap_prefers_latest_sign_on(self):
        entry = make_entry(cycles={
            1: ("2025-09-01", "2025-09-20"),
            2: ("2025-09-10", "2025-09-25"),
        })
        active = active_rotation_range(entry, date(2025, 9, 12))
        assert active.start == date(2025, 9, 10)
        assert days_on_board(entry, date(2025, 9, 12)) == 3

    def test_overlap_independent_of_insertion_order(self):
        entry = make_entry(cycles={
            2: ("2025-09-10", "2025-09-25"),
            1: ("2025-09-01", "2025-09-20"),
        })
        assert active_rotation_range(entry, date(2025, 9, 12)).start == date(2025, 9, 10)


class TestDaysOnBoard:
    def test_sign_on_is_day_one(self, medic):
        assert days_on_board(medic, date(2025, 9, 5)) == 1

    def test_last_day_is_day_fourteen(self, medic):
        assert days_on_board(medic, date(2025, 9, 18)) == 14

    def test_zero_when_not_on_board(self, medic):
        assert days_on_board(medic, date(2025, 9, 19)) == 0

    def test_increases_by_one_per_day(self, medic):
        counts = [days_on_board(medic, date(2025, 9, 5) + timedelta(days=i)) for i in range(14)]
        assert counts == list(range(1, 15))

    def test_across_dst_change(self):
        entry = make_entry(cycles={1: ("2025-10-20", "2025-11-10")})
        assert days_on_board(entry, date(2025, 11, 3)) == 15


class TestDepartureImminent:
    def test_three_days_to_end(self, medic):
        assert is_departure_imminent(medic, date(2025, 9, 16)) is True

    def test_four_days_to_end(self, medic):
        assert is_departure_imminent(medic, date(2025, 9, 15)) is False

    def test_last_day(self, medic):
        assert is_departure_imminent(medic, date(2025, 9, 18)) is True

    def test_already_departed(self, medic):
        assert is_departure_imminent(medic, date(2025, 9, 19)) is False
        assert is_departure_imminent(medic, date(2025, 9, 25)) is False

    def test_custom_window(self, medic):
        assert is_departure_imminent(medic, date(2025, 9, 15), alert_days=4) is True


class TestPersonnelStatus:
    def test_status_mid_rotation(self, medic):
        status = personnel_status(medic, date(2025, 9, 16))
        assert status.is_on_board
        assert status.days_on_board == 12
        assert status.rotation_start == date(2025, 9, 5)
        assert status.rotation_end == date(2025, 9, 19)
        assert status.departure_imminent
        assert not status.long_stay

    def test_long_stay_from_day_fourteen(self, medic):
        assert personnel_status(medic, date(2025, 9, 17)).long_stay is False
        assert personnel_status(medic, date(2025, 9, 18)).long_stay is True

    def test_status_off_board(self, medic):
        status = personnel_status(medic, date(2025, 10, 1))
        assert not status.is_on_board
        assert status.days_on_board == 0
        assert status.rotation_start is None


class TestMonthlyActivity:
    def test_cycle_spanning_months(self):
        entry = make_entry(cycles={1: ("2025-08-25", "2025-09-03")})
        assert has_activity_in_month(entry, 2025, 8)
        assert has_activity_in_month(entry, 2025, 9)
        assert not has_activity_in_month(entry, 2025, 10)

    def test_office_staff_always_active(self):
        assert has_activity_in_month(make_entry(post="OHN"), 2025, 2)

    def test_no_valid_cycles(self):
        entry = make_entry(cycles={1: ("N/A", "2025-09-03")})
        assert not has_activity_in_month(entry, 2025, 9)


class TestDayStatus:
    def test_rotation_days_inclusive_of_sign_off(self, medic):
        assert day_status(medic, date(2025, 9, 4)) is DayStatus.OFF
        assert day_status(medic, date(2025, 9, 5)) is DayStatus.PRIMARY
        assert day_status(medic, date(2025, 9, 19)) is DayStatus.PRIMARY
        assert day_status(medic, date(2025, 9, 20)) is DayStatus.OFF

    def test_secondary_role(self):
        entry = make_entry(cycles={1: ("2025-09-05", "2025-09-19")})
        entry.roles_em = "SECONDARY"
        assert day_status(entry, date(2025, 9, 10)) is DayStatus.SECONDARY

    def test_unknown_role_is_primary(self):
        entry = make_entry(cycles={1: ("2025-09-05", "2025-09-19")})
        entry.roles_em = "BACKUP"
        assert day_status(entry, date(2025, 9, 10)) is DayStatus.PRIMARY

    def test_office_staff_weekday_and_weekend(self):
        entry = make_entry(post="IM PRACTITIONER")
        assert day_status(entry, date(2025, 9, 2)) is DayStatus.OHN_WEEKDAY
        assert day_status(entry, date(2025, 9, 6)) is DayStatus.OHN_WEEKEND

    def test_unparseable_dates_are_off(self):
        entry = make_entry(cycles={1: ("32/13/2025", "2025-09-19")})
        assert day_status(entry, date(2025, 9, 10)) is DayStatus.OFF

    def test_month_length(self, medic):
        statuses = month_day_statuses(medic, 2025, 9)
        assert len(statuses) == 30
        assert statuses.count(DayStatus.PRIMARY) == 15
        assert len(month_day_statuses(medic, 2024, 2)) == 29


# ============================================
# Certification tiers
# ============================================
class TestCertStatus:
    TODAY = date(2025, 1, 1)

    def test_expired(self):
        assert cert_status("2024-12-31", self.TODAY) is CertStatus.EXPIRED

    def test_expiring_today(self):
        assert cert_status("2025-01-01", self.TODAY) is CertStatus.EXPIRING

    def test_expiring_at_ninety_days(self):
        assert cert_status("2025-04-01", self.TODAY) is CertStatus.EXPIRING

    def test_valid_after_ninety_days(self):
        assert cert_status("2025-04-02", self.TODAY) is CertStatus.VALID

    def test_no_data(self):
        assert cert_status(None, self.TODAY) is CertStatus.NO_DATA
        assert cert_status("soon", self.TODAY) is CertStatus.NO_DATA

    def test_course_list(self):
        assert ALL_COURSES[0] == "BLS"
        assert "MLC" in ALL_COURSES and len(ALL_COURSES) == 10


# ============================================
# Catalog
# ============================================
class TestCatalog:
    def test_clients(self):
        assert catalog.get_clients() == ["SBA", "SKA"]

    def test_posts_for_client(self):
        assert catalog.get_posts_for_client("SKA") == ["ESCORT MEDIC", "IM / OHN", "OFFSHORE MEDIC"]
        assert catalog.get_posts_for_client("XYZ") == []

    def test_locations_for_client_post(self):
        assert catalog.get_locations_for_client_post("SBA", "ESCORT MEDIC") == ["KK", "LABUAN"]
        assert catalog.get_locations_for_client_post("SBA", "DRIVER") == []

    def test_all_locations_unique_and_sorted(self):
        locations = catalog.get_all_locations()
        assert locations == sorted(set(locations))
        assert "BARAM" in locations and "SOGT" in locations
