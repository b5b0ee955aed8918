from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from staylanding.core.entities.reservation import Reservation
from staylanding.core.use_cases.stay_status import (
    DOOR_CODE_PENDING_MESSAGE,
    REGISTER_FOR_DOOR_CODE_MESSAGE,
    compute_door_code_message,
    compute_registration_button_text,
    derive_stay_timeline,
    door_code_cutoff,
    subtract_calendar_days,
)

NY = ZoneInfo("America/New_York")
DOOR_CODE = "543210"


def _reservation(**overrides) -> Reservation:
    base = Reservation(
        id="ABC1234",
        guest_name="Steven Canaj",
        check_in=datetime(2025, 3, 9, 16, 0, tzinfo=NY),
        check_out=datetime(2025, 3, 13, 10, 0, tzinfo=NY),
        address="123 Example St., Kissimmee, FL",
        confirmation_code="ABC1234",
        wifi_name="MyVacationHome",
        wifi_password="12345",
    )
    return replace(base, **overrides)


@pytest.mark.parametrize(
    "now",
    [
        datetime(2025, 3, 1, 0, 0, tzinfo=NY),
        datetime(2025, 3, 9, 15, 59, 59, tzinfo=NY),
    ],
)
def test_before_check_in(now: datetime) -> None:
    timeline = derive_stay_timeline(_reservation(), now)
    assert timeline.before_check_in is True
    assert timeline.during_stay is False
    assert timeline.after_check_out is False


@pytest.mark.parametrize(
    "now",
    [
        datetime(2025, 3, 9, 16, 0, tzinfo=NY),  # check-in instant
        datetime(2025, 3, 10, 12, 0, tzinfo=NY),
        datetime(2025, 3, 13, 10, 0, tzinfo=NY),  # check-out instant
    ],
)
def test_during_stay_includes_both_boundaries(now: datetime) -> None:
    timeline = derive_stay_timeline(_reservation(), now)
    assert timeline.during_stay is True
    assert timeline.before_check_in is False
    assert timeline.after_check_out is False


def test_after_check_out() -> None:
    timeline = derive_stay_timeline(_reservation(), datetime(2025, 3, 14, 0, 0, tzinfo=NY))
    assert timeline.after_check_out is True
    assert timeline.before_check_in is False
    assert timeline.during_stay is False


def test_no_reservation_has_every_flag_false() -> None:
    timeline = derive_stay_timeline(None, datetime(2025, 3, 10, tzinfo=NY))
    assert (timeline.before_check_in, timeline.during_stay, timeline.after_check_out) == (False, False, False)


@pytest.mark.parametrize(
    "now",
    [
        datetime(2024, 1, 1, tzinfo=NY),
        datetime(2025, 3, 10, 12, 0, tzinfo=NY),
        datetime(2030, 1, 1, tzinfo=NY),
    ],
)
def test_unregistered_guest_is_asked_to_register(now: datetime) -> None:
    assert compute_door_code_message(_reservation(is_registered=False), now, DOOR_CODE) == REGISTER_FOR_DOOR_CODE_MESSAGE


def test_door_code_available_exactly_at_cutoff() -> None:
    reservation = _reservation(is_registered=True)
    cutoff = door_code_cutoff(reservation)

    assert compute_door_code_message(reservation, cutoff, DOOR_CODE) == DOOR_CODE


def test_door_code_pending_one_millisecond_before_cutoff() -> None:
    reservation = _reservation(is_registered=True)
    cutoff = door_code_cutoff(reservation)

    message = compute_door_code_message(reservation, cutoff - timedelta(milliseconds=1), DOOR_CODE)
    assert message == DOOR_CODE_PENDING_MESSAGE
    assert message == "Code will be generated 3 days before check-in"


def test_door_code_prefers_the_reservations_own_code() -> None:
    reservation = _reservation(is_registered=True, door_code="111222")
    assert compute_door_code_message(reservation, datetime(2025, 3, 10, tzinfo=NY), DOOR_CODE) == "111222"


def test_cutoff_uses_calendar_days_across_dst_change() -> None:
    # Check-in falls on the day clocks spring forward (EST -> EDT).
    reservation = _reservation(is_registered=True)
    cutoff = door_code_cutoff(reservation)

    assert cutoff == datetime(2025, 3, 6, 16, 0, tzinfo=NY)
    assert cutoff.astimezone(timezone.utc) == datetime(2025, 3, 6, 21, 0, tzinfo=timezone.utc)

    # 72 hours before check-in would already have released the code at 20:00 UTC.
    seventy_two_hours_before = reservation.check_in.astimezone(timezone.utc) - timedelta(hours=72)
    assert seventy_two_hours_before == datetime(2025, 3, 6, 20, 0, tzinfo=timezone.utc)

    between = datetime(2025, 3, 6, 20, 30, tzinfo=timezone.utc)
    assert compute_door_code_message(reservation, between, DOOR_CODE) == DOOR_CODE_PENDING_MESSAGE


def test_subtract_calendar_days_keeps_wall_time() -> None:
    moment = datetime(2025, 11, 3, 9, 30, tzinfo=NY)  # day after clocks fall back
    result = subtract_calendar_days(moment, 3)
    assert (result.year, result.month, result.day, result.hour, result.minute) == (2025, 10, 31, 9, 30)
    assert result.utcoffset() == timedelta(hours=-4)


def test_registration_button_text() -> None:
    assert compute_registration_button_text(_reservation(is_registered=False)) == "Guest Registration"
    assert compute_registration_button_text(_reservation(is_registered=True)) == "Update Registration"
