from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from staylanding.core.entities.reservation import Reservation

DOOR_CODE_LEAD_DAYS = 3

REGISTER_FOR_DOOR_CODE_MESSAGE = "Please register to receive door code"
DOOR_CODE_PENDING_MESSAGE = f"Code will be generated {DOOR_CODE_LEAD_DAYS} days before check-in"

REGISTRATION_BUTTON_TEXT = "Guest Registration"
UPDATE_REGISTRATION_BUTTON_TEXT = "Update Registration"


@dataclass(frozen=True, slots=True)
class StayTimeline:
    before_check_in: bool = False
    during_stay: bool = False
    after_check_out: bool = False


def derive_stay_timeline(reservation: Reservation | None, now: datetime) -> StayTimeline:
    """
    Place `now` on the reservation timeline.

    Comparisons are strict, so now == check_in and now == check_out both count as during the stay.
    """
    if reservation is None:
        return StayTimeline()

    before_check_in = now < reservation.check_in
    after_check_out = now > reservation.check_out
    return StayTimeline(
        before_check_in=before_check_in,
        during_stay=not before_check_in and not after_check_out,
        after_check_out=after_check_out,
    )


def subtract_calendar_days(moment: datetime, days: int) -> datetime:
    """
    Move `moment` back by whole calendar days, keeping its local wall-clock time.

    The UTC offset is re-resolved for the new date, so across a DST change the result is
    not exactly `days * 24` hours earlier.
    """
    wall_time = moment.replace(tzinfo=None) - timedelta(days=days)
    return wall_time.replace(tzinfo=moment.tzinfo)


def door_code_cutoff(reservation: Reservation) -> datetime:
    return subtract_calendar_days(reservation.check_in, DOOR_CODE_LEAD_DAYS)


def compute_door_code_message(reservation: Reservation, now: datetime, door_code: str) -> str:
    if not reservation.is_registered:
        return REGISTER_FOR_DOOR_CODE_MESSAGE

    if now >= door_code_cutoff(reservation):
        return reservation.door_code or door_code
    return DOOR_CODE_PENDING_MESSAGE


def compute_registration_button_text(reservation: Reservation) -> str:
    return UPDATE_REGISTRATION_BUTTON_TEXT if reservation.is_registered else REGISTRATION_BUTTON_TEXT
