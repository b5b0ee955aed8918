from __future__ import annotations

from datetime import datetime, tzinfo

from staylanding.core.entities.reservation import Reservation

DEMO_RESERVATION_ID = "ABC1234"


def demo_reservation(tz: tzinfo, reservation_id: str | None = None) -> Reservation:
    """The fixed reservation served while there is no real reservation backend."""
    return Reservation(
        id=reservation_id or DEMO_RESERVATION_ID,
        guest_name="Steven Canaj",
        check_in=datetime(2025, 3, 9, 16, 0, tzinfo=tz),
        check_out=datetime(2025, 3, 13, 10, 0, tzinfo=tz),
        address="123 Example St., Kissimmee, FL",
        confirmation_code="ABC1234",
        wifi_name="MyVacationHome",
        wifi_password="12345",
        door_code="",
        is_registered=False,
        resort_name="Paradise Palms",
    )
