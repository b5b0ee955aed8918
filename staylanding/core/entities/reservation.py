from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Reservation:
    id: str
    guest_name: str
    check_in: datetime
    check_out: datetime
    address: str
    confirmation_code: str
    wifi_name: str
    wifi_password: str
    door_code: str = ""
    is_registered: bool = False
    resort_name: str | None = None

    def with_registration(self, is_registered: bool) -> Reservation:
        """Return a copy with only the registration flag replaced."""
        return replace(self, is_registered=is_registered)
