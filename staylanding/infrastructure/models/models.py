from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from staylanding.infrastructure.database import Base


class ReservationModel(Base):
    __tablename__ = "reservations"

    reservation_id: Mapped[str] = mapped_column(String, primary_key=True)
    guest_name: Mapped[str] = mapped_column(String, nullable=False)
    # property-local wall time; the zone comes from settings.property_timezone
    check_in: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    check_out: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    address: Mapped[str] = mapped_column(String, nullable=False)
    confirmation_code: Mapped[str] = mapped_column(String, nullable=False, index=True)
    wifi_name: Mapped[str] = mapped_column(String, nullable=False, default="")
    wifi_password: Mapped[str] = mapped_column(String, nullable=False, default="")
    door_code: Mapped[str] = mapped_column(String, nullable=False, default="")
    is_registered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resort_name: Mapped[str | None] = mapped_column(String, nullable=True)
