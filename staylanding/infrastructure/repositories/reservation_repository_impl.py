from __future__ import annotations

from datetime import datetime, tzinfo

from sqlalchemy.orm import Session

from staylanding.core.entities.reservation import Reservation
from staylanding.core.repositories.reservation_repository import ReservationRepository
from staylanding.infrastructure.models.models import ReservationModel


class ReservationRepositoryImpl(ReservationRepository):
    """
    SQLAlchemy implementation. Stay dates are stored as property-local wall time.
    """

    def __init__(self, db: Session, *, tz: tzinfo) -> None:
        self._db = db
        self._tz = tz

    async def get(self, reservation_id: str | None) -> Reservation | None:
        if not reservation_id:
            return None

        row = self._db.get(ReservationModel, reservation_id)
        if row is None:
            return None

        return Reservation(
            id=row.reservation_id,
            guest_name=row.guest_name,
            check_in=row.check_in.replace(tzinfo=self._tz),
            check_out=row.check_out.replace(tzinfo=self._tz),
            address=row.address,
            confirmation_code=row.confirmation_code,
            wifi_name=row.wifi_name,
            wifi_password=row.wifi_password,
            door_code=row.door_code,
            is_registered=row.is_registered,
            resort_name=row.resort_name,
        )

    async def upsert(self, reservation: Reservation) -> None:
        row = self._db.get(ReservationModel, reservation.id)
        if row is None:
            row = ReservationModel(reservation_id=reservation.id)

        row.guest_name = reservation.guest_name
        row.check_in = self._to_wall_time(reservation.check_in)
        row.check_out = self._to_wall_time(reservation.check_out)
        row.address = reservation.address
        row.confirmation_code = reservation.confirmation_code
        row.wifi_name = reservation.wifi_name
        row.wifi_password = reservation.wifi_password
        row.door_code = reservation.door_code
        row.is_registered = reservation.is_registered
        row.resort_name = reservation.resort_name

        self._db.add(row)
        self._db.commit()

    def _to_wall_time(self, moment: datetime) -> datetime:
        if moment.tzinfo is not None:
            moment = moment.astimezone(self._tz)
        return moment.replace(tzinfo=None)
