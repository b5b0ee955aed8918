from __future__ import annotations

import asyncio
from datetime import tzinfo

from staylanding.core.entities.reservation import Reservation
from staylanding.core.repositories.reservation_repository import ReservationRepository
from staylanding.infrastructure.demo_data import demo_reservation


class MockReservationRepositoryImpl(ReservationRepository):
    """
    Stand-in for the reservation backend.

    Any identifier resolves to the demo reservation after `delay_seconds`; records written
    through `upsert` are returned instead from then on.
    """

    def __init__(self, *, tz: tzinfo, delay_seconds: float = 0.5) -> None:
        self._tz = tz
        self._delay_seconds = delay_seconds
        self._records: dict[str, Reservation] = {}

    async def get(self, reservation_id: str | None) -> Reservation | None:
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        if reservation_id is not None and reservation_id in self._records:
            return self._records[reservation_id]
        return demo_reservation(self._tz, reservation_id)

    async def upsert(self, reservation: Reservation) -> None:
        self._records[reservation.id] = reservation
