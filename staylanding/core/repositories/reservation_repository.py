from __future__ import annotations

from abc import ABC, abstractmethod

from staylanding.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    """
    Data source for reservations. Implementations may suspend (network, simulated delay).
    """

    @abstractmethod
    async def get(self, reservation_id: str | None) -> Reservation | None:
        """Return the reservation for `reservation_id`, or None if there is no such record."""
        raise NotImplementedError

    @abstractmethod
    async def upsert(self, reservation: Reservation) -> None:
        raise NotImplementedError
