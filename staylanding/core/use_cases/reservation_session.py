from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable

from staylanding.core.entities.info_block import InfoBlock
from staylanding.core.entities.reservation import Reservation
from staylanding.core.repositories.reservation_repository import ReservationRepository
from staylanding.core.use_cases.stay_status import (
    REGISTRATION_BUTTON_TEXT,
    StayTimeline,
    compute_door_code_message,
    compute_registration_button_text,
    derive_stay_timeline,
)

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load reservation data. Please try again later."
RESERVATION_NOT_FOUND_MESSAGE = "Could not find your reservation. Please check the link or contact support."

Clock = Callable[[], datetime]


class LoadFailure(Exception):
    """The reservation could not be loaded. `message` is shown to the guest as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True, slots=True)
class ReservationState:
    """
    Snapshot of a session.

    While `is_loading` is True both `reservation` and `error` are None; once a load settles
    exactly one of them is set.
    """
    reservation: Reservation | None = None
    is_loading: bool = True
    error: str | None = None


Listener = Callable[[ReservationState], None]


class ReservationSession:
    """
    Loading state, derived stay status and registration updates for one guest view.

    Loads are last-request-wins: a newer `load` invalidates older in-flight ones, and
    `request_load` additionally cancels the task it supersedes.
    """

    def __init__(
        self,
        *,
        reservation_repo: ReservationRepository,
        clock: Clock,
        info_blocks: list[InfoBlock] | None = None,
        door_code: str = "",
        live_clock: bool = False,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._clock = clock
        self._live_clock = live_clock
        self._captured_now = clock()
        self._info_blocks = list(info_blocks or [])
        self._door_code = door_code

        self._state = ReservationState()
        self._request_token = 0
        self._inflight: asyncio.Task[None] | None = None
        self._listeners: list[Listener] = []

    # -----------------------------
    # State
    # -----------------------------
    @property
    def state(self) -> ReservationState:
        return self._state

    @property
    def reservation(self) -> Reservation | None:
        return self._state.reservation

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def info_blocks(self) -> list[InfoBlock]:
        return list(self._info_blocks)

    @property
    def now(self) -> datetime:
        return self._clock() if self._live_clock else self._captured_now

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with every new state; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set_state(self, state: ReservationState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # -----------------------------
    # Derived fields
    # -----------------------------
    @property
    def timeline(self) -> StayTimeline:
        return derive_stay_timeline(self.reservation, self.now)

    @property
    def is_before_check_in(self) -> bool:
        return self.timeline.before_check_in

    @property
    def is_during_stay(self) -> bool:
        return self.timeline.during_stay

    @property
    def is_after_check_out(self) -> bool:
        return self.timeline.after_check_out

    @property
    def door_code_message(self) -> str:
        if self.reservation is None:
            return ""
        return compute_door_code_message(self.reservation, self.now, self._door_code)

    @property
    def registration_button_text(self) -> str:
        if self.reservation is None:
            return REGISTRATION_BUTTON_TEXT
        return compute_registration_button_text(self.reservation)

    # -----------------------------
    # Operations
    # -----------------------------
    async def load(self, reservation_id: str | None = None) -> None:
        self._request_token += 1
        token = self._request_token
        self._set_state(ReservationState(is_loading=True))

        try:
            reservation = await self._fetch(reservation_id)
        except LoadFailure as e:
            if token != self._request_token:
                logger.debug("Discarding stale load failure for reservation %s", reservation_id)
                return
            self._set_state(ReservationState(is_loading=False, error=e.message))
            return

        if token != self._request_token:
            logger.debug("Discarding stale load result for reservation %s", reservation_id)
            return
        self._set_state(ReservationState(reservation=reservation, is_loading=False))

    def request_load(self, reservation_id: str | None = None) -> asyncio.Task[None]:
        """Schedule `load` on the running loop, cancelling the load it supersedes."""
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = asyncio.get_running_loop().create_task(self.load(reservation_id))
        return self._inflight

    def update_registration_status(self, is_registered: bool) -> None:
        reservation = self.reservation
        if reservation is None:
            return
        self._set_state(replace(self._state, reservation=reservation.with_registration(is_registered)))

    async def _fetch(self, reservation_id: str | None) -> Reservation:
        try:
            reservation = await self._reservation_repo.get(reservation_id)
        except Exception as e:
            logger.exception("Error fetching reservation %s", reservation_id)
            raise LoadFailure(LOAD_FAILED_MESSAGE) from e

        if reservation is None:
            logger.warning("Reservation %s not found", reservation_id)
            raise LoadFailure(RESERVATION_NOT_FOUND_MESSAGE)
        return reservation
